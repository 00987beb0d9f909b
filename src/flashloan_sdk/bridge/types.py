"""Bridge request types.

User-facing values produced by the request builders. All are immutable and
handed whole to an external transaction submitter.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Sequence

from ..abi.encoder import decode_function_result
from ..config import ChainInfo
from ..identity import Identity


@dataclass(frozen=True)
class Direction:
    """Source and destination chain of a flash loan."""

    source: ChainInfo
    destination: ChainInfo

    def reversed(self) -> "Direction":
        return Direction(source=self.destination, destination=self.source)


@dataclass(frozen=True)
class FlashLoanRequest:
    """Request for the bridge to originate a cross-chain flash loan."""

    originator: Identity
    """Account submitting the request on the source chain."""

    bridge_address: str
    """Bridge contract on the source chain."""

    destination_chain: int
    """Destination chain id, widened to uint256 on the wire."""

    principal: int
    """Loan amount (18 decimals)."""

    target_address: str
    """Contract on the destination chain receiving principal and callback."""

    inner_call_payload: bytes
    """Calldata forwarded to the target contract."""

    fee: int
    """Flat protocol fee sent as transaction value (18 decimals)."""


@dataclass(frozen=True)
class MintRequest:
    """Request to mint test tokens to a recipient (usually the bridge)."""

    originator: Identity
    token_address: str
    recipient: str
    amount: int
    chain_id: int


@dataclass(frozen=True)
class PreparedTransaction:
    """Unsigned transaction ready for an external submitter."""

    sender: str
    to: str
    data: bytes
    value: int
    chain_id: int

    @property
    def data_hex(self) -> str:
        return "0x" + self.data.hex()

    def to_dict(self) -> Dict[str, Any]:
        """Transaction fields in the key shape web3-style submitters accept."""
        return {
            "from": self.sender,
            "to": self.to,
            "data": self.data_hex,
            "value": self.value,
            "chainId": self.chain_id,
        }


@dataclass(frozen=True)
class ReadCall:
    """An ``eth_call`` for a view function, performed by the caller."""

    to: str
    data: bytes
    chain_id: int
    abi: Sequence[Dict[str, Any]] = field(repr=False)
    function: str

    @property
    def data_hex(self) -> str:
        return "0x" + self.data.hex()

    def decode(self, result: bytes) -> Any:
        """Decode the raw return data of this call."""
        return decode_function_result(self.abi, self.function, result)
