"""Configuration for the Flash Loan SDK."""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dotenv import load_dotenv
from eth_utils import is_address, to_checksum_address

from .exceptions import ConfigurationError
from .utils import parse_ether

# Well-known local development key (anvil/supersim account 0).
# DO NOT use on any public network.
DEV_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"

# Demo contracts deployed on supersim
FLASH_LOAN_BRIDGE_ADDRESS = "0xd3c51ed9a0dcab74afc011f4f662a65e2cfd949b"
TOKEN_ADDRESS = "0x820e6303d954e083be1d6051eabc97636a7e468a"
TARGET_CONTRACT_ADDRESS = "0x14927f49b13cc09cff9cb132b6a8e3318b724f19"

DEFAULT_FLAT_FEE = parse_ether("0.01")


@dataclass(frozen=True)
class ChainInfo:
    """A supported chain."""

    id: int
    name: str
    rpc_url: str = ""
    """Node endpoint for the external submitter. Not used by the SDK."""


SUPERSIM_L2_A = ChainInfo(id=901, name="Supersim L2 A", rpc_url="http://127.0.0.1:9545")
SUPERSIM_L2_B = ChainInfo(id=902, name="Supersim L2 B", rpc_url="http://127.0.0.1:9546")


@dataclass(frozen=True)
class FlashLoanConfig:
    """Contract addresses, chains and fee for flash loan requests."""

    bridge_address: str
    token_address: str
    target_address: str
    supported_chains: Tuple[ChainInfo, ...] = field(
        default=(SUPERSIM_L2_A, SUPERSIM_L2_B)
    )
    flat_fee: int = DEFAULT_FLAT_FEE

    def __post_init__(self):
        for name in ("bridge_address", "token_address", "target_address"):
            value = getattr(self, name)
            if not isinstance(value, str) or not is_address(value):
                raise ConfigurationError(f"Invalid {name}: {value}", {"field": name})
            object.__setattr__(self, name, to_checksum_address(value))

        object.__setattr__(self, "supported_chains", tuple(self.supported_chains))
        if not self.supported_chains:
            raise ConfigurationError("At least one supported chain is required")
        ids = [chain.id for chain in self.supported_chains]
        if len(set(ids)) != len(ids):
            raise ConfigurationError(f"Duplicate chain ids: {ids}")

        if not isinstance(self.flat_fee, int) or self.flat_fee < 0:
            raise ConfigurationError(f"Invalid flat_fee: {self.flat_fee}")

    @property
    def default_chain(self) -> ChainInfo:
        """First supported chain; token mints go here."""
        return self.supported_chains[0]

    def get_chain(self, chain_id: int) -> ChainInfo:
        for chain in self.supported_chains:
            if chain.id == chain_id:
                return chain
        raise ConfigurationError(
            f"Unsupported chain id: {chain_id}",
            {"supported": [chain.id for chain in self.supported_chains]},
        )

    def fee_for(self, principal: int) -> int:
        """Fee attached to a flash loan of ``principal``.

        Flat: the principal does not affect it.
        """
        return self.flat_fee

    @classmethod
    def supersim(cls) -> "FlashLoanConfig":
        """Local supersim configuration."""
        return cls(
            bridge_address=FLASH_LOAN_BRIDGE_ADDRESS,
            token_address=TOKEN_ADDRESS,
            target_address=TARGET_CONTRACT_ADDRESS,
            supported_chains=(SUPERSIM_L2_A, SUPERSIM_L2_B),
        )

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "FlashLoanConfig":
        """Load configuration from environment variables.

        Unset variables fall back to the supersim defaults. Chains are given
        as ``FLASHLOAN_CHAINS=901=http://127.0.0.1:9545,902=http://127.0.0.1:9546``.

        Args:
            env_file: Optional dotenv file loaded before reading the environment
        """
        if env_file:
            load_dotenv(env_file)

        chains = _parse_chains(os.environ.get("FLASHLOAN_CHAINS"))
        fee = os.environ.get("FLASHLOAN_FLAT_FEE")
        try:
            flat_fee = parse_ether(fee) if fee else DEFAULT_FLAT_FEE
        except ValueError:
            raise ConfigurationError(f"Invalid FLASHLOAN_FLAT_FEE: {fee!r}")
        return cls(
            bridge_address=os.environ.get("FLASHLOAN_BRIDGE_ADDRESS", FLASH_LOAN_BRIDGE_ADDRESS),
            token_address=os.environ.get("FLASHLOAN_TOKEN_ADDRESS", TOKEN_ADDRESS),
            target_address=os.environ.get("FLASHLOAN_TARGET_ADDRESS", TARGET_CONTRACT_ADDRESS),
            supported_chains=chains or (SUPERSIM_L2_A, SUPERSIM_L2_B),
            flat_fee=flat_fee,
        )


def _parse_chains(value: Optional[str]) -> Tuple[ChainInfo, ...]:
    if not value:
        return ()
    chains = []
    for item in value.split(","):
        chain_id, _, rpc_url = item.strip().partition("=")
        try:
            chains.append(ChainInfo(id=int(chain_id), name=f"Chain {chain_id}", rpc_url=rpc_url))
        except ValueError:
            raise ConfigurationError(f"Invalid chain entry: {item!r}")
    return tuple(chains)
