"""Flash Loan Client.

Prepares the two transactions of the cross-chain flash loan demo:

1. Mint test tokens into the bridge contract
2. Ask the bridge on the source chain to lend tokens to the target contract
   on the destination chain, forwarding an encoded ``setValue`` callback

Transactions are returned unsigned; signing and broadcasting belong to the
caller's wallet or transport.

Example:
    ```python
    client = FlashLoanClient(FlashLoanConfig.supersim(), DEV_PRIVATE_KEY)

    mint_tx = client.prepare_mint(parse_ether("1000"))
    loan_tx = client.prepare_flash_loan(client.direction(901, 902), parse_ether("1"))
    ```
"""

import logging
from typing import Optional, Sequence, Any, Union

from .abi.contracts import TARGET_CONTRACT_ABI, TOKEN_ABI
from .abi.encoder import encode_function_call
from .bridge import (
    Direction,
    FlashLoanRequest,
    PreparedTransaction,
    ReadCall,
    build_flash_loan_request,
    build_mint_request,
    flash_loan_transaction,
    mint_transaction,
)
from .config import FlashLoanConfig
from .identity import Identity, identity_from_credential

logger = logging.getLogger(__name__)


class FlashLoanClient:
    """Builds mint, flash loan and read requests for one configuration."""

    def __init__(self, config: FlashLoanConfig, identity: Union[Identity, str]):
        """Initialize the client.

        Args:
            config: Contract addresses, chains and fee
            identity: Identity, or a private key to derive one from
        """
        self.config = config
        self.identity = (
            identity if isinstance(identity, Identity) else identity_from_credential(identity)
        )

    @property
    def address(self) -> str:
        return self.identity.address

    def direction(self, source_id: int, destination_id: int) -> Direction:
        """Direction between two supported chains.

        Source and destination may be equal; the bridge decides what that means.

        Raises:
            ConfigurationError: If either chain is not supported
        """
        return Direction(
            source=self.config.get_chain(source_id),
            destination=self.config.get_chain(destination_id),
        )

    def default_direction(self) -> Direction:
        """First supported chain to the second (or to itself if there is one)."""
        chains = self.config.supported_chains
        return Direction(source=chains[0], destination=chains[1] if len(chains) > 1 else chains[0])

    def prepare_mint(
        self,
        amount: int,
        recipient: Optional[str] = None,
        chain_id: Optional[int] = None,
    ) -> PreparedTransaction:
        """Prepare a mint of test tokens.

        Args:
            amount: Token amount (18 decimals)
            recipient: Receiver of the tokens. Default: the bridge contract
            chain_id: Chain to mint on. Default: first supported chain
        """
        chain = self.config.get_chain(chain_id) if chain_id is not None else self.config.default_chain
        request = build_mint_request(
            originator=self.identity,
            token_address=self.config.token_address,
            recipient=recipient or self.config.bridge_address,
            amount=amount,
            chain_id=chain.id,
        )
        tx = mint_transaction(request)
        logger.info("Prepared mint of %d to %s on chain %d", amount, request.recipient, chain.id)
        return tx

    def encode_target_callback(self, args: Optional[Sequence[Any]] = None) -> bytes:
        """Calldata for the target contract: ``setValue(token_address)`` by default."""
        if args is None:
            args = [self.config.token_address]
        return encode_function_call(TARGET_CONTRACT_ABI, "setValue", args)

    def build_flash_loan(
        self,
        direction: Direction,
        amount: int,
        inner_call_payload: Optional[bytes] = None,
    ) -> FlashLoanRequest:
        """Build the flash loan request for ``direction``.

        Args:
            direction: Source and destination chains
            amount: Principal (18 decimals)
            inner_call_payload: Callback for the target contract.
                Default: ``encode_target_callback()``
        """
        if inner_call_payload is None:
            inner_call_payload = self.encode_target_callback()
        return build_flash_loan_request(
            originator=self.identity,
            bridge_address=self.config.bridge_address,
            destination=direction.destination.id,
            principal=amount,
            target_address=self.config.target_address,
            inner_call_payload=inner_call_payload,
            fee=self.config.fee_for(amount),
        )

    def prepare_flash_loan(
        self,
        direction: Direction,
        amount: int,
        inner_call_payload: Optional[bytes] = None,
    ) -> PreparedTransaction:
        """Prepare the bridge transaction on the source chain of ``direction``."""
        request = self.build_flash_loan(direction, amount, inner_call_payload)
        tx = flash_loan_transaction(request, direction.source.id)
        logger.info(
            "Prepared flash loan of %d from chain %d to chain %d (fee %d)",
            amount,
            direction.source.id,
            direction.destination.id,
            request.fee,
        )
        return tx

    def balance_of(self, holder: str, chain_id: int) -> ReadCall:
        """Read call for the token balance of ``holder``."""
        return ReadCall(
            to=self.config.token_address,
            data=encode_function_call(TOKEN_ABI, "balanceOf", [holder]),
            chain_id=self.config.get_chain(chain_id).id,
            abi=TOKEN_ABI,
            function="balanceOf",
        )

    def bridge_balance(self, chain_id: Optional[int] = None) -> ReadCall:
        chain = self.config.get_chain(chain_id) if chain_id is not None else self.config.default_chain
        return self.balance_of(self.config.bridge_address, chain.id)

    def target_value(self, chain_id: int) -> ReadCall:
        """Read call for the value last stored by the target contract."""
        return ReadCall(
            to=self.config.target_address,
            data=encode_function_call(TARGET_CONTRACT_ABI, "getValue"),
            chain_id=self.config.get_chain(chain_id).id,
            abi=TARGET_CONTRACT_ABI,
            function="getValue",
        )
