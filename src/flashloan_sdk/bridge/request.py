"""Cross-chain flash loan request construction.

``build_flash_loan_request`` only assembles values. Encoding of the outer
``initiateCrosschainFlashLoan`` call happens in ``flash_loan_transaction``,
once the caller has picked the source chain.
"""

import logging

from eth_utils import to_checksum_address

from ..abi.contracts import FLASH_LOAN_BRIDGE_ABI, INITIATE_FLASH_LOAN, TOKEN_ABI
from ..abi.encoder import encode_function_call
from ..exceptions import TypeMismatchError
from ..identity import Identity
from .types import FlashLoanRequest, MintRequest, PreparedTransaction

logger = logging.getLogger(__name__)


def build_flash_loan_request(
    originator: Identity,
    bridge_address: str,
    destination: int,
    principal: int,
    target_address: str,
    inner_call_payload: bytes,
    fee: int,
) -> FlashLoanRequest:
    """Assemble a flash loan request.

    Args:
        originator: Identity submitting the request
        bridge_address: Bridge contract on the source chain
        destination: Destination chain id
        principal: Loan amount (18 decimals)
        target_address: Receiver contract on the destination chain
        inner_call_payload: Calldata for the target contract
        fee: Flat protocol fee (18 decimals)

    Returns:
        FlashLoanRequest

    Raises:
        ValueError: If an address is malformed
        TypeMismatchError: If the payload is not bytes
    """
    if not isinstance(inner_call_payload, (bytes, bytearray)):
        # data argument of initiateCrosschainFlashLoan
        raise TypeMismatchError(3, "bytes", inner_call_payload, "expected bytes")

    request = FlashLoanRequest(
        originator=originator,
        bridge_address=to_checksum_address(bridge_address),
        destination_chain=int(destination),
        principal=principal,
        target_address=to_checksum_address(target_address),
        inner_call_payload=bytes(inner_call_payload),
        fee=fee,
    )
    logger.debug(
        "Built flash loan request: %s -> chain %d, principal=%d, fee=%d",
        request.originator.address,
        request.destination_chain,
        request.principal,
        request.fee,
    )
    return request


def flash_loan_transaction(request: FlashLoanRequest, source_chain: int) -> PreparedTransaction:
    """Encode a flash loan request as a bridge transaction on ``source_chain``.

    Raises:
        TypeMismatchError: If a request field does not fit the bridge interface
    """
    data = encode_function_call(
        FLASH_LOAN_BRIDGE_ABI,
        INITIATE_FLASH_LOAN,
        [
            request.destination_chain,
            request.principal,
            request.target_address,
            request.inner_call_payload,
        ],
    )
    return PreparedTransaction(
        sender=request.originator.address,
        to=request.bridge_address,
        data=data,
        value=request.fee,
        chain_id=source_chain,
    )


def build_mint_request(
    originator: Identity,
    token_address: str,
    recipient: str,
    amount: int,
    chain_id: int,
) -> MintRequest:
    """Assemble a request to mint ``amount`` tokens to ``recipient``."""
    return MintRequest(
        originator=originator,
        token_address=to_checksum_address(token_address),
        recipient=to_checksum_address(recipient),
        amount=amount,
        chain_id=chain_id,
    )


def mint_transaction(request: MintRequest) -> PreparedTransaction:
    data = encode_function_call(TOKEN_ABI, "mint", [request.recipient, request.amount])
    return PreparedTransaction(
        sender=request.originator.address,
        to=request.token_address,
        data=data,
        value=0,
        chain_id=request.chain_id,
    )
