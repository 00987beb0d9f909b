"""Cross-chain flash loan request building."""

from .types import (
    Direction,
    FlashLoanRequest,
    MintRequest,
    PreparedTransaction,
    ReadCall,
)
from .request import (
    build_flash_loan_request,
    flash_loan_transaction,
    build_mint_request,
    mint_transaction,
)

__all__ = [
    # Types
    "Direction",
    "FlashLoanRequest",
    "MintRequest",
    "PreparedTransaction",
    "ReadCall",
    # Builders
    "build_flash_loan_request",
    "flash_loan_transaction",
    "build_mint_request",
    "mint_transaction",
]
