"""Flash Loan SDK.

Builds the requests for a cross-chain flash loan: resolve and encode contract
calls from a JSON ABI, then wrap the encoded callback in a bridge request with
routing metadata and a flat fee.

Example usage:
    ```python
    from flashloan_sdk import (
        FlashLoanClient,
        FlashLoanConfig,
        DEV_PRIVATE_KEY,
        parse_ether,
    )

    client = FlashLoanClient(FlashLoanConfig.supersim(), DEV_PRIVATE_KEY)
    tx = client.prepare_flash_loan(client.direction(901, 902), parse_ether("1"))
    wallet.send_transaction(tx.to_dict())  # submitted by your own wallet
    ```
"""

__version__ = "0.1.0"

from .abi import (
    FunctionDescriptor,
    Parameter,
    parse_interface,
    resolve_function,
    function_selector,
    encode_function_call,
    decode_function_result,
    TOKEN_ABI,
    FLASH_LOAN_BRIDGE_ABI,
    TARGET_CONTRACT_ABI,
)
from .bridge import (
    Direction,
    FlashLoanRequest,
    MintRequest,
    PreparedTransaction,
    ReadCall,
    build_flash_loan_request,
    flash_loan_transaction,
    build_mint_request,
    mint_transaction,
)
from .client import FlashLoanClient
from .config import (
    ChainInfo,
    FlashLoanConfig,
    DEV_PRIVATE_KEY,
    SUPERSIM_L2_A,
    SUPERSIM_L2_B,
)
from .exceptions import (
    FlashLoanSDKError,
    FunctionNotFoundError,
    AmbiguousFunctionError,
    ArityMismatchError,
    TypeMismatchError,
    UnsupportedTypeError,
    InvalidCredentialError,
    ConfigurationError,
)
from .identity import Identity, identity_from_credential
from .utils import (
    sort_by,
    parse_units,
    format_units,
    parse_ether,
    format_ether,
)

__all__ = [
    "__version__",
    # ABI
    "FunctionDescriptor",
    "Parameter",
    "parse_interface",
    "resolve_function",
    "function_selector",
    "encode_function_call",
    "decode_function_result",
    "TOKEN_ABI",
    "FLASH_LOAN_BRIDGE_ABI",
    "TARGET_CONTRACT_ABI",
    # Bridge
    "Direction",
    "FlashLoanRequest",
    "MintRequest",
    "PreparedTransaction",
    "ReadCall",
    "build_flash_loan_request",
    "flash_loan_transaction",
    "build_mint_request",
    "mint_transaction",
    # Client
    "FlashLoanClient",
    # Config
    "ChainInfo",
    "FlashLoanConfig",
    "DEV_PRIVATE_KEY",
    "SUPERSIM_L2_A",
    "SUPERSIM_L2_B",
    # Exceptions
    "FlashLoanSDKError",
    "FunctionNotFoundError",
    "AmbiguousFunctionError",
    "ArityMismatchError",
    "TypeMismatchError",
    "UnsupportedTypeError",
    "InvalidCredentialError",
    "ConfigurationError",
    # Identity
    "Identity",
    "identity_from_credential",
    # Utils
    "sort_by",
    "parse_units",
    "format_units",
    "parse_ether",
    "format_ether",
]
