"""Contract interface resolution and call encoding."""

from .types import (
    ParameterType,
    UintType,
    IntType,
    AddressType,
    BoolType,
    FixedBytesType,
    BytesType,
    StringType,
    ArrayType,
    TupleType,
    Parameter,
    FunctionDescriptor,
    parse_type,
    parse_entry,
)
from .resolver import InterfaceDescriptor, parse_interface, resolve_function
from .encoder import (
    function_signature,
    function_selector,
    encode_arguments,
    encode_function_call,
    decode_function_result,
)
from .contracts import TOKEN_ABI, FLASH_LOAN_BRIDGE_ABI, TARGET_CONTRACT_ABI

__all__ = [
    # Types
    "ParameterType",
    "UintType",
    "IntType",
    "AddressType",
    "BoolType",
    "FixedBytesType",
    "BytesType",
    "StringType",
    "ArrayType",
    "TupleType",
    "Parameter",
    "FunctionDescriptor",
    "InterfaceDescriptor",
    "parse_type",
    "parse_entry",
    "parse_interface",
    # Resolution
    "resolve_function",
    # Encoding
    "function_signature",
    "function_selector",
    "encode_arguments",
    "encode_function_call",
    "decode_function_result",
    # Contracts
    "TOKEN_ABI",
    "FLASH_LOAN_BRIDGE_ABI",
    "TARGET_CONTRACT_ABI",
]
