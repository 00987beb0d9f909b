"""Contract call encoding.

Produces the calldata for a contract function: the 4-byte keccak selector of
the canonical signature followed by the ABI encoding of the arguments.
"""

import logging
from typing import Any, Sequence

from eth_abi import decode, encode
from eth_utils import decode_hex, keccak

from ..exceptions import ArityMismatchError, FlashLoanSDKError
from .resolver import InterfaceDescriptor, resolve_function
from .types import FunctionDescriptor

logger = logging.getLogger(__name__)


def function_signature(fn: FunctionDescriptor) -> str:
    """Canonical signature the selector is hashed from."""
    return fn.signature


def function_selector(fn: FunctionDescriptor) -> bytes:
    """Return the 4-byte selector for a function."""
    return keccak(text=fn.signature)[:4]


def encode_arguments(fn: FunctionDescriptor, args: Sequence[Any]) -> bytes:
    """ABI-encode ``args`` against the inputs of ``fn`` (no selector).

    Raises:
        ArityMismatchError: If the argument count is wrong
        TypeMismatchError: If an argument does not fit its declared type
    """
    if len(args) != len(fn.inputs):
        raise ArityMismatchError(fn.name, len(fn.inputs), len(args))

    values = [
        param.type.normalize(value, index)
        for index, (param, value) in enumerate(zip(fn.inputs, args))
    ]
    return encode(fn.input_types, values)


def encode_function_call(
    abi: InterfaceDescriptor,
    name: str,
    args: Sequence[Any] = (),
) -> bytes:
    """Encode a call to ``name`` as opaque calldata.

    Args:
        abi: Contract interface (JSON ABI entries)
        name: Function name or full signature
        args: Arguments in declared parameter order

    Returns:
        Selector followed by the encoded arguments

    Raises:
        FunctionNotFoundError: If the function is not in the interface
        AmbiguousFunctionError: If the name is overloaded
        ArityMismatchError: If the argument count is wrong
        TypeMismatchError: If an argument does not fit its declared type
    """
    fn = resolve_function(abi, name)
    payload = function_selector(fn) + encode_arguments(fn, args)
    logger.debug("Encoded %s (%d bytes)", fn.signature, len(payload))
    return payload


def decode_function_result(abi: InterfaceDescriptor, name: str, data: bytes) -> Any:
    """Decode the return data of a read call.

    Single-output functions return the bare value; otherwise a tuple.
    """
    fn = resolve_function(abi, name)
    if isinstance(data, str):
        try:
            data = decode_hex(data)
        except ValueError as exc:
            raise FlashLoanSDKError(
                f"Invalid return data for {fn.signature}", {"data": data}
            ) from exc
    values = decode(fn.output_types, data)
    if len(values) == 1:
        return values[0]
    return values
