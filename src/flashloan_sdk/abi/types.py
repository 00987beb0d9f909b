"""ABI Types for the Flash Loan SDK.

Interface entries are parsed into a closed set of parameter-type variants.
Each variant knows its canonical type string and how to validate and
normalise a Python value before it is handed to ``eth_abi``.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from eth_utils import decode_hex, is_address, is_hex, to_checksum_address

from ..exceptions import TypeMismatchError, UnsupportedTypeError


# Only entries of this kind are resolvable
FUNCTION = "function"

_ARRAY_SUFFIX = re.compile(r"^(.*)\[(\d*)\]$")
_SIZED = re.compile(r"^(uint|int|bytes)(\d*)$")


class ParameterType:
    """Base class for ABI parameter types."""

    @property
    def canonical(self) -> str:
        raise NotImplementedError

    def normalize(self, value: Any, index: int) -> Any:
        """Validate ``value`` and return the form ``eth_abi`` expects.

        Raises:
            TypeMismatchError: If the value does not fit this type
        """
        raise NotImplementedError

    def mismatch(self, value: Any, index: int, reason: Optional[str] = None):
        return TypeMismatchError(index, self.canonical, value, reason)

    def __str__(self) -> str:
        return self.canonical


@dataclass(frozen=True)
class UintType(ParameterType):
    bits: int = 256

    @property
    def canonical(self) -> str:
        return f"uint{self.bits}"

    def normalize(self, value: Any, index: int) -> int:
        if not isinstance(value, int) or isinstance(value, bool):
            raise self.mismatch(value, index, "expected an integer")
        if value < 0 or value >= 2**self.bits:
            raise self.mismatch(value, index, "out of range")
        return value


@dataclass(frozen=True)
class IntType(ParameterType):
    bits: int = 256

    @property
    def canonical(self) -> str:
        return f"int{self.bits}"

    def normalize(self, value: Any, index: int) -> int:
        if not isinstance(value, int) or isinstance(value, bool):
            raise self.mismatch(value, index, "expected an integer")
        bound = 2 ** (self.bits - 1)
        if value < -bound or value >= bound:
            raise self.mismatch(value, index, "out of range")
        return value


@dataclass(frozen=True)
class AddressType(ParameterType):
    @property
    def canonical(self) -> str:
        return "address"

    def normalize(self, value: Any, index: int) -> str:
        if not isinstance(value, str) or not is_address(value):
            raise self.mismatch(value, index, "expected a 20-byte hex address")
        return to_checksum_address(value)


@dataclass(frozen=True)
class BoolType(ParameterType):
    @property
    def canonical(self) -> str:
        return "bool"

    def normalize(self, value: Any, index: int) -> bool:
        if not isinstance(value, bool):
            raise self.mismatch(value, index, "expected a bool")
        return value


@dataclass(frozen=True)
class FixedBytesType(ParameterType):
    size: int

    @property
    def canonical(self) -> str:
        return f"bytes{self.size}"

    def normalize(self, value: Any, index: int) -> bytes:
        data = _to_bytes(value)
        if data is None:
            raise self.mismatch(value, index, "expected bytes or a 0x hex string")
        if len(data) != self.size:
            raise self.mismatch(
                value, index, f"expected {self.size} bytes, got {len(data)}"
            )
        return data


@dataclass(frozen=True)
class BytesType(ParameterType):
    @property
    def canonical(self) -> str:
        return "bytes"

    def normalize(self, value: Any, index: int) -> bytes:
        data = _to_bytes(value)
        if data is None:
            raise self.mismatch(value, index, "expected bytes or a 0x hex string")
        return data


@dataclass(frozen=True)
class StringType(ParameterType):
    @property
    def canonical(self) -> str:
        return "string"

    def normalize(self, value: Any, index: int) -> str:
        if not isinstance(value, str):
            raise self.mismatch(value, index, "expected a str")
        return value


@dataclass(frozen=True)
class ArrayType(ParameterType):
    item: ParameterType
    length: Optional[int] = None
    """Fixed length, or None for a dynamic array."""

    @property
    def canonical(self) -> str:
        size = "" if self.length is None else str(self.length)
        return f"{self.item.canonical}[{size}]"

    def normalize(self, value: Any, index: int) -> List[Any]:
        if isinstance(value, (str, bytes, bytearray, Mapping)) or not isinstance(
            value, Sequence
        ):
            raise self.mismatch(value, index, "expected a list")
        if self.length is not None and len(value) != self.length:
            raise self.mismatch(
                value, index, f"expected {self.length} items, got {len(value)}"
            )
        return [self.item.normalize(v, index) for v in value]


@dataclass(frozen=True)
class TupleType(ParameterType):
    components: Tuple["Parameter", ...]

    @property
    def canonical(self) -> str:
        return "(" + ",".join(c.type.canonical for c in self.components) + ")"

    def normalize(self, value: Any, index: int) -> Tuple[Any, ...]:
        if isinstance(value, Mapping):
            missing = [c.name for c in self.components if c.name not in value]
            if missing:
                raise self.mismatch(value, index, f"missing fields {missing}")
            items = [value[c.name] for c in self.components]
        elif isinstance(value, (list, tuple)):
            if len(value) != len(self.components):
                raise self.mismatch(
                    value,
                    index,
                    f"expected {len(self.components)} fields, got {len(value)}",
                )
            items = list(value)
        else:
            raise self.mismatch(value, index, "expected a tuple, list or dict")
        return tuple(
            c.type.normalize(v, index) for c, v in zip(self.components, items)
        )


@dataclass(frozen=True)
class Parameter:
    """A named, typed function input or output."""

    name: str
    type: ParameterType


@dataclass(frozen=True)
class FunctionDescriptor:
    """A parsed interface entry."""

    kind: str
    name: str
    inputs: Tuple[Parameter, ...] = ()
    outputs: Tuple[Parameter, ...] = ()
    state_mutability: str = "nonpayable"

    @property
    def input_types(self) -> List[str]:
        return [p.type.canonical for p in self.inputs]

    @property
    def output_types(self) -> List[str]:
        return [p.type.canonical for p in self.outputs]

    @property
    def signature(self) -> str:
        """Canonical signature, e.g. ``setValue(address)``."""
        return f"{self.name}({','.join(self.input_types)})"


def _to_bytes(value: Any) -> Optional[bytes]:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str) and value.startswith("0x") and is_hex(value):
        try:
            return decode_hex(value)
        except ValueError:
            # odd number of hex digits
            return None
    return None


def parse_type(type_string: str, components: Optional[Sequence[Dict]] = None) -> ParameterType:
    """Parse an ABI type string into a parameter-type variant.

    Args:
        type_string: ABI type, e.g. ``uint256``, ``address[]``, ``tuple[2]``
        components: Component entries for tuple types

    Returns:
        The matching ParameterType

    Raises:
        UnsupportedTypeError: If the type string is not recognised
    """
    array = _ARRAY_SUFFIX.match(type_string)
    if array:
        base, size = array.groups()
        return ArrayType(
            item=parse_type(base, components),
            length=int(size) if size else None,
        )

    if type_string == "tuple":
        if components is None:
            raise UnsupportedTypeError("tuple without components")
        return TupleType(components=tuple(parse_parameter(c) for c in components))
    if type_string == "address":
        return AddressType()
    if type_string == "bool":
        return BoolType()
    if type_string == "string":
        return StringType()
    if type_string == "bytes":
        return BytesType()

    sized = _SIZED.match(type_string)
    if sized:
        base, size = sized.groups()
        if base == "bytes":
            n = int(size)
            if 1 <= n <= 32:
                return FixedBytesType(size=n)
        else:
            bits = int(size) if size else 256
            if 8 <= bits <= 256 and bits % 8 == 0:
                return UintType(bits) if base == "uint" else IntType(bits)

    raise UnsupportedTypeError(type_string)


def parse_parameter(entry: Mapping[str, Any]) -> Parameter:
    return Parameter(
        name=entry.get("name", ""),
        type=parse_type(entry["type"], entry.get("components")),
    )


def parse_entry(entry: Mapping[str, Any]) -> FunctionDescriptor:
    """Parse a single JSON ABI entry."""
    return FunctionDescriptor(
        kind=entry.get("type", FUNCTION),
        name=entry.get("name", ""),
        inputs=tuple(parse_parameter(p) for p in entry.get("inputs", [])),
        outputs=tuple(parse_parameter(p) for p in entry.get("outputs", [])),
        state_mutability=entry.get("stateMutability", "nonpayable"),
    )
