"""Function resolution against a contract interface.

Only ``function`` entries are resolvable. A bare name must match exactly one
function; overloaded names are resolved by passing the full canonical
signature instead, e.g. ``"setValue(address)"``.
"""

import logging
from typing import Any, Iterable, List, Mapping, Sequence, Union

from ..exceptions import AmbiguousFunctionError, FunctionNotFoundError
from .types import FUNCTION, FunctionDescriptor, parse_entry

logger = logging.getLogger(__name__)

InterfaceDescriptor = Sequence[Union[Mapping[str, Any], FunctionDescriptor]]


def _as_descriptor(entry: Union[Mapping[str, Any], FunctionDescriptor]) -> FunctionDescriptor:
    if isinstance(entry, FunctionDescriptor):
        return entry
    return parse_entry(entry)


def _kind(entry) -> str:
    if isinstance(entry, FunctionDescriptor):
        return entry.kind
    return entry.get("type", FUNCTION)


def _name(entry) -> str:
    if isinstance(entry, FunctionDescriptor):
        return entry.name
    return entry.get("name", "")


def parse_interface(abi: InterfaceDescriptor) -> List[FunctionDescriptor]:
    """Parse every entry of a JSON ABI.

    Unlike ``resolve_function`` this fails on the first entry with a type the
    encoder does not support.
    """
    return [_as_descriptor(entry) for entry in abi]


def resolve_function(abi: InterfaceDescriptor, name: str) -> FunctionDescriptor:
    """Find the unique function matching ``name``.

    Args:
        abi: Interface entries (raw JSON ABI dicts or parsed descriptors)
        name: Function name, or a full signature such as ``mint(address,uint256)``

    Returns:
        The matching FunctionDescriptor

    Raises:
        FunctionNotFoundError: If no function matches
        AmbiguousFunctionError: If a bare name matches several overloads
    """
    bare_name = name.split("(", 1)[0]
    candidates: Iterable = (
        entry for entry in abi
        if _kind(entry) == FUNCTION and _name(entry) == bare_name
    )
    matches = [_as_descriptor(entry) for entry in candidates]

    if "(" in name:
        matches = [fn for fn in matches if fn.signature == name.replace(" ", "")]

    if not matches:
        raise FunctionNotFoundError(name)
    if len(matches) > 1:
        raise AmbiguousFunctionError(name, [fn.signature for fn in matches])

    logger.debug("Resolved %s to %s", name, matches[0].signature)
    return matches[0]
