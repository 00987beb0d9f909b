"""Exceptions for the Flash Loan SDK.

All errors are local input or configuration defects. They subclass
``ValueError`` so callers that already guard against bad input keep working.
"""

from typing import Any, Dict, List, Optional


class FlashLoanSDKError(ValueError):
    """Base exception for all Flash Loan SDK errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class FunctionNotFoundError(FlashLoanSDKError):
    """No function with the requested name exists in the interface."""

    def __init__(self, name: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Function {name} not found in interface", details)
        self.name = name


class AmbiguousFunctionError(FlashLoanSDKError):
    """More than one overload matches a bare function name."""

    def __init__(self, name: str, candidates: List[str]):
        super().__init__(
            f"Function {name} is overloaded; use one of: {', '.join(candidates)}",
            {"candidates": candidates},
        )
        self.name = name
        self.candidates = candidates


class ArityMismatchError(FlashLoanSDKError):
    """Argument count differs from the declared parameter count."""

    def __init__(self, name: str, expected: int, actual: int):
        super().__init__(
            f"Function {name} expects {expected} argument(s), got {actual}"
        )
        self.name = name
        self.expected = expected
        self.actual = actual


class TypeMismatchError(FlashLoanSDKError):
    """An argument does not fit its declared parameter type."""

    def __init__(
        self,
        parameter_index: int,
        expected_type: str,
        value: Any = None,
        reason: Optional[str] = None,
    ):
        message = f"Argument {parameter_index} is not a valid {expected_type}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, {"value": repr(value)})
        self.parameter_index = parameter_index
        self.expected_type = expected_type


class UnsupportedTypeError(FlashLoanSDKError):
    """Interface declares a parameter type the encoder does not know."""

    def __init__(self, type_string: str):
        super().__init__(f"Unsupported ABI type: {type_string}")
        self.type_string = type_string


class InvalidCredentialError(FlashLoanSDKError):
    """Private key is not a well-formed 32-byte hex string."""
    pass


class ConfigurationError(FlashLoanSDKError):
    """Configuration is invalid or refers to an unsupported chain."""
    pass
