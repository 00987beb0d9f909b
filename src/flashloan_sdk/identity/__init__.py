"""Identity derivation for transaction originators."""

from .wallet import Identity, identity_from_credential

__all__ = [
    "Identity",
    "identity_from_credential",
]
