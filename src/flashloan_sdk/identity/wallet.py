"""Account identity derived from a private key."""

import re
from dataclasses import dataclass, field

from eth_account import Account
from eth_account.signers.local import LocalAccount

from ..exceptions import InvalidCredentialError


# secp256k1 group order; valid keys are in [1, n)
SECP256K1_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

_PRIVATE_KEY = re.compile(r"(0x)?[0-9a-fA-F]{64}")


@dataclass(frozen=True)
class Identity:
    """Transaction originator."""

    address: str
    """Checksummed account address."""

    signer: LocalAccount = field(repr=False, compare=False)
    """Signing handle for the external submitter. Never serialised."""


def identity_from_credential(private_key: str) -> Identity:
    """Derive an Identity from a private key.

    Args:
        private_key: 32-byte hex string, with or without 0x prefix

    Returns:
        Identity with the account address and signer handle

    Raises:
        InvalidCredentialError: If the key is malformed or out of range
    """
    if not isinstance(private_key, str) or not _PRIVATE_KEY.fullmatch(private_key):
        raise InvalidCredentialError(
            "Private key must be a 32-byte hex string (64 hex characters)"
        )

    key_hex = private_key[2:] if private_key.startswith("0x") else private_key
    if not 0 < int(key_hex, 16) < SECP256K1_N:
        raise InvalidCredentialError("Private key is outside the secp256k1 range")

    account = Account.from_key("0x" + key_hex)
    return Identity(address=account.address, signer=account)
