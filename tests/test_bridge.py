"""Tests for the bridge module."""

import dataclasses

import pytest
from eth_abi import decode
from eth_utils import keccak, to_checksum_address

from flashloan_sdk.abi import TARGET_CONTRACT_ABI, encode_function_call
from flashloan_sdk.bridge import (
    Direction,
    FlashLoanRequest,
    PreparedTransaction,
    build_flash_loan_request,
    flash_loan_transaction,
    build_mint_request,
    mint_transaction,
)
from flashloan_sdk.config import SUPERSIM_L2_A, SUPERSIM_L2_B
from flashloan_sdk.exceptions import TypeMismatchError
from flashloan_sdk.identity import identity_from_credential


# Test wallet (DO NOT use in production)
TEST_PRIVATE_KEY = "0x" + "ab" * 32
TEST_IDENTITY = identity_from_credential(TEST_PRIVATE_KEY)

BRIDGE = "0xd3c51ed9a0dcab74afc011f4f662a65e2cfd949b"
TARGET = "0x14927f49b13cc09cff9cb132b6a8e3318b724f19"
TOKEN = "0x820e6303d954e083be1d6051eabc97636a7e468a"
FEE = 10**16
MAX_UINT256 = 2**256 - 1

CALLBACK = encode_function_call(TARGET_CONTRACT_ABI, "setValue", [TOKEN])


def make_request(principal=10**18, destination=901, fee=FEE) -> FlashLoanRequest:
    return build_flash_loan_request(
        originator=TEST_IDENTITY,
        bridge_address=BRIDGE,
        destination=destination,
        principal=principal,
        target_address=TARGET,
        inner_call_payload=CALLBACK,
        fee=fee,
    )


class TestBuildFlashLoanRequest:
    """Tests for flash loan request assembly."""

    def test_request_fields(self):
        """Test one token unit to chain 901 with a 0.01 unit fee."""
        request = make_request()

        assert request.principal == 1000000000000000000
        assert request.fee == 10000000000000000
        assert request.destination_chain == 901
        assert request.originator.address == TEST_IDENTITY.address
        assert request.bridge_address == to_checksum_address(BRIDGE)
        assert request.target_address == to_checksum_address(TARGET)
        assert request.inner_call_payload == CALLBACK

    def test_request_shape(self):
        """Test the request has exactly the seven documented fields in order."""
        names = [f.name for f in dataclasses.fields(FlashLoanRequest)]
        assert names == [
            "originator",
            "bridge_address",
            "destination_chain",
            "principal",
            "target_address",
            "inner_call_payload",
            "fee",
        ]

    @pytest.mark.parametrize("principal", [0, 1, 10**18, MAX_UINT256])
    def test_principal_extremes(self, principal):
        """Test that any uint256 principal builds and encodes."""
        request = make_request(principal=principal)
        assert request.principal == principal

        tx = flash_loan_transaction(request, SUPERSIM_L2_A.id)
        _, amount, _, _ = decode(["uint256", "uint256", "address", "bytes"], tx.data[4:])
        assert amount == principal

    def test_fee_independent_of_principal(self):
        """Test that requests differing only in principal share the fee."""
        small = make_request(principal=1)
        large = make_request(principal=MAX_UINT256)
        assert small.fee == large.fee

    def test_request_is_immutable(self):
        """Test that a built request cannot be modified."""
        request = make_request()
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.principal = 0

    def test_same_source_and_destination(self):
        """Test that equal chains still produce a full request."""
        direction = Direction(source=SUPERSIM_L2_A, destination=SUPERSIM_L2_A)
        request = make_request(destination=direction.destination.id)
        tx = flash_loan_transaction(request, direction.source.id)

        assert request.destination_chain == tx.chain_id == SUPERSIM_L2_A.id

    def test_invalid_bridge_address(self):
        """Test that a malformed address is rejected."""
        with pytest.raises(ValueError):
            build_flash_loan_request(
                originator=TEST_IDENTITY,
                bridge_address="0x1234",
                destination=901,
                principal=1,
                target_address=TARGET,
                inner_call_payload=CALLBACK,
                fee=FEE,
            )

    @pytest.mark.parametrize("payload", [4, "0x12", None])
    def test_payload_must_be_bytes(self, payload):
        """Test that a non-bytes callback payload is rejected, not coerced."""
        with pytest.raises(TypeMismatchError) as exc_info:
            build_flash_loan_request(
                originator=TEST_IDENTITY,
                bridge_address=BRIDGE,
                destination=902,
                principal=1,
                target_address=TARGET,
                inner_call_payload=payload,
                fee=FEE,
            )

        assert exc_info.value.parameter_index == 3
        assert exc_info.value.expected_type == "bytes"

    def test_bytearray_payload(self):
        """Test that a bytearray payload is stored as bytes."""
        request = build_flash_loan_request(
            originator=TEST_IDENTITY,
            bridge_address=BRIDGE,
            destination=902,
            principal=1,
            target_address=TARGET,
            inner_call_payload=bytearray(CALLBACK),
            fee=FEE,
        )

        assert request.inner_call_payload == CALLBACK
        assert isinstance(request.inner_call_payload, bytes)


class TestFlashLoanTransaction:
    """Tests for the outer bridge transaction."""

    def test_transaction_encoding(self):
        """Test that the bridge call wraps the callback with routing fields."""
        request = make_request(destination=902)
        tx = flash_loan_transaction(request, SUPERSIM_L2_A.id)

        assert isinstance(tx, PreparedTransaction)
        assert tx.to == to_checksum_address(BRIDGE)
        assert tx.sender == TEST_IDENTITY.address
        assert tx.value == FEE
        assert tx.chain_id == 901

        selector = keccak(text="initiateCrosschainFlashLoan(uint256,uint256,address,bytes)")[:4]
        assert tx.data[:4] == selector

        destination, amount, target, data = decode(
            ["uint256", "uint256", "address", "bytes"], tx.data[4:]
        )
        assert destination == 902
        assert amount == 10**18
        assert target.lower() == TARGET
        assert data == CALLBACK

    def test_transaction_dict(self):
        """Test the submitter-facing dict form."""
        tx = flash_loan_transaction(make_request(), SUPERSIM_L2_B.id)
        as_dict = tx.to_dict()

        assert set(as_dict) == {"from", "to", "data", "value", "chainId"}
        assert as_dict["data"] == tx.data_hex
        assert as_dict["data"].startswith("0x")
        assert as_dict["chainId"] == 902

    def test_principal_out_of_range_is_not_encoded(self):
        """Test that a principal beyond uint256 fails at encoding."""
        request = make_request(principal=MAX_UINT256 + 1)
        with pytest.raises(TypeMismatchError) as exc_info:
            flash_loan_transaction(request, 901)
        assert exc_info.value.parameter_index == 1


class TestMint:
    """Tests for mint requests."""

    def test_mint_transaction(self):
        """Test mint(bridge, amount) on the token contract."""
        request = build_mint_request(
            originator=TEST_IDENTITY,
            token_address=TOKEN,
            recipient=BRIDGE,
            amount=1000 * 10**18,
            chain_id=901,
        )
        tx = mint_transaction(request)

        assert tx.to == to_checksum_address(TOKEN)
        assert tx.value == 0
        assert tx.chain_id == 901
        assert tx.data[:4].hex() == "40c10f19"

        recipient, amount = decode(["address", "uint256"], tx.data[4:])
        assert recipient.lower() == BRIDGE
        assert amount == 1000 * 10**18


class TestDirection:
    """Tests for direction values."""

    def test_reversed(self):
        """Test swapping source and destination."""
        direction = Direction(source=SUPERSIM_L2_A, destination=SUPERSIM_L2_B)
        assert direction.reversed() == Direction(source=SUPERSIM_L2_B, destination=SUPERSIM_L2_A)
        assert direction.reversed().reversed() == direction


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
