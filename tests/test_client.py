"""Tests for the flash loan client."""

import logging

import pytest
from eth_abi import decode
from eth_utils import keccak

from flashloan_sdk import (
    DEV_PRIVATE_KEY,
    ChainInfo,
    ConfigurationError,
    FlashLoanClient,
    FlashLoanConfig,
    InvalidCredentialError,
    TARGET_CONTRACT_ABI,
    encode_function_call,
    identity_from_credential,
    parse_ether,
)

DEV_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


@pytest.fixture
def client():
    return FlashLoanClient(FlashLoanConfig.supersim(), DEV_PRIVATE_KEY)


class TestClientSetup:
    """Tests for client construction."""

    def test_from_private_key(self, client):
        """Test that a private key is turned into an identity."""
        assert client.address == DEV_ADDRESS

    def test_from_identity(self):
        """Test passing an already derived identity."""
        identity = identity_from_credential(DEV_PRIVATE_KEY)
        client = FlashLoanClient(FlashLoanConfig.supersim(), identity)
        assert client.identity is identity

    def test_invalid_key(self):
        """Test that a bad key fails at construction."""
        with pytest.raises(InvalidCredentialError):
            FlashLoanClient(FlashLoanConfig.supersim(), "0x1234")

    def test_direction(self, client):
        """Test direction lookup and validation."""
        direction = client.direction(901, 902)
        assert direction.source.id == 901
        assert direction.destination.id == 902
        assert client.default_direction() == direction

        with pytest.raises(ConfigurationError):
            client.direction(901, 1)

    def test_default_direction_single_chain(self):
        """Test that a single chain loops back to itself."""
        base = FlashLoanConfig.supersim()
        config = FlashLoanConfig(
            bridge_address=base.bridge_address,
            token_address=base.token_address,
            target_address=base.target_address,
            supported_chains=(ChainInfo(id=901, name="Only"),),
        )
        direction = FlashLoanClient(config, DEV_PRIVATE_KEY).default_direction()
        assert direction.source == direction.destination


class TestPrepareMint:
    """Tests for mint preparation."""

    def test_mint_to_bridge(self, client):
        """Test that tokens are minted to the bridge on the first chain."""
        tx = client.prepare_mint(parse_ether("1000"))

        assert tx.to == client.config.token_address
        assert tx.chain_id == 901
        assert tx.sender == DEV_ADDRESS
        assert tx.value == 0

        recipient, amount = decode(["address", "uint256"], tx.data[4:])
        assert recipient.lower() == client.config.bridge_address.lower()
        assert amount == 1000 * 10**18

    def test_mint_to_other_chain(self, client):
        """Test minting on a chosen chain and recipient."""
        tx = client.prepare_mint(1, recipient=DEV_ADDRESS, chain_id=902)
        recipient, _ = decode(["address", "uint256"], tx.data[4:])

        assert tx.chain_id == 902
        assert recipient.lower() == DEV_ADDRESS.lower()

    def test_mint_unsupported_chain(self, client):
        """Test that unsupported chains are rejected."""
        with pytest.raises(ConfigurationError):
            client.prepare_mint(1, chain_id=1)


class TestPrepareFlashLoan:
    """Tests for flash loan preparation."""

    def test_default_callback(self, client):
        """Test that the callback stores the token address on the target."""
        expected = encode_function_call(
            TARGET_CONTRACT_ABI, "setValue", [client.config.token_address]
        )
        assert client.encode_target_callback() == expected

    def test_build_flash_loan(self, client):
        """Test request fields for 1 token from 901 to 902."""
        request = client.build_flash_loan(client.direction(901, 902), parse_ether("1"))

        assert request.principal == 10**18
        assert request.fee == 10**16
        assert request.destination_chain == 902
        assert request.originator.address == DEV_ADDRESS
        assert request.bridge_address == client.config.bridge_address
        assert request.target_address == client.config.target_address
        assert request.inner_call_payload == client.encode_target_callback()

    def test_prepare_flash_loan(self, client):
        """Test the outer bridge transaction on the source chain."""
        direction = client.direction(902, 901)
        tx = client.prepare_flash_loan(direction, parse_ether("2"))

        assert tx.chain_id == 902
        assert tx.to == client.config.bridge_address
        assert tx.value == client.config.flat_fee
        assert tx.data[:4] == keccak(
            text="initiateCrosschainFlashLoan(uint256,uint256,address,bytes)"
        )[:4]

        destination, amount, target, data = decode(
            ["uint256", "uint256", "address", "bytes"], tx.data[4:]
        )
        assert destination == 901
        assert amount == 2 * 10**18
        assert target.lower() == client.config.target_address.lower()
        assert data == client.encode_target_callback()

    def test_custom_callback(self, client):
        """Test forwarding a caller-provided payload unchanged."""
        payload = b"\x12\x34\x56\x78"
        request = client.build_flash_loan(client.default_direction(), 1, payload)
        assert request.inner_call_payload == payload

    def test_fee_independent_of_amount(self, client):
        """Test that different amounts carry the same fee."""
        direction = client.default_direction()
        small = client.prepare_flash_loan(direction, 1)
        large = client.prepare_flash_loan(direction, parse_ether("1000000"))
        assert small.value == large.value

    def test_private_key_not_logged(self, client, caplog):
        """Test that preparing requests never logs the key."""
        with caplog.at_level(logging.DEBUG, logger="flashloan_sdk"):
            client.prepare_mint(1)
            client.prepare_flash_loan(client.default_direction(), 1)

        assert caplog.records
        assert DEV_PRIVATE_KEY[2:] not in caplog.text


class TestReadCalls:
    """Tests for read call descriptors."""

    def test_bridge_balance(self, client):
        """Test the balanceOf call for the bridge and its decoding."""
        call = client.bridge_balance()

        assert call.to == client.config.token_address
        assert call.chain_id == 901
        assert call.data[:4].hex() == "70a08231"
        assert call.data_hex.startswith("0x70a08231")
        assert call.decode((5 * 10**18).to_bytes(32, "big")) == 5 * 10**18

    def test_target_value(self, client):
        """Test the getValue call on the destination chain."""
        call = client.target_value(902)

        assert call.to == client.config.target_address
        assert call.chain_id == 902
        assert call.data == keccak(text="getValue()")[:4]

        raw = b"\x00" * 12 + bytes.fromhex(client.config.token_address[2:])
        assert call.decode(raw).lower() == client.config.token_address.lower()

    def test_unsupported_chain(self, client):
        """Test that read calls validate the chain."""
        with pytest.raises(ConfigurationError):
            client.target_value(1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
