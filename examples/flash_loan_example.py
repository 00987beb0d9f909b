"""Cross-Chain Flash Loan Example.

This example prepares the two transactions of the supersim flash loan demo:
- Mint test tokens into the flash loan bridge
- Initiate a flash loan from chain 901 to the target contract on chain 902

The transactions are printed, not sent. Pass them to your own wallet or
transport (e.g. web3.py ``send_transaction``) to execute them.

Prerequisites:
1. pip install flashloan-sdk
2. Optionally set FLASHLOAN_* variables in a .env file
3. For execution: supersim running with the demo contracts deployed

Usage:
    python flash_loan_example.py
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()


def main():
    from flashloan_sdk import (
        DEV_PRIVATE_KEY,
        FlashLoanClient,
        FlashLoanConfig,
        format_ether,
        parse_ether,
    )

    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))

    config = FlashLoanConfig.from_env()
    private_key = os.environ.get("FLASHLOAN_PRIVATE_KEY", DEV_PRIVATE_KEY)
    client = FlashLoanClient(config, private_key)

    print("=" * 60)
    print("  CROSS-CHAIN FLASH LOAN")
    print("=" * 60)
    print(f"\nAccount: {client.address}")

    # Mint test tokens to the bridge
    mint_amount = parse_ether("1000")
    mint_tx = client.prepare_mint(mint_amount)
    print(f"\n[1] Mint {format_ether(mint_amount)} tokens to bridge")
    print(f"    {mint_tx.to_dict()}")

    balance_call = client.bridge_balance()
    print(f"    Check with eth_call to {balance_call.to}: {balance_call.data_hex}")

    # Flash loan from the first chain to the second
    direction = client.default_direction()
    amount = parse_ether("1")
    loan_tx = client.prepare_flash_loan(direction, amount)
    print(
        f"\n[2] Flash loan of {format_ether(amount)} tokens: "
        f"{direction.source.name} -> {direction.destination.name}"
    )
    print(f"    Fee: {format_ether(loan_tx.value)} ETH")
    print(f"    {loan_tx.to_dict()}")

    value_call = client.target_value(direction.destination.id)
    print(f"\n[3] After execution, read target value on {direction.destination.name}:")
    print(f"    eth_call to {value_call.to}: {value_call.data_hex}")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
