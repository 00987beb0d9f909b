"""Interfaces of the demo contracts.

- TOKEN_ABI: mintable ERC-20 lent out by the bridge
- FLASH_LOAN_BRIDGE_ABI: originates cross-chain flash loans
- TARGET_CONTRACT_ABI: destination-chain receiver of the loan callback
"""

TOKEN_ABI = [
    {
        "type": "function",
        "name": "mint",
        "inputs": [
            {"name": "to", "type": "address"},
            {"name": "amount", "type": "uint256"},
        ],
        "outputs": [],
        "stateMutability": "nonpayable",
    },
    {
        "type": "function",
        "name": "balanceOf",
        "inputs": [{"name": "account", "type": "address"}],
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
    },
    {
        "type": "function",
        "name": "transfer",
        "inputs": [
            {"name": "to", "type": "address"},
            {"name": "amount", "type": "uint256"},
        ],
        "outputs": [{"name": "", "type": "bool"}],
        "stateMutability": "nonpayable",
    },
    {
        "type": "event",
        "name": "Transfer",
        "inputs": [
            {"name": "from", "type": "address", "indexed": True},
            {"name": "to", "type": "address", "indexed": True},
            {"name": "value", "type": "uint256", "indexed": False},
        ],
        "anonymous": False,
    },
]

FLASH_LOAN_BRIDGE_ABI = [
    {
        "type": "function",
        "name": "initiateCrosschainFlashLoan",
        "inputs": [
            {"name": "destinationChain", "type": "uint256"},
            {"name": "amount", "type": "uint256"},
            {"name": "target", "type": "address"},
            {"name": "data", "type": "bytes"},
        ],
        "outputs": [{"name": "loanId", "type": "bytes32"}],
        "stateMutability": "payable",
    },
    {
        "type": "event",
        "name": "CrosschainFlashLoanInitiated",
        "inputs": [
            {"name": "destinationChain", "type": "uint256", "indexed": True},
            {"name": "borrower", "type": "address", "indexed": True},
            {"name": "amount", "type": "uint256", "indexed": False},
        ],
        "anonymous": False,
    },
]

TARGET_CONTRACT_ABI = [
    {
        "type": "function",
        "name": "setValue",
        "inputs": [{"name": "_value", "type": "address"}],
        "outputs": [],
        "stateMutability": "nonpayable",
    },
    {
        "type": "function",
        "name": "getValue",
        "inputs": [],
        "outputs": [{"name": "", "type": "address"}],
        "stateMutability": "view",
    },
]

INITIATE_FLASH_LOAN = "initiateCrosschainFlashLoan"
