"""
Random recipient addresses for transfer batches

A fresh key is drawn from the OS CSPRNG, the address is derived from it and
the key is dropped. The result is not a usable wallet.
"""

import secrets

from eth_account import Account
from eth_utils import is_checksum_address


def generate_random_address() -> str:
    """
    Generate a random Ethereum address

    Returns:
        Ethereum address (checksummed)
    """
    private_key = "0x" + secrets.token_hex(32)
    return Account.from_key(private_key).address


def is_valid_address(value: str) -> bool:
    """Check that value is a 0x-prefixed, EIP-55 checksummed address"""
    return isinstance(value, str) and is_checksum_address(value)
