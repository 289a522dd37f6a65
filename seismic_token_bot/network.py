"""
Token Network - Web3 session for the Seismic devnet

Responsibilities:
1. Connect to the fixed JSON-RPC endpoint
2. Load the signing account from the environment
3. Sign, submit and confirm transactions one at a time
"""

from typing import Any, Dict, List, Optional

import requests
from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import Web3
from web3.exceptions import TimeExhausted
from web3.providers.rpc import HTTPProvider

from .config import TokenBotConfig
from .errors import DeploymentError, NetworkConnectionError


class TokenNetwork:
    """Single Web3 connection plus signer, used serially by both workflows"""

    def __init__(self, config: TokenBotConfig, w3: Optional[Web3] = None):
        """
        Initialize network session

        Args:
            config: Bot configuration (RPC URL, chain ID, timeouts)
            w3: Pre-built Web3 instance (skips HTTP provider setup)
        """
        self.config = config
        self.w3: Optional[Web3] = w3
        self.account: Optional[LocalAccount] = None

    @property
    def address(self) -> Optional[str]:
        return self.account.address if self.account else None

    def connect(self) -> Web3:
        """
        Connect to the RPC endpoint (once)

        Returns:
            Connected Web3 instance
        """
        if self.w3 is not None:
            return self.w3

        session = requests.Session()
        provider = HTTPProvider(
            self.config.rpc_url,
            session=session,
            request_kwargs={'timeout': self.config.request_timeout}
        )
        w3 = Web3(provider)

        if not w3.is_connected():
            raise NetworkConnectionError(f"Cannot connect to RPC: {self.config.rpc_url}")

        self.w3 = w3
        return w3

    def load_signer(self) -> LocalAccount:
        """
        Build the signing account from the PRIVATE_KEY environment variable

        Raises:
            MissingCredentialError: Key not set
        """
        private_key = self.config.private_key()
        self.account = Account.from_key(private_key)
        return self.account

    def get_balance(self, address: Optional[str] = None) -> int:
        """Native balance in wei (defaults to the signer)"""
        return self.w3.eth.get_balance(address or self.address)

    def pending_nonce(self) -> int:
        return self.w3.eth.get_transaction_count(self.address, 'pending')

    def contract(self, address: Optional[str] = None, abi: Optional[List[Dict[str, Any]]] = None, bytecode: Optional[str] = None):
        """Web3 contract object (bound when address is given)"""
        kwargs = {'abi': abi}
        if address is not None:
            kwargs['address'] = Web3.to_checksum_address(address)
        if bytecode is not None:
            kwargs['bytecode'] = bytecode
        return self.w3.eth.contract(**kwargs)

    def send_transaction(self, tx: Dict[str, Any]) -> str:
        """
        Sign with the loaded account and submit

        Args:
            tx: Fully built transaction dict

        Returns:
            Transaction hash (0x-prefixed hex)
        """
        signed_tx = self.w3.eth.account.sign_transaction(tx, self.account.key)
        tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        return Web3.to_hex(tx_hash)

    def wait_for_receipt(self, tx_hash: str, error_cls=DeploymentError):
        """
        Block until the transaction is mined

        Args:
            tx_hash: Transaction hash
            error_cls: Exception type raised on timeout

        Returns:
            Transaction receipt
        """
        try:
            return self.w3.eth.wait_for_transaction_receipt(tx_hash, timeout=self.config.receipt_timeout)
        except TimeExhausted as e:
            raise error_cls(
                f"Transaction {tx_hash} not confirmed within {self.config.receipt_timeout}s",
                tx_hash=tx_hash
            ) from e
