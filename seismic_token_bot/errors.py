"""
Error kinds raised by the deployment and transfer workflows
"""

from typing import Any, Dict, List, Optional


class TokenBotError(Exception):
    """Base class for all token bot errors"""


class MissingCredentialError(TokenBotError):
    """Signing key not found in the environment"""

    def __init__(self, env_var: str):
        self.env_var = env_var
        super().__init__(f"Private key not found: set {env_var} in the environment or .env file")


class InsufficientFundsError(TokenBotError):
    """Signing account cannot pay transaction fees"""

    def __init__(self, address: str, balance_wei: int = 0):
        self.address = address
        self.balance_wei = balance_wei
        super().__init__(
            f"Wallet {address} has no ETH for transaction fees. Please fund your account."
        )


class CompilationError(TokenBotError):
    """Compiler reported one or more errors"""

    def __init__(self, diagnostics: List[Dict[str, Any]], message: Optional[str] = None):
        self.diagnostics = diagnostics
        if message is None:
            lines = [d.get('formattedMessage') or d.get('message', '') for d in diagnostics]
            message = "Compilation error:\n" + "\n".join(line.strip() for line in lines if line)
        super().__init__(message)


class ContractNotFoundError(TokenBotError):
    """Named contract missing from the compiler output"""

    def __init__(self, contract_name: str):
        self.contract_name = contract_name
        super().__init__(f"Contract {contract_name} not found in compilation output")


class ValidationError(TokenBotError):
    """Bad user input"""


class NetworkConnectionError(TokenBotError):
    """RPC endpoint unreachable"""


class DeploymentError(TokenBotError):
    """Deployment transaction reverted or was not confirmed in time"""

    def __init__(self, message: str, tx_hash: Optional[str] = None):
        self.tx_hash = tx_hash
        super().__init__(message)


class TransactionFailure(TokenBotError):
    """A single token transfer failed"""

    def __init__(self, message: str, tx_hash: Optional[str] = None):
        self.tx_hash = tx_hash
        super().__init__(message)
