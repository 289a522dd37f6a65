"""
Token Bot Configuration

Holds the fixed network settings (Seismic devnet), compiler settings and
console preferences. One TokenBotConfig is built at start-up and passed to
every workflow.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .errors import MissingCredentialError

SEISMIC_RPC_URL = "https://node-2.seismicdev.net/rpc"
SEISMIC_CHAIN_ID = 5124
SEISMIC_EXPLORER_URL = "https://explorer-2.seismicdev.net"
SEISMIC_NETWORK_NAME = "Seismic devnet"

PRIVATE_KEY_ENV = "PRIVATE_KEY"
DEPLOY_GAS_LIMIT = 3000000  # 3M gas for deployment
SOLC_VERSION = "0.8.19"
OPTIMIZER_RUNS = 200


@dataclass
class TokenBotConfig:
    """Runtime settings shared by the deploy and transfer workflows"""

    rpc_url: str = SEISMIC_RPC_URL
    chain_id: int = SEISMIC_CHAIN_ID
    network_name: str = SEISMIC_NETWORK_NAME
    explorer_url: str = SEISMIC_EXPLORER_URL
    private_key_env: str = PRIVATE_KEY_ENV
    deploy_gas_limit: int = DEPLOY_GAS_LIMIT
    solc_version: str = SOLC_VERSION
    optimizer_runs: int = OPTIMIZER_RUNS
    receipt_timeout: float = 120
    request_timeout: float = 60
    contract_dir: Path = field(default_factory=lambda: Path.cwd())
    use_color: bool = True

    @property
    def network_label(self) -> str:
        return f"{self.network_name} (Chain ID: {self.chain_id})"

    def explorer_address_url(self, address: str) -> str:
        return f"{self.explorer_url}/address/{address}"

    def private_key(self) -> str:
        """
        Read the signing key from the environment

        Returns:
            Private key as a 0x-prefixed hex string

        Raises:
            MissingCredentialError: If the variable is unset or blank
        """
        value = os.getenv(self.private_key_env, '').strip()
        if not value:
            raise MissingCredentialError(self.private_key_env)
        if not value.startswith('0x'):
            value = '0x' + value
        return value


def load_config(env_file: Optional[str] = None, **overrides) -> TokenBotConfig:
    """
    Load .env values into the process environment and build the config

    Args:
        env_file: Explicit .env path. None searches upwards from the current directory.
        **overrides: TokenBotConfig fields to override (e.g. use_color=False)

    Returns:
        TokenBotConfig instance
    """
    if env_file:
        load_dotenv(env_file, override=False)
    else:
        load_dotenv(find_dotenv(usecwd=True), override=False)

    return TokenBotConfig(**overrides)
