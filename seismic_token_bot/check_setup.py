"""
Seismic Token Bot Setup Checker

Verifies that the signing key, RPC endpoint and Solidity compiler are ready
before any transaction is attempted.
"""

from typing import Optional

import solcx
from web3 import Web3

from .config import TokenBotConfig
from .errors import TokenBotError
from .network import TokenNetwork


def check_credential(network: TokenNetwork) -> bool:
    """Check that PRIVATE_KEY is set and is a valid key"""
    try:
        account = network.load_signer()
    except TokenBotError as e:
        print(f"❌ Credential: {e}")
        return False
    except ValueError as e:
        print(f"❌ Credential: {network.config.private_key_env} is not a valid private key ({e})")
        return False
    print(f"✅ Credential: deployer {account.address}")
    return True


def check_rpc(network: TokenNetwork) -> bool:
    """Check RPC reachability and chain ID"""
    config = network.config
    try:
        w3 = network.connect()
        chain_id = w3.eth.chain_id
    except Exception as e:
        print(f"❌ RPC: {config.rpc_url} unreachable ({e})")
        return False

    if chain_id != config.chain_id:
        print(f"❌ RPC: {config.rpc_url} reports chain ID {chain_id}, expected {config.chain_id}")
        return False
    print(f"✅ RPC: {config.rpc_url} (Chain ID: {chain_id}, block {w3.eth.block_number})")
    return True


def check_balance(network: TokenNetwork) -> bool:
    """Check that the deployer can pay fees"""
    try:
        balance = network.get_balance()
    except Exception as e:
        print(f"❌ Balance: query failed ({e})")
        return False

    balance_eth = Web3.from_wei(balance, 'ether')
    if balance == 0:
        print(f"❌ Balance: 0 ETH - fund {network.address} before deploying")
        return False
    print(f"✅ Balance: {balance_eth} ETH")
    return True


def check_solc(version: str) -> bool:
    """Check that the configured solc version is installed"""
    installed = [str(v) for v in solcx.get_installed_solc_versions()]
    if version in installed:
        print(f"✅ Solidity compiler: v{version}")
        return True
    print(f"⚠️  Solidity compiler: v{version} not installed (installed on first deploy)")
    return False


def main(config: TokenBotConfig, network: Optional[TokenNetwork] = None) -> int:
    print("=" * 80)
    print("🔍 Seismic Token Bot Setup Checker")
    print("=" * 80)
    print()

    network = network or TokenNetwork(config)
    all_checks_passed = True

    print("🔑 Credential:")
    credential_ok = check_credential(network)
    all_checks_passed &= credential_ok
    print()

    print(f"🌐 Network ({config.network_label}):")
    rpc_ok = check_rpc(network)
    all_checks_passed &= rpc_ok
    if credential_ok and rpc_ok:
        all_checks_passed &= check_balance(network)
    print()

    print("🛠  Compiler:")
    all_checks_passed &= check_solc(config.solc_version)
    print()

    print("=" * 80)
    if all_checks_passed:
        print("✅ ALL CHECKS PASSED - Ready to deploy!")
    else:
        print("❌ SOME CHECKS FAILED - Please review errors above")
    print("=" * 80)

    return 0 if all_checks_passed else 1
