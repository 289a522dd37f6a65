"""
Token Deployer - Deployment workflow

Deploys exactly one SeismicToken instance per call:
signer -> balance check -> compile -> contract creation tx -> confirmation
"""

from typing import Optional

from web3 import Web3

from .compiler import ContractCompiler
from .config import TokenBotConfig
from .console import Console
from .contract_source import CONTRACT_FILENAME, CONTRACT_NAME, TOKEN_CONTRACT_SOURCE, save_contract_source
from .errors import DeploymentError, InsufficientFundsError, TokenBotError
from .models import CompiledArtifact, DeployedContract, TokenParameters
from .network import TokenNetwork


class TokenDeployer:
    """Deployment workflow for the embedded token contract"""

    def __init__(
        self,
        config: TokenBotConfig,
        console: Console,
        network: TokenNetwork,
        compiler: Optional[ContractCompiler] = None,
        contract_source: str = TOKEN_CONTRACT_SOURCE,
        contract_name: str = CONTRACT_NAME
    ):
        self.config = config
        self.console = console
        self.network = network
        self.compiler = compiler or ContractCompiler(config.solc_version, config.optimizer_runs)
        self.contract_source = contract_source
        self.contract_name = contract_name

    def deploy(self, params: TokenParameters) -> DeployedContract:
        """
        Deploy the token contract

        Args:
            params: Token name, symbol and whole-token supply

        Returns:
            DeployedContract with address and ABI

        Raises:
            TokenBotError: Any step failed; nothing after that step ran
        """
        try:
            return self._deploy(params)
        except TokenBotError as e:
            self.console.error(f"Contract deployment error: {e}")
            raise
        except Exception as e:
            self.console.error(f"Contract deployment error: {e}")
            raise DeploymentError(str(e)) from e

    def _deploy(self, params: TokenParameters) -> DeployedContract:
        account = self.network.load_signer()

        self.console.section("DEPLOYING TOKEN CONTRACT")
        self.console.field("📝", "Token name", params.name)
        self.console.field("🔤", "Token symbol", params.symbol)
        self.console.field("💰", "Total supply", params.total_supply)
        self.console.field("🌐", "Network", self.config.network_label)

        self.network.connect()
        self.console.field("👛", "Deployer", account.address)

        balance = self.network.get_balance(account.address)
        self.console.field("💎", "Wallet balance", f"{Web3.from_wei(balance, 'ether')} ETH")
        if balance == 0:
            raise InsufficientFundsError(account.address, balance)

        artifact = self.compile()

        self.console.info("⏳ Initializing deployment...")
        tx_hash = self._submit(artifact, params)
        self.console.field("🔄", "Transaction hash", tx_hash)
        self.console.info("⏳ Waiting for confirmation...")

        receipt = self.network.wait_for_receipt(tx_hash)
        if receipt['status'] != 1:
            raise DeploymentError(
                f"Contract deployment failed with status: {receipt['status']}",
                tx_hash=tx_hash
            )

        contract_address = receipt.get('contractAddress')
        if not contract_address:
            raise DeploymentError("Contract deployment failed - no contract address", tx_hash=tx_hash)
        contract_address = Web3.to_checksum_address(contract_address)

        self.console.write()
        self.console.success("Token contract deployed successfully!")
        self.console.field("📍", "Contract address", contract_address)
        self.console.field("🔍", "View on explorer", self.config.explorer_address_url(contract_address))

        return DeployedContract(
            address=contract_address,
            abi=artifact.abi,
            tx_hash=tx_hash,
            block_number=receipt.get('blockNumber'),
            deployer=account.address
        )

    def compile(self) -> CompiledArtifact:
        """Write the embedded source to config.contract_dir (default: working directory) and compile it"""
        contract_path = save_contract_source(
            self.contract_source,
            CONTRACT_FILENAME,
            self.config.contract_dir
        )
        self.console.field("📄", "Contract saved to", contract_path)

        artifact = self.compiler.compile_file(contract_path, self.contract_name)
        self.console.success("Contract compiled successfully")
        return artifact

    def _submit(self, artifact: CompiledArtifact, params: TokenParameters) -> str:
        factory = self.network.contract(abi=artifact.abi, bytecode=artifact.creation_code)
        deploy_tx = factory.constructor(
            params.name,
            params.symbol,
            params.total_supply
        ).build_transaction({
            'from': self.network.address,
            'gas': self.config.deploy_gas_limit,
            'gasPrice': self.network.w3.eth.gas_price,
            'nonce': self.network.pending_nonce(),
            'chainId': self.config.chain_id,
        })
        return self.network.send_transaction(deploy_tx)

    def token_contract(self, deployed: DeployedContract):
        """Bound contract for read calls (totalSupply, balanceOf, decimals)"""
        self.network.connect()
        return self.network.contract(address=deployed.address, abi=deployed.abi)
