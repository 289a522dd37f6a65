"""
Token Transferrer - Transfer workflow

Sends `count` transfers of a fixed amount from the deployer to freshly
generated addresses. Transfers run strictly one after another; a failed
transfer is reported as a failed row and the batch continues.
"""

from decimal import Decimal
from typing import Callable, Optional

from .address_generator import generate_random_address
from .config import TokenBotConfig
from .console import Console
from .contract_source import TOKEN_DECIMALS
from .errors import TokenBotError, TransactionFailure, ValidationError
from .models import (
    STATUS_FAILED,
    STATUS_SUCCESS,
    DeployedContract,
    TransferReport,
    TransferRequest,
    TransferResult,
)
from .network import TokenNetwork


def scale_amount(amount: Decimal, decimals: int = TOKEN_DECIMALS) -> int:
    """
    Whole-token amount to smallest units (amount * 10**decimals)

    Raises:
        ValidationError: amount has more decimal places than the token
    """
    scaled = Decimal(str(amount)).scaleb(decimals)
    if scaled != scaled.to_integral_value():
        raise ValidationError(f"Amount {amount} has more than {decimals} decimal places")
    return int(scaled)


class TokenTransferrer:
    """Transfer workflow for a deployed token"""

    def __init__(
        self,
        config: TokenBotConfig,
        console: Console,
        network: TokenNetwork,
        address_factory: Optional[Callable[[], str]] = None
    ):
        self.config = config
        self.console = console
        self.network = network
        self.address_factory = address_factory or generate_random_address

    def transfer_tokens(self, deployed: DeployedContract, count: int, amount: Decimal) -> TransferReport:
        """
        Run a batch of transfers

        Args:
            deployed: Contract returned by the deployment workflow
            count: Number of transfers (> 0)
            amount: Tokens per transfer in whole units (> 0)

        Returns:
            TransferReport with one row per attempted transfer
        """
        try:
            return self._transfer_tokens(deployed, count, Decimal(str(amount)))
        except TokenBotError as e:
            self.console.error(f"Token transfer error: {e}")
            raise

    def _transfer_tokens(self, deployed: DeployedContract, count: int, amount: Decimal) -> TransferReport:
        if count <= 0:
            raise ValidationError("Number of transfers must be a positive number")
        if amount <= 0:
            raise ValidationError("Amount must be a positive number")

        self.console.section("TRANSFERRING TOKENS")
        self.console.field("📊", "Number of transfers", count)
        self.console.field("💸", "Amount per transfer", amount)
        self.console.field("🎯", "Contract address", deployed.address)

        self.network.load_signer()
        self.network.connect()
        token = self.network.contract(address=deployed.address, abi=deployed.abi)
        decimals = token.functions.decimals().call()
        raw_amount = scale_amount(amount, decimals)

        self.console.write()
        self.console.notice("📤 Starting token transfers...")
        self.console.table_header()

        report = TransferReport()
        for index in range(1, count + 1):
            request = TransferRequest(
                index=index,
                recipient=self.address_factory(),
                amount=amount,
                raw_amount=raw_amount
            )
            report.results.append(self._transfer_one(token, request))

        self.console.table_rule()
        self.console.write()
        self.console.success("Token transfer operations completed")
        return report

    def _transfer_one(self, token, request: TransferRequest) -> TransferResult:
        """Submit and confirm a single transfer; failures become a failed row"""
        result = TransferResult(request=request)
        pending_shown = False
        try:
            transfer_tx = token.functions.transfer(
                request.recipient,
                request.raw_amount
            ).build_transaction({
                'from': self.network.address,
                'nonce': self.network.pending_nonce(),
                'chainId': self.config.chain_id,
            })
            result.tx_hash = self.network.send_transaction(transfer_tx)

            self.console.row_pending(request.index, request.recipient, request.amount)
            pending_shown = True

            receipt = self.network.wait_for_receipt(result.tx_hash, error_cls=TransactionFailure)
            if receipt['status'] != 1:
                raise TransactionFailure(
                    f"Transfer reverted with status: {receipt['status']}",
                    tx_hash=result.tx_hash
                )
            result.status = STATUS_SUCCESS
        except Exception as e:
            result.status = STATUS_FAILED
            result.error = str(e)

        self.console.row_done(
            request.index,
            request.recipient,
            request.amount,
            success=result.succeeded,
            replace_pending=pending_shown
        )
        return result
