"""
Interactive Shell - prompt sequence driving deploy and transfer workflows

name -> symbol -> supply -> deploy -> transfer? -> count -> amount -> transfer
"""

from decimal import Decimal, InvalidOperation
from typing import Callable, Optional

from .config import TokenBotConfig
from .console import Console
from .deployer import TokenDeployer
from .errors import TokenBotError, ValidationError
from .models import TokenParameters
from .transfers import TokenTransferrer

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_ABORTED = 130


def parse_positive_int(text: str, field: str) -> int:
    """
    Parse a strictly positive integer

    Raises:
        ValidationError: Not an integer or not > 0
    """
    text = str(text).strip()
    if not (text.isascii() and text.isdigit()):
        raise ValidationError(f"{field} must be a positive number")
    value = int(text)
    if value <= 0:
        raise ValidationError(f"{field} must be a positive number")
    return value


def parse_positive_amount(text: str, field: str) -> Decimal:
    """
    Parse a strictly positive decimal amount

    Raises:
        ValidationError: Not a finite number or not > 0
    """
    try:
        value = Decimal(str(text).strip())
    except InvalidOperation:
        raise ValidationError(f"{field} must be a positive number")
    if not value.is_finite() or value <= 0:
        raise ValidationError(f"{field} must be a positive number")
    return value


def build_token_parameters(name: str, symbol: str, supply_text: str) -> TokenParameters:
    """Validate raw prompt answers into TokenParameters"""
    name = (name or '').strip()
    symbol = (symbol or '').strip()
    supply_text = (supply_text or '').strip()
    if not name or not symbol or not supply_text:
        raise ValidationError("All fields are required!")

    total_supply = parse_positive_int(supply_text, "Total supply")
    return TokenParameters(name=name, symbol=symbol, total_supply=total_supply)


class InteractiveShell:
    """Linear prompt sequence for one deploy (and optional transfer batch)"""

    def __init__(
        self,
        config: TokenBotConfig,
        console: Console,
        deployer: TokenDeployer,
        transferrer: TokenTransferrer,
        input_fn: Optional[Callable[[str], str]] = None
    ):
        self.config = config
        self.console = console
        self.deployer = deployer
        self.transferrer = transferrer
        self.input_fn = input_fn or input

    def ask(self, icon: str, question: str, leading_newline: bool = False) -> str:
        prompt = self.console.prompt_text(icon, question)
        if leading_newline:
            prompt = "\n" + prompt
        return self.input_fn(prompt).strip()

    def run(self) -> int:
        """
        Run the prompt sequence

        Returns:
            Process exit status (0 success, 1 error, 130 aborted)
        """
        try:
            return self._run()
        except (EOFError, KeyboardInterrupt):
            self.console.write()
            self.console.error("Aborted by user")
            return EXIT_ABORTED
        except TokenBotError as e:
            self.console.error(f"Error: {e}")
            return EXIT_ERROR
        except Exception as e:
            self.console.error(f"An error occurred: {e}")
            return EXIT_ERROR

    def _run(self) -> int:
        name = self.ask("📝", "Enter token name", leading_newline=True)
        symbol = self.ask("🔤", "Enter token symbol")
        supply = self.ask("💰", "Enter total supply")

        params = build_token_parameters(name, symbol, supply)
        deployed = self.deployer.deploy(params)

        choice = self.ask("🔄", "Do you want to transfer tokens to random addresses? (y/n)", leading_newline=True)
        if choice.lower() not in ('y', 'yes'):
            self.console.write()
            self.console.celebrate("Token deployment completed successfully!")
            return EXIT_OK

        count = parse_positive_int(self.ask("📊", "Enter number of transfers"), "Number of transfers")
        amount = parse_positive_amount(self.ask("💸", "Enter amount per transfer"), "Amount")

        report = self.transferrer.transfer_tokens(deployed, count, amount)

        self.console.write()
        self.console.info(f"✅ Successful: {report.success_count}  ❌ Failed: {report.failure_count}")
        self.console.celebrate("All operations completed successfully!")
        return EXIT_OK
