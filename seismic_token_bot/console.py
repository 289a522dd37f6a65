"""
Console output helpers - banner, section headers, colored status lines and
the transfer progress table
"""

import sys
from typing import Optional, TextIO

from colorama import Fore, Style
from colorama.ansi import clear_line

RULE_WIDTH = 50
TABLE_WIDTH = 80

BANNER_LINES = [
    "░█▀▀░█▀▀░▀█▀░█▀▀░█▄█░▀█▀░█▀▀",
    "░▀▀█░█▀▀░░█░░▀▀█░█░█░░█░░█░░",
    "░▀▀▀░▀▀▀░▀▀▀░▀▀▀░▀░▀░▀▀▀░▀▀▀",
]


class Console:
    """Colored console writer shared by all workflows"""

    def __init__(self, use_color: bool = True, stream: Optional[TextIO] = None):
        self.use_color = use_color
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved per call so a TeeWriter swapped into sys.stdout is picked up
        return self._stream if self._stream is not None else sys.stdout

    def paint(self, text: str, *styles: str) -> str:
        if not self.use_color or not styles:
            return text
        return "".join(styles) + text + Style.RESET_ALL

    def write(self, text: str = "", end: str = "\n"):
        self.stream.write(text + end)
        self.stream.flush()

    def banner(self, network_label: str):
        colors = [Fore.GREEN, Fore.CYAN, Fore.YELLOW]
        for line, color in zip(BANNER_LINES, colors):
            self.write(self.paint(line, Style.BRIGHT, color))
        rule = "━" * (RULE_WIDTH + 5)
        self.write()
        self.write(self.paint(rule, Fore.CYAN, Style.BRIGHT))
        self.write(self.paint("             SEISMIC TOKEN AUTO BOT            ", Fore.CYAN, Style.BRIGHT))
        self.write(self.paint(rule, Fore.CYAN, Style.BRIGHT))
        self.write(self.paint(f"🌐 Network: {network_label}", Fore.YELLOW))

    def section(self, title: str):
        rule = "━" * RULE_WIDTH
        self.write()
        self.write(self.paint(rule, Fore.CYAN, Style.BRIGHT))
        self.write(self.paint(f" 🚀 {title}", Fore.CYAN))
        self.write(self.paint(rule, Fore.CYAN, Style.BRIGHT))

    def field(self, icon: str, label: str, value):
        self.write(f"{icon} {label}: {self.paint(str(value), Fore.YELLOW)}")

    def info(self, message: str):
        self.write(message)

    def notice(self, message: str):
        self.write(self.paint(message, Fore.CYAN))

    def success(self, message: str):
        self.write(self.paint(f"✅ {message}", Fore.GREEN))

    def celebrate(self, message: str):
        self.write(self.paint(f"🎉 {message}", Fore.GREEN))

    def error(self, message: str):
        self.write(self.paint(f"❌ {message}", Fore.RED))

    def prompt_text(self, icon: str, question: str) -> str:
        return self.paint(f"{icon} {question}: ", Fore.YELLOW)

    # Transfer table

    def table_rule(self):
        self.write(self.paint("━" * TABLE_WIDTH, Fore.CYAN))

    def table_header(self):
        self.write()
        self.table_rule()
        self.write(self.paint("  #  | Recipient Address                           | Amount         | Status", Style.BRIGHT))
        self.table_rule()

    def _row(self, index: int, recipient: str, amount) -> str:
        return f"  {index}".ljust(4) + "| " + f"{recipient}".ljust(45) + "| " + f"{amount}".ljust(15) + "| "

    def row_pending(self, index: int, recipient: str, amount):
        self.write(self._row(index, recipient, amount) + self.paint("Pending...", Fore.YELLOW), end="")

    def row_done(self, index: int, recipient: str, amount, success: bool, replace_pending: bool = True):
        if replace_pending:
            # Overwrite in place only when ANSI codes are allowed on a terminal
            is_tty = getattr(self.stream, 'isatty', lambda: False)()
            self.write("\r" + clear_line() if is_tty and self.use_color else "\n", end="")
        status = self.paint("✅ Success", Fore.GREEN) if success else self.paint("❌ Failed", Fore.RED)
        self.write(self._row(index, recipient, amount) + status)
