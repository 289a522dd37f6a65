"""
Command-line entry point

Usage:
    # Deploy a token (interactive prompts)
    seismic-token-bot

    # Load a specific .env file and disable colors
    seismic-token-bot --env-file ./devnet.env --no-color

    # Check credential, RPC and compiler without deploying
    seismic-token-bot --check
"""

import argparse
import re
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from colorama import just_fix_windows_console

from . import check_setup
from .compiler import ContractCompiler
from .config import load_config
from .console import Console
from .deployer import TokenDeployer
from .network import TokenNetwork
from .shell import InteractiveShell
from .transfers import TokenTransferrer


ANSI_ESCAPE = re.compile(r'\x1b\[[0-9;]*[A-Za-z]')


class TeeWriter:
    """Console stream that also appends a plain-text copy to the run log"""

    def __init__(self, console_stream, log_file):
        self.console_stream = console_stream
        self.log_file = log_file
        self.encoding = getattr(console_stream, 'encoding', None) or 'utf-8'

    def _log_open(self) -> bool:
        return self.log_file is not None and not self.log_file.closed

    def write(self, message):
        written = self.console_stream.write(message)
        if self._log_open():
            # Colors and cursor codes stay on the terminal only
            self.log_file.write(ANSI_ESCAPE.sub('', message))
            self.log_file.flush()
        return written

    def flush(self):
        self.console_stream.flush()
        if self._log_open():
            self.log_file.flush()

    def isatty(self):
        return getattr(self.console_stream, 'isatty', lambda: False)()

    def fileno(self):
        return self.console_stream.fileno()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='seismic-token-bot',
        description='Deploy an ERC20 token to the Seismic devnet and send test transfers',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive deploy (reads PRIVATE_KEY from the environment or .env)
  seismic-token-bot

  # Use another .env file
  seismic-token-bot --env-file ./devnet.env

  # Only check the setup
  seismic-token-bot --check
        """
    )
    parser.add_argument(
        '--env-file',
        type=str,
        default=None,
        help='Path to a .env file (default: search from the current directory)'
    )
    parser.add_argument(
        '--log-dir',
        type=str,
        default='log',
        help='Directory for the full console log (default: log)'
    )
    parser.add_argument(
        '--no-log',
        action='store_true',
        help='Do not write a console log file'
    )
    parser.add_argument(
        '--no-color',
        action='store_true',
        help='Disable colored output'
    )
    parser.add_argument(
        '--check',
        action='store_true',
        help='Run the setup checker instead of the interactive deploy'
    )
    return parser


def run(args: argparse.Namespace) -> int:
    config = load_config(args.env_file, use_color=not args.no_color)
    network = TokenNetwork(config)

    if args.check:
        return check_setup.main(config, network)

    console = Console(use_color=config.use_color)
    console.banner(config.network_label)

    compiler = ContractCompiler(config.solc_version, config.optimizer_runs)
    deployer = TokenDeployer(config, console, network, compiler=compiler)
    transferrer = TokenTransferrer(config, console, network)
    shell = InteractiveShell(config, console, deployer, transferrer)
    return shell.run()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    just_fix_windows_console()

    if args.no_log:
        return run(args)

    log_dir = Path(args.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = log_dir / f"token_bot_{timestamp}.log"

    log_file = open(log_path, 'w', encoding='utf-8')
    original_stdout = sys.stdout
    original_stderr = sys.stderr
    sys.stdout = TeeWriter(original_stdout, log_file)
    sys.stderr = TeeWriter(original_stderr, log_file)

    try:
        return run(args)
    finally:
        sys.stdout = original_stdout
        sys.stderr = original_stderr
        if not log_file.closed:
            log_file.close()
        print(f"📁 Full log saved to: {log_path}")


if __name__ == "__main__":
    sys.exit(main())
