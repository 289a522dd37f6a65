"""
Contract Compiler - Solidity compilation via py-solc-x

Responsibilities:
1. Make sure the requested solc version is installed
2. Compile source through the standard JSON interface (optimizer on)
3. Extract ABI and bytecode for a named contract
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

import solcx
from solcx.exceptions import SolcError

from .config import OPTIMIZER_RUNS, SOLC_VERSION
from .errors import CompilationError, ContractNotFoundError
from .models import CompiledArtifact


class ContractCompiler:
    """Solidity compiler adapter"""

    def __init__(
        self,
        solc_version: str = SOLC_VERSION,
        optimizer_runs: int = OPTIMIZER_RUNS,
        compile_fn: Optional[Callable[..., Dict[str, Any]]] = None,
        auto_install: bool = True
    ):
        """
        Initialize compiler

        Args:
            solc_version: Solidity compiler version
            optimizer_runs: Optimizer runs setting
            compile_fn: Standard JSON compile callable (default: solcx.compile_standard)
            auto_install: Install solc_version on first use if missing
        """
        self.solc_version = solc_version
        self.optimizer_runs = optimizer_runs
        self.compile_fn = compile_fn or solcx.compile_standard
        self.auto_install = auto_install and compile_fn is None
        self._solc_ready = False

    def ensure_solc(self):
        """Install the configured solc version if it is not available yet"""
        if self._solc_ready or not self.auto_install:
            return

        installed = [str(v) for v in solcx.get_installed_solc_versions()]
        if self.solc_version not in installed:
            print(f"  • Installing Solidity compiler v{self.solc_version}...")
            solcx.install_solc(self.solc_version)
        self._solc_ready = True

    def build_input(self, source: str, source_name: str) -> Dict[str, Any]:
        """Standard JSON input for a single source file"""
        return {
            'language': 'Solidity',
            'sources': {
                source_name: {'content': source}
            },
            'settings': {
                'outputSelection': {
                    '*': {
                        '*': ['abi', 'evm.bytecode']
                    }
                },
                'optimizer': {
                    'enabled': True,
                    'runs': self.optimizer_runs
                }
            }
        }

    def compile_file(self, contract_path: Union[str, Path], contract_name: str) -> CompiledArtifact:
        """
        Compile a contract file written to disk

        Args:
            contract_path: Path to the .sol file
            contract_name: Contract to extract from the output

        Returns:
            CompiledArtifact with ABI and bytecode
        """
        path = Path(contract_path)
        source = path.read_text(encoding='utf-8')
        return self.compile_source(source, contract_name, source_name=path.name)

    def compile_source(self, source: str, contract_name: str, source_name: str = 'Contract.sol') -> CompiledArtifact:
        """
        Compile Solidity source text

        Args:
            source: Solidity source
            contract_name: Contract to extract from the output
            source_name: Source unit name used as the output key

        Returns:
            CompiledArtifact with ABI and bytecode

        Raises:
            CompilationError: Compiler reported errors
            ContractNotFoundError: contract_name not in output
        """
        self.ensure_solc()

        try:
            output = self.compile_fn(
                self.build_input(source, source_name),
                solc_version=self.solc_version
            )
        except SolcError as e:
            raise CompilationError(_diagnostics_from_solc_error(e)) from e

        errors = [d for d in output.get('errors', []) if d.get('severity') == 'error']
        if errors:
            raise CompilationError(errors)

        compiled = output.get('contracts', {}).get(source_name, {}).get(contract_name)
        if not compiled:
            raise ContractNotFoundError(contract_name)

        return CompiledArtifact(
            contract_name=contract_name,
            abi=compiled['abi'],
            bytecode=compiled['evm']['bytecode']['object']
        )


def _diagnostics_from_solc_error(error: SolcError) -> List[Dict[str, Any]]:
    """Recover the compiler's error list from a SolcError"""
    error_dict = getattr(error, 'error_dict', None)
    if error_dict:
        return [d for d in error_dict if d.get('severity', 'error') == 'error']

    stdout_data = getattr(error, 'stdout_data', None)
    if stdout_data:
        try:
            output = json.loads(stdout_data)
        except ValueError:
            output = {}
        errors = [d for d in output.get('errors', []) if d.get('severity') == 'error']
        if errors:
            return errors

    return [{'severity': 'error', 'message': getattr(error, 'message', None) or str(error)}]
