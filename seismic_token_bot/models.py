"""
Data objects passed between the compiler, deployer and transfer workflows
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional

STATUS_PENDING = 'pending'
STATUS_SUCCESS = 'success'
STATUS_FAILED = 'failed'


@dataclass(frozen=True)
class TokenParameters:
    """Constructor arguments captured from the user"""

    name: str
    symbol: str
    total_supply: int


@dataclass(frozen=True)
class CompiledArtifact:
    """ABI and creation bytecode for one compiled contract"""

    contract_name: str
    abi: List[Dict[str, Any]]
    bytecode: str

    @property
    def creation_code(self) -> str:
        return self.bytecode if self.bytecode.startswith('0x') else '0x' + self.bytecode


@dataclass(frozen=True)
class DeployedContract:
    address: str
    abi: List[Dict[str, Any]]
    tx_hash: Optional[str] = None
    block_number: Optional[int] = None
    deployer: Optional[str] = None


@dataclass(frozen=True)
class TransferRequest:
    """One transfer of `amount` tokens (`raw_amount` in smallest units)"""

    index: int
    recipient: str
    amount: Decimal
    raw_amount: int


@dataclass
class TransferResult:
    request: TransferRequest
    status: str = STATUS_PENDING
    tx_hash: Optional[str] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.status == STATUS_SUCCESS


@dataclass
class TransferReport:
    """Per-row outcome of a transfer batch"""

    results: List[TransferResult] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return sum(1 for r in self.results if r.status == STATUS_SUCCESS)

    @property
    def failure_count(self) -> int:
        return sum(1 for r in self.results if r.status == STATUS_FAILED)

    def __len__(self) -> int:
        return len(self.results)
