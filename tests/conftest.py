import io
from unittest.mock import MagicMock

import pytest

from seismic_token_bot.compiler import ContractCompiler
from seismic_token_bot.config import TokenBotConfig
from seismic_token_bot.console import Console
from seismic_token_bot.contract_source import CONTRACT_FILENAME, CONTRACT_NAME
from seismic_token_bot.network import TokenNetwork

TEST_PRIVATE_KEY = "0x" + "4c" * 32
CONTRACT_ADDRESS = "0x" + "ab" * 20

TOKEN_ABI = [
    {"type": "function", "name": "transfer", "stateMutability": "nonpayable",
     "inputs": [{"name": "to", "type": "address"}, {"name": "value", "type": "uint256"}],
     "outputs": [{"name": "success", "type": "bool"}]},
    {"type": "function", "name": "decimals", "stateMutability": "view",
     "inputs": [], "outputs": [{"name": "", "type": "uint8"}]},
]


def compiler_output(contract_name=CONTRACT_NAME, source_name=CONTRACT_FILENAME, errors=None):
    """Standard JSON output shaped like solc's"""
    output = {
        "contracts": {
            source_name: {
                contract_name: {
                    "abi": TOKEN_ABI,
                    "evm": {"bytecode": {"object": "6080604052"}},
                }
            }
        }
    }
    if errors is not None:
        output["errors"] = errors
    return output


@pytest.fixture
def private_key(monkeypatch):
    monkeypatch.setenv("PRIVATE_KEY", TEST_PRIVATE_KEY)
    return TEST_PRIVATE_KEY


@pytest.fixture
def config(tmp_path):
    return TokenBotConfig(contract_dir=tmp_path, use_color=False, receipt_timeout=5)


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def console(output):
    return Console(use_color=False, stream=output)


@pytest.fixture
def fake_w3():
    """MagicMock standing in for a connected Web3 instance"""
    w3 = MagicMock(name="w3")
    w3.eth.get_balance.return_value = 10 ** 18
    w3.eth.gas_price = 1_000_000_000
    w3.eth.get_transaction_count.return_value = 0
    w3.eth.send_raw_transaction.return_value = bytes.fromhex("11" * 32)
    w3.eth.wait_for_transaction_receipt.return_value = {
        "status": 1,
        "contractAddress": CONTRACT_ADDRESS,
        "blockNumber": 7,
    }
    contract = w3.eth.contract.return_value
    contract.constructor.return_value.build_transaction.return_value = {"data": "0x6080604052"}
    contract.functions.transfer.return_value.build_transaction.return_value = {"data": "0xa9059cbb"}
    contract.functions.decimals.return_value.call.return_value = 18
    return w3


@pytest.fixture
def network(config, fake_w3):
    return TokenNetwork(config, w3=fake_w3)


@pytest.fixture
def compile_fn():
    return MagicMock(name="compile_standard", return_value=compiler_output())


@pytest.fixture
def compiler(compile_fn):
    return ContractCompiler(compile_fn=compile_fn)
