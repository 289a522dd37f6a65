from decimal import Decimal
from itertools import count

import pytest

from seismic_token_bot.errors import MissingCredentialError, ValidationError
from seismic_token_bot.models import STATUS_FAILED, STATUS_SUCCESS, DeployedContract
from seismic_token_bot.transfers import TokenTransferrer, scale_amount

from conftest import CONTRACT_ADDRESS, TOKEN_ABI

DEPLOYED = DeployedContract(address=CONTRACT_ADDRESS, abi=TOKEN_ABI)


def tx_hash(n):
    return bytes([n]) * 32


@pytest.fixture
def recipients():
    serial = count(1)
    return lambda: "0x" + format(next(serial), "040x")


@pytest.fixture
def transferrer(config, console, network, recipients):
    return TokenTransferrer(config, console, network, address_factory=recipients)


def test_scale_amount_uses_decimal_precision():
    assert scale_amount(Decimal("1"), 18) == 10 ** 18
    assert scale_amount(Decimal("0.1"), 18) == 10 ** 17
    assert scale_amount(Decimal("2.5"), 6) == 2_500_000


def test_scale_amount_rejects_sub_unit_precision():
    with pytest.raises(ValidationError):
        scale_amount(Decimal("0.0000000000000000001"), 18)
    with pytest.raises(ValidationError):
        scale_amount(Decimal("1.0000001"), 6)
    assert scale_amount(Decimal("1.500000"), 6) == 1_500_000


def test_all_transfers_succeed(private_key, transferrer, fake_w3, output):
    report = transferrer.transfer_tokens(DEPLOYED, 3, Decimal("10"))

    assert len(report) == 3
    assert report.success_count == 3
    assert report.failure_count == 0
    assert [r.request.index for r in report.results] == [1, 2, 3]
    assert all(r.request.raw_amount == 10 * 10 ** 18 for r in report.results)
    assert "Token transfer operations completed" in output.getvalue()


def test_transfer_targets_and_amounts(private_key, transferrer, fake_w3):
    transferrer.transfer_tokens(DEPLOYED, 2, Decimal("1.5"))

    transfer = fake_w3.eth.contract.return_value.functions.transfer
    assert [c.args for c in transfer.call_args_list] == [
        ("0x" + format(1, "040x"), 15 * 10 ** 17),
        ("0x" + format(2, "040x"), 15 * 10 ** 17),
    ]


def test_third_failure_does_not_stop_batch(private_key, transferrer, fake_w3, output):
    fake_w3.eth.send_raw_transaction.side_effect = [
        tx_hash(1),
        tx_hash(2),
        ValueError("execution reverted: Insufficient balance"),
        tx_hash(4),
        tx_hash(5),
    ]

    report = transferrer.transfer_tokens(DEPLOYED, 5, Decimal("1"))

    assert len(report) == 5
    assert [r.status for r in report.results] == [
        STATUS_SUCCESS, STATUS_SUCCESS, STATUS_FAILED, STATUS_SUCCESS, STATUS_SUCCESS
    ]
    assert report.failure_count == 1
    assert report.success_count == 4
    assert "Insufficient balance" in report.results[2].error
    assert fake_w3.eth.send_raw_transaction.call_count == 5

    text = output.getvalue()
    assert text.count("❌ Failed") == 1
    assert text.count("✅ Success") == 4


def test_reverted_receipt_marks_row_failed(private_key, transferrer, fake_w3):
    fake_w3.eth.wait_for_transaction_receipt.side_effect = [
        {"status": 1},
        {"status": 0},
    ]

    report = transferrer.transfer_tokens(DEPLOYED, 2, Decimal("1"))

    assert [r.status for r in report.results] == [STATUS_SUCCESS, STATUS_FAILED]
    assert report.results[1].tx_hash is not None
    assert "reverted" in report.results[1].error


def test_decimals_read_from_contract(private_key, transferrer, fake_w3):
    fake_w3.eth.contract.return_value.functions.decimals.return_value.call.return_value = 6

    report = transferrer.transfer_tokens(DEPLOYED, 1, Decimal("3"))

    assert report.results[0].request.raw_amount == 3_000_000


@pytest.mark.parametrize("n, amount", [(0, Decimal("1")), (-2, Decimal("1")), (1, Decimal("0"))])
def test_rejects_non_positive_inputs(private_key, transferrer, fake_w3, n, amount):
    with pytest.raises(ValidationError):
        transferrer.transfer_tokens(DEPLOYED, n, amount)

    fake_w3.eth.send_raw_transaction.assert_not_called()


def test_missing_credential_is_fatal(monkeypatch, transferrer, fake_w3):
    monkeypatch.delenv("PRIVATE_KEY", raising=False)

    with pytest.raises(MissingCredentialError):
        transferrer.transfer_tokens(DEPLOYED, 1, Decimal("1"))

    fake_w3.eth.send_raw_transaction.assert_not_called()


def test_amount_below_one_unit_sends_nothing(private_key, transferrer, fake_w3, output):
    with pytest.raises(ValidationError):
        transferrer.transfer_tokens(DEPLOYED, 1, Decimal("0.0000000000000000001"))

    fake_w3.eth.send_raw_transaction.assert_not_called()
    assert "✅ Success" not in output.getvalue()
    assert "decimal places" in output.getvalue()
