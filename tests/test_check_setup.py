import pytest

from seismic_token_bot import check_setup


@pytest.fixture
def solc_installed(monkeypatch):
    monkeypatch.setattr("solcx.get_installed_solc_versions", lambda: ["0.8.19"])


def test_all_checks_pass(private_key, config, network, fake_w3, solc_installed, capsys):
    fake_w3.eth.chain_id = 5124
    fake_w3.eth.block_number = 100

    assert check_setup.main(config, network) == 0
    assert "ALL CHECKS PASSED" in capsys.readouterr().out


def test_missing_key_fails(monkeypatch, config, network, fake_w3, solc_installed, capsys):
    monkeypatch.delenv("PRIVATE_KEY", raising=False)
    fake_w3.eth.chain_id = 5124

    assert check_setup.main(config, network) == 1
    out = capsys.readouterr().out
    assert "❌ Credential" in out
    fake_w3.eth.get_balance.assert_not_called()


def test_wrong_chain_fails(private_key, config, network, fake_w3, solc_installed, capsys):
    fake_w3.eth.chain_id = 1

    assert check_setup.main(config, network) == 1
    assert "expected 5124" in capsys.readouterr().out


def test_zero_balance_fails(private_key, config, network, fake_w3, solc_installed, capsys):
    fake_w3.eth.chain_id = 5124
    fake_w3.eth.get_balance.return_value = 0

    assert check_setup.main(config, network) == 1
    assert "fund" in capsys.readouterr().out


def test_missing_solc_is_reported(monkeypatch, private_key, config, network, fake_w3, capsys):
    monkeypatch.setattr("solcx.get_installed_solc_versions", lambda: [])
    fake_w3.eth.chain_id = 5124

    assert check_setup.main(config, network) == 1
    assert "not installed" in capsys.readouterr().out
