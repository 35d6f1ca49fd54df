"""Tests for the actionkit command-line utilities."""

import json

from actionkit.cli import main
from actionkit.clients import HttpxSender
from actionkit.pools import pool_id
from actionkit.signing import sign_request
from tests.helpers.constants import USDC_SEPOLIA, WETH_SEPOLIA
from tests.helpers.factories import make_liquidity_config


class TestCli:
    """Tests for CLI subcommands."""

    def test_pool_id(self, capsys):
        assert main(["pool-id", WETH_SEPOLIA, USDC_SEPOLIA, "--tick-spacing", "10"]) == 0
        out = capsys.readouterr().out
        assert f"currency0: {USDC_SEPOLIA}" in out
        assert "0x" + pool_id(USDC_SEPOLIA, WETH_SEPOLIA, 3000, 10).hex() in out

    def test_scale_to_decimal(self, capsys):
        assert main(["scale", "1500000", "--decimals", "6"]) == 0
        assert capsys.readouterr().out.strip() == "1.500000"

    def test_scale_to_raw(self, capsys):
        assert main(["scale", "1.5", "--decimals", "6", "--to-raw"]) == 0
        assert capsys.readouterr().out.strip() == "1500000"

    def test_liquidity(self, capsys):
        args = ["liquidity", "--tick-lower", "-120", "--tick-upper", "120"]
        assert main(args + ["--amount0", "1000000", "--amount1", "1000000"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert int(data["liquidity"]) > 0
        assert int(data["amount0"]) <= 1000000

    def test_sign(self, capsys):
        args = ["sign", "--secret", "k", "--path", "/v1/positions/open", "--body", "{}"]
        assert main(args + ["--timestamp", "1"]) == 0
        expected = sign_request("k", "POST", "/v1/positions/open", "{}", "1")
        assert capsys.readouterr().out.strip() == expected

    def test_invalid_input_returns_error(self, capsys):
        assert main(["scale", "abc", "--decimals", "6", "--to-raw"]) == 1
        assert "Error" in capsys.readouterr().err

    def test_run_closes_http_client(self, tmp_path, capsys, monkeypatch):
        senders = []

        class RecordingSender(HttpxSender):
            def __init__(self):
                super().__init__()
                senders.append(self)

        monkeypatch.setattr("actionkit.clients.HttpxSender", RecordingSender)
        path = tmp_path / "liquidity-position.json"
        path.write_text(make_liquidity_config().model_dump_json(by_alias=True))

        assert main(["run", "liquidity-position", "--config", str(path)]) == 0
        assert json.loads(capsys.readouterr().out)["success"] is True
        assert len(senders) == 1
        assert senders[0].client.is_closed
