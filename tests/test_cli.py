"""Tests for the massive command-line interface."""

import json
from pathlib import Path

import pytest
from pytest_httpx import HTTPXMock

from massive_client.cli import build_parser, main, mask_key


@pytest.fixture(autouse=True)
def cli_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the CLI at a temporary config dir and a fake API host."""
    monkeypatch.setenv("MASSIVE_CONFIG_DIR", str(tmp_path))
    monkeypatch.setenv("MASSIVE_API_KEY", "cli-key")
    monkeypatch.setenv("MASSIVE_BASE_URL", "https://api.massive.test")
    return tmp_path


def run(argv: list[str], capsys: pytest.CaptureFixture[str]) -> object:
    """Run the CLI and parse its JSON output."""
    main(argv)
    return json.loads(capsys.readouterr().out)


class TestParser:
    """Tests for argument parsing."""

    def test_requires_group(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_bars_requires_range(self) -> None:
        """Test --from and --to are mandatory for bars."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["stocks", "bars", "AAPL"])

    def test_adjusted_tristate(self) -> None:
        """Test --adjusted is unset unless given."""
        parser = build_parser()
        assert parser.parse_args(["stocks", "open-close", "AAPL", "2025-01-06"]).adjusted is None
        args = parser.parse_args(["stocks", "open-close", "AAPL", "2025-01-06", "--no-adjusted"])
        assert args.adjusted is False


class TestMaskKey:
    """Tests for API key masking."""

    def test_long_key(self) -> None:
        assert mask_key("abcd1234efgh5678") == "abcd********5678"

    def test_short_key(self) -> None:
        assert mask_key("abc") == "***"

    def test_empty(self) -> None:
        assert mask_key("") == "(not set)"


class TestConfigCommands:
    """Tests for config init/show."""

    def test_init_and_show(self, cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the key is stored and only ever shown masked."""
        out = run(["config", "init", "--api-key", "abcd1234efgh5678"], capsys)
        assert out["api_key"] == "abcd********5678"

        stored = json.loads((cli_env / "config.json").read_text())
        assert stored["api_key"] == "abcd1234efgh5678"

        out = run(["config", "show"], capsys)
        assert out["api_key"] == "abcd********5678"
        assert out["path"] == str(cli_env / "config.json")


class TestDataCommands:
    """Tests for commands that call the API."""

    def test_open_close(self, httpx_mock: HTTPXMock, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the decoded result is printed as JSON."""
        httpx_mock.add_response(json={"status": "OK", "symbol": "AAPL", "open": 244.31})

        out = run(["stocks", "open-close", "AAPL", "2025-01-06"], capsys)

        assert out["symbol"] == "AAPL"
        assert out["open"] == 244.31
        request = httpx_mock.get_request()
        assert request.url.path == "/v1/open-close/AAPL/2025-01-06"
        assert request.url.params["apiKey"] == "cli-key"

    def test_bars(self, httpx_mock: HTTPXMock, capsys: pytest.CaptureFixture[str]) -> None:
        httpx_mock.add_response(json={"status": "OK", "results": [{"c": 245.0}]})

        out = run(
            ["stocks", "bars", "AAPL", "--from", "2025-01-01", "--to", "2025-01-31", "--limit", "5"],
            capsys,
        )

        assert out["results"][0]["close"] == 245.0
        request = httpx_mock.get_request()
        assert request.url.path == "/v2/aggs/ticker/AAPL/range/1/day/2025-01-01/2025-01-31"
        assert request.url.params["limit"] == "5"

    def test_market_holidays(self, httpx_mock: HTTPXMock, capsys: pytest.CaptureFixture[str]) -> None:
        """Test list results print as a JSON array."""
        httpx_mock.add_response(json=[{"date": "2025-12-25", "name": "Christmas", "status": "closed"}])

        out = run(["market", "holidays"], capsys)

        assert out[0]["name"] == "Christmas"

    def test_macd(self, httpx_mock: HTTPXMock, capsys: pytest.CaptureFixture[str]) -> None:
        httpx_mock.add_response(json={"status": "OK", "results": {"values": [{"value": 1.0}]}})

        out = run(["indicators", "macd", "AAPL", "--short-window", "12", "--long-window", "26"], capsys)

        assert out["results"]["values"][0]["value"] == 1.0
        request = httpx_mock.get_request()
        assert request.url.path == "/v1/indicators/macd/AAPL"
        assert request.url.params["short_window"] == "12"

    def test_forex_convert(self, httpx_mock: HTTPXMock, capsys: pytest.CaptureFixture[str]) -> None:
        httpx_mock.add_response(json={"converted": 92.15, "from": "USD", "to": "EUR"})

        out = run(["forex", "convert", "USD", "EUR", "--amount", "100"], capsys)

        assert out["from_"] == "USD"
        assert httpx_mock.get_request().url.path == "/v1/conversion/USD/EUR"

    def test_statement_subcommand(self, httpx_mock: HTTPXMock, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the statement subcommand name selects the endpoint."""
        httpx_mock.add_response(json={"status": "OK", "results": [{"revenue": 1000}]})

        out = run(["fundamentals", "income-statements", "--ticker", "AAPL", "--timeframe", "annual"], capsys)

        assert out["results"][0]["revenue"] == 1000.0
        request = httpx_mock.get_request()
        assert request.url.path == "/stocks/financials/v1/income-statements"
        assert request.url.params["tickers"] == "AAPL"

    def test_economy(self, httpx_mock: HTTPXMock, capsys: pytest.CaptureFixture[str]) -> None:
        httpx_mock.add_response(json={"status": "OK", "results": [{"date": "2025-01-06", "yield_10_year": 4.62}]})

        out = run(["economy", "treasury-yields", "--date-gte", "2025-01-01"], capsys)

        assert out["results"][0]["yield_10_year"] == 4.62
        request = httpx_mock.get_request()
        assert request.url.path == "/fed/v1/treasury-yields"
        assert request.url.params["date.gte"] == "2025-01-01"

    def test_crypto_snapshot_market(self, httpx_mock: HTTPXMock, capsys: pytest.CaptureFixture[str]) -> None:
        """Test omitting the ticker snapshots the whole market."""
        httpx_mock.add_response(json={"status": "OK", "tickers": [{"ticker": "X:BTCUSD"}]})

        out = run(["crypto", "snapshot", "--tickers", "X:BTCUSD"], capsys)

        assert out["tickers"][0]["ticker"] == "X:BTCUSD"
        assert httpx_mock.get_request().url.path == "/v2/snapshot/locale/global/markets/crypto/tickers"

    def test_market_snapshot(self, httpx_mock: HTTPXMock, capsys: pytest.CaptureFixture[str]) -> None:
        httpx_mock.add_response(json={"status": "OK", "results": [{"ticker": "AAPL", "value": 245.0}]})

        out = run(["market", "snapshot", "AAPL,C:EURUSD"], capsys)

        assert out["results"][0]["value"] == 245.0
        request = httpx_mock.get_request()
        assert request.url.path == "/v3/snapshot"
        assert request.url.params["ticker.any_of"] == "AAPL,C:EURUSD"


class TestErrors:
    """Tests for error reporting."""

    def test_api_error_exit_code(
        self, httpx_mock: HTTPXMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test provider errors go to stderr with exit status 1."""
        httpx_mock.add_response(status_code=403, text='{"status":"NOT_AUTHORIZED"}')

        with pytest.raises(SystemExit) as exc_info:
            main(["market", "status"])

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "API error (status 403)" in captured.err
        assert "(api_error)" in captured.err

    def test_missing_api_key(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test a missing key is reported without making a request."""
        monkeypatch.delenv("MASSIVE_API_KEY")

        with pytest.raises(SystemExit) as exc_info:
            main(["market", "status"])

        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "massive config init" in err
        assert "(config)" in err
