"""Integration tests for the macro-digest CLI."""

import json
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from src.cli.digest import cli


FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"
ITEMS_JSON = str(FIXTURES_DIR / "items" / "submitted.json")
ITEMS_YAML = str(FIXTURES_DIR / "items" / "submitted.yaml")
ATOM_FEED = str(FIXTURES_DIR / "feeds" / "markets_atom.xml")
CONFIG_PATH = str(FIXTURES_DIR / "config" / "relevance.yaml")


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    """CLI runner with a quiet, file-free environment."""
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("LOG_JSON", "false")
    monkeypatch.delenv("MACRO_DIGEST_CONFIG", raising=False)
    return CliRunner()


class TestClassifyCommand:
    """Tests for the classify command."""

    @pytest.mark.integration
    def test_breaking_market_item(self, runner: CliRunner) -> None:
        """Title and text are classified and scored."""
        result = runner.invoke(
            cli,
            ["classify", "--title", "BREAKING: oil tanker attacked near Strait",
             "crude surges"],
        )

        assert result.exit_code == 0, result.output
        assert "Category: MARKETS (Markets)" in result.output
        assert "Score: 15" in result.output
        assert "Breaking: yes" in result.output

    @pytest.mark.integration
    def test_unmatched_text(self, runner: CliRunner) -> None:
        """Text with no keywords falls back to OTHER."""
        result = runner.invoke(cli, ["classify", "A quiet afternoon"])

        assert result.exit_code == 0, result.output
        assert "Category: OTHER (Other)" in result.output
        assert "Score: 1" in result.output
        assert "Breaking: no" in result.output


class TestRankCommand:
    """Tests for the rank command."""

    @pytest.mark.integration
    def test_text_output(self, runner: CliRunner) -> None:
        """Items are listed in ranked order."""
        result = runner.invoke(cli, ["rank", "--items", ITEMS_JSON])

        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0] == "Digest selection:"
        assert lines[1] == (
            "  1. [15] MARKETS [BREAKING]: BREAKING: oil tanker attacked near Strait"
        )
        assert lines[2].startswith("  2. [10] MACRO_DATA: The Fed cut rates")
        assert lines[3].startswith("  3. [2] POLITICAL: Celebrity wins")

    @pytest.mark.integration
    def test_json_output(self, runner: CliRunner) -> None:
        """JSON output carries scored items."""
        result = runner.invoke(
            cli, ["rank", "--items", ITEMS_JSON, "--format", "json"]
        )

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert [entry["source"] for entry in payload] == ["C", "A", "B"]
        assert payload[0]["category"] == "MARKETS"
        assert payload[0]["relevance_score"] == 15
        assert payload[0]["is_breaking"] is True
        assert payload[0]["url"] == "https://example.com/tanker"

    @pytest.mark.integration
    def test_top_and_min_score(self, runner: CliRunner) -> None:
        """--top and --min-score narrow the selection."""
        result = runner.invoke(
            cli,
            ["rank", "--items", ITEMS_JSON, "--items", ITEMS_YAML,
             "--min-score", "3", "--top", "3", "--format", "json"],
        )

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert [entry["source"] for entry in payload] == ["C", "A", "Notes"]

    @pytest.mark.integration
    def test_market_moving_with_feed(self, runner: CliRunner) -> None:
        """Feed entries are ranked alongside submitted items."""
        result = runner.invoke(
            cli,
            ["rank", "--items", ITEMS_YAML, "--feed", f"Atom={ATOM_FEED}",
             "--market-moving", "--format", "json"],
        )

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert [entry["source"] for entry in payload] == ["Atom", "Notes"]
        assert payload[0]["relevance_score"] == 12

    @pytest.mark.integration
    def test_config_file(self, runner: CliRunner) -> None:
        """Config top_n applies when --top is not given."""
        result = runner.invoke(
            cli,
            ["rank", "--items", ITEMS_JSON, "--config", CONFIG_PATH,
             "--format", "json"],
        )

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert [entry["source"] for entry in payload] == ["C", "A"]

    @pytest.mark.integration
    def test_no_inputs(self, runner: CliRunner) -> None:
        """rank without inputs is a usage error."""
        result = runner.invoke(cli, ["rank"])
        assert result.exit_code == 2

    @pytest.mark.integration
    def test_bad_feed_spec(self, runner: CliRunner) -> None:
        """--feed must be NAME=PATH."""
        result = runner.invoke(cli, ["rank", "--feed", ATOM_FEED])
        assert result.exit_code == 2
        assert "NAME=PATH" in result.output

    @pytest.mark.integration
    def test_invalid_items(self, runner: CliRunner, tmp_path: Path) -> None:
        """Schema errors in an items file exit with status 1."""
        path = tmp_path / "items.json"
        path.write_text(json.dumps([{"title": "no body"}]), encoding="utf-8")

        result = runner.invoke(cli, ["rank", "--items", str(path)])

        assert result.exit_code == 1
        assert "Invalid items" in result.output

    @pytest.mark.integration
    def test_invalid_config(self, runner: CliRunner, tmp_path: Path) -> None:
        """A broken config exits with status 1."""
        path = tmp_path / "relevance.yaml"
        path.write_text("top_n: -5\n", encoding="utf-8")

        result = runner.invoke(
            cli, ["rank", "--items", ITEMS_JSON, "--config", str(path)]
        )

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    @pytest.mark.integration
    def test_config_directory(self, runner: CliRunner, tmp_path: Path) -> None:
        """A directory passed as --config exits with status 1 and a hint."""
        result = runner.invoke(
            cli, ["rank", "--items", ITEMS_JSON, "--config", str(tmp_path)]
        )

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Invalid configuration" in result.output
        assert "Hint:" in result.output

    @pytest.mark.integration
    def test_config_directory_from_environment(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """MACRO_DIGEST_CONFIG pointing at a directory exits with status 1."""
        monkeypatch.setenv("MACRO_DIGEST_CONFIG", str(tmp_path))

        result = runner.invoke(cli, ["rank", "--items", ITEMS_JSON])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    @pytest.mark.integration
    def test_run_context_cleared(self, runner: CliRunner) -> None:
        """The run id is unbound once rank returns."""
        result = runner.invoke(cli, ["rank", "--items", ITEMS_JSON])

        assert result.exit_code == 0, result.output
        assert "run_id" not in structlog.contextvars.get_contextvars()

    @pytest.mark.integration
    def test_run_context_cleared_on_failure(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        """The run id is unbound even when rank exits with an error."""
        result = runner.invoke(
            cli, ["rank", "--items", ITEMS_JSON, "--config", str(tmp_path)]
        )

        assert result.exit_code == 1
        assert "run_id" not in structlog.contextvars.get_contextvars()

class TestValidateCommand:
    """Tests for the validate command."""

    @pytest.mark.integration
    def test_valid_config(self, runner: CliRunner) -> None:
        """A valid config reports its settings."""
        result = runner.invoke(cli, ["validate", CONFIG_PATH])

        assert result.exit_code == 0, result.output
        assert "Configuration is valid!" in result.output
        assert "Top N: 2" in result.output
        assert "Min score: 3" in result.output

    @pytest.mark.integration
    def test_invalid_config(self, runner: CliRunner, tmp_path: Path) -> None:
        """Validation errors are listed with hints."""
        path = tmp_path / "relevance.yaml"
        path.write_text("top_n: -1\nunknown: 1\n", encoding="utf-8")

        result = runner.invoke(cli, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Configuration validation failed:" in result.output
        assert "top_n" in result.output
        assert "Hint:" in result.output
