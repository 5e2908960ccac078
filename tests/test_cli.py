"""Tests für die Kommandozeile (click CliRunner)."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from main import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def config_path(tmp_path: Path) -> str:
    # Nicht existierende Datei → Standardwerte mit Beispielzimmern
    return str(tmp_path / "hostel_config.yaml")


class TestCli:
    def test_list_shows_seed_rooms(self, runner, config_path):
        result = runner.invoke(cli, ["--config", config_path, "list"])
        assert result.exit_code == 0
        for room_id in ("101", "102", "103", "104", "201"):
            assert room_id in result.output

    def test_search(self, runner, config_path):
        result = runner.invoke(cli, ["--config", config_path, "search", "-n", "2", "--ac"])
        assert result.exit_code == 0
        assert "Treffer gesamt: 2" in result.output

    def test_search_no_results(self, runner, config_path):
        result = runner.invoke(cli, ["--config", config_path, "search", "-n", "50"])
        assert result.exit_code == 0
        assert "Keine Zimmer gefunden" in result.output

    def test_allocate_best_fit(self, runner, config_path):
        result = runner.invoke(
            cli, ["--config", config_path, "allocate", "-n", "2", "--ac", "--washroom"]
        )
        assert result.exit_code == 0
        assert "Zimmer zugeteilt" in result.output
        assert "104" in result.output

    def test_allocate_none(self, runner, config_path):
        result = runner.invoke(cli, ["--config", config_path, "allocate", "-n", "10"])
        assert result.exit_code == 0
        assert "Kein passendes Zimmer" in result.output

    def test_allocate_invalid_students(self, runner, config_path):
        result = runner.invoke(cli, ["--config", config_path, "allocate", "-n", "0"])
        assert result.exit_code == 1
        assert "Eingabefehler" in result.output

    def test_add_room(self, runner, config_path):
        result = runner.invoke(
            cli, ["--config", config_path, "add", "999", "3", "--ac", "--washroom"]
        )
        assert result.exit_code == 0
        assert "999" in result.output

    def test_add_duplicate_case_insensitive(self, runner, config_path):
        result = runner.invoke(cli, ["--config", config_path, "add", "101", "2"])
        assert result.exit_code == 1
        assert "existiert bereits" in result.output

    def test_setup_writes_config(self, runner, config_path):
        result = runner.invoke(cli, ["--config", config_path, "setup"])
        assert result.exit_code == 0
        assert Path(config_path).exists()

    def test_config_show(self, runner, config_path):
        result = runner.invoke(cli, ["--config", config_path, "config", "show"])
        assert result.exit_code == 0
        assert "Standardwerte" in result.output

    def test_summary(self, runner, config_path):
        result = runner.invoke(cli, ["--config", config_path, "summary"])
        assert result.exit_code == 0
        assert "15" in result.output

    def test_shell_session(self, runner, config_path):
        """Anlegen und Zuteilen in derselben Sitzung."""
        session = "\n".join([
            "1", "999", "3", "y", "y",   # Zimmer 999 anlegen
            "4", "3", "y", "y",          # 3 Personen, Klima + Bad
            "0",
        ]) + "\n"
        result = runner.invoke(cli, ["--config", config_path, "shell"], input=session)
        assert result.exit_code == 0
        assert "Zimmer 999 angelegt" in result.output
        assert "Zimmer zugeteilt" in result.output

    def test_invalid_config_aborts(self, runner, tmp_path):
        path = tmp_path / "kaputt.yaml"
        path.write_text("logging:\n  level: LAUT\n", encoding="utf-8")
        result = runner.invoke(cli, ["--config", str(path), "list"])
        assert result.exit_code == 1

    def test_malformed_yaml_config_aborts(self, runner, tmp_path):
        """Kein gültiges YAML → rote Meldung und Exit-Code 1 statt Traceback."""
        path = tmp_path / "kaputt.yaml"
        path.write_text("hostel_name: [unclosed\n", encoding="utf-8")
        result = runner.invoke(cli, ["--config", str(path), "list"])
        assert result.exit_code == 1
        assert "ungültig" in result.output

    def test_add_room_id_with_brackets_printed(self, runner, config_path):
        result = runner.invoke(cli, ["--config", config_path, "add", "[B]7", "2"])
        assert result.exit_code == 0
        assert "Zimmer [B]7 angelegt" in result.output
