"""Tests for the shiftbot CLI."""

from typer.testing import CliRunner

from cli.cli import EXIT_DATA_ERROR, EXIT_NOT_A_REQUEST, app

runner = CliRunner()


class TestParseCommand:
    """Test `shiftbot parse`."""

    def test_parse_prints_request(self, catalog_file):
        """Test a successful parse."""
        result = runner.invoke(
            app,
            ["parse", "Стрижавка 18-09 9.12 Зваричевський Юрій", "--catalog", str(catalog_file), "--today", "2025-12-01"],
        )

        assert result.exit_code == 0
        assert "Зваричевський Юрій" in result.output
        assert "2025-12-09" in result.output
        assert "18:00:00" in result.output

    def test_not_a_request_exit_code(self):
        """Test exit code 2 for chatter."""
        result = runner.invoke(app, ["parse", "Дима Маслов"])

        assert result.exit_code == EXIT_NOT_A_REQUEST
        assert "Not a shift request" in result.output

    def test_missing_catalog_exit_code(self, tmp_path):
        """Test exit code 1 for an unreadable catalog."""
        result = runner.invoke(app, ["parse", "Стрижавка 9.12", "--catalog", str(tmp_path / "nope.json")])

        assert result.exit_code == EXIT_DATA_ERROR
        assert "FILE_NOT_FOUND" in result.output

    def test_invalid_today(self):
        """Test --today validation."""
        result = runner.invoke(app, ["parse", "11.12 Дима Маслов", "--today", "yesterday"])

        assert result.exit_code != 0


class TestMatchCommand:
    """Test `shiftbot match`."""

    def test_match_prints_ranked_table(self, catalog_file, slots_file):
        """Test a resolved request."""
        result = runner.invoke(
            app,
            [
                "match",
                "Стрижавка 18-09 9.12 Зваричевський Юрій",
                "--slots",
                str(slots_file),
                "--catalog",
                str(catalog_file),
                "--today",
                "2025-12-01",
            ],
        )

        assert result.exit_code == 0
        assert "Matching slots" in result.output
        assert "11" in result.output

    def test_no_match(self, catalog_file, slots_file):
        """Test a request that matches no slot."""
        result = runner.invoke(
            app,
            ["match", "Гайсин 9.12 Дима Маслов", "--slots", str(slots_file), "--catalog", str(catalog_file), "--today", "2025-12-01"],
        )

        assert result.exit_code == 0
        assert "No matching slot" in result.output

    def test_invalid_slots_file(self, tmp_path, catalog_file):
        """Test exit code 1 for a malformed slot feed."""
        slots = tmp_path / "slots.json"
        slots.write_text("not json", encoding="utf-8")

        result = runner.invoke(app, ["match", "Стрижавка 9.12 18-09", "--slots", str(slots), "--catalog", str(catalog_file)])

        assert result.exit_code == EXIT_DATA_ERROR
        assert "INVALID_JSON" in result.output
