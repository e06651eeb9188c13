"""Tests for the budgetplan CLI."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from budgetplan.cli import app
from budgetplan.commands.plan import format_monthly
from budgetplan.config import Settings, load_config

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.setenv("COLUMNS", "120")
    return tmp_path / "budgetplan" / "config.toml"


class TestPlanCommand:
    """Tests for `budgetplan plan`."""

    def test_lists_items_sorted_with_totals(self) -> None:
        """Should show sorted items and monthly totals."""
        result = runner.invoke(
            app,
            [
                "plan",
                "--group",
                "Household",
                "-i",
                "Salary:2400",
                "-e",
                "Rent:900",
                "-e",
                "Insurance:240:yearly",
            ],
        )

        assert result.exit_code == 0, result.output
        assert "Household" in result.output
        assert result.output.index("Insurance") < result.output.index("Rent") < result.output.index("Salary")
        assert "-£20.00" in result.output
        assert "+£1,480.00" in result.output
        assert "£17,760.00" in result.output

    def test_remove_by_index(self) -> None:
        """Should remove items by their sorted index."""
        result = runner.invoke(app, ["plan", "-i", "qq:10", "-i", "ab:10", "--remove", "0"])

        assert result.exit_code == 0, result.output
        assert "qq" in result.output
        assert "ab" not in result.output

    def test_remove_out_of_range(self) -> None:
        """Should fail when removing index == number of items."""
        result = runner.invoke(app, ["plan", "-i", "Salary:100", "--remove", "1"])

        assert result.exit_code == 1
        assert "out of range" in result.output

    def test_rejects_non_positive_amount(self) -> None:
        """Should fail on a non-positive amount."""
        result = runner.invoke(app, ["plan", "-e", "Rent:0"])

        assert result.exit_code == 1
        assert "Amount must be positive" in result.output

    def test_rejects_bad_period(self) -> None:
        """Should fail on an unknown period."""
        result = runner.invoke(app, ["plan", "-e", "Rent:900:weekly"])

        assert result.exit_code == 1
        assert "Unknown period" in result.output

    def test_empty_group(self) -> None:
        """Should report an empty group."""
        result = runner.invoke(app, ["plan", "--group", "Nothing"])

        assert result.exit_code == 0, result.output
        assert "has no items" in result.output

    def test_uses_configured_currency(self, isolated_config: Path) -> None:
        """Should format amounts with the configured currency."""
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text('currency = "$"\n')

        result = runner.invoke(app, ["plan", "-i", "Salary:100"])

        assert result.exit_code == 0, result.output
        assert "$100.00" in result.output

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ("currency = \n", "Invalid config file"),
            ('precision = "two"\n', "precision"),
            ("precision = -1\n", "precision"),
            ('log_level = "verbose"\n', "log_level"),
        ],
    )
    def test_bad_config_exits_cleanly(self, isolated_config: Path, content: str, message: str) -> None:
        """Should print the config error and exit 1 instead of crashing."""
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text(content)

        result = runner.invoke(app, ["plan", "-i", "Salary:100"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert message in result.output

    def test_balanced_budget_net_is_unsigned(self) -> None:
        """Should show a zero net without a sign."""
        result = runner.invoke(app, ["plan", "-i", "Salary:100", "-e", "Rent:100"])

        assert result.exit_code == 0, result.output
        assert "+£0.00" not in result.output
        assert "-£0.00" not in result.output
        assert "£0.00 / month" in result.output


class TestPeriodsCommand:
    """Tests for `budgetplan periods`."""

    def test_lists_periods(self) -> None:
        """Should list every period."""
        result = runner.invoke(app, ["periods"])

        assert result.exit_code == 0, result.output
        for label in ("Monthly", "Bimonthly", "Quarterly", "Half-yearly", "Yearly"):
            assert label in result.output


class TestInitCommand:
    """Tests for `budgetplan init`."""

    def test_creates_config(self, isolated_config: Path) -> None:
        """Should write the default config."""
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0, result.output
        assert load_config(isolated_config)["currency"] == "£"

    def test_refuses_to_overwrite(self, isolated_config: Path) -> None:
        """Should refuse to overwrite without --force."""
        runner.invoke(app, ["init"])
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 1
        assert "--force" in result.output

    def test_force_overwrites(self, isolated_config: Path) -> None:
        """Should overwrite with --force."""
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text('currency = "$"\n')

        result = runner.invoke(app, ["init", "--force"])

        assert result.exit_code == 0, result.output
        assert load_config(isolated_config)["currency"] == "£"


class TestFormatMonthly:
    """Tests for format_monthly."""

    def test_positive_is_green_with_plus(self) -> None:
        """Should mark income green with a plus sign."""
        assert format_monthly(5, Settings()) == "[green]+£5.00[/green]"

    def test_negative_is_red(self) -> None:
        """Should mark expenses red."""
        assert format_monthly(-5, Settings()) == "[red]-£5.00[/red]"

    def test_rounds_before_choosing_sign(self) -> None:
        """Should treat amounts that round to zero as zero."""
        assert format_monthly(0.0, Settings()) == "£0.00"
        assert format_monthly(-0.001, Settings()) == "£0.00"
        assert format_monthly(0.004, Settings()) == "£0.00"
