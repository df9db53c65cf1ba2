"""Tests for the command line entry point."""

import matplotlib
import pytest

# Use non-interactive backend for testing
matplotlib.use("Agg")

from print_cost_planner.cli import build_argparser, main

SETTINGS = "3,50,1.5,20,false,0,0.2\nA,0.5,1.0,0.4,2\nB,0.3,2.0,0.4,1\n"


@pytest.fixture
def settings_file(tmp_path):
    path = tmp_path / "settings.txt"
    path.write_text(SETTINGS, encoding="utf-8")
    return path


class TestArgparser:
    """Tests for argument defaults."""

    def test_defaults(self):
        args = build_argparser().parse_args([])
        assert args.settings == "settings.txt"
        assert args.calculate is False
        assert args.strategy == "completion_time"
        assert args.plot == ""

    def test_unknown_strategy_rejected(self):
        with pytest.raises(SystemExit):
            build_argparser().parse_args(["--strategy", "random"])


class TestCalculate:
    """Tests for one-shot calculation."""

    def test_calculate_prints_report(self, settings_file, capsys):
        """Test the report printed for a settings file."""
        assert main(["--settings", str(settings_file), "--calculate"]) == 0

        out = capsys.readouterr().out
        assert "A -> Units: 3, Energy Cost: $0.30 (Nozzle: 0.40mm)" in out
        assert "Total Cost with Commission: $7.80" in out

    def test_power_first_strategy(self, settings_file, capsys):
        """Test selecting the power-first distribution."""
        assert (
            main(["--settings", str(settings_file), "--calculate", "--strategy", "power_first"])
            == 0
        )
        out = capsys.readouterr().out
        assert "A -> Units: 2" in out
        assert "B -> Units: 1" in out

    def test_plot_is_saved(self, settings_file, tmp_path, capsys):
        """Test writing the distribution chart."""
        plot_path = tmp_path / "plan.png"
        assert main(["--settings", str(settings_file), "--calculate", "--plot", str(plot_path)]) == 0
        assert plot_path.exists()
        assert "Plot saved" in capsys.readouterr().out

    def test_missing_settings_file(self, tmp_path, capsys):
        """Test that a missing file is reported with a non-zero exit code."""
        assert main(["--settings", str(tmp_path / "missing.txt"), "--calculate"]) == 1
        assert "error:" in capsys.readouterr().err

    def test_settings_without_printers(self, tmp_path, capsys):
        """Test that an empty fleet is reported with a non-zero exit code."""
        path = tmp_path / "settings.txt"
        path.write_text("3,50,1.5,20,false,0,0.2\n", encoding="utf-8")

        assert main(["--settings", str(path), "--calculate"]) == 1
        assert "at least one printer" in capsys.readouterr().err

    def test_undecodable_settings_file(self, tmp_path, capsys):
        """Test that a non-UTF-8 settings file exits with an error instead of a traceback."""
        path = tmp_path / "settings.txt"
        path.write_bytes(b"3,50,1.5,20,false,0,0.2\n\xff\xfeA,0.5,1.0,0.4,2\n")

        assert main(["--settings", str(path), "--calculate"]) == 1
        assert "cannot read settings file" in capsys.readouterr().err

    def test_unwritable_plot_path(self, settings_file, tmp_path, capsys):
        """Test that a failed chart write exits with an error."""
        plot_path = tmp_path / "missing" / "plan.png"

        assert main(["--settings", str(settings_file), "--calculate", "--plot", str(plot_path)]) == 1
        assert "error:" in capsys.readouterr().err
