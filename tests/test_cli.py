"""Tests for the command line interface."""

import pandas as pd
import pytest
from src.presentation.cli.main import main


@pytest.fixture
def settings_file(tmp_path):
    return str(tmp_path / "drill_settings.csv")


def configure(settings_file, width="20", spacing="7.5", distance="86"):
    return main(
        [
            "--settings-file",
            settings_file,
            "configure",
            "--width",
            width,
            "--spacing",
            spacing,
            "--distance",
            distance,
        ]
    )


def test_configure_and_show(settings_file, capsys):
    """Test saving settings and showing them."""
    assert configure(settings_file) == 0
    assert main(["--settings-file", settings_file, "show"]) == 0

    output = capsys.readouterr().out
    assert "Total Rows:    32" in output
    assert "Spacing:       7.5 inches" in output


def test_configure_rejected(settings_file, capsys):
    """Test invalid settings print the reason."""
    assert configure(settings_file, width="1", spacing="12") == 1
    assert "Row spacing must be less than the drill width" in capsys.readouterr().out


def test_show_without_settings(settings_file, capsys):
    """Test commands needing settings fail cleanly."""
    assert main(["--settings-file", settings_file, "show"]) == 1
    assert "No drill settings saved yet." in capsys.readouterr().out


def test_calculate(settings_file, capsys):
    """Test the reference calibration run."""
    configure(settings_file)
    code = main(
        ["--settings-file", settings_file, "calculate", "--turns", "10", "--rows", "4", "--weight", "2.0"]
    )
    assert code == 0
    assert "486.3 lbs/acre" in capsys.readouterr().out


def test_calculate_incomplete(settings_file, capsys):
    """Test zero seed weight gives zero with a note."""
    configure(settings_file)
    code = main(
        ["--settings-file", settings_file, "calculate", "--turns", "10", "--rows", "4", "--weight", "0"]
    )
    assert code == 0
    output = capsys.readouterr().out
    assert "0 lbs/acre" in output
    assert "Waiting for all inputs" in output


def test_calculate_too_many_rows(settings_file, capsys):
    """Test rows above capacity are rejected."""
    configure(settings_file)
    code = main(
        ["--settings-file", settings_file, "calculate", "--turns", "10", "--rows", "40", "--weight", "2"]
    )
    assert code == 1
    assert "Cannot catch more than 32 rows" in capsys.readouterr().out


def test_batch(settings_file, tmp_path, capsys):
    """Test computing a rate table from a CSV file."""
    configure(settings_file)
    runs_file = tmp_path / "runs.csv"
    output_file = tmp_path / "rates.csv"
    pd.DataFrame(
        {"number_of_turns": [10, 1], "rows_caught": [4, 32], "seed_weight": [2.0, 0.5]}
    ).to_csv(runs_file, index=False)

    code = main(
        [
            "--settings-file",
            settings_file,
            "batch",
            "--input",
            str(runs_file),
            "--output",
            str(output_file),
        ]
    )
    assert code == 0

    table = pd.read_csv(output_file)
    assert list(table["pounds_per_acre"]) == [486.3, 152.0]
    assert "Runs calculated: 2 of 2" in capsys.readouterr().out


def test_batch_missing_input(settings_file, tmp_path):
    """Test a missing runs file fails cleanly."""
    configure(settings_file)
    code = main(["--settings-file", settings_file, "batch", "--input", str(tmp_path / "none.csv")])
    assert code == 1
