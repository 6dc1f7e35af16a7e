"""Tests for the command-line entry point."""

import sys
from galaxy_interaction.cli import main as cli
from galaxy_interaction.utils.config import load_config


def run_cli(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["galaxy-interaction", *argv])
    cli.main()


def test_headless_run(monkeypatch, capsys):
    """A short headless run prints the diagnostics table."""
    run_cli(monkeypatch, "--stars", "50", "--seed", "1", "--frames", "30", "--debug-every", "10")
    out = capsys.readouterr().out
    
    assert "Frame" in out
    assert "Simulation complete!" in out
    # Header, separator, initial row and three periodic rows
    rows = [line for line in out.splitlines() if line[:1].isdigit()]
    assert len(rows) == 4


def test_save_config(monkeypatch, tmp_path):
    """--save-config writes the effective configuration."""
    path = tmp_path / "run.yaml"
    run_cli(monkeypatch, "--stars", "77", "--cross-weight", "1.5", "--save-config", str(path))
    
    config = load_config(str(path))
    assert config.stars_per_galaxy == 77
    assert config.cross_weight == 1.5
