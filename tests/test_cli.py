"""Tests for the headless demo runner."""

import pytest

from carambolage import cli


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    """Keep the demo from replacing pytest's log handlers."""
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)


def test_main_reports_poses(capsys):
    """Demo prints a line per report interval."""
    assert cli.main(["--steps", "10", "--report-every", "5"]) == 0

    out = capsys.readouterr().out
    assert out.count("t = ") == 2
    assert "point mass" in out


def test_run_ticks_world():
    """World ticks once per step and the steering car is drawn each tick."""
    args = cli.parse_args(["--steps", "120", "--dt", "0.01", "--report-every", "1000"])

    world = cli.run(args)

    assert world.frame == 120
    steering_car = world.get_car(0)
    assert steering_car.model.draw_count == 120
    assert steering_car.center_of_mass[1] > 0


def test_invalid_arguments():
    """Bad arguments exit with a usage error."""
    with pytest.raises(SystemExit):
        cli.parse_args(["--dt", "0"])
