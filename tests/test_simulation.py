import pytest

import simulation
from simulator import Intersection, Vehicle, VehicleType


def test_format_report_table():
    inter = Intersection(1)
    inter.add_vehicle("South", Vehicle(1, VehicleType.EMERGENCY))
    text = simulation.format_report(inter.simulate_cycle())
    lines = text.splitlines()
    assert lines[0] == "--- Intersection 1 ---"
    assert lines[1] == "GREEN: South | Time: 52s"
    assert lines[2].rstrip() == "Road      Density   Signal"
    assert lines[4].rstrip() == "South     1         GREEN"
    assert lines[3].rstrip() == "North     0         RED"


def test_main_prints_demo_round(capsys):
    city = simulation.main(["--ticks", "1", "--scenario", "demo"])
    out = capsys.readouterr().out
    assert "GREEN WAVE ACTIVATED" in out
    assert "GREEN: South | Time: 52s" in out
    assert "GREEN: East | Time: 24s" in out
    assert "GREEN: North | Time: 22s" in out
    assert "Cycles run         : 3" in out
    assert city.t == 1


def test_main_with_seed_keeps_running(capsys):
    city = simulation.main(["--ticks", "5", "--seed", "1", "--intersections", "2"])
    assert city.t == 5
    assert city.metrics.cycles_run == 10
    assert "=== TICK 5 ===" in capsys.readouterr().out


def test_bad_scenario_rejected():
    with pytest.raises(SystemExit):
        simulation.parse_args(["--scenario", "carnival"])
