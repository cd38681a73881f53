import json

import pytest

import run_scenario


def test_scenario_runs_operations_in_order(tmp_path, capsys):
    scenario = {
        "name": "two_calls",
        "building": {"number_of_floors": 8, "active_elevators": 2},
        "operations": [
            {"type": "pickup", "floor": 3, "direction": 1},
            {"type": "target", "elevator_id": 0, "floor": 5},
            {"type": "target", "elevator_id": 6, "floor": 5},
            {"type": "step", "count": 5},
        ],
    }
    config_path = tmp_path / "scenario.json"
    config_path.write_text(json.dumps(scenario))
    output_path = tmp_path / "out" / "results.json"

    run_scenario.main([str(config_path), "--output", str(output_path)])

    results = json.loads(output_path.read_text())
    assert results["scenario"] == "two_calls"
    assert results["selector"] == "priority"
    assert results["results"][0] == {"type": "pickup", "floor": 3, "elevator_id": 0}
    assert results["results"][2]["accepted"] is False
    assert results["results"][3]["arrivals"] == [[0, 3], [0, 5]]
    car = results["final_state"]["elevators"][0]
    assert car["current_floor"] == 5
    assert car["status"] == "idle"
    assert "Scenario: two_calls" in capsys.readouterr().out


def test_configure_operation_resets_fleet():
    engine = run_scenario.build_engine({"building": {"number_of_floors": 6, "active_elevators": 4}})
    engine.add_target(3, 4)
    result = run_scenario.apply_operation(
        engine, {"type": "configure", "number_of_floors": 6, "active_elevators": 2}
    )
    assert result["config"] == {"number_of_floors": 6, "active_elevators": 2}
    assert engine.get_status()[3].target_floors == []


def test_unknown_operation_is_rejected():
    engine = run_scenario.build_engine({})
    with pytest.raises(ValueError):
        run_scenario.apply_operation(engine, {"type": "teleport"})
