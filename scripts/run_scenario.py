"""CLI for replaying scripted LiftDispatch scenarios defined in JSON configs."""
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Dict, List, Optional

from controller import DispatchEngine, configure_logging
from fleet import BuildingConfig


def build_engine(config: Dict) -> DispatchEngine:
    building_cfg = config.get("building", {})
    selector_cfg = config.get("selector", {})
    return DispatchEngine(
        BuildingConfig(
            number_of_floors=building_cfg.get("number_of_floors", 10),
            active_elevators=building_cfg.get("active_elevators", 5),
        ),
        selector_name=selector_cfg.get("name", "priority"),
        selector_options=selector_cfg.get("options", {}),
    )


def apply_operation(engine: DispatchEngine, operation: Dict) -> Dict:
    kind = operation.get("type")
    if kind == "configure":
        engine.configure(operation["number_of_floors"], operation["active_elevators"])
        return {"type": kind, "config": engine.get_config().as_dict()}
    if kind == "pickup":
        elevator_id = engine.pickup(operation["floor"], operation["direction"])
        return {"type": kind, "floor": operation["floor"], "elevator_id": elevator_id}
    if kind == "target":
        accepted = engine.add_target(operation["elevator_id"], operation["floor"])
        return {"type": kind, "elevator_id": operation["elevator_id"], "accepted": accepted}
    if kind == "step":
        arrivals: List[List[int]] = []
        for _ in range(operation.get("count", 1)):
            arrivals.extend([elevator_id, floor] for elevator_id, floor in engine.step())
        return {"type": kind, "count": operation.get("count", 1), "arrivals": arrivals}
    raise ValueError(f"Unknown operation type '{kind}'")


def run_scenario(engine: DispatchEngine, config: Dict) -> List[Dict]:
    return [apply_operation(engine, operation) for operation in config.get("operations", [])]


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("config", type=Path, help="Path to a JSON scenario configuration file")
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional file path to write operation results and final state as JSON",
    )
    parser.add_argument("--log-level", default="WARNING", help="Log level for engine events")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    config = json.loads(args.config.read_text())
    engine = build_engine(config)
    results = run_scenario(engine, config)

    final_state = engine.snapshot()
    summary = {
        "scenario": config.get("name", args.config.stem),
        "description": config.get("description"),
        "selector": final_state["selector"],
        "results": results,
        "final_state": final_state,
    }
    save_results(args.output, summary)

    print(f"Scenario: {summary['scenario']}")
    if summary["description"]:
        print(summary["description"])
    print(f"Selector: {summary['selector']}")
    print(f"Operations: {len(results)}")
    print("Final fleet:")
    for elevator in final_state["elevators"]:
        if elevator["status"] == "off":
            continue
        print(
            f"  #{elevator['id']}: floor {elevator['current_floor']} "
            f"{elevator['status']} targets={elevator['target_floors']}"
        )
    if args.output:
        print(f"Saved results to {args.output}")


if __name__ == "__main__":
    main()
