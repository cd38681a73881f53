import random
import threading

import pytest

from controller import DispatchEngine
from dispatch import DOWN, UP, SwarmSelector
from fleet import BuildingConfig, ElevatorStatus, InvalidConfigurationError


def test_pickup_on_idle_fleet_goes_to_lowest_id(engine):
    assert engine.pickup(7, UP) == 0
    car = engine.get_status()[0]
    assert car.target_floors == [7]
    assert car.status is ElevatorStatus.UP


def test_second_pickup_uses_next_idle_car(engine):
    engine.pickup(7, UP)
    assert engine.pickup(3, UP) == 1


def test_pickup_already_queued_floor_reuses_car(engine):
    engine.pickup(6, UP)
    engine.step()
    engine.pickup(2, DOWN)
    assert engine.pickup(6, UP) == 0
    assert engine.get_status()[0].target_floors == [6, 6]


def test_pickup_rejects_unknown_direction_and_floor(engine):
    assert engine.pickup(3, 0) is None
    assert engine.pickup(10, UP) is None
    assert engine.pickup(-1, DOWN) is None
    assert all(not car.target_floors for car in engine.get_status())


def test_pickup_with_no_active_cars_returns_none():
    engine = DispatchEngine(BuildingConfig(number_of_floors=10, active_elevators=0))
    assert engine.pickup(4, UP) is None


def test_add_target_rejects_off_and_unknown_cars(engine):
    assert engine.add_target(7, 3) is False
    assert engine.add_target(42, 3) is False
    assert engine.add_target(0, 99) is False
    assert engine.get_status()[7].target_floors == []


def test_add_target_orders_queue_and_sets_direction(engine):
    engine.add_target(2, 8)
    engine.step()
    engine.step()
    assert engine.add_target(2, 1) is True
    assert engine.add_target(2, 5) is True
    car = engine.get_status()[2]
    assert car.current_floor == 2
    assert car.target_floors == [5, 8, 1]
    assert car.status is ElevatorStatus.UP


def test_step_reports_arrivals(engine):
    engine.add_target(0, 2)
    engine.add_target(1, 1)
    assert engine.step() == [(1, 1)]
    assert engine.step() == [(0, 2)]
    assert engine.step() == []


def test_step_convergence_to_floor_seven(engine):
    engine.add_target(0, 7)
    for _ in range(7):
        engine.step()
    car = engine.get_status()[0]
    assert car.current_floor == 7
    assert car.target_floors == []
    assert car.status is ElevatorStatus.IDLE


def test_configure_turns_off_cars_and_pickup_skips_them(engine):
    engine.add_target(4, 6)
    engine.step()
    engine.configure(10, 3)

    status = engine.get_status()
    for car in status[3:]:
        assert car.status is ElevatorStatus.OFF
        assert car.target_floors == []
        assert car.current_floor == 0
    for _ in range(10):
        assert engine.pickup(5, UP) in (0, 1, 2)


def test_invalid_configure_raises(engine):
    with pytest.raises(InvalidConfigurationError):
        engine.configure(0, 3)
    assert engine.get_config() == BuildingConfig(10, 5)


def test_status_is_a_snapshot(engine):
    snapshot = engine.get_status()
    snapshot[0].target_floors.append(9)
    snapshot[0].current_floor = 4
    fresh = engine.get_status()[0]
    assert fresh.target_floors == []
    assert fresh.current_floor == 0


def test_config_is_a_copy(engine):
    config = engine.get_config()
    config.active_elevators = 1
    assert engine.get_config().active_elevators == 5


def test_set_selector_switches_strategy(engine):
    engine.set_selector("swarm", random_seed=3)
    assert isinstance(engine.selector, SwarmSelector)
    assert engine.snapshot()["selector"] == "swarm"
    assert engine.pickup(4, UP) in range(5)


def test_set_selector_rejects_unknown_name_and_options(engine):
    with pytest.raises(ValueError):
        engine.set_selector("elevator-magic")
    with pytest.raises(ValueError):
        engine.set_selector("priority", random_seed=1)
    assert engine.snapshot()["selector"] == "priority"


def test_concurrent_operations_keep_fleet_invariants(engine):
    def worker(seed):
        rng = random.Random(seed)
        for _ in range(300):
            roll = rng.random()
            if roll < 0.4:
                engine.pickup(rng.randrange(12), rng.choice((UP, DOWN)))
            elif roll < 0.7:
                engine.add_target(rng.randrange(16), rng.randrange(12))
            elif roll < 0.95:
                engine.step()
            else:
                engine.configure(rng.randint(5, 12), rng.randint(0, 16))

    threads = [threading.Thread(target=worker, args=(seed,)) for seed in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    config = engine.get_config()
    for car in engine.get_status():
        assert (car.status is ElevatorStatus.OFF) == (car.elevator_id >= config.active_elevators)
        if car.status is not ElevatorStatus.OFF and not car.target_floors:
            assert car.status is ElevatorStatus.IDLE
        assert 0 <= car.current_floor < config.number_of_floors
        assert all(0 <= floor < config.number_of_floors for floor in car.target_floors)
