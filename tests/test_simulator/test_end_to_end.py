"""
End-to-end runs: SimPy host + dispatcher + traffic

Checks what riders see: every hall call is eventually served by a car
whose indicator shows the call's direction.
"""

import random

import pytest

from config import BuildingConfig, DispatcherConfig, ElevatorConfig, SimulationConfig, TrafficConfig
from main import build_simulation


def make_config(num_floors=10, num_elevators=1, duration=200.0, calls=None,
                hall_call_rate=0.0, rider_cab_calls=False, seed=42):
    return SimulationConfig(
        building=BuildingConfig(num_floors=num_floors),
        elevator=ElevatorConfig(num_elevators=num_elevators, travel_time_per_floor=1.0, stop_time=5.0),
        traffic=TrafficConfig(
            simulation_duration=duration,
            hall_call_rate=hall_call_rate,
            rider_cab_calls=rider_cab_calls,
            calls=calls or [],
        ),
        random_seed=seed,
    )


def assert_hall_state_consistent(simulation):
    """Registry and hall button lights agree once events have settled"""
    registry = simulation.solution.registry
    for floor in simulation.floors:
        for direction in ["UP", "DOWN"]:
            assert registry.is_pending(floor.floor_num(), direction) == floor.is_lit(direction)


def assert_indicators_exclusive(simulation):
    for name, stops in simulation.statistics.stops_history.items():
        for stop in stops:
            assert not (stop['indicator_up'] and stop['indicator_down']), f"{name} at {stop}"


def test_single_hall_call_is_served():
    config = make_config(calls=[{'time': 1.0, 'type': 'hall', 'floor': 5, 'direction': 'UP'}])
    simulation = build_simulation(config, DispatcherConfig())

    simulation.run()

    elevator = simulation.elevators[0]
    assert elevator.current_floor() == 5
    assert elevator.destination_queue == []
    assert not simulation.floors[5].is_lit("UP")
    assert not simulation.solution.registry.is_pending(5, "UP")
    # 5 floors of travel after the press
    assert simulation.statistics.response_times == [5.0]
    assert simulation.traffic.hall_calls_boarded == 1


def test_fleet_serves_calls_and_riders():
    config = make_config(
        num_floors=12, num_elevators=2, duration=300.0, rider_cab_calls=True,
        calls=[
            {'time': 1.0, 'type': 'hall', 'floor': 3, 'direction': 'DOWN'},
            {'time': 2.0, 'type': 'hall', 'floor': 8, 'direction': 'UP'},
        ],
    )
    simulation = build_simulation(config, DispatcherConfig())

    simulation.run()

    assert simulation.statistics.open_hall_calls == []
    assert simulation.traffic.hall_calls_boarded == 2
    assert all(elevator.destination_queue == [] for elevator in simulation.elevators)
    # Each call went to a different car
    assert all(len(stops) >= 2 for stops in simulation.statistics.stops_history.values())
    assert len(simulation.statistics.stops_history) == 2
    assert_indicators_exclusive(simulation)
    assert_hall_state_consistent(simulation)


def test_scripted_cab_call():
    config = make_config(calls=[{'time': 0.5, 'type': 'cab', 'elevator': 0, 'floor': 7}])
    simulation = build_simulation(config, DispatcherConfig())

    simulation.run()

    assert simulation.elevators[0].current_floor() == 7
    assert simulation.elevators[0].stop_count == 1


@pytest.mark.parametrize("seed", [1, 7, 42])
def test_random_traffic(seed):
    config = make_config(num_floors=12, num_elevators=3, duration=600.0,
                         hall_call_rate=0.1, rider_cab_calls=True, seed=seed)
    simulation = build_simulation(config, DispatcherConfig())

    simulation.run()

    assert simulation.traffic.hall_calls_generated > 0
    assert simulation.traffic.hall_calls_boarded > 0
    assert_indicators_exclusive(simulation)
    assert_hall_state_consistent(simulation)
    assert simulation.statistics.response_time_summary()['count'] == len(simulation.statistics.response_times)


def test_burst_of_calls_drains():
    """Nothing is left behind for good: riders who miss a car call again"""
    rng = random.Random(3)
    calls = []
    for i in range(30):
        floor = rng.randrange(12)
        direction = "UP" if floor == 0 else "DOWN" if floor == 11 else rng.choice(["UP", "DOWN"])
        calls.append({'time': float(i * 5), 'type': 'hall', 'floor': floor, 'direction': direction})
    config = make_config(num_floors=12, num_elevators=2, duration=800.0,
                         calls=calls, rider_cab_calls=True, seed=3)
    simulation = build_simulation(config, DispatcherConfig())

    simulation.run()

    assert simulation.traffic.hall_calls_generated > 0
    assert simulation.statistics.open_hall_calls == []
    assert all(elevator.destination_queue == [] for elevator in simulation.elevators)
    assert_hall_state_consistent(simulation)
