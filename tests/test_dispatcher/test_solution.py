"""
Dispatcher Solution Tests

init() registers every handler on the host objects; host events drive
the dispatcher and the indicator controller from there on.
"""

import pytest

from config.dispatcher import AllocationStrategyConfig, DispatcherConfig
from dispatcher.solution import DispatcherSolution
from tests.fakes import FakeElevator, FakeFloor


def make_solution(elevators, num_floors=10, config=None):
    floors = [FakeFloor(i) for i in range(num_floors)]
    solution = DispatcherSolution(config)
    solution.init(elevators, floors)
    return solution, floors


def test_init_registers_every_handler():
    elevators = [FakeElevator(0), FakeElevator(9)]
    solution, floors = make_solution(elevators)

    for elevator in elevators:
        assert set(elevator.handlers) == {"floor_button_pressed", "stopped_at_floor", "idle"}
    for floor in floors:
        assert set(floor.handlers) == {"up_button_pressed", "down_button_pressed"}
    assert len(solution.registry) == 10


def test_hall_button_event_assigns_nearest_car():
    low, high = FakeElevator(0), FakeElevator(9)
    solution, floors = make_solution([low, high])

    floors[7].trigger("down_button_pressed")

    assert high.destination_queue == [7]
    assert low.destination_queue == []
    assert solution.registry.is_pending(7, "DOWN")
    assert high.indicators == {"UP": False, "DOWN": True}


def test_car_button_event_goes_to_that_car():
    first, second = FakeElevator(0), FakeElevator(0)
    make_solution([first, second])

    second.trigger("floor_button_pressed", 6)

    assert first.destination_queue == []
    assert second.destination_queue == [6]
    assert second.check_count == 1


def test_stop_event_serves_pending_hall_call():
    elevator = FakeElevator(0)
    solution, floors = make_solution([elevator])

    floors[4].trigger("up_button_pressed")
    assert elevator.destination_queue == [4]

    # Host arrives, pops the stop, then reports it
    elevator.floor = 4
    elevator.destination_queue.pop(0)
    elevator.trigger("stopped_at_floor", 4)

    assert not solution.registry.is_pending(4, "UP")
    assert elevator.indicators == {"UP": True, "DOWN": False}

    elevator.trigger("idle")
    assert elevator.indicators == {"UP": True, "DOWN": False}


def test_dwell_steps_come_from_config():
    elevator = FakeElevator(0, [3], "UP")
    solution, _ = make_solution([elevator], config=DispatcherConfig(dwell_steps=2))

    assert solution.dispatcher.estimator.dwell_steps == 2


def test_unknown_strategy_is_rejected():
    config = DispatcherConfig(allocation_strategy=AllocationStrategyConfig(name="NearestCar"))
    with pytest.raises(ValueError):
        make_solution([FakeElevator(0)], config=config)


def test_update_has_nothing_to_do():
    elevator = FakeElevator(3, [7], "UP")
    solution, floors = make_solution([elevator])

    solution.update(1.0, [elevator], floors)

    assert elevator.destination_queue == [7]
    assert elevator.check_count == 0
