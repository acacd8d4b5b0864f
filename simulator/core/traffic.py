"""
Call traffic for the host simulation

Presses hall and car buttons:
- scripted calls at fixed times
- random hall calls (Poisson arrivals)
- riders boarding at a stop press a destination in their direction

Boarding follows the indicators: riders waiting for a direction take a car
stopped at their floor only if that car's indicator for the direction is lit.
Riders left behind press their hall button again once the car has left.
"""

import random
import simpy
from typing import Any, Dict, List, Optional

from .elevator import Elevator
from .floor import Floor


class TrafficGenerator:
    """
    Generates button presses for a fleet

    Register it AFTER the dispatcher so that boarding sees the indicators
    the dispatcher decided for the stop.
    """

    def __init__(self, env: simpy.Environment, elevators: List[Elevator], floors: List[Floor],
                 calls: Optional[List[Dict[str, Any]]] = None, hall_call_rate: float = 0.0,
                 rider_cab_calls: bool = True, rng: Optional[random.Random] = None,
                 verbose: bool = False):
        self.env = env
        self.elevators = elevators
        self.floors = floors
        self.calls = sorted(calls or [], key=lambda call: call['time'])
        self.hall_call_rate = hall_call_rate
        self.rider_cab_calls = rider_cab_calls
        self.rng = rng if rng is not None else random.Random()
        self.verbose = verbose

        self.hall_calls_generated = 0
        self.hall_calls_boarded = 0

        for elevator in self.elevators:
            elevator.on("stopped_at_floor", lambda floor_num, elevator=elevator: self._on_stopped(elevator, floor_num))

    def start(self):
        """Start the traffic processes"""
        if self.calls:
            self.env.process(self._scripted_calls())
        if self.hall_call_rate > 0:
            self.env.process(self._random_hall_calls())

    def _scripted_calls(self):
        for call in self.calls:
            delay = call['time'] - self.env.now
            if delay > 0:
                yield self.env.timeout(delay)

            if call['type'] == 'hall':
                self._press_hall(call['floor'], call.get('direction', 'UP'))
            else:
                self.elevators[call['elevator']].press_floor_button(call['floor'])

    def _random_hall_calls(self):
        num_floors = len(self.floors)
        while True:
            yield self.env.timeout(self.rng.expovariate(self.hall_call_rate))
            floor = self.rng.randrange(num_floors)
            if floor == 0:
                direction = "UP"
            elif floor == num_floors - 1:
                direction = "DOWN"
            else:
                direction = self.rng.choice(["UP", "DOWN"])
            self._press_hall(floor, direction)

    def _press_hall(self, floor: int, direction: str):
        if self.floors[floor].press(direction):
            self.hall_calls_generated += 1

    def _on_stopped(self, elevator: Elevator, floor_num: int):
        floor = self.floors[floor_num]
        for direction in ["UP", "DOWN"]:
            if not floor.is_lit(direction):
                continue
            if not elevator.get_indicator(direction):
                # Left behind: call again once the car has left
                self.env.process(self._press_hall_again(floor, direction, elevator.stop_time))
                continue
            floor.serve(direction, elevator.name)
            self.hall_calls_boarded += 1
            destination = self._pick_destination(floor_num, direction)
            if self.rider_cab_calls and destination is not None:
                # Press after the stop event has been fully handled
                self.env.process(self._press_car_button(elevator, destination))

    def _pick_destination(self, floor_num: int, direction: str) -> Optional[int]:
        if direction == "UP":
            candidates = range(floor_num + 1, len(self.floors))
        else:
            candidates = range(0, floor_num)
        if not candidates:
            return None
        return self.rng.choice(list(candidates))

    def _press_car_button(self, elevator: Elevator, floor: int):
        yield self.env.timeout(0)
        elevator.press_floor_button(floor)

    def _press_hall_again(self, floor: Floor, direction: str, delay: float):
        yield self.env.timeout(delay)
        floor.press_again(direction)
