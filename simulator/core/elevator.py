import simpy
from typing import Optional

from .entity import Entity
from ..infrastructure.message_broker import MessageBroker
from ..interfaces.host import IElevator, ELEVATOR_EVENTS


class Elevator(Entity, IElevator):
    """
    Host elevator car driven by its destination queue

    Motion model:
    - One floor per travel_time_per_floor; while travelling, current_floor()
      is the floor being approached
    - A stop takes stop_time; the stopped floor is removed from the queue
      before 'stopped_at_floor' handlers run
    - An empty queue makes the car idle until check_destination_queue()

    States: IDLE, UP, DOWN, STOPPED
    """

    def __init__(self, env: simpy.Environment, name: str, num_floors: int,
                 broker: Optional[MessageBroker] = None, start_floor: int = 0,
                 travel_time_per_floor: float = 1.0, stop_time: float = 5.0,
                 verbose: bool = False):
        self.verbose = verbose
        super().__init__(env, name, events=ELEVATOR_EVENTS)
        self.broker = broker
        self.num_floors = num_floors
        self.travel_time_per_floor = travel_time_per_floor
        self.stop_time = stop_time

        if not (0 <= start_floor < num_floors):
            raise ValueError(f"Invalid start floor {start_floor} for elevator {name}. Must be between 0 and {num_floors - 1}.")
        self._floor = start_floor

        self.destination_queue = []
        self._indicators = {"UP": False, "DOWN": False}
        self._wake_event = None
        self.stop_count = 0

        self.status_topic = f"elevator/{self.name}/status"
        self.stop_topic = f"elevator/{self.name}/stopped"

        self.set_state("IDLE")

    # --- IElevator ---

    def current_floor(self) -> int:
        return self._floor

    def check_destination_queue(self):
        """Validate the queue and wake the car if it is waiting idle"""
        for floor in self.destination_queue:
            if not (0 <= floor < self.num_floors):
                raise ValueError(f"Invalid floor {floor} in destination queue of {self.name}. Must be between 0 and {self.num_floors - 1}.")
        if self._wake_event is not None and not self._wake_event.triggered:
            self._wake_event.succeed()

    def get_indicator(self, direction: str) -> bool:
        return self._indicators[self._check_direction(direction)]

    def set_indicator(self, direction: str, lit: bool):
        self._indicators[self._check_direction(direction)] = bool(lit)

    # --- Host-side inputs ---

    def press_floor_button(self, floor: int):
        """A rider pressed a destination button inside this car"""
        if not (0 <= floor < self.num_floors):
            raise ValueError(f"Invalid floor {floor}. Must be between 0 and {self.num_floors - 1}.")
        if self.verbose:
            print(f"{self.env.now:.2f} [{self.name}] Car button pressed: floor {floor}")
        self.emit("floor_button_pressed", floor)

    # --- Process ---

    def run(self):
        self._report_status()
        idle_announced = False
        while True:
            if not self.destination_queue:
                self.set_state("IDLE")
                if not idle_announced:
                    idle_announced = True
                    self.emit("idle")
                    continue
                self._wake_event = self.env.event()
                yield self._wake_event
                self._wake_event = None
                continue

            idle_announced = False
            target = self.destination_queue[0]
            if target == self._floor:
                yield from self._stop()
                continue

            direction = "UP" if target > self._floor else "DOWN"
            self.set_state(direction)
            next_floor = self._floor + (1 if direction == "UP" else -1)
            if next_floor != target:
                self.emit("passing_floor", next_floor, direction)

            # Committed to the next floor once departed
            self._floor = next_floor
            yield self.env.timeout(self.travel_time_per_floor)
            self._report_status()

    def _stop(self):
        floor = self._floor
        self.destination_queue.pop(0)
        self.set_state("STOPPED")
        self.stop_count += 1
        if self.verbose:
            print(f"{self.env.now:.2f} [{self.name}] Stopped at floor {floor}, queue={self.destination_queue}")

        self.emit("stopped_at_floor", floor)
        self._report_stop(floor)

        yield self.env.timeout(self.stop_time)

    def _report_status(self):
        if self.broker is None:
            return
        self.broker.put(self.status_topic, {
            "timestamp": self.env.now,
            "floor": self._floor,
            "state": self.state,
        })

    def _report_stop(self, floor: int):
        if self.broker is None:
            return
        self.broker.put(self.stop_topic, {
            "timestamp": self.env.now,
            "floor": floor,
            "indicator_up": self._indicators["UP"],
            "indicator_down": self._indicators["DOWN"],
            "queue": list(self.destination_queue),
        })

    def _check_direction(self, direction: str) -> str:
        if direction not in self._indicators:
            raise ValueError(f"Invalid direction '{direction}'. Must be 'UP' or 'DOWN'")
        return direction
