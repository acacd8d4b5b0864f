"""
Indicator Controller

Keeps each elevator's UP/DOWN direction indicators consistent with its
committed stops and with the pending hall calls of the floor it stops at.

States per elevator (over the two indicator booleans):
- IDLE: both indicators off
- UP:   UP on, DOWN off
- DOWN: DOWN on, UP off

The host stores the two indicators independently; this controller is
their only writer and never leaves both on.
"""

from typing import Optional

from simulator.interfaces.host import IElevator
from .hall_call_registry import HallCallRegistry


IDLE = "IDLE"


def opposite(direction: str) -> str:
    return "DOWN" if direction == "UP" else "UP"


class IndicatorController:
    """
    Direction indicator state machine

    Trigger: the elevator stopped at a floor.

    Transition priority:
    1. Queue not empty: head toward the next stop, clear the hall call
       being served at this floor in that direction
    2. Queue empty: serve a pending hall call at this floor, preferring
       the last direction of travel, then the opposite one
    3. Otherwise: IDLE
    """

    def __init__(self, registry: HallCallRegistry, verbose: bool = False):
        self.registry = registry
        self.verbose = verbose

    def state_of(self, elevator: IElevator) -> str:
        """
        Current indicator state of an elevator

        Returns:
            'UP', 'DOWN' or 'IDLE' (also when the host lit both)
        """
        up = elevator.get_indicator("UP")
        down = elevator.get_indicator("DOWN")
        if up and not down:
            return "UP"
        if down and not up:
            return "DOWN"
        return IDLE

    def on_stopped_at_floor(self, elevator: IElevator, floor: int):
        """Decide the next indicator state when the elevator stops at a floor"""
        next_stop = self._next_stop(elevator, floor)
        if next_stop is not None:
            direction = "UP" if floor < next_stop else "DOWN"
            self._set_state(elevator, direction)
            if self.registry.clear(floor, direction) and self.verbose:
                print(f"[Indicator] {self._label(elevator)}: served hall call at floor {floor} ({direction})")
            return

        last_direction = self.state_of(elevator)
        preferred = last_direction if last_direction != IDLE else "UP"
        for direction in (preferred, opposite(preferred)):
            if self.registry.clear(floor, direction):
                self._set_state(elevator, direction)
                if self.verbose:
                    print(f"[Indicator] {self._label(elevator)}: served hall call at floor {floor} ({direction}) with empty queue")
                return

        self._set_state(elevator, IDLE)

    def on_idle(self, elevator: IElevator):
        """An idle car keeps its indicators until its next stop decides them"""
        if self.verbose:
            print(f"[Indicator] {self._label(elevator)}: idle at floor {elevator.current_floor()} ({self.state_of(elevator)})")

    def light_for_departure(self, elevator: IElevator, fallback_direction: str):
        """
        Light the indicator toward the elevator's queue head

        Used by the Dispatcher right after committing a stop to an elevator
        whose indicators were both off. When the head is the current floor,
        fallback_direction (the request's direction) is used.
        """
        current = elevator.current_floor()
        head = elevator.destination_queue[0] if elevator.destination_queue else None
        if head is None or head == current:
            direction = fallback_direction
        else:
            direction = "UP" if head > current else "DOWN"
        self._set_state(elevator, direction)

    def _next_stop(self, elevator: IElevator, floor: int) -> Optional[int]:
        """First queued stop that is not the current floor"""
        for stop in elevator.destination_queue:
            if stop != floor:
                return stop
        return None

    def _set_state(self, elevator: IElevator, state: str):
        old_state = self.state_of(elevator)
        elevator.set_indicator("UP", state == "UP")
        elevator.set_indicator("DOWN", state == "DOWN")
        if self.verbose and old_state != state:
            print(f"[Indicator] {self._label(elevator)} state transition: {old_state} -> {state}")

    def _label(self, elevator: IElevator) -> str:
        return getattr(elevator, 'name', elevator.__class__.__name__)
