"""
Host Capability Interfaces

Defines the elevator and floor objects the host hands to the dispatcher.
The dispatcher depends only on these operations, so any host (the SimPy
simulator in this package, or an in-memory fake in tests) can drive it.
"""

from abc import ABC, abstractmethod
from typing import Callable, List


ELEVATOR_EVENTS = ("idle", "floor_button_pressed", "passing_floor", "stopped_at_floor")
FLOOR_EVENTS = ("up_button_pressed", "down_button_pressed")


class IElevator(ABC):
    """
    Interface of one elevator car as seen by the dispatcher

    Attributes:
        destination_queue: Ordered list of floors the car will stop at.
            Owned by the host. After editing it in place, call
            check_destination_queue() so the change applies immediately.

    Events (registered with on()):
        - 'idle': queue drained, nothing left to do
        - 'floor_button_pressed' (floor_num): destination button inside the car
        - 'passing_floor' (floor_num, direction): about to pass a floor
        - 'stopped_at_floor' (floor_num): car stopped at a floor
    """

    destination_queue: List[int]

    @abstractmethod
    def current_floor(self) -> int:
        """Floor the car is at, or the next floor once it has departed"""
        pass

    @abstractmethod
    def check_destination_queue(self):
        """Apply manual edits of destination_queue now instead of lazily"""
        pass

    @abstractmethod
    def get_indicator(self, direction: str) -> bool:
        """
        Read the direction indicator

        Args:
            direction: 'UP' or 'DOWN'
        """
        pass

    @abstractmethod
    def set_indicator(self, direction: str, lit: bool):
        """
        Write the direction indicator

        The UP and DOWN indicators are independent at this boundary.
        Waiting passengers only board a car whose indicator matches
        their direction.
        """
        pass

    @abstractmethod
    def on(self, event: str, handler: Callable):
        """Register an event handler"""
        pass


class IFloor(ABC):
    """
    Interface of one floor as seen by the dispatcher

    Events (registered with on()):
        - 'up_button_pressed'
        - 'down_button_pressed'
    """

    @abstractmethod
    def floor_num(self) -> int:
        pass

    @abstractmethod
    def on(self, event: str, handler: Callable):
        """Register an event handler"""
        pass
