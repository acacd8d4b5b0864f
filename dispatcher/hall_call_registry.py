"""
Hall Call Registry

Per-floor pending UP/DOWN hall call flags shared by the Dispatcher
(which marks them) and the IndicatorController (which clears them).
"""

from dataclasses import dataclass
from typing import List


@dataclass
class FloorCalls:
    """Pending hall call flags of a single floor"""
    floor_num: int
    pending_up: bool = False
    pending_down: bool = False


class HallCallRegistry:
    """
    Pending hall calls for every floor of the building

    The registry is sized once at startup and lives for the whole run.

    Writers:
    - mark(): Dispatcher, when a hall button is pressed
    - clear(): IndicatorController, when a stop actually serves the call
    """

    def __init__(self, num_floors: int):
        """
        Args:
            num_floors: Total number of floors (floors are numbered 0..num_floors-1)
        """
        if num_floors < 1:
            raise ValueError("num_floors must be at least 1")
        self.num_floors = num_floors
        self._floors: List[FloorCalls] = [FloorCalls(floor_num=i) for i in range(num_floors)]

    def _get(self, floor: int) -> FloorCalls:
        if not (0 <= floor < self.num_floors):
            raise ValueError(f"Invalid floor {floor}. Must be between 0 and {self.num_floors - 1}.")
        return self._floors[floor]

    def mark(self, floor: int, direction: str):
        """Register a pending hall call"""
        calls = self._get(floor)
        if direction == "UP":
            calls.pending_up = True
        elif direction == "DOWN":
            calls.pending_down = True
        else:
            raise ValueError(f"Invalid direction '{direction}'. Must be 'UP' or 'DOWN'")

    def clear(self, floor: int, direction: str) -> bool:
        """
        Clear a pending hall call

        Returns:
            True if a pending call was cleared, False if nothing was pending
        """
        calls = self._get(floor)
        if direction == "UP":
            was_pending = calls.pending_up
            calls.pending_up = False
        elif direction == "DOWN":
            was_pending = calls.pending_down
            calls.pending_down = False
        else:
            raise ValueError(f"Invalid direction '{direction}'. Must be 'UP' or 'DOWN'")
        return was_pending

    def is_pending(self, floor: int, direction: str) -> bool:
        calls = self._get(floor)
        if direction == "UP":
            return calls.pending_up
        if direction == "DOWN":
            return calls.pending_down
        return False

    def __len__(self) -> int:
        return self.num_floors
