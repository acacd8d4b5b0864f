"""Interface definitions for host components"""

from .host import IElevator, IFloor, ELEVATOR_EVENTS, FLOOR_EVENTS

__all__ = [
    'IElevator',
    'IFloor',
    'ELEVATOR_EVENTS',
    'FLOOR_EVENTS',
]
