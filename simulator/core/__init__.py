"""Core host entities"""

from .entity import Entity, EventSource
from .elevator import Elevator
from .floor import Floor
from .traffic import TrafficGenerator

__all__ = [
    'Entity',
    'EventSource',
    'Elevator',
    'Floor',
    'TrafficGenerator',
]
