"""
Elevator Simulator - SimPy host for the dispatcher

This package provides the host-side elevator and floor objects that
implement the capabilities the dispatcher depends on.
"""

__version__ = "0.1.0"

from .core.elevator import Elevator
from .core.floor import Floor
from .core.entity import Entity, EventSource
from .core.traffic import TrafficGenerator

from .infrastructure.message_broker import MessageBroker

from .interfaces.host import IElevator, IFloor

__all__ = [
    'Elevator',
    'Floor',
    'Entity',
    'EventSource',
    'TrafficGenerator',
    'MessageBroker',
    'IElevator',
    'IFloor',
]
