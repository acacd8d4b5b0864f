"""
Elevator Fleet Dispatcher

This package decides which elevator serves each call, where the new stop
goes in that elevator's destination queue, and which direction indicator
each elevator shows.
"""

__version__ = "0.1.0"

from .eta_estimator import ETAEstimator, StepEstimate, NO_INSERTION
from .hall_call_registry import HallCallRegistry
from .indicator_controller import IndicatorController
from .system import Dispatcher
from .solution import DispatcherSolution

__all__ = [
    'ETAEstimator',
    'StepEstimate',
    'NO_INSERTION',
    'HallCallRegistry',
    'IndicatorController',
    'Dispatcher',
    'DispatcherSolution',
]
