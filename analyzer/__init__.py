"""
Dispatch Analyzer

Statistical reporting of a simulation run:
- Statistics: trajectories, stops and hall call response times
"""

__version__ = "0.1.0"

from .statistics import Statistics

__all__ = ['Statistics']
