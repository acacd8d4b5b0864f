"""Allocation strategy implementations"""

from ..interfaces.allocation_strategy import IAllocationStrategy
from .shortest_eta import ShortestETAStrategy


def create_allocation_strategy(name: str, verbose: bool = False) -> IAllocationStrategy:
    """Create an allocation strategy from its configured name"""
    if name == "ShortestETA":
        return ShortestETAStrategy(verbose=verbose)
    raise ValueError(f"Unknown allocation strategy: {name}")


__all__ = [
    'ShortestETAStrategy',
    'create_allocation_strategy',
]
