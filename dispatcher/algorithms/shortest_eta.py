"""
Shortest ETA Strategy

Selects the elevator with the fewest estimated steps to the hall call.
"""

from typing import Dict, Any, List, Optional

from ..eta_estimator import StepEstimate
from ..interfaces.allocation_strategy import IAllocationStrategy


class ShortestETAStrategy(IAllocationStrategy):
    """
    Shortest ETA allocation strategy

    Selection Logic:
    - Invalid estimates (steps == -1) never win
    - Strictly minimal steps wins
    - Ties go to the lowest fleet index (first elevator encountered)

    Steps and insertion index are independent: an elevator that already
    reaches the floor as committed (insertion_index == -1) competes on
    steps like any other.

    Usage:
        strategy = ShortestETAStrategy()
        index = strategy.select_elevator(call_data, estimates)
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def select_elevator(
        self,
        call_data: Dict[str, Any],
        estimates: List[StepEstimate]
    ) -> Optional[int]:
        best_index = None
        best_steps = None

        for index, estimate in enumerate(estimates):
            if not estimate.is_valid:
                continue
            if best_steps is None or estimate.steps < best_steps:
                best_steps = estimate.steps
                best_index = index

            if self.verbose:
                print(f"[Dispatcher] Elevator #{index}: Steps={estimate.steps}, InsertAt={estimate.insertion_index}")

        if self.verbose and best_index is not None:
            print(f"[Dispatcher] Selected elevator #{best_index} with steps={best_steps}")

        return best_index

    def get_strategy_name(self) -> str:
        """Return strategy name"""
        return "Shortest ETA (Step-estimate based)"
