"""
Allocation Strategy Interface

Defines how an elevator is selected for a hall call.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional

from ..eta_estimator import StepEstimate


class IAllocationStrategy(ABC):
    """
    Interface for elevator allocation strategies

    Defines how to select the best elevator for a given hall call
    from the step estimates of the whole fleet.

    Design Philosophy:
    - Estimates are computed once per hall call by the Dispatcher,
      identically for every elevator, and handed over in fleet order
    - The strategy only chooses; it never mutates queues or indicators
    """

    @abstractmethod
    def select_elevator(
        self,
        call_data: Dict[str, Any],
        estimates: List[StepEstimate]
    ) -> Optional[int]:
        """
        Select the best elevator for a hall call

        Args:
            call_data: Hall call information
                {
                    'floor': int,        # Call floor
                    'direction': str,    # 'UP' or 'DOWN'
                }

            estimates: StepEstimate of every elevator, in fleet order

        Returns:
            Fleet index of the selected elevator, or None when no
            estimate is valid
        """
        pass

    @abstractmethod
    def get_strategy_name(self) -> str:
        """
        Get the name of this strategy

        Returns:
            str: Strategy name (for logging and debugging)
        """
        pass
