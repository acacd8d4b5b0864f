from typing import List, Optional

from simulator.interfaces.host import IElevator
from .eta_estimator import ETAEstimator, StepEstimate
from .hall_call_registry import HallCallRegistry
from .indicator_controller import IndicatorController
from .interfaces.allocation_strategy import IAllocationStrategy


class Dispatcher:
    """
    Dispatcher that assigns cab calls and hall calls to elevators

    This is a controller, not a simulated entity. Each handler runs to
    completion on one host event, performs at most one queue insertion
    (immediately followed by check_destination_queue()) and at most one
    indicator update.

    - Cab call: estimated against the elevator it was pressed in
    - Hall call: estimated against every elevator; the allocation
      strategy picks the winner
    """
    def __init__(self, elevators: List[IElevator], estimator: ETAEstimator,
                 registry: HallCallRegistry, indicators: IndicatorController,
                 strategy: IAllocationStrategy, verbose: bool = False):
        self.elevators = list(elevators)
        self.estimator = estimator
        self.registry = registry
        self.indicators = indicators
        self.strategy = strategy
        self.verbose = verbose

        if self.verbose:
            print(f"[Dispatcher] Using strategy: {self.strategy.get_strategy_name()}")

    @property
    def num_floors(self) -> int:
        return len(self.registry)

    def on_cab_call(self, elevator: IElevator, floor: int) -> StepEstimate:
        """
        Handle a destination button pressed inside an elevator

        Args:
            elevator: Elevator the button was pressed in
            floor: Requested floor

        Returns:
            The StepEstimate that was acted on
        """
        self._check_floor(floor)
        direction = "UP" if floor > elevator.current_floor() else "DOWN"
        estimate = self.estimator.estimate(elevator, floor, direction)

        if estimate.needs_insertion:
            self._commit(elevator, floor, direction, estimate)
        elif self.verbose:
            print(f"[Dispatcher] Cab call to floor {floor} already covered by {self._label(elevator)}")
        return estimate

    def on_hall_call(self, floor: int, direction: str) -> Optional[StepEstimate]:
        """
        Handle a hall button pressed on a floor

        Args:
            floor: Floor the button was pressed on
            direction: 'UP' or 'DOWN'

        Returns:
            The winning StepEstimate, or None if the call was ignored
        """
        self._check_floor(floor)
        if direction not in ["UP", "DOWN"]:
            if self.verbose:
                print(f"[Dispatcher] Ignored hall call at floor {floor}: invalid direction '{direction}'")
            return None

        self.registry.mark(floor, direction)

        estimates = [self.estimator.estimate(elevator, floor, direction) for elevator in self.elevators]
        call_data = {'floor': floor, 'direction': direction}
        selected = self.strategy.select_elevator(call_data, estimates)
        if selected is None:
            if self.verbose:
                print(f"[Dispatcher] WARNING: No elevator can serve floor {floor} {direction}. Hall call left pending.")
            return None

        elevator = self.elevators[selected]
        estimate = estimates[selected]
        if estimate.needs_insertion:
            self._commit(elevator, floor, direction, estimate)
        elif self.verbose:
            print(f"[Dispatcher] Hall call floor {floor} {direction} already covered by {self._label(elevator)}")
        return estimate

    def _commit(self, elevator: IElevator, floor: int, direction: str, estimate: StepEstimate):
        """Insert the floor, notify the host, then light the departure indicator if the car was idle"""
        was_idle = not elevator.get_indicator("UP") and not elevator.get_indicator("DOWN")

        elevator.destination_queue.insert(estimate.insertion_index, floor)
        elevator.check_destination_queue()

        if was_idle:
            self.indicators.light_for_departure(elevator, direction)

        if self.verbose:
            print(f"[Dispatcher] Assigned floor {floor} {direction} to {self._label(elevator)} "
                  f"at index {estimate.insertion_index} (steps={estimate.steps}), queue={list(elevator.destination_queue)}")

    def _check_floor(self, floor: int):
        if not (0 <= floor < self.num_floors):
            raise ValueError(f"Invalid floor {floor}. Must be between 0 and {self.num_floors - 1}.")

    def _label(self, elevator: IElevator) -> str:
        return getattr(elevator, 'name', elevator.__class__.__name__)
