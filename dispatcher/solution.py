"""
Dispatcher Solution

Registration entry point the host calls once at startup: init() receives
the whole, fixed fleet and floor list and installs every event handler;
update() is called periodically and has nothing to do.
"""

from typing import List, Optional

from config.dispatcher import DispatcherConfig
from simulator.interfaces.host import IElevator, IFloor
from .algorithms import create_allocation_strategy
from .eta_estimator import ETAEstimator
from .hall_call_registry import HallCallRegistry
from .indicator_controller import IndicatorController
from .system import Dispatcher


class DispatcherSolution:
    """
    Wires the Dispatcher and IndicatorController to host events

    Usage:
        solution = DispatcherSolution(config)
        solution.init(elevators, floors)
        # host delivers events; solution.update(dt, elevators, floors) per tick
    """

    def __init__(self, config: Optional[DispatcherConfig] = None):
        self.config = config if config is not None else DispatcherConfig()
        self.registry: Optional[HallCallRegistry] = None
        self.indicators: Optional[IndicatorController] = None
        self.dispatcher: Optional[Dispatcher] = None

    def init(self, elevators: List[IElevator], floors: List[IFloor]):
        """
        Build the dispatcher for this run and register all handlers

        Args:
            elevators: Every elevator of the run, in fleet order
            floors: Every floor of the run
        """
        verbose = self.config.verbose
        self.registry = HallCallRegistry(len(floors))
        self.indicators = IndicatorController(self.registry, verbose=verbose)
        strategy = create_allocation_strategy(self.config.allocation_strategy.name, verbose=verbose)
        self.dispatcher = Dispatcher(
            elevators,
            ETAEstimator(dwell_steps=self.config.dwell_steps),
            self.registry,
            self.indicators,
            strategy,
            verbose=verbose
        )

        for elevator in elevators:
            self._register_elevator(elevator)
        for floor in floors:
            self._register_floor(floor)

    def update(self, dt: float, elevators: List[IElevator], floors: List[IFloor]):
        """Periodic tick; every decision is event driven"""
        pass

    def _register_elevator(self, elevator: IElevator):
        dispatcher = self.dispatcher
        indicators = self.indicators
        elevator.on("floor_button_pressed", lambda floor_num: dispatcher.on_cab_call(elevator, floor_num))
        elevator.on("stopped_at_floor", lambda floor_num: indicators.on_stopped_at_floor(elevator, floor_num))
        elevator.on("idle", lambda: indicators.on_idle(elevator))

    def _register_floor(self, floor: IFloor):
        dispatcher = self.dispatcher
        floor_num = floor.floor_num()
        floor.on("up_button_pressed", lambda: dispatcher.on_hall_call(floor_num, "UP"))
        floor.on("down_button_pressed", lambda: dispatcher.on_hall_call(floor_num, "DOWN"))
