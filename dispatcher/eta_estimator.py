"""
ETA Estimator

Calculates how many simulated steps an elevator needs to reach a floor
in a given direction, and where that floor belongs in the elevator's
destination queue.

This module is responsible for CALCULATION ONLY. It reads an elevator
snapshot and never mutates it.

Cost model (comparative, not wall-clock):
- 1 step per floor travelled
- dwell_steps per committed stop (must match the host's per-stop cost
  so that estimates of different elevators stay comparable)
"""

from dataclasses import dataclass

from simulator.interfaces.host import IElevator


NO_INSERTION = -1
DEFAULT_DWELL_STEPS = 5


@dataclass(frozen=True)
class StepEstimate:
    """
    Result of ETAEstimator.estimate()

    Attributes:
        steps: Steps until the elevator reaches the floor (-1 = invalid request)
        insertion_index: Index to insert the floor at in destination_queue,
            or -1 when the floor is already reached as committed
    """
    steps: int
    insertion_index: int

    @classmethod
    def invalid(cls) -> 'StepEstimate':
        return cls(steps=-1, insertion_index=NO_INSERTION)

    @property
    def is_valid(self) -> bool:
        return self.steps >= 0

    @property
    def needs_insertion(self) -> bool:
        return self.insertion_index >= 0


def _direction_sign(direction: str) -> int:
    if direction == "UP":
        return 1
    if direction == "DOWN":
        return -1
    return 0


class ETAEstimator:
    """
    Step estimator for a single elevator

    The elevator's future motion is simulated on a private copy of its
    destination queue:

        position --walk--> queue[0] --dwell--> queue[1] ... --> target

    Walking toward a stop, the target is matched when the simulated car
    passes it in the requested direction (insert before the next stop).
    At a stop, the target is matched when the stop IS the target and the
    car arrives or departs in the requested direction (nothing to insert).
    A stop where the direction of travel reverses is a turning point.
    """

    def __init__(self, dwell_steps: int = DEFAULT_DWELL_STEPS):
        if dwell_steps < 0:
            raise ValueError("dwell_steps cannot be negative")
        self.dwell_steps = dwell_steps

    def estimate(self, elevator: IElevator, target_floor: int, direction: str) -> StepEstimate:
        """
        Estimate the steps for an elevator to serve target_floor in direction

        Args:
            elevator: Elevator snapshot
            target_floor: Requested floor
            direction: Requested direction ('UP' or 'DOWN')

        Returns:
            StepEstimate. StepEstimate(-1, -1) for an invalid direction.
        """
        wanted = _direction_sign(direction)
        if wanted == 0:
            return StepEstimate.invalid()

        position = elevator.current_floor()
        queue = list(elevator.destination_queue)

        heading = self._current_heading(elevator)
        if heading == 0:
            if position == target_floor:
                if queue and queue[0] == target_floor:
                    return StepEstimate(0, NO_INSERTION)
                return StepEstimate(0, 0)
            heading = 1 if target_floor > position else -1

        steps = 0
        consumed = 0

        while queue:
            stop = queue[0]

            # Travel toward the next committed stop
            while position != stop:
                if position == target_floor and heading == wanted:
                    return StepEstimate(steps, consumed)
                heading = 1 if stop > position else -1
                position += heading
                steps += 1

            # departing == 0 on the last committed stop: the car may leave either way
            departing = self._departure_heading(queue, heading)
            if position == target_floor and (heading == wanted or departing in (wanted, 0)):
                return StepEstimate(steps, NO_INSERTION)

            steps += self.dwell_steps

            if departing == -heading:
                # Turning point: extend the current run past it if the target lies beyond
                beyond = (target_floor - position) * heading > 0
                if beyond and wanted == heading:
                    steps += abs(target_floor - position)
                    return StepEstimate(steps, consumed + 1)
                heading = departing

            queue.pop(0)
            consumed += 1

        steps += abs(target_floor - position)
        return StepEstimate(steps, consumed)

    def _current_heading(self, elevator: IElevator) -> int:
        """Direction from the indicators; 0 unless exactly one is lit"""
        up = elevator.get_indicator("UP")
        down = elevator.get_indicator("DOWN")
        if up and not down:
            return 1
        if down and not up:
            return -1
        return 0

    def _departure_heading(self, queue, heading: int) -> int:
        """
        Direction the car leaves queue[0] in

        Returns 0 when queue[0] is the last committed stop. A duplicate
        next entry is a zero-length hop and keeps the current heading.
        """
        if len(queue) < 2:
            return 0
        if queue[1] > queue[0]:
            return 1
        if queue[1] < queue[0]:
            return -1
        return heading
