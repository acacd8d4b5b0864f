"""
In-memory test doubles for the host capabilities

Implement only what the dispatcher needs. No SimPy, no motion: tests set
the floor, queue and indicators directly and trigger events by hand.
"""

from simulator.interfaces.host import IElevator, IFloor


class FakeElevator(IElevator):
    """
    Elevator frozen at a floor

    Args:
        floor: Current floor
        queue: Initial destination queue
        direction: 'UP' or 'DOWN' lights that indicator, None leaves both off
    """

    def __init__(self, floor: int = 0, queue=None, direction: str = None, name: str = "FakeElevator"):
        self.name = name
        self.floor = floor
        self.destination_queue = list(queue or [])
        self.indicators = {"UP": direction == "UP", "DOWN": direction == "DOWN"}
        self.check_count = 0
        self.handlers = {}

    def current_floor(self) -> int:
        return self.floor

    def check_destination_queue(self):
        self.check_count += 1

    def get_indicator(self, direction: str) -> bool:
        return self.indicators[direction]

    def set_indicator(self, direction: str, lit: bool):
        self.indicators[direction] = lit

    def on(self, event: str, handler):
        self.handlers.setdefault(event, []).append(handler)

    def trigger(self, event: str, *args):
        for handler in self.handlers.get(event, []):
            handler(*args)


class FakeFloor(IFloor):
    def __init__(self, floor_num: int):
        self._floor_num = floor_num
        self.handlers = {}

    def floor_num(self) -> int:
        return self._floor_num

    def on(self, event: str, handler):
        self.handlers.setdefault(event, []).append(handler)

    def trigger(self, event: str, *args):
        for handler in self.handlers.get(event, []):
            handler(*args)
