import simpy
from typing import Optional

from .entity import EventSource
from ..infrastructure.message_broker import MessageBroker
from ..interfaces.host import IFloor, FLOOR_EVENTS


class Floor(EventSource, IFloor):
    """
    Host floor with an UP and a DOWN hall button (with light state)
    """
    def __init__(self, env: simpy.Environment, floor_num: int,
                 broker: Optional[MessageBroker] = None, verbose: bool = False):
        """
        Args:
            env (simpy.Environment): SimPy environment
            floor_num (int): Floor number (0-based)
            broker (MessageBroker): Optional broker for hall button reports
        """
        super().__init__(FLOOR_EVENTS)
        self.env = env
        self._floor_num = floor_num
        self.broker = broker
        self.verbose = verbose
        self.buttons = {"UP": False, "DOWN": False}

    def floor_num(self) -> int:
        return self._floor_num

    def is_lit(self, direction: str) -> bool:
        """Check if the hall button is lit"""
        return self.buttons.get(direction, False)

    def press(self, direction: str) -> bool:
        """
        Press the hall button

        Returns:
            True if the call was newly registered, False if already lit
        """
        if direction not in self.buttons:
            raise ValueError(f"Invalid direction '{direction}'. Must be 'UP' or 'DOWN'")
        if self.buttons[direction]:
            return False

        self.buttons[direction] = True
        if self.verbose:
            print(f"{self.env.now:.2f} [HallButton] Button pressed at floor {self._floor_num} ({direction}). Light ON.")
        if self.broker is not None:
            self.broker.put(f"hall_button/floor_{self._floor_num}/new_hall_call", {
                "timestamp": self.env.now,
                "floor": self._floor_num,
                "direction": direction,
            })

        self.emit("up_button_pressed" if direction == "UP" else "down_button_pressed")
        return True

    def press_again(self, direction: str):
        """Riders left behind by a car press the still lit button again"""
        if not self.buttons.get(direction):
            return
        if self.verbose:
            print(f"{self.env.now:.2f} [HallButton] Button pressed again at floor {self._floor_num} ({direction}).")
        self.emit("up_button_pressed" if direction == "UP" else "down_button_pressed")

    def serve(self, direction: str, elevator_name: str = None):
        """Turn the hall button off when a car takes the waiting riders"""
        if not self.buttons.get(direction):
            return
        self.buttons[direction] = False
        if self.verbose:
            print(f"{self.env.now:.2f} [HallButton] Call served at floor {self._floor_num} ({direction}) by {elevator_name}. Light OFF.")
        if self.broker is not None:
            self.broker.put(f"hall_button/floor_{self._floor_num}/call_off", {
                "timestamp": self.env.now,
                "floor": self._floor_num,
                "direction": direction,
                "serviced_by": elevator_name,
            })
