import simpy
from abc import ABC, abstractmethod
import itertools  # Helper for entity ID counter
from typing import Callable, Dict, List, Sequence


class EventSource:
    """
    Holds event handlers registered with on() and delivers events to them.

    Handlers run synchronously, in registration order, to completion
    before emit() returns. Only event names listed in `events` may be used.
    """

    def __init__(self, events: Sequence[str]):
        self._handlers: Dict[str, List[Callable]] = {event: [] for event in events}

    def on(self, event: str, handler: Callable):
        """Register a handler for an event"""
        if event not in self._handlers:
            raise ValueError(f"Unknown event '{event}'. Available: {', '.join(self._handlers)}")
        self._handlers[event].append(handler)

    def emit(self, event: str, *args):
        """Deliver an event to every registered handler"""
        for handler in list(self._handlers[event]):
            handler(*args)


class Entity(EventSource, ABC):
    """
    Abstract base class for host objects that run as SimPy processes.

    Every entity gets a unique ID, a name, a state string and a SimPy
    process executing run().
    """
    # Entity ID counter shared across all class instances
    _entity_id_counter = itertools.count()

    def __init__(self, env: simpy.Environment, name: str = None, events: Sequence[str] = ()):
        """
        Initialize the entity.

        Args:
            env: The SimPy simulation environment this entity belongs to.
            name: Entity name. If not specified, auto-generated from class name and ID.
            events: Event names handlers can be registered for.
        """
        EventSource.__init__(self, events)
        self.env = env
        self.entity_id: int = next(self._entity_id_counter)
        self.name: str = name if name is not None else f"{self.__class__.__name__}_{self.entity_id}"
        self.verbose: bool = getattr(self, 'verbose', False)

        # Specific state values are defined by concrete classes
        self.state: str = "initial_state"

        self._process = self.env.process(self.run())

    @abstractmethod
    def run(self):
        """
        Generator method that serves as the SimPy process body of the entity.

        Use yield to wait for events and advance simulation time.
        """
        pass

    def set_state(self, new_state: str):
        """
        Transition the entity's state.

        Args:
            new_state: Target state.
        """
        if self.state != new_state:
            old_state = self.state
            self.state = new_state
            self._log_state_change(old_state, new_state)

    def get_state(self) -> str:
        return self.state

    def _log_state_change(self, old_state: str, new_state: str):
        if self.verbose:
            print(f'{self.env.now:.2f}: Entity "{self.name}" ({self.__class__.__name__}, ID:{self.entity_id}) state transition: {old_state} -> {new_state}')

    @property
    def process(self) -> simpy.Process:
        """
        SimPy process object of this entity.
        """
        return self._process
