"""
Dispatcher Configuration

Control logic settings only, no physical specifications.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class AllocationStrategyConfig:
    """Configuration for hall call allocation strategy"""
    name: str = "ShortestETA"

    def __post_init__(self):
        if not self.name:
            raise ValueError("allocation_strategy.name cannot be empty")


@dataclass
class DispatcherConfig:
    """
    Dispatcher configuration

    dwell_steps is the per-stop cost used by the step estimator. It must
    match the host's per-stop cost so that estimates stay comparable
    across the fleet.
    """
    dwell_steps: int = 5
    allocation_strategy: Optional[AllocationStrategyConfig] = None
    verbose: bool = False

    def __post_init__(self):
        if self.allocation_strategy is None:
            self.allocation_strategy = AllocationStrategyConfig()
        if self.dwell_steps < 0:
            raise ValueError("dwell_steps cannot be negative")

    @classmethod
    def from_dict(cls, data: dict) -> 'DispatcherConfig':
        """Create DispatcherConfig from dictionary"""
        disp_data = data.get('dispatcher', data)

        alloc_data = disp_data.get('allocation_strategy', {})
        allocation_strategy = AllocationStrategyConfig(name=alloc_data.get('name', 'ShortestETA'))

        return cls(
            dwell_steps=disp_data.get('dwell_steps', 5),
            allocation_strategy=allocation_strategy,
            verbose=disp_data.get('verbose', False)
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        return {
            'dispatcher': {
                'dwell_steps': self.dwell_steps,
                'allocation_strategy': {
                    'name': self.allocation_strategy.name
                },
                'verbose': self.verbose
            }
        }

    def validate(self):
        """Validate configuration consistency"""
        if not self.allocation_strategy.name:
            raise ValueError("allocation_strategy.name is required")
        if not isinstance(self.dwell_steps, int):
            raise ValueError("dwell_steps must be an integer")
