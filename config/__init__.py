"""
Configuration management package

Provides configuration classes for both the dispatcher and the simulation host.
"""

from .dispatcher import (
    DispatcherConfig,
    AllocationStrategyConfig
)

from .simulation import (
    SimulationConfig,
    BuildingConfig,
    ElevatorConfig,
    TrafficConfig
)

from .config_loader import (
    ConfigLoader,
    load_dispatcher_config,
    load_simulation_config,
    save_dispatcher_config,
    save_simulation_config
)

__all__ = [
    # Dispatcher
    'DispatcherConfig',
    'AllocationStrategyConfig',

    # Simulation
    'SimulationConfig',
    'BuildingConfig',
    'ElevatorConfig',
    'TrafficConfig',

    # Loader
    'ConfigLoader',
    'load_dispatcher_config',
    'load_simulation_config',
    'save_dispatcher_config',
    'save_simulation_config',
]
