"""
Simulation Configuration

This configuration is used only by the SimPy host.
Contains building size, car timing and the call traffic to generate.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional


@dataclass
class BuildingConfig:
    """Building specifications"""
    num_floors: int = 10  # floors are numbered 0..num_floors-1

    def __post_init__(self):
        if self.num_floors < 2:
            raise ValueError("num_floors must be at least 2")


@dataclass
class ElevatorConfig:
    """Elevator specifications"""
    num_elevators: int = 2
    start_floor: int = 0
    travel_time_per_floor: float = 1.0  # time units
    stop_time: float = 5.0  # time units per stop

    def __post_init__(self):
        if self.num_elevators < 1:
            raise ValueError("num_elevators must be at least 1")
        if self.start_floor < 0:
            raise ValueError("start_floor cannot be negative")
        if self.travel_time_per_floor <= 0:
            raise ValueError("travel_time_per_floor must be positive")
        if self.stop_time <= 0:
            raise ValueError("stop_time must be positive")


@dataclass
class TrafficConfig:
    """Call traffic configuration"""
    simulation_duration: float = 300.0  # time units
    hall_call_rate: float = 0.0  # random hall calls per time unit
    rider_cab_calls: bool = True  # boarding a served hall call presses a destination
    calls: List[Dict[str, Any]] = field(default_factory=list)  # scripted calls

    def __post_init__(self):
        if self.simulation_duration <= 0:
            raise ValueError("simulation_duration must be positive")
        if self.hall_call_rate < 0:
            raise ValueError("hall_call_rate cannot be negative")

        for call in self.calls:
            if call.get('type') not in ["hall", "cab"]:
                raise ValueError(f"Scripted call type must be 'hall' or 'cab': {call}")
            if 'time' not in call or 'floor' not in call:
                raise ValueError(f"Scripted call needs 'time' and 'floor': {call}")
            if call['type'] == 'cab' and 'elevator' not in call:
                raise ValueError(f"Scripted cab call needs 'elevator': {call}")
            if call['type'] == 'hall' and call.get('direction', 'UP') not in ["UP", "DOWN"]:
                raise ValueError(f"Scripted hall call direction must be 'UP' or 'DOWN': {call}")


@dataclass
class SimulationConfig:
    """
    Complete simulation configuration

    Combines building, elevator and traffic settings.
    """
    building: BuildingConfig
    elevator: ElevatorConfig
    traffic: TrafficConfig

    # Simulation control
    random_seed: Optional[int] = None
    verbose: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> 'SimulationConfig':
        """Create SimulationConfig from dictionary"""
        sim_data = data.get('simulation', data)

        building_data = sim_data.get('building', {})
        building = BuildingConfig(
            num_floors=building_data.get('num_floors', 10)
        )

        elevator_data = sim_data.get('elevator', {})
        elevator = ElevatorConfig(
            num_elevators=elevator_data.get('num_elevators', 2),
            start_floor=elevator_data.get('start_floor', 0),
            travel_time_per_floor=elevator_data.get('travel_time_per_floor', 1.0),
            stop_time=elevator_data.get('stop_time', 5.0)
        )

        traffic_data = sim_data.get('traffic', {})
        traffic = TrafficConfig(
            simulation_duration=traffic_data.get('simulation_duration', 300.0),
            hall_call_rate=traffic_data.get('hall_call_rate', 0.0),
            rider_cab_calls=traffic_data.get('rider_cab_calls', True),
            calls=traffic_data.get('calls') or []
        )

        return cls(
            building=building,
            elevator=elevator,
            traffic=traffic,
            random_seed=sim_data.get('random_seed'),
            verbose=sim_data.get('verbose', False)
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        result = {
            'simulation': {
                'building': {
                    'num_floors': self.building.num_floors
                },
                'elevator': {
                    'num_elevators': self.elevator.num_elevators,
                    'start_floor': self.elevator.start_floor,
                    'travel_time_per_floor': self.elevator.travel_time_per_floor,
                    'stop_time': self.elevator.stop_time
                },
                'traffic': {
                    'simulation_duration': self.traffic.simulation_duration,
                    'hall_call_rate': self.traffic.hall_call_rate,
                    'rider_cab_calls': self.traffic.rider_cab_calls,
                    'calls': self.traffic.calls
                },
                'verbose': self.verbose
            }
        }

        if self.random_seed is not None:
            result['simulation']['random_seed'] = self.random_seed

        return result

    def validate(self):
        """Validate configuration consistency"""
        num_floors = self.building.num_floors
        if self.elevator.start_floor >= num_floors:
            raise ValueError(f"elevator.start_floor ({self.elevator.start_floor}) must be below building.num_floors ({num_floors})")

        for call in self.traffic.calls:
            if not (0 <= call['floor'] < num_floors):
                raise ValueError(f"Scripted call floor {call['floor']} outside building (0..{num_floors - 1})")
            if call['type'] == 'cab' and not (0 <= call['elevator'] < self.elevator.num_elevators):
                raise ValueError(f"Scripted cab call elevator {call['elevator']} does not exist")
