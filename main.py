import random
import sys
from dataclasses import dataclass
from typing import List, Optional

import simpy

# Configuration
from config import DispatcherConfig, SimulationConfig, load_dispatcher_config, load_simulation_config

# Host components
from simulator.infrastructure.message_broker import MessageBroker
from simulator.core.elevator import Elevator
from simulator.core.floor import Floor
from simulator.core.traffic import TrafficGenerator

# Dispatcher
from dispatcher.solution import DispatcherSolution

# Analyzer
from analyzer.statistics import Statistics


UPDATE_INTERVAL = 1.0


@dataclass
class SimulationRun:
    """Everything built for one run"""
    env: simpy.Environment
    broker: MessageBroker
    statistics: Statistics
    elevators: List[Elevator]
    floors: List[Floor]
    solution: DispatcherSolution
    traffic: TrafficGenerator
    duration: float

    def run(self):
        self.env.run(until=self.duration)


def update_loop(env, solution: DispatcherSolution, elevators, floors):
    """Periodic update tick of the registration contract"""
    while True:
        yield env.timeout(UPDATE_INTERVAL)
        solution.update(UPDATE_INTERVAL, elevators, floors)


def build_simulation(sim_config: SimulationConfig, dispatcher_config: DispatcherConfig) -> SimulationRun:
    """
    Set up the host, the dispatcher and the traffic for one run

    Args:
        sim_config: Building, car timing and traffic
        dispatcher_config: Dispatcher settings

    Returns:
        SimulationRun ready to run()
    """
    num_floors = sim_config.building.num_floors
    verbose = sim_config.verbose

    host_stop_steps = sim_config.elevator.stop_time / sim_config.elevator.travel_time_per_floor
    if host_stop_steps != dispatcher_config.dwell_steps:
        print(f"WARNING: dispatcher dwell_steps ({dispatcher_config.dwell_steps}) does not match "
              f"host stop cost ({host_stop_steps:g} floors of travel). Estimates will be skewed.")

    env = simpy.Environment()
    broker = MessageBroker(env, verbose=verbose)

    statistics = Statistics(env, broker.get_broadcast_pipe())
    env.process(statistics.start_listening())

    floors = [Floor(env, floor_num, broker, verbose=verbose) for floor_num in range(num_floors)]
    elevators = [
        Elevator(
            env, f"Elevator_{i}", num_floors, broker,
            start_floor=sim_config.elevator.start_floor,
            travel_time_per_floor=sim_config.elevator.travel_time_per_floor,
            stop_time=sim_config.elevator.stop_time,
            verbose=verbose
        )
        for i in range(1, sim_config.elevator.num_elevators + 1)
    ]

    # Dispatcher handlers first: boarding in TrafficGenerator reads the indicators they set
    solution = DispatcherSolution(dispatcher_config)
    solution.init(elevators, floors)
    env.process(update_loop(env, solution, elevators, floors))

    rng = random.Random(sim_config.random_seed)
    traffic = TrafficGenerator(
        env, elevators, floors,
        calls=sim_config.traffic.calls,
        hall_call_rate=sim_config.traffic.hall_call_rate,
        rider_cab_calls=sim_config.traffic.rider_cab_calls,
        rng=rng,
        verbose=verbose
    )
    traffic.start()

    return SimulationRun(
        env=env,
        broker=broker,
        statistics=statistics,
        elevators=elevators,
        floors=floors,
        solution=solution,
        traffic=traffic,
        duration=sim_config.traffic.simulation_duration
    )


def run_simulation(sim_config_path="scenarios/simulation.yaml",
                   dispatcher_config_path="scenarios/dispatcher.yaml",
                   plot_path: Optional[str] = None) -> SimulationRun:
    """
    Load the configuration files, run the simulation and print a summary

    Args:
        sim_config_path: Path to simulation configuration YAML file
        dispatcher_config_path: Path to dispatcher configuration YAML file
        plot_path: Save the trajectory diagram there (no plot if None)
    """
    print("--- Loading Configuration ---")
    sim_config = load_simulation_config(sim_config_path)
    dispatcher_config = load_dispatcher_config(dispatcher_config_path)
    print(f"Simulation Config: {sim_config_path}")
    print(f"Dispatcher Config: {dispatcher_config_path}")

    print("\n--- Simulation Setup ---")
    simulation = build_simulation(sim_config, dispatcher_config)
    print(f"{len(simulation.elevators)} elevators, {len(simulation.floors)} floors, "
          f"duration {simulation.duration:g}")

    print("\n--- Simulation Start ---")
    simulation.run()
    print("--- Simulation End ---")

    simulation.statistics.print_summary()
    if plot_path:
        simulation.statistics.plot_trajectory_diagram(plot_path)
        print(f"Trajectory diagram saved to {plot_path}")
    return simulation


if __name__ == '__main__':
    # Accept command line arguments for config files
    sim_config_path = sys.argv[1] if len(sys.argv) > 1 else "scenarios/simulation.yaml"
    dispatcher_config_path = sys.argv[2] if len(sys.argv) > 2 else "scenarios/dispatcher.yaml"
    plot_path = sys.argv[3] if len(sys.argv) > 3 else None
    run_simulation(sim_config_path=sim_config_path, dispatcher_config_path=dispatcher_config_path,
                   plot_path=plot_path)
