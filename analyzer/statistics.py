import re
from typing import Dict, List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np


class Statistics:
    """
    Receives every broker message and records what the dispatcher achieved,
    as an independent "recorder".

    Recorded:
    - car trajectories (time, floor) per elevator
    - stops per elevator with the indicators lit at that stop
    - hall call response times (button ON -> button OFF)
    """
    def __init__(self, env, broadcast_pipe):
        self.env = env
        self.broadcast_pipe = broadcast_pipe
        self.elevator_trajectories: Dict[str, List[Tuple[float, int]]] = {}
        self.stops_history: Dict[str, List[dict]] = {}
        self.hall_call_history: List[dict] = []
        self.response_times: List[float] = []
        self._open_hall_calls: Dict[Tuple[int, str], float] = {}

    def start_listening(self):
        """
        Main process intercepting global broadcasts.
        """
        while True:
            data = yield self.broadcast_pipe.get()
            self.record(data.get('topic', ''), data.get('message', {}))

    def record(self, topic: str, message: dict):
        """Record one broadcast message"""
        status_match = re.search(r'elevator/(.*?)/status', topic)
        if status_match:
            trajectory = self.elevator_trajectories.setdefault(status_match.group(1), [])
            point = (message.get('timestamp'), message.get('floor'))
            if not trajectory or trajectory[-1] != point:
                trajectory.append(point)
            return

        stop_match = re.search(r'elevator/(.*?)/stopped', topic)
        if stop_match:
            self.stops_history.setdefault(stop_match.group(1), []).append(dict(message))
            return

        new_call_match = re.search(r'hall_button/floor_(\d+)/new_hall_call', topic)
        if new_call_match:
            key = (int(new_call_match.group(1)), message.get('direction'))
            self._open_hall_calls[key] = message.get('timestamp')
            self.hall_call_history.append({**message, 'action': 'ON'})
            return

        call_off_match = re.search(r'hall_button/floor_(\d+)/call_off', topic)
        if call_off_match:
            key = (int(call_off_match.group(1)), message.get('direction'))
            pressed_at = self._open_hall_calls.pop(key, None)
            if pressed_at is not None:
                self.response_times.append(message.get('timestamp') - pressed_at)
            self.hall_call_history.append({**message, 'action': 'OFF'})

    @property
    def open_hall_calls(self) -> List[Tuple[int, str]]:
        """Hall calls still waiting for a car"""
        return sorted(self._open_hall_calls)

    def response_time_summary(self) -> Optional[Dict[str, float]]:
        """
        Summary of hall call response times

        Returns:
            {'count', 'mean', 'p90', 'max'} or None if no call was served
        """
        if not self.response_times:
            return None
        times = np.asarray(self.response_times, dtype=float)
        return {
            'count': int(times.size),
            'mean': float(np.mean(times)),
            'p90': float(np.percentile(times, 90)),
            'max': float(np.max(times)),
        }

    def print_summary(self):
        print("\n" + "=" * 60)
        print("   DISPATCH SUMMARY")
        print("=" * 60)
        for name, stops in sorted(self.stops_history.items()):
            print(f"{name}: {len(stops):>4} stops")

        summary = self.response_time_summary()
        if summary:
            print(f"\nHall Call Response Time:")
            print(f"  Count:   {summary['count']:>6} calls")
            print(f"  Average: {summary['mean']:>6.2f}")
            print(f"  P90:     {summary['p90']:>6.2f}")
            print(f"  Max:     {summary['max']:>6.2f}")
        if self._open_hall_calls:
            print(f"\nUnserved hall calls: {self.open_hall_calls}")
        print("=" * 60)

    def plot_trajectory_diagram(self, output_path: Optional[str] = None):
        """
        Draw the trajectory diagram after the simulation ends

        Args:
            output_path: Save the figure there instead of showing it
        """
        fig = plt.figure(figsize=(14, 8))

        for name, trajectory in self.elevator_trajectories.items():
            if not trajectory:
                continue
            times, floors = zip(*sorted(trajectory, key=lambda x: x[0]))
            plt.step(times, floors, where='post', label=name)

        for call in self.hall_call_history:
            if call['action'] == 'ON':
                arrow = '↑' if call['direction'] == 'UP' else '↓'
                color = 'green' if call['direction'] == 'UP' else 'red'
                plt.annotate(arrow, (call['timestamp'], call['floor']),
                             fontsize=12, color=color, fontweight='bold',
                             ha='center', va='center')
            else:
                plt.annotate('✕', (call['timestamp'], call['floor']),
                             fontsize=10, color='gray', ha='center', va='center')

        plt.title("Elevator Trajectory Diagram")
        plt.xlabel("Time")
        plt.ylabel("Floor")
        plt.grid(True, which='both', linestyle='--', alpha=0.7)

        all_floors = [floor for trajectory in self.elevator_trajectories.values() for _, floor in trajectory]
        if all_floors:
            plt.yticks(range(int(min(all_floors)), int(max(all_floors)) + 1))
        plt.legend()

        if output_path:
            fig.savefig(output_path)
            plt.close(fig)
        else:
            plt.show()
