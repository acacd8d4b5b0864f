import pytest

from config import (
    AllocationStrategyConfig,
    BuildingConfig,
    DispatcherConfig,
    ElevatorConfig,
    SimulationConfig,
    TrafficConfig,
    load_dispatcher_config,
    load_simulation_config,
    save_dispatcher_config,
    save_simulation_config,
)


def make_simulation_config(**traffic):
    return SimulationConfig(
        building=BuildingConfig(num_floors=8),
        elevator=ElevatorConfig(num_elevators=2),
        traffic=TrafficConfig(**traffic),
        random_seed=7,
    )


class TestDispatcherConfig:
    def test_defaults(self):
        config = DispatcherConfig()
        assert config.dwell_steps == 5
        assert config.allocation_strategy.name == "ShortestETA"
        assert config.verbose is False

    def test_from_dict_accepts_section_or_bare_mapping(self):
        nested = DispatcherConfig.from_dict({'dispatcher': {'dwell_steps': 3}})
        bare = DispatcherConfig.from_dict({'dwell_steps': 3})
        assert nested.dwell_steps == bare.dwell_steps == 3

    def test_to_dict_round_trip(self):
        config = DispatcherConfig(dwell_steps=2, verbose=True)
        assert DispatcherConfig.from_dict(config.to_dict()) == config

    def test_strategy_is_selected_by_name_only(self):
        config = DispatcherConfig.from_dict({'allocation_strategy': {'name': 'ShortestETA'}})
        assert config.to_dict()['dispatcher']['allocation_strategy'] == {'name': 'ShortestETA'}

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            DispatcherConfig(dwell_steps=-1)
        with pytest.raises(ValueError):
            AllocationStrategyConfig(name="")
        with pytest.raises(ValueError):
            DispatcherConfig(dwell_steps=2.5).validate()


class TestSimulationConfig:
    def test_from_dict_defaults(self):
        config = SimulationConfig.from_dict({})
        assert config.building.num_floors == 10
        assert config.elevator.num_elevators == 2
        assert config.elevator.stop_time == 5.0
        assert config.traffic.calls == []
        assert config.random_seed is None

    def test_to_dict_round_trip(self):
        config = make_simulation_config(calls=[
            {'time': 1.0, 'type': 'hall', 'floor': 3, 'direction': 'DOWN'},
            {'time': 2.0, 'type': 'cab', 'elevator': 1, 'floor': 6},
        ])
        assert SimulationConfig.from_dict(config.to_dict()) == config

    @pytest.mark.parametrize("kwargs", [
        {'num_floors': 1},
    ])
    def test_invalid_building(self, kwargs):
        with pytest.raises(ValueError):
            BuildingConfig(**kwargs)

    @pytest.mark.parametrize("kwargs", [
        {'num_elevators': 0},
        {'start_floor': -1},
        {'travel_time_per_floor': 0},
        {'stop_time': -5.0},
    ])
    def test_invalid_elevator(self, kwargs):
        with pytest.raises(ValueError):
            ElevatorConfig(**kwargs)

    @pytest.mark.parametrize("call", [
        {'time': 1.0, 'type': 'lobby', 'floor': 3},
        {'type': 'hall', 'floor': 3, 'direction': 'UP'},
        {'time': 1.0, 'type': 'cab', 'floor': 3},
        {'time': 1.0, 'type': 'hall', 'floor': 3, 'direction': 'STOPPED'},
    ])
    def test_invalid_scripted_call(self, call):
        with pytest.raises(ValueError):
            TrafficConfig(calls=[call])

    def test_validate_against_building(self):
        with pytest.raises(ValueError):
            make_simulation_config(calls=[{'time': 1.0, 'type': 'hall', 'floor': 8}]).validate()
        with pytest.raises(ValueError):
            make_simulation_config(calls=[{'time': 1.0, 'type': 'cab', 'elevator': 2, 'floor': 1}]).validate()

        config = make_simulation_config()
        config.elevator.start_floor = 8
        with pytest.raises(ValueError):
            config.validate()


class TestConfigLoader:
    def test_save_and_load_dispatcher(self, tmp_path):
        path = tmp_path / "configs" / "dispatcher.yaml"
        config = DispatcherConfig(dwell_steps=4)

        save_dispatcher_config(config, path)

        assert path.exists()
        assert load_dispatcher_config(path) == config

    def test_save_and_load_simulation(self, tmp_path):
        path = tmp_path / "simulation.yaml"
        config = make_simulation_config(hall_call_rate=0.1)

        save_simulation_config(config, path)

        assert load_simulation_config(path) == config

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_dispatcher_config(path) == DispatcherConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_simulation_config(tmp_path / "missing.yaml")

    def test_non_mapping_document(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_dispatcher_config(path)

    def test_validation_runs_on_load(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text(
            "simulation:\n"
            "  building: {num_floors: 4}\n"
            "  traffic:\n"
            "    calls:\n"
            "      - {time: 1.0, type: hall, floor: 9, direction: UP}\n",
            encoding="utf-8",
        )
        with pytest.raises(ValueError):
            load_simulation_config(path)

    def test_bundled_scenarios_load(self):
        from pathlib import Path
        scenarios = Path(__file__).parent.parent.parent / "scenarios"
        assert load_dispatcher_config(scenarios / "dispatcher.yaml").allocation_strategy.name == "ShortestETA"
        assert load_simulation_config(scenarios / "simulation.yaml").building.num_floors == 12
