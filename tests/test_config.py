"""
test_config.py - 설정 로드/저장 테스트
"""

import json

from simply_invest.utils.config import Config, SimulationConfig, StoreConfig


def test_defaults():
    config = Config()
    assert config.store.backend == "json"
    assert config.store.params == {"path": "data/simply_invest.json"}
    assert config.simulation.initial_coins == 100000
    assert config.simulation.min_age == 13
    assert config.simulation.max_variation == 0.05
    assert config.simulation.seed is None
    assert config.log_level == "INFO"


def test_from_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "store:\n"
        "  backend: clickhouse\n"
        "  params:\n"
        "    host: db\n"
        "    table: kv\n"
        "simulation:\n"
        "  initial_coins: 5000\n"
        "  seed: 7\n"
        "  unknown_key: 1\n"
        "log_level: DEBUG\n",
        encoding="utf-8",
    )

    config = Config.from_yaml(path)

    assert config.store == StoreConfig(backend="clickhouse", params={"host": "db", "table": "kv"})
    assert config.simulation.initial_coins == 5000
    assert config.simulation.seed == 7
    assert config.simulation.min_age == 13
    assert config.log_level == "DEBUG"
    assert config.log_dir == "logs"


def test_store_params_shorthand(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"store": {"backend": "json", "path": "x.json"}}), encoding="utf-8")

    config = Config.from_json(path)

    assert config.store.params == {"path": "x.json"}
    assert config.simulation == SimulationConfig()


def test_empty_yaml_uses_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert Config.from_yaml(path) == Config()


def test_save_yaml_round_trip(tmp_path):
    config = Config(store=StoreConfig(backend="memory", params={}), log_dir="out")
    path = tmp_path / "sub" / "config.yaml"

    config.save_yaml(path)

    assert Config.from_yaml(path) == config
