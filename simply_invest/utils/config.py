"""
설정 관리 모듈.

[ 역할 ]
    config.yaml (또는 .json) 파일을 파싱하여 Config 객체로 변환.
    저장소 백엔드, 시뮬레이션 파라미터, 로깅 설정 등을 통합 관리.

[ 설정 파일 구조 (config.yaml) ]
    store:            → StoreConfig (백엔드 이름 + 생성자 파라미터)
    simulation:       → SimulationConfig (지급 코인, 나이 제한, 가격 변동폭)
    log_level:        → "INFO" / "DEBUG"
    log_dir:          → 로그 디렉토리 경로

[ 호출하는 곳 ]
    - run_simulator.py에서 Config.from_yaml()로 로드
    - app.py::SimplyInvest.from_config()에서 저장소/오라클/계정 생성 시 사용
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml


@dataclass
class StoreConfig:
    """저장소 설정. config.yaml의 store 섹션에 대응.

    params는 백엔드 생성자에 키워드 인자로 그대로 전달된다.
        json       → path
        clickhouse → host, port, database, user, password, table
    """
    backend: str = "json"
    params: dict[str, Any] = field(default_factory=lambda: {"path": "data/simply_invest.json"})


@dataclass
class SimulationConfig:
    """시뮬레이션 설정. config.yaml의 simulation 섹션에 대응."""
    initial_coins: float = 100_000
    min_age: int = 13
    max_variation: float = 0.05   # 가격 변동폭 ±5%
    price_floor: float = 1.0      # 최저 가격
    seed: Optional[int] = None    # None이면 매 실행마다 다른 난수


@dataclass
class Config:
    """전체 설정. from_yaml() 또는 from_json()으로 파일에서 로드."""
    store: StoreConfig = field(default_factory=StoreConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    log_level: str = "INFO"
    log_dir: str = "logs"

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """YAML 파일에서 설정 로드."""
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls._from_dict(data or {})

    @classmethod
    def from_json(cls, path: str | Path) -> "Config":
        """JSON 파일에서 설정 로드."""
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """딕셔너리에서 Config 생성."""
        store_data = data.get("store") or {}
        simulation_data = data.get("simulation") or {}

        # store 섹션 파싱: backend는 직접 필드, params가 없으면 나머지를 모두 params로
        backend = store_data.get("backend", "json")
        if "params" in store_data:
            params = dict(store_data["params"] or {})
        else:
            params = {k: v for k, v in store_data.items() if k != "backend"}
        store = StoreConfig(backend=backend, params=params) if store_data else StoreConfig()

        simulation = SimulationConfig(**{
            k: v for k, v in simulation_data.items()
            if k in SimulationConfig.__dataclass_fields__
        })

        return cls(
            store=store,
            simulation=simulation,
            log_level=data.get("log_level", "INFO"),
            log_dir=data.get("log_dir", "logs"),
        )

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환."""
        from dataclasses import asdict
        return asdict(self)

    def save_yaml(self, path: str | Path) -> None:
        """YAML 파일로 저장."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(self.to_dict(), f, allow_unicode=True, default_flow_style=False)
