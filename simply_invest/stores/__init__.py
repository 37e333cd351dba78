"""
저장소 백엔드 모듈.

[ 백엔드 등록 방식 ]
    @register("이름") 데코레이터를 붙이면 STORE_REGISTRY에 자동 등록.
    app.py / run_simulator.py에서 이름만으로 저장소 클래스를 찾아 생성할 수 있다.

[ 새 백엔드 추가 방법 ]
    1. 이 디렉토리에 새 .py 파일 생성
    2. KeyValueStore를 상속받는 클래스 작성
    3. @register("이름") 데코레이터 추가
    4. config.yaml에서 store.backend를 해당 이름으로 설정
"""

from importlib import import_module
from pathlib import Path
from typing import Any

from simply_invest.core.storage import KeyValueStore

# 백엔드 이름 → 저장소 클래스 매핑
STORE_REGISTRY: dict[str, type[KeyValueStore]] = {}


def register(name: str):
    """저장소 클래스를 STORE_REGISTRY에 등록하는 데코레이터."""
    def decorator(cls: type[KeyValueStore]):
        STORE_REGISTRY[name] = cls
        return cls
    return decorator


def create_store(name: str, params: dict[str, Any] | None = None) -> KeyValueStore:
    """이름으로 저장소 인스턴스를 생성.

    Args:
        name: 등록된 백엔드 이름 (예: "memory", "json", "clickhouse")
        params: 백엔드 생성자에 그대로 전달할 키워드 인자

    Raises:
        ValueError: 등록되지 않은 백엔드 이름
    """
    if name not in STORE_REGISTRY:
        available = ", ".join(sorted(STORE_REGISTRY.keys()))
        raise ValueError(f"알 수 없는 저장소: '{name}'. 사용 가능: {available}")
    return STORE_REGISTRY[name](**(params or {}))


def list_stores() -> list[str]:
    """등록된 백엔드 이름 목록 반환."""
    return sorted(STORE_REGISTRY.keys())


def _auto_discover():
    """이 디렉토리의 모든 백엔드 모듈을 자동 임포트하여 @register가 실행되게 한다."""
    stores_dir = Path(__file__).parent
    for py_file in stores_dir.glob("*.py"):
        if py_file.name.startswith("_"):
            continue
        module_name = f"simply_invest.stores.{py_file.stem}"
        import_module(module_name)


# 모듈 로드 시 자동 탐색
_auto_discover()
