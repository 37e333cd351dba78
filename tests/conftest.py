"""
conftest.py - 테스트 공용 fixture

- store        : 비어 있는 MemoryStore
- fixed_rng    : 항상 같은 변동률을 돌려주는 난수원 (기본 0%)
- app          : MemoryStore + fixed_rng로 조립한 SimplyInvest
- logged_in    : alice(20세)로 가입되어 세션이 활성화된 app
"""

import pytest

from simply_invest.app import SimplyInvest
from simply_invest.stores.memory_store import MemoryStore
from tests.fake_rng import FixedRng


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def fixed_rng():
    return FixedRng(0.0)


@pytest.fixture
def app(store, fixed_rng):
    return SimplyInvest(store, rng=fixed_rng)


@pytest.fixture
def logged_in(app):
    result = app.register("alice", 20, "secret")
    assert result.success
    return app
