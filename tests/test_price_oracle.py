"""
test_price_oracle.py - 가격 오라클 테스트

- 기준가 초기화 / 카탈로그 밖 심볼
- update_price 변동 / 하한 / 반올림
- tick 가격 경로 DataFrame
"""

import json

import numpy as np
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from simply_invest.core.storage import PRICES_KEY
from simply_invest.data.catalog import BASE_PRICES, STOCKS
from simply_invest.data.price_oracle import PriceOracle
from simply_invest.stores.memory_store import MemoryStore
from tests.fake_rng import FixedRng


class TestGetPrice:
    """get_price 초기화 규칙."""

    def test_seeds_from_base_table(self, store):
        oracle = PriceOracle(store, rng=FixedRng())
        assert oracle.get_price("AAPL") == 150
        assert json.loads(store.get(PRICES_KEY)) == {"AAPL": 150}

    def test_unknown_symbol_falls_back_to_100(self, store):
        oracle = PriceOracle(store, rng=FixedRng())
        assert oracle.get_price("ZZZZ") == 100
        assert oracle.get_prices()["ZZZZ"] == 100

    def test_existing_price_is_not_reseeded(self, store):
        store.set(PRICES_KEY, json.dumps({"AAPL": 123.45}))
        oracle = PriceOracle(store, rng=FixedRng())
        assert oracle.get_price("AAPL") == 123.45

    def test_get_prices_returns_copy(self, store):
        oracle = PriceOracle(store, rng=FixedRng())
        oracle.get_price("TSLA")
        prices = oracle.get_prices()
        prices["TSLA"] = 1
        assert oracle.get_price("TSLA") == 700


class TestUpdatePrice:
    """update_price 랜덤워크."""

    def test_applies_variation_to_seeded_price(self, store):
        oracle = PriceOracle(store, rng=FixedRng(0.02))
        assert oracle.update_price("AAPL") == 153.0
        assert oracle.get_price("AAPL") == 153.0

    def test_compounds_on_stored_price(self, store):
        oracle = PriceOracle(store, rng=FixedRng(-0.05))
        oracle.update_price("NFLX")
        assert oracle.update_price("NFLX") == round(500 * 0.95 * 0.95, 2)

    def test_draws_from_symmetric_range(self, store):
        rng = FixedRng(0.0)
        oracle = PriceOracle(store, rng=rng)
        oracle.update_price("MSFT")
        assert rng.calls == [(-0.05, 0.05)]

    def test_clamped_at_floor(self, store):
        store.set(PRICES_KEY, json.dumps({"AAPL": 1.02}))
        oracle = PriceOracle(store, rng=FixedRng(-0.05))
        assert oracle.update_price("AAPL") == 1.0

    def test_rounds_to_two_decimals(self, store):
        store.set(PRICES_KEY, json.dumps({"AAPL": 100.0}))
        oracle = PriceOracle(store, rng=FixedRng(0.012345))
        assert oracle.update_price("AAPL") == 101.23

    def test_only_touches_requested_symbol(self, store):
        oracle = PriceOracle(store, rng=FixedRng(0.01))
        oracle.get_price("AMZN")
        oracle.update_price("AAPL")
        assert oracle.get_prices()["AMZN"] == 3200

    @settings(max_examples=200, deadline=None)
    @given(
        price=st.floats(min_value=0.5, max_value=100_000, allow_nan=False),
        variation=st.floats(min_value=-0.05, max_value=0.05, exclude_max=True),
    )
    def test_bounds(self, price, variation):
        store = MemoryStore()
        store.set(PRICES_KEY, json.dumps({"AAPL": price}))
        oracle = PriceOracle(store, rng=FixedRng(variation))

        new_price = oracle.update_price("AAPL")

        assert new_price >= 1
        if new_price > 1:
            assert price * 0.95 - 0.005 <= new_price <= price * 1.05 + 0.005

    def test_numpy_generator_stays_in_range(self, store):
        oracle = PriceOracle(store, rng=np.random.default_rng(7))
        previous = oracle.get_price("GOOG")
        for _ in range(50):
            current = oracle.update_price("GOOG")
            assert previous * 0.95 - 0.005 <= current <= previous * 1.05 + 0.005
            previous = current


class TestTick:
    """tick 시장 갱신."""

    def test_frame_covers_catalog(self, store):
        oracle = PriceOracle(store, rng=FixedRng(0.01))
        df = oracle.tick(steps=3)

        assert list(df.columns) == ["step", "symbol", "price"]
        assert len(df) == 3 * len(STOCKS)
        assert set(df["symbol"]) == set(BASE_PRICES)

        aapl = df[df["symbol"] == "AAPL"]["price"].tolist()
        assert aapl == [151.5, round(151.5 * 1.01, 2), round(round(151.5 * 1.01, 2) * 1.01, 2)]

    def test_subset_of_symbols(self, store):
        oracle = PriceOracle(store, rng=FixedRng(0.0))
        df = oracle.tick(steps=2, symbols=["TSLA"])
        assert df["symbol"].unique().tolist() == ["TSLA"]
        assert df["price"].tolist() == [700, 700]

    def test_seeded_generator_is_reproducible(self):
        a = PriceOracle(MemoryStore(), rng=np.random.default_rng(42)).tick(steps=4)
        b = PriceOracle(MemoryStore(), rng=np.random.default_rng(42)).tick(steps=4)
        assert a.equals(b)
