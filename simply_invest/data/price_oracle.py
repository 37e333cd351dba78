"""
가격 오라클 모듈.

[ 역할 ]
    종목별 현재가를 저장소의 stockPrices 테이블로 관리.
    최초 조회 시 카탈로그 기준가로 초기화하고, update_price() 호출마다
    -5% ~ +5% 균등분포 랜덤워크로 가격을 움직인다.

[ 가격 규칙 ]
    new = price * (1 + U[-max_variation, +max_variation))
    new = max(new, price_floor)   → 가격은 항상 1 이상
    new = round(new, 2)

[ 호출하는 곳 ]
    - data/portfolio.py: 매수 시 get_price(), 재평가/매도 시 update_price()
    - run_simulator.py: stocks / tick 명령
"""

import json
import logging
from typing import Iterable, Optional, Protocol

import numpy as np
import pandas as pd

from simply_invest.core.storage import PRICES_KEY, KeyValueStore
from simply_invest.data.catalog import STOCKS, base_price

logger = logging.getLogger("simply_invest.prices")


class UniformSource(Protocol):
    """uniform(low, high)를 제공하는 난수원 (numpy Generator 호환)."""

    def uniform(self, low: float, high: float) -> float:
        ...


class PriceOracle:
    """저장소 기반 가격 오라클.

    사용법:
        oracle = PriceOracle(store, rng=np.random.default_rng(42))
        oracle.get_price("AAPL")     # 150 (최초 조회 시 기준가)
        oracle.update_price("AAPL")  # 예: 147.31
    """

    def __init__(
        self,
        store: KeyValueStore,
        rng: Optional[UniformSource] = None,
        max_variation: float = 0.05,   # ±5%
        price_floor: float = 1.0,      # 최저 가격
    ):
        self.store = store
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_variation = max_variation
        self.price_floor = price_floor

    def _load(self) -> dict[str, float]:
        text = self.store.get(PRICES_KEY)
        return json.loads(text) if text else {}

    def _save(self, prices: dict[str, float]) -> None:
        self.store.set(PRICES_KEY, json.dumps(prices))

    def get_prices(self) -> dict[str, float]:
        """저장된 가격 테이블 전체 (복사본)."""
        return dict(self._load())

    def get_price(self, symbol: str) -> float:
        """현재가 조회. 없으면 기준가로 초기화 후 저장."""
        prices = self._load()
        if symbol not in prices:
            prices[symbol] = base_price(symbol)
            self._save(prices)
            logger.debug(f"가격 초기화: {symbol} = {prices[symbol]}")
        return prices[symbol]

    def update_price(self, symbol: str) -> float:
        """랜덤 변동을 적용한 새 가격을 저장하고 반환."""
        prices = self._load()
        price = prices.get(symbol)
        if price is None:
            price = self.get_price(symbol)
            prices = self._load()

        variation = float(self.rng.uniform(-self.max_variation, self.max_variation))
        new_price = price * (1 + variation)
        if new_price < self.price_floor:
            new_price = self.price_floor

        prices[symbol] = round(new_price, 2)
        self._save(prices)
        logger.debug(f"가격 변동: {symbol} {price} → {prices[symbol]} ({variation:+.2%})")
        return prices[symbol]

    def tick(self, steps: int = 1, symbols: Optional[Iterable[str]] = None) -> pd.DataFrame:
        """시장 전체를 steps회 움직이고 가격 경로를 DataFrame으로 반환.

        Returns:
            DataFrame with columns: [step, symbol, price]
        """
        targets = list(symbols) if symbols is not None else [s.symbol for s in STOCKS]
        rows = []
        for step in range(1, steps + 1):
            for symbol in targets:
                rows.append({
                    "step": step,
                    "symbol": symbol,
                    "price": self.update_price(symbol),
                })

        logger.info(f"시장 갱신: {len(targets)}종목 x {steps}회")
        return pd.DataFrame(rows, columns=["step", "symbol", "price"])

    def __repr__(self):
        return f"PriceOracle(max_variation={self.max_variation}, floor={self.price_floor})"
