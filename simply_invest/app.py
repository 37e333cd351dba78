"""
애플리케이션 조립 모듈.

[ 역할 ]
    Config 하나로 저장소 → 가격 오라클 → 계정 → 세션 → 포트폴리오 원장을
    생성하고 연결한다. CLI(또는 다른 UI)는 이 객체의 메서드만 호출하면 된다.

[ 의존 관계 ]
    SimplyInvest
      ├── KeyValueStore       (stores/, config.store.backend로 선택)
      ├── PriceOracle         (data/price_oracle.py)
      ├── CredentialStore     (accounts/credentials.py)
      ├── SessionAccessor     (accounts/session.py)
      └── PortfolioLedger     (data/portfolio.py)
"""

from typing import Any, Optional

import numpy as np
import pandas as pd

from simply_invest.accounts.credentials import CredentialStore
from simply_invest.accounts.session import SessionAccessor
from simply_invest.core.results import OperationResult
from simply_invest.core.storage import KeyValueStore
from simply_invest.data.catalog import Stock, get_stocks
from simply_invest.data.models import User
from simply_invest.data.portfolio import PortfolioLedger
from simply_invest.data.price_oracle import PriceOracle, UniformSource
from simply_invest.stores import create_store
from simply_invest.utils.config import Config


class SimplyInvest:
    """투자 시뮬레이터 파사드.

    사용 예:
        app = SimplyInvest.from_config(Config.from_yaml("config.yaml"))
        app.register("alice", 20, "secret")
        app.buy("AAPL", 1000)
        app.revalue()
        app.sell(0)
    """

    def __init__(
        self,
        store: KeyValueStore,
        config: Optional[Config] = None,
        rng: Optional[UniformSource] = None,
    ):
        self.config = config or Config()
        sim = self.config.simulation

        self.store = store
        self.oracle = PriceOracle(
            store,
            rng=rng if rng is not None else np.random.default_rng(sim.seed),
            max_variation=sim.max_variation,
            price_floor=sim.price_floor,
        )
        self.credentials = CredentialStore(
            store,
            initial_coins=sim.initial_coins,
            min_age=sim.min_age,
        )
        self.session = SessionAccessor(self.credentials)
        self.ledger = PortfolioLedger(self.session, self.oracle)

    @classmethod
    def from_config(cls, config: Config) -> "SimplyInvest":
        """config.store 설정으로 저장소를 만들어 조립."""
        store = create_store(config.store.backend, config.store.params)
        return cls(store, config)

    # ─── 계정 ──────────────────────────────────────────────────────────

    def register(self, username: str, age: Any, password: str) -> OperationResult:
        return self.credentials.register(username, age, password)

    def login(self, username: str, password: str) -> OperationResult:
        return self.credentials.login(username, password)

    def logout(self) -> None:
        self.credentials.logout()

    def current_user(self) -> Optional[User]:
        return self.session.current_user()

    # ─── 투자 ──────────────────────────────────────────────────────────

    def buy(self, symbol: str, amount: Any) -> OperationResult:
        return self.ledger.buy(symbol, amount)

    def revalue(self) -> OperationResult:
        return self.ledger.revalue_all()

    def sell(self, index: Any) -> OperationResult:
        return self.ledger.sell_one(index)

    def summary(self) -> Optional[dict[str, Any]]:
        return self.ledger.get_summary()

    def holdings_frame(self) -> pd.DataFrame:
        return self.ledger.holdings_frame()

    # ─── 시장 ──────────────────────────────────────────────────────────

    def stocks(self) -> list[tuple[Stock, float]]:
        """카탈로그 종목과 현재가."""
        return [(s, self.oracle.get_price(s.symbol)) for s in get_stocks()]

    def tick(self, steps: int = 1) -> pd.DataFrame:
        return self.oracle.tick(steps)

    def close(self) -> None:
        self.store.close()
