"""
종목 카탈로그.

[ 역할 ]
    투자 가능한 8개 종목(심볼, 이름)과 기준가 테이블을 고정으로 정의.
    읽기 전용. 실제 시세와는 무관한 시뮬레이션용 값.

[ 호출하는 곳 ]
    - data/price_oracle.py: 최초 조회 시 기준가로 가격 초기화
    - data/portfolio.py: 매수 종목 검증, 보유 종목 이름 표시
    - run_simulator.py: stocks 명령
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Stock:
    """카탈로그 종목."""
    symbol: str
    name: str


STOCKS: tuple[Stock, ...] = (
    Stock("AAPL", "Apple Inc."),
    Stock("AMZN", "Amazon.com Inc."),
    Stock("TSLA", "Tesla Inc."),
    Stock("GOOG", "Alphabet Inc."),
    Stock("NFLX", "Netflix Inc."),
    Stock("NVDA", "Nvidia Corp."),
    Stock("MSFT", "Microsoft Corp."),
    Stock("META", "Meta Platforms Inc."),
)

# 가격 테이블에 값이 없을 때 쓰는 기준가
BASE_PRICES: dict[str, float] = {
    "AAPL": 150,
    "AMZN": 3200,
    "TSLA": 700,
    "GOOG": 2800,
    "NFLX": 500,
    "NVDA": 450,
    "MSFT": 350,
    "META": 300,
}

FALLBACK_PRICE: float = 100  # 카탈로그 밖 심볼

_BY_SYMBOL: dict[str, Stock] = {s.symbol: s for s in STOCKS}


def get_stocks() -> list[Stock]:
    """카탈로그 전체 (표시 순서 유지)."""
    return list(STOCKS)


def get_stock(symbol: str) -> Optional[Stock]:
    return _BY_SYMBOL.get(symbol)


def is_listed(symbol: str) -> bool:
    return symbol in _BY_SYMBOL


def base_price(symbol: str) -> float:
    """기준가. 모르는 심볼은 FALLBACK_PRICE."""
    return BASE_PRICES.get(symbol, FALLBACK_PRICE)
