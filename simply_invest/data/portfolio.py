"""
포트폴리오 원장 모듈.

[ 역할 ]
    현재 로그인한 사용자의 코인 잔고와 보유분(Holding)을 갱신.
    매수 / 전체 재평가 / 개별 매도를 처리하고 결과를 사용자 레코드에 저장.

[ 재평가 규칙 ]
    보유분마다 순서대로:
        new_price   = oracle.update_price(symbol)
        pct_change  = (new_price - reference_price) / reference_price
        profit_loss = invested_amount * pct_change      → 잔고에 반영 (소수 2자리)
        reference_price = new_price                     → 기준가 갱신
        invested_amount = quantity * new_price
    손익은 매수가 대비 누적이 아니라 재평가 구간마다 잔고로 실현된다.

[ 호출하는 곳 ]
    - app.py::SimplyInvest.buy/revalue/sell/summary
    - run_simulator.py: buy / update / sell / portfolio 명령
"""

import logging
import math
from typing import Any, Optional

import pandas as pd

from simply_invest.accounts.session import SessionAccessor
from simply_invest.core.results import FailureReason, OperationResult
from simply_invest.data.catalog import get_stock, is_listed
from simply_invest.data.models import Holding, User
from simply_invest.data.price_oracle import PriceOracle

logger = logging.getLogger("simply_invest.portfolio")


def _parse_amount(amount: Any) -> Optional[float]:
    """금액을 float로 변환. 숫자가 아니거나 0 이하이면 None."""
    if isinstance(amount, bool):
        return None
    try:
        value = float(amount)
    except (TypeError, ValueError):
        return None
    if math.isnan(value) or math.isinf(value) or value <= 0:
        return None
    return value


class PortfolioLedger:
    """포트폴리오 원장.

    SessionAccessor로 현재 사용자를 얻고, PriceOracle에서 가격을 받아
    잔고/보유분을 갱신한 뒤 persist()로 저장한다.
    """

    def __init__(self, session: SessionAccessor, oracle: PriceOracle):
        self.session = session
        self.oracle = oracle

    def buy(self, symbol: str, amount: Any) -> OperationResult:
        """코인 amount만큼 symbol 매수."""
        user = self.session.current_user()
        if user is None:
            return OperationResult.fail(FailureReason.NOT_LOGGED_IN)

        value = _parse_amount(amount)
        if value is None:
            logger.warning(f"매수 거부 (잘못된 금액): {user.username} {symbol} {amount!r}")
            return OperationResult.fail(FailureReason.INVALID_AMOUNT)
        if value > user.coins:
            logger.warning(f"매수 거부 (잔고 부족): {user.username} {value:,.2f} > {user.coins:,.2f}")
            return OperationResult.fail(FailureReason.INSUFFICIENT_FUNDS)
        if not is_listed(symbol):
            logger.warning(f"매수 거부 (미등록 종목): {symbol}")
            return OperationResult.fail(FailureReason.UNKNOWN_SYMBOL)

        price = self.oracle.get_price(symbol)
        quantity = value / price
        user.portfolio.append(Holding(
            symbol=symbol,
            quantity=quantity,
            reference_price=price,
            invested_amount=value,
        ))
        user.coins = round(user.coins - value, 2)
        self.session.persist(user)

        logger.info(f"매수: {user.username} {symbol} {quantity:.4f}주 @ {price:,.2f} (잔고 {user.coins:,.2f})")
        return OperationResult.ok(price=price, quantity=quantity)

    def revalue_all(self) -> OperationResult:
        """모든 보유분 가격을 갱신하고 손익을 잔고에 반영."""
        user = self.session.current_user()
        if user is None:
            return OperationResult.fail(FailureReason.NOT_LOGGED_IN)

        before = user.coins
        for holding in user.portfolio:
            new_price = self.oracle.update_price(holding.symbol)
            old_price = holding.reference_price
            pct_change = (new_price - old_price) / old_price
            profit_loss = holding.invested_amount * pct_change
            user.coins = round(user.coins + profit_loss, 2)

            # 다음 재평가 기준 갱신
            holding.reference_price = new_price
            holding.invested_amount = holding.quantity * new_price

        # 잔고 하한 0: 0 아래로 내려간 손실분은 버려지므로 이 경우 잔고 변화 = 손익 공식이 성립하지 않음
        if user.coins < 0:
            logger.warning(f"재평가 손실로 잔고가 음수가 되어 0으로 보정: {user.username} ({user.coins:,.2f})")
            user.coins = 0.0

        self.session.persist(user)
        logger.info(
            f"재평가: {user.username} {len(user.portfolio)}건, "
            f"잔고 {before:,.2f} → {user.coins:,.2f}"
        )
        return OperationResult.ok()

    def sell_one(self, index: Any) -> OperationResult:
        """index 위치의 보유분 전량 매도. 뒤의 보유분은 한 칸씩 당겨진다."""
        user = self.session.current_user()
        if user is None:
            return OperationResult.fail(FailureReason.NOT_LOGGED_IN)

        if isinstance(index, bool) or not isinstance(index, int):
            return OperationResult.fail(FailureReason.INVALID_INDEX)
        if index < 0 or index >= len(user.portfolio):
            logger.warning(f"매도 거부 (잘못된 인덱스): {user.username} [{index}]")
            return OperationResult.fail(FailureReason.INVALID_INDEX)

        holding = user.portfolio[index]
        current_price = self.oracle.update_price(holding.symbol)
        proceeds = holding.quantity * current_price
        user.coins = round(user.coins + proceeds, 2)
        del user.portfolio[index]
        self.session.persist(user)

        logger.info(f"매도: {user.username} {holding.symbol} {holding.quantity:.4f}주 @ {current_price:,.2f} → {proceeds:,.2f}")
        return OperationResult.ok(price=current_price, quantity=holding.quantity, proceeds=proceeds)

    # ─── 조회 ──────────────────────────────────────────────────────────

    def get_summary(self) -> Optional[dict[str, Any]]:
        """포트폴리오 요약. 로그인하지 않았으면 None."""
        user = self.session.current_user()
        if user is None:
            return None
        return summarize(user)

    def holdings_frame(self) -> pd.DataFrame:
        """보유분 표 (로그인하지 않았으면 빈 표)."""
        user = self.session.current_user()
        return holdings_frame(user.portfolio if user else [])


def summarize(user: User) -> dict[str, Any]:
    """사용자 잔고 + 보유분 요약."""
    invested = user.invested_value
    return {
        "username": user.username,
        "coins": user.coins,
        "num_holdings": len(user.portfolio),
        "total_invested": invested,
        "total_assets": user.coins + invested,
    }


def holdings_frame(holdings: list[Holding]) -> pd.DataFrame:
    """보유분 목록 → DataFrame.

    Returns:
        DataFrame with columns: [index, symbol, name, quantity, reference_price, invested_amount]
    """
    columns = ["index", "symbol", "name", "quantity", "reference_price", "invested_amount"]
    rows = []
    for i, h in enumerate(holdings):
        stock = get_stock(h.symbol)
        rows.append({
            "index": i,
            "symbol": h.symbol,
            "name": stock.name if stock else h.symbol,
            "quantity": h.quantity,
            "reference_price": h.reference_price,
            "invested_amount": h.invested_amount,
        })
    return pd.DataFrame(rows, columns=columns)
