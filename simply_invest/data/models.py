"""
사용자 / 보유 종목 레코드.

[ 역할 ]
    저장소의 users 항목에 들어가는 레코드를 dataclass로 표현.
    to_dict()/from_dict()는 브라우저 클라이언트와 공유하는 camelCase 키 이름을 쓴다.
        User    : username, age, passwordHash, coins, portfolio
        Holding : symbol, quantity, priceAtPurchase, investedAmount

[ 주요 클래스 ]
    Holding - 한 번의 매수로 생긴 보유분 (같은 종목을 여러 번 사면 여러 개)
    User    - 사용자 계정 + 코인 잔고 + 보유 목록

[ 호출하는 곳 ]
    - accounts/credentials.py에서 생성/조회
    - data/portfolio.py에서 잔고/보유 목록 갱신
"""

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Holding:
    """보유분. 재평가 때마다 reference_price/invested_amount가 새 가격으로 갱신됨."""
    symbol: str
    quantity: float             # 보유 수량 (소수 허용)
    reference_price: float      # 다음 재평가의 기준 가격
    invested_amount: float      # 현재 평가 금액

    def to_dict(self) -> dict[str, Any]:
        return {
            "symbol": self.symbol,
            "quantity": self.quantity,
            "priceAtPurchase": self.reference_price,
            "investedAmount": self.invested_amount,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Holding":
        return cls(
            symbol=data["symbol"],
            quantity=float(data["quantity"]),
            reference_price=float(data["priceAtPurchase"]),
            invested_amount=float(data["investedAmount"]),
        )


@dataclass
class User:
    """사용자 레코드."""
    username: str
    age: int
    password_hash: str          # SHA-256 hex (64자)
    coins: float = 0.0          # 가용 코인 잔고
    portfolio: list[Holding] = field(default_factory=list)

    @property
    def invested_value(self) -> float:
        """보유분 평가 금액 합계."""
        return sum(h.invested_amount for h in self.portfolio)

    def to_dict(self) -> dict[str, Any]:
        return {
            "username": self.username,
            "age": self.age,
            "passwordHash": self.password_hash,
            "coins": self.coins,
            "portfolio": [h.to_dict() for h in self.portfolio],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        return cls(
            username=data["username"],
            age=int(float(data["age"])),   # "15.5" 같은 값도 허용
            password_hash=data["passwordHash"],
            coins=float(data.get("coins", 0.0)),
            portfolio=[Holding.from_dict(h) for h in data.get("portfolio", [])],
        )


def dump_users(users: list[User]) -> str:
    """사용자 목록 → JSON 텍스트."""
    return json.dumps([u.to_dict() for u in users], ensure_ascii=False)


def load_users(text: str | None) -> list[User]:
    """JSON 텍스트 → 사용자 목록. None/빈 문자열은 빈 목록."""
    if not text:
        return []
    return [User.from_dict(d) for d in json.loads(text)]
