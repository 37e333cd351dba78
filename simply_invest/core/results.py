"""
작업 결과 타입 정의.

[ 역할 ]
    register / login / buy / sell 등 사용자 작업의 반환값.
    실패는 예외가 아니라 success=False + 사유(FailureReason) + 메시지로 보고한다.
    검증 실패는 상태를 변경하기 전에 감지되므로 실패한 작업은 항상 no-op.

[ 호출하는 곳 ]
    - accounts/credentials.py, data/portfolio.py에서 생성
    - run_simulator.py에서 메시지 출력 / 종료 코드 결정
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class FailureReason(Enum):
    """작업 실패 사유."""
    MISSING_USERNAME = "missing_username"
    UNDERAGE = "underage"
    DUPLICATE_USERNAME = "duplicate_username"
    USER_NOT_FOUND = "user_not_found"
    BAD_CREDENTIAL = "bad_credential"
    NOT_LOGGED_IN = "not_logged_in"
    INVALID_AMOUNT = "invalid_amount"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    UNKNOWN_SYMBOL = "unknown_symbol"
    INVALID_INDEX = "invalid_index"


# 사유별 기본 메시지 (화면에 그대로 노출되는 문구)
DEFAULT_MESSAGES: dict[FailureReason, str] = {
    FailureReason.MISSING_USERNAME: "Username is required.",
    FailureReason.UNDERAGE: "You must be at least 13 years old to register.",
    FailureReason.DUPLICATE_USERNAME: "Username already exists.",
    FailureReason.USER_NOT_FOUND: "User not found.",
    FailureReason.BAD_CREDENTIAL: "Incorrect password.",
    FailureReason.NOT_LOGGED_IN: "Not logged in.",
    FailureReason.INVALID_AMOUNT: "Please enter a valid amount.",
    FailureReason.INSUFFICIENT_FUNDS: "You do not have enough coins.",
    FailureReason.UNKNOWN_SYMBOL: "Unknown stock symbol.",
    FailureReason.INVALID_INDEX: "Invalid investment index.",
}


@dataclass
class OperationResult:
    """작업 결과. buy는 price/quantity, sell은 proceeds를 채운다."""
    success: bool
    message: str = ""
    reason: Optional[FailureReason] = None
    price: Optional[float] = None
    quantity: Optional[float] = None
    proceeds: Optional[float] = None

    @classmethod
    def ok(cls, **payload: Any) -> "OperationResult":
        return cls(success=True, **payload)

    @classmethod
    def fail(cls, reason: FailureReason, message: str = "") -> "OperationResult":
        return cls(
            success=False,
            reason=reason,
            message=message or DEFAULT_MESSAGES[reason],
        )

    def __bool__(self) -> bool:
        return self.success

    def to_dict(self) -> dict[str, Any]:
        """None 필드를 제외한 딕셔너리 변환."""
        data: dict[str, Any] = {"success": self.success}
        if self.message:
            data["message"] = self.message
        if self.reason is not None:
            data["reason"] = self.reason.value
        for name in ("price", "quantity", "proceeds"):
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        return data
