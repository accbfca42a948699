# app/services/results.py
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from app.services.firestore_service import StoreResult, StoreStatus

T = TypeVar('T')


class Outcome(Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    MALFORMED_REFERENCE = "malformed_reference"
    NOT_AUTHORIZED = "not_authorized"
    CONFLICT = "conflict"
    FAILED = "failed"


@dataclass
class ServiceResult(Generic[T]):
    """서비스 계층의 처리 결과. 라우트는 outcome에 따라 HTTP 응답을 결정합니다."""
    outcome: Outcome
    value: Optional[T] = None
    error_code: Optional[str] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK

    @classmethod
    def success(cls, value: Any = None) -> 'ServiceResult':
        return cls(Outcome.OK, value)

    @classmethod
    def error(cls, outcome: Outcome, error_code: str, message: str) -> 'ServiceResult':
        return cls(outcome, error_code=error_code, message=message)

    @classmethod
    def from_store(cls, result: StoreResult, not_found_code: str, not_found_message: str) -> 'ServiceResult':
        """OK가 아닌 저장소 결과를 서비스 결과로 변환합니다."""
        if result.status is StoreStatus.NOT_FOUND:
            return cls.error(Outcome.NOT_FOUND, not_found_code, not_found_message)
        if result.status is StoreStatus.MALFORMED_REFERENCE:
            return cls.error(Outcome.MALFORMED_REFERENCE, "INCORRECT_ID", f"{not_found_message} 또는 ID 형식이 올바르지 않습니다.")
        if result.status is StoreStatus.FAILED:
            return cls.error(Outcome.FAILED, "INTERNAL_SERVER_ERROR", "서버 내부 오류가 발생했습니다.")
        return cls.success(result.value)
