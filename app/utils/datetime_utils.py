# app/utils/datetime_utils.py
"""
게시글/댓글/사용자 문서의 시간 필드를 일관되게 다루기 위한 유틸리티 모듈

- 모든 시간은 UTC timezone-aware datetime으로 저장합니다.
- Firestore에서 읽은 Timestamp 계열 값도 UTC datetime으로 정규화합니다.
"""

import logging
from datetime import datetime, timezone
from typing import Any

logger = logging.getLogger(__name__)


class DateTimeUtils:
    """시간 처리를 위한 유틸리티 클래스"""

    @staticmethod
    def now() -> datetime:
        """현재 시간을 UTC timezone-aware datetime으로 반환"""
        return datetime.now(timezone.utc)

    @staticmethod
    def for_firestore(obj: Any) -> Any:
        """
        Firestore 저장 전 변환
        - timezone-naive datetime -> UTC
        - dict/list 내부 재귀적 변환
        """
        if isinstance(obj, datetime):
            if obj.tzinfo is None:
                return obj.replace(tzinfo=timezone.utc)
            return obj.astimezone(timezone.utc)
        if isinstance(obj, dict):
            return {k: DateTimeUtils.for_firestore(v) for k, v in obj.items()}
        if isinstance(obj, list):
            return [DateTimeUtils.for_firestore(item) for item in obj]
        return obj

    @staticmethod
    def from_firestore(obj: Any) -> Any:
        """
        Firestore에서 읽은 문서의 시간 필드 정규화
        - datetime(DatetimeWithNanoseconds 포함) -> UTC datetime
        - timestamp()를 가진 Timestamp 객체 -> UTC datetime
        """
        if isinstance(obj, datetime):
            if obj.tzinfo is None:
                return obj.replace(tzinfo=timezone.utc)
            return obj.astimezone(timezone.utc)
        if isinstance(obj, dict):
            return {k: DateTimeUtils.from_firestore(v) for k, v in obj.items()}
        if isinstance(obj, list):
            return [DateTimeUtils.from_firestore(item) for item in obj]
        if hasattr(obj, 'timestamp') and callable(obj.timestamp):
            try:
                return datetime.fromtimestamp(obj.timestamp(), tz=timezone.utc)
            except (TypeError, ValueError, OverflowError) as e:
                logger.error(f"Firestore 시간 변환 실패: {obj} ({type(obj)}) - {e}")
                return obj
        return obj

