# app/services/firestore_service.py
import logging
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, Iterable, List, Optional, TypeVar
from firebase_admin import firestore

from app.utils.datetime_utils import DateTimeUtils

T = TypeVar('T')


class StoreStatus(Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    MALFORMED_REFERENCE = "malformed_reference"
    FAILED = "failed"


@dataclass
class StoreResult(Generic[T]):
    """
    문서 저장소 호출 결과.
    저장소 예외는 호출자에게 전파되지 않고 FAILED 상태로 변환됩니다.
    """
    status: StoreStatus
    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is StoreStatus.OK

    @classmethod
    def success(cls, value: Optional[T] = None) -> 'StoreResult[T]':
        return cls(StoreStatus.OK, value)

    @classmethod
    def not_found(cls) -> 'StoreResult[T]':
        return cls(StoreStatus.NOT_FOUND)

    @classmethod
    def malformed(cls, doc_id: Any) -> 'StoreResult[T]':
        return cls(StoreStatus.MALFORMED_REFERENCE, error=f"잘못된 문서 ID 형식입니다: {doc_id!r}")

    @classmethod
    def failed(cls, error: Exception) -> 'StoreResult[T]':
        return cls(StoreStatus.FAILED, error=str(error))


def new_id() -> str:
    """게시글/댓글/사용자 문서에 사용할 새 ID를 생성합니다."""
    return str(uuid.uuid4())


def is_valid_id(doc_id: Any) -> bool:
    """문서 ID는 하이픈이 포함된 소문자 UUID 문자열(표준 형식)이어야 합니다."""
    if not isinstance(doc_id, str) or not doc_id:
        return False
    try:
        return str(uuid.UUID(doc_id)) == doc_id
    except ValueError:
        return False


class DocumentStore:
    """
    Firestore 클라이언트를 감싸는 얇은 어댑터.
    - find_by_id / find_all_sorted / find_one_by_field / save / remove 만 제공합니다.
    - 모든 메서드는 StoreResult를 반환합니다.
    """

    def __init__(self, db=None):
        self.db = db if db is not None else firestore.client()

    def find_by_id(self, collection: str, doc_id: str, exclude: Iterable[str] = ()) -> StoreResult[Dict[str, Any]]:
        if not is_valid_id(doc_id):
            return StoreResult.malformed(doc_id)
        try:
            doc = self.db.collection(collection).document(doc_id).get()
            if not doc.exists:
                return StoreResult.not_found()
            return StoreResult.success(self._to_document(doc.to_dict(), exclude))
        except Exception as e:
            logging.error(f"Firestore 조회 실패 (Collection: {collection}, Doc ID: {doc_id}): {e}", exc_info=True)
            return StoreResult.failed(e)

    def find_all_sorted(self, collection: str, order_field: str, descending: bool = True) -> StoreResult[List[Dict[str, Any]]]:
        direction = firestore.Query.DESCENDING if descending else firestore.Query.ASCENDING
        try:
            docs = self.db.collection(collection).order_by(order_field, direction=direction).stream()
            return StoreResult.success([self._to_document(doc.to_dict()) for doc in docs])
        except Exception as e:
            logging.error(f"Firestore 목록 조회 실패 (Collection: {collection}): {e}", exc_info=True)
            return StoreResult.failed(e)

    def find_one_by_field(self, collection: str, field_name: str, value: Any) -> StoreResult[Dict[str, Any]]:
        try:
            query = self.db.collection(collection).where(field_name, '==', value).limit(1).stream()
            doc = next(query, None)
            if doc is None:
                return StoreResult.not_found()
            return StoreResult.success(self._to_document(doc.to_dict()))
        except Exception as e:
            logging.error(f"Firestore 필드 조회 실패 (Collection: {collection}, Field: {field_name}): {e}", exc_info=True)
            return StoreResult.failed(e)

    def save(self, collection: str, doc_id: str, data: Dict[str, Any]) -> StoreResult[Dict[str, Any]]:
        """문서 전체를 덮어써서 저장합니다."""
        if not is_valid_id(doc_id):
            return StoreResult.malformed(doc_id)
        try:
            self.db.collection(collection).document(doc_id).set(DateTimeUtils.for_firestore(data))
            return StoreResult.success(data)
        except Exception as e:
            logging.error(f"Firestore 저장 실패 (Collection: {collection}, Doc ID: {doc_id}): {e}", exc_info=True)
            return StoreResult.failed(e)

    def remove(self, collection: str, doc_id: str) -> StoreResult[None]:
        if not is_valid_id(doc_id):
            return StoreResult.malformed(doc_id)
        try:
            self.db.collection(collection).document(doc_id).delete()
            return StoreResult.success()
        except Exception as e:
            logging.error(f"Firestore 삭제 실패 (Collection: {collection}, Doc ID: {doc_id}): {e}", exc_info=True)
            return StoreResult.failed(e)

    @staticmethod
    def _to_document(data: Optional[Dict[str, Any]], exclude: Iterable[str] = ()) -> Dict[str, Any]:
        document = DateTimeUtils.from_firestore(data or {})
        for key in exclude:
            document.pop(key, None)
        return document
