# app/api/users/services.py
import hashlib
import logging
from dataclasses import asdict
from typing import Any, Dict
from urllib.parse import urlencode
from werkzeug.security import generate_password_hash, check_password_hash

from app.models.user import User
from app.services.firestore_service import DocumentStore, StoreStatus, new_id
from app.services.results import Outcome, ServiceResult

USERS = 'users'


def gravatar_url(email: str) -> str:
    """이메일 기반 Gravatar 이미지 URL (200px, pg 등급, 기본 아이콘 mm)"""
    digest = hashlib.md5(email.strip().lower().encode('utf-8'), usedforsecurity=False).hexdigest()
    return f"https://www.gravatar.com/avatar/{digest}?" + urlencode({'s': '200', 'r': 'pg', 'd': 'mm'})


class UserService:
    """
    사용자 가입/로그인 및 조회를 담당하는 서비스 클래스.
    비밀번호는 해시로만 저장하며 조회 결과에는 포함하지 않습니다.
    """
    def __init__(self, store: DocumentStore):
        self.store = store

    def register(self, name: str, email: str, password: str) -> ServiceResult:
        email = email.strip().lower()
        existing = self.store.find_one_by_field(USERS, 'email', email)
        if existing.ok:
            return ServiceResult.error(Outcome.CONFLICT, "USER_ALREADY_EXISTS", "이미 가입된 이메일입니다.")
        if existing.status is StoreStatus.FAILED:
            return ServiceResult.from_store(existing, "USER_NOT_FOUND", "사용자를 찾을 수 없습니다.")

        user = User(
            user_id=new_id(),
            name=name,
            email=email,
            password=generate_password_hash(password),
            avatar=gravatar_url(email)
        )
        saved = self.store.save(USERS, user.user_id, asdict(user))
        if not saved.ok:
            return ServiceResult.from_store(saved, "USER_NOT_FOUND", "사용자를 찾을 수 없습니다.")

        logging.info(f"신규 사용자 가입 완료 (user_id: {user.user_id})")
        return ServiceResult.success(self._public(asdict(user)))

    def authenticate(self, email: str, password: str) -> ServiceResult:
        """이메일/비밀번호를 확인합니다. 실패 사유는 구분하지 않고 동일한 메시지를 반환합니다."""
        found = self.store.find_one_by_field(USERS, 'email', email.strip().lower())
        if found.status is StoreStatus.FAILED:
            return ServiceResult.from_store(found, "USER_NOT_FOUND", "사용자를 찾을 수 없습니다.")

        user_data = found.value if found.ok else None
        if not user_data or not check_password_hash(user_data.get('password', ''), password):
            return ServiceResult.error(Outcome.CONFLICT, "INVALID_CREDENTIALS", "이메일 또는 비밀번호가 올바르지 않습니다.")
        return ServiceResult.success(self._public(user_data))

    def get_user(self, user_id: str) -> ServiceResult:
        """password 필드를 제외한 사용자 문서를 조회합니다."""
        found = self.store.find_by_id(USERS, user_id, exclude=('password',))
        if not found.ok:
            return ServiceResult.from_store(found, "USER_NOT_FOUND", "사용자를 찾을 수 없습니다.")
        return ServiceResult.success(found.value)

    @staticmethod
    def _public(user_data: Dict[str, Any]) -> Dict[str, Any]:
        return {k: v for k, v in user_data.items() if k != 'password'}

