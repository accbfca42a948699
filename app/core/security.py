import logging
import jwt
from datetime import datetime, timedelta, timezone
from functools import wraps
from typing import Any, Mapping, Optional
from flask import request, jsonify, g, current_app

ALGORITHM = "HS256"


class TokenVerificationError(Exception):
    """토큰 검증 실패. expired가 True면 만료된 토큰입니다."""

    def __init__(self, message: str, expired: bool = False):
        super().__init__(message)
        self.expired = expired


class TokenVerifier:
    """
    서명된 토큰을 발급하고 검증합니다.
    - 비밀 키는 생성 시점에 주입받으며, 전역 설정을 직접 조회하지 않습니다.
    - 검증은 (토큰, 비밀 키, 현재 시각)에만 의존하며 네트워크/DB 접근이 없습니다.
    """

    def __init__(self, secret: str, expires_in: int = 360000):
        if not secret:
            raise ValueError("JWT_SECRET_KEY가 설정되지 않았습니다.")
        self._secret = secret
        self.expires_in = expires_in

    def issue(self, user_id: str, now: Optional[datetime] = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "user": {"id": user_id},
            "iat": issued_at,
            "exp": issued_at + timedelta(seconds=self.expires_in),
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: Optional[str]) -> str:
        """토큰을 검증하고 user id를 반환합니다. 실패 시 TokenVerificationError."""
        if not token:
            raise TokenVerificationError("Token is missing")
        try:
            payload = jwt.decode(token, self._secret, algorithms=[ALGORITHM])
        except jwt.ExpiredSignatureError:
            raise TokenVerificationError("Token has expired", expired=True)
        except jwt.InvalidTokenError as e:
            raise TokenVerificationError(f"Invalid token: {e}")

        user = payload.get("user")
        if not isinstance(user, dict) or not user.get("id"):
            raise TokenVerificationError("Token does not carry a user identity")
        return str(user["id"])


def auth_required(f):
    """
    커스텀 헤더의 토큰을 검증하고, 성공 시 g.user_id를 설정한 뒤 뷰를 실행합니다.
    헤더가 없거나 토큰이 유효하지 않으면 뷰를 실행하지 않고 401을 반환합니다.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        token = request.headers.get(current_app.config['AUTH_HEADER_NAME'])
        if not token:
            return jsonify({"error_code": "AUTHORIZATION_DENIED", "message": "Authorization denied: no token provided"}), 401

        verifier: TokenVerifier = current_app.services['tokens']
        try:
            user_id = verifier.verify(token)
        except TokenVerificationError as e:
            logging.warning(f"토큰 검증 실패 ({request.method} {request.path}): {e}")
            message = "Token has expired" if e.expired else "Invalid token"
            return jsonify({"error_code": "INVALID_TOKEN", "message": message}), 401

        g.user_id = user_id
        return f(*args, **kwargs)

    return decorated_function


def is_owner(requester_id: str, resource: Mapping[str, Any], owner_field: str = "user_id") -> bool:
    """요청자가 리소스(게시글 또는 댓글)의 작성자인지 확인합니다."""
    owner_id = resource.get(owner_field)
    return owner_id is not None and str(owner_id) == str(requester_id)
