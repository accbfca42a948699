# app/models/user.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from app.utils.datetime_utils import DateTimeUtils


@dataclass
class User:
    """
    Firestore 'users' 컬렉션의 문서 구조를 정의하는 데이터클래스.
    password에는 해시값만 저장합니다.
    """
    user_id: str
    name: str
    email: str
    password: str
    avatar: Optional[str] = None
    created_at: datetime = field(default_factory=DateTimeUtils.now)
