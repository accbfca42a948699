# app/models/comment.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from app.utils.datetime_utils import DateTimeUtils


@dataclass
class Comment:
    """
    Post 문서의 'comments' 배열에 포함되는 댓글 구조.
    독립적인 컬렉션 없이 부모 게시글과 함께 저장/삭제됩니다.
    """
    comment_id: str
    user_id: str
    name: str
    text: str
    avatar: Optional[str] = None
    created_at: datetime = field(default_factory=DateTimeUtils.now)
