# app/models/post.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from app.models.comment import Comment
from app.utils.datetime_utils import DateTimeUtils


@dataclass
class Like:
    """Post 문서 내부에 저장될 좋아요. 게시글당 사용자 한 명에 하나만 존재합니다."""
    user_id: str


@dataclass
class Post:
    """
    Firestore 'posts' 컬렉션의 문서 구조를 정의하는 데이터클래스.
    - name/avatar는 작성 시점의 사용자 정보 스냅샷입니다.
    - likes/comments는 최신 항목이 앞에 오도록 저장됩니다.
    """
    post_id: str
    user_id: str
    name: str
    text: str
    avatar: Optional[str] = None
    likes: List[Like] = field(default_factory=list)
    comments: List[Comment] = field(default_factory=list)
    created_at: datetime = field(default_factory=DateTimeUtils.now)
