# app/utils/test_datetime_utils.py
"""
시간 처리 유틸리티 테스트

사용법: python -m pytest app/utils/test_datetime_utils.py -v
"""

from datetime import datetime, timezone, timedelta
from app.utils.datetime_utils import DateTimeUtils


def test_now_is_utc_aware():
    """현재 시간은 UTC timezone-aware여야 함"""
    current = DateTimeUtils.now()
    assert current.tzinfo is not None
    assert current.utcoffset() == timedelta(0)


def test_for_firestore_normalizes_nested_documents():
    """게시글 문서 안의 댓글 시간까지 재귀적으로 UTC로 변환"""
    post = {
        'created_at': datetime(2024, 1, 1, 9, 0),
        'likes': [{'user_id': 'u1'}],
        'comments': [{'comment_id': 'c1', 'created_at': datetime(2024, 1, 2)}],
    }

    converted = DateTimeUtils.for_firestore(post)

    assert converted['created_at'].tzinfo == timezone.utc
    assert converted['comments'][0]['created_at'].tzinfo == timezone.utc
    assert converted['likes'] == [{'user_id': 'u1'}]


def test_from_firestore_converts_timestamp_like_objects():
    class FakeTimestamp:
        def timestamp(self):
            return 0

    converted = DateTimeUtils.from_firestore({'created_at': FakeTimestamp(), 'text': 'hi'})

    assert converted['created_at'] == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert converted['text'] == 'hi'
