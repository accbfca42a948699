# app/api/posts/schemas.py
from marshmallow import Schema, fields, validate

# --- 재사용을 위한 중첩 스키마 ---
class LikeSchema(Schema):
    """게시글의 likes 배열 항목."""
    user_id = fields.Str(required=True)

class CommentSchema(Schema):
    """게시글의 comments 배열 항목."""
    comment_id = fields.Str(required=True)
    user_id = fields.Str(required=True)
    name = fields.Str(required=True)
    avatar = fields.Str(allow_none=True)
    text = fields.Str(required=True)
    created_at = fields.DateTime(required=True)

# --- API 요청/응답 스키마 ---

class PostCreateSchema(Schema):
    """POST /api/posts 요청 본문의 유효성을 검사합니다."""
    text = fields.Str(required=True, validate=validate.Length(min=1, error="게시글 내용을 입력해야 합니다."))

class CommentCreateSchema(Schema):
    """POST /api/posts/comment/{post_id} 요청 본문의 유효성을 검사합니다."""
    text = fields.Str(required=True, validate=validate.Length(min=1, error="댓글 내용을 입력해야 합니다."))

class PostResponseSchema(Schema):
    """게시글 정보 응답을 위한 최종 JSON 형식을 정의합니다."""
    post_id = fields.Str(dump_only=True)
    user_id = fields.Str(required=True)
    name = fields.Str(required=True)
    avatar = fields.Str(allow_none=True)
    text = fields.Str(required=True)
    likes = fields.List(fields.Nested(LikeSchema), dump_default=list)
    comments = fields.List(fields.Nested(CommentSchema), dump_default=list)
    created_at = fields.DateTime(required=True)
