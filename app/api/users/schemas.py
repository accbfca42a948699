# app/api/users/schemas.py
from marshmallow import Schema, fields, validate

class UserRegisterSchema(Schema):
    """
    POST /api/users
    회원가입 요청 본문의 유효성을 검사하는 스키마.
    """
    name = fields.Str(required=True, validate=validate.Length(min=1, error="이름은 필수 항목입니다."))
    email = fields.Email(required=True, error_messages={"invalid": "올바른 이메일 형식이 아닙니다."})
    password = fields.Str(
        required=True,
        load_only=True,
        validate=validate.Length(min=6, error="비밀번호는 6자 이상이어야 합니다.")
    )

class UserResponseSchema(Schema):
    """
    사용자 정보 응답 스키마. 비밀번호는 포함하지 않습니다.
    """
    user_id = fields.Str(required=True, dump_only=True)
    name = fields.Str(required=True)
    email = fields.Email(required=True)
    avatar = fields.Str(allow_none=True)
    created_at = fields.DateTime()
