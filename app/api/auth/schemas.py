#app/api/auth/schemas.py
from marshmallow import Schema, fields, validate

class LoginSchema(Schema):
    """이메일/비밀번호 로그인 요청의 유효성을 검사하는 스키마"""
    email = fields.Email(required=True, error_messages={"invalid": "올바른 이메일 형식이 아닙니다."})
    password = fields.Str(required=True, validate=validate.Length(min=1, error="비밀번호는 필수 항목입니다."))
