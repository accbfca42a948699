# app/api/auth/routes.py

from flask import Blueprint, request, jsonify, g, current_app
from marshmallow import ValidationError

from app.api.auth.schemas import LoginSchema
from app.api.errors import error_response
from app.api.users.schemas import UserResponseSchema
from app.core.security import auth_required

auth_bp = Blueprint('auth_bp', __name__)

@auth_bp.route('', methods=['GET'])
@auth_required
def get_current_user():
    """토큰의 사용자 정보를 비밀번호를 제외하고 반환합니다."""
    result = current_app.services['users'].get_user(g.user_id)
    if not result.ok:
        return error_response(result)
    return jsonify(UserResponseSchema().dump(result.value)), 200


@auth_bp.route('', methods=['POST'])
def login():
    """이메일/비밀번호를 확인하고 액세스 토큰을 발급합니다."""
    try:
        data = LoginSchema().load(request.get_json(silent=True) or {})
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400

    result = current_app.services['users'].authenticate(data['email'], data['password'])
    if not result.ok:
        return error_response(result)

    token = current_app.services['tokens'].issue(result.value['user_id'])
    return jsonify({"token": token}), 200
