# app/api/users/routes.py
from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError

from app.api.errors import error_response
from app.api.users.schemas import UserRegisterSchema

users_bp = Blueprint('users_bp', __name__)

@users_bp.route('', methods=['POST'])
def register_user():
    """회원가입 후 바로 사용할 수 있는 액세스 토큰을 발급합니다."""
    user_service = current_app.services['users']
    try:
        data = UserRegisterSchema().load(request.get_json(silent=True) or {})
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400

    result = user_service.register(data['name'], data['email'], data['password'])
    if not result.ok:
        return error_response(result)

    token = current_app.services['tokens'].issue(result.value['user_id'])
    return jsonify({"token": token}), 201
