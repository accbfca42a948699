# app/api/errors.py
import logging
from flask import jsonify, request

from app.services.results import Outcome, ServiceResult


def error_response(result: ServiceResult, not_found_status: int = 404):
    """
    실패한 ServiceResult를 JSON 에러 응답으로 변환합니다.
    - NOT_FOUND의 상태 코드는 엔드포인트마다 다르므로 호출자가 지정합니다.
    - FAILED는 내부 오류 내용을 노출하지 않고 일반 메시지만 반환합니다.
    """
    if result.outcome is Outcome.NOT_FOUND:
        status = not_found_status
    elif result.outcome in (Outcome.MALFORMED_REFERENCE, Outcome.CONFLICT):
        status = 400
    elif result.outcome is Outcome.NOT_AUTHORIZED:
        status = 401
    else:
        logging.error(f"요청 처리 중 저장소 오류 발생 ({request.method} {request.path})")
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "서버 내부 오류가 발생했습니다."}), 500
    return jsonify({"error_code": result.error_code, "message": result.message}), status
