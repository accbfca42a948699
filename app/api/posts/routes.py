# app/api/posts/routes.py
import logging
from flask import Blueprint, request, jsonify, g, current_app
from marshmallow import ValidationError

from app.api.errors import error_response
from app.api.posts.schemas import PostCreateSchema, CommentCreateSchema, PostResponseSchema, LikeSchema, CommentSchema
from app.core.security import auth_required


posts_bp = Blueprint('posts_bp', __name__)

@posts_bp.route('', methods=['POST'])
@auth_required
def create_post():
    """
    새로운 게시글을 생성합니다.
    - 요청 본문은 PostCreateSchema에 따라 유효성을 검사합니다.
    - 성공 시, 생성된 게시글 정보를 201 Created 상태 코드와 함께 반환합니다.
    """
    post_service = current_app.services['posts']
    try:
        data = PostCreateSchema().load(request.get_json(silent=True) or {})
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400

    result = post_service.create_post(g.user_id, data['text'])
    if not result.ok:
        return error_response(result)
    return jsonify(PostResponseSchema().dump(result.value)), 201


@posts_bp.route('', methods=['GET'])
@auth_required
def get_posts():
    """모든 게시글을 최신순으로 조회합니다."""
    post_service = current_app.services['posts']
    result = post_service.get_posts()
    if not result.ok:
        return error_response(result)
    return jsonify(PostResponseSchema(many=True).dump(result.value)), 200


@posts_bp.route('/<string:post_id>', methods=['GET'])
@auth_required
def get_post(post_id: str):
    """
    특정 게시글의 상세 정보를 조회합니다.
    """
    post_service = current_app.services['posts']
    result = post_service.get_post(post_id)
    if not result.ok:
        return error_response(result, not_found_status=404)
    return jsonify(PostResponseSchema().dump(result.value)), 200


@posts_bp.route('/<string:post_id>', methods=['DELETE'])
@auth_required
def delete_post(post_id: str):
    """
    특정 게시글을 삭제합니다. (작성자 본인만 가능)
    """
    post_service = current_app.services['posts']
    result = post_service.delete_post(post_id, g.user_id)
    if not result.ok:
        # 삭제 대상이 없는 경우는 400으로 응답합니다.
        return error_response(result, not_found_status=400)
    return jsonify({"message": "게시글이 삭제되었습니다."}), 200


@posts_bp.route('/like/<string:post_id>', methods=['PUT'])
@auth_required
def like_post(post_id: str):
    """게시글에 좋아요를 누르고, 갱신된 좋아요 목록을 반환합니다."""
    post_service = current_app.services['posts']
    result = post_service.like_post(post_id, g.user_id)
    if not result.ok:
        return error_response(result)
    return jsonify(LikeSchema(many=True).dump(result.value)), 200


@posts_bp.route('/unlike/<string:post_id>', methods=['PUT'])
@auth_required
def unlike_post(post_id: str):
    """게시글의 좋아요를 취소하고, 갱신된 좋아요 목록을 반환합니다."""
    post_service = current_app.services['posts']
    result = post_service.unlike_post(post_id, g.user_id)
    if not result.ok:
        return error_response(result)
    return jsonify(LikeSchema(many=True).dump(result.value)), 200


@posts_bp.route('/comment/<string:post_id>', methods=['POST'])
@auth_required
def create_comment(post_id: str):
    """
    특정 게시글에 새로운 댓글을 작성합니다.
    - 성공 시, 갱신된 댓글 목록을 201 Created 상태 코드와 함께 반환합니다.
    """
    post_service = current_app.services['posts']
    try:
        data = CommentCreateSchema().load(request.get_json(silent=True) or {})
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400

    result = post_service.add_comment(post_id, g.user_id, data['text'])
    if not result.ok:
        return error_response(result)
    logging.info(f"댓글 작성 완료 (post_id: {post_id}, user_id: {g.user_id})")
    return jsonify(CommentSchema(many=True).dump(result.value)), 201


@posts_bp.route('/comment/<string:post_id>/<string:comment_id>', methods=['DELETE'])
@auth_required
def delete_comment(post_id: str, comment_id: str):
    """
    특정 댓글을 삭제합니다. (댓글 작성자 본인만 가능)
    """
    post_service = current_app.services['posts']
    result = post_service.delete_comment(post_id, comment_id, g.user_id)
    if not result.ok:
        # 게시글이 없으면 404, 게시글 안에 댓글이 없으면 400
        not_found_status = 400 if result.error_code == "COMMENT_NOT_FOUND" else 404
        return error_response(result, not_found_status=not_found_status)
    return jsonify(CommentSchema(many=True).dump(result.value)), 200
