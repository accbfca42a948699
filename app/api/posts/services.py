# app/api/posts/services.py
import logging
from dataclasses import asdict
from typing import Any, Dict, List

from app.api.users.services import UserService
from app.core.security import is_owner
from app.models.comment import Comment
from app.models.post import Like, Post
from app.services.firestore_service import DocumentStore, new_id
from app.services.results import Outcome, ServiceResult

POSTS = 'posts'
POST_NOT_FOUND = "게시글을 찾을 수 없습니다."


class PostService:
    """
    게시글/좋아요/댓글 관련 비즈니스 로직을 담당하는 서비스 클래스.
    - 모든 변경은 '조회 -> 메모리에서 수정 -> 문서 전체 저장' 순서로 처리합니다.
    - 좋아요와 댓글은 게시글 문서 안에 최신 항목이 앞에 오도록 저장됩니다.
    """
    def __init__(self, store: DocumentStore, user_service: UserService):
        self.store = store
        self.user_service = user_service

    def create_post(self, user_id: str, text: str) -> ServiceResult:
        """새로운 게시글을 생성합니다. 작성자 이름/아바타는 현재 사용자 정보를 복사해 둡니다."""
        author = self.user_service.get_user(user_id)
        if not author.ok:
            return author

        post = Post(
            post_id=new_id(),
            user_id=user_id,
            name=author.value.get('name'),
            avatar=author.value.get('avatar'),
            text=text
        )
        saved = self.store.save(POSTS, post.post_id, asdict(post))
        if not saved.ok:
            return ServiceResult.from_store(saved, "POST_NOT_FOUND", POST_NOT_FOUND)

        logging.info(f"게시글 생성 완료 (post_id: {post.post_id}, user_id: {user_id})")
        return ServiceResult.success(saved.value)

    def get_posts(self) -> ServiceResult:
        """모든 게시글을 최신순으로 조회합니다."""
        found = self.store.find_all_sorted(POSTS, 'created_at', descending=True)
        if not found.ok:
            return ServiceResult.from_store(found, "POST_NOT_FOUND", POST_NOT_FOUND)
        return ServiceResult.success(found.value)

    def get_post(self, post_id: str) -> ServiceResult:
        found = self.store.find_by_id(POSTS, post_id)
        if not found.ok:
            return ServiceResult.from_store(found, "POST_NOT_FOUND", POST_NOT_FOUND)
        return ServiceResult.success(found.value)

    def delete_post(self, post_id: str, user_id: str) -> ServiceResult:
        """게시글을 삭제합니다. (작성자 본인만 가능)"""
        found = self.get_post(post_id)
        if not found.ok:
            return found
        if not is_owner(user_id, found.value):
            return ServiceResult.error(Outcome.NOT_AUTHORIZED, "NOT_AUTHORIZED", "게시글을 삭제할 권한이 없습니다.")

        removed = self.store.remove(POSTS, post_id)
        if not removed.ok:
            return ServiceResult.from_store(removed, "POST_NOT_FOUND", POST_NOT_FOUND)

        logging.info(f"게시글 삭제 완료 (post_id: {post_id}, user_id: {user_id})")
        return ServiceResult.success()

    def like_post(self, post_id: str, user_id: str) -> ServiceResult:
        """좋아요를 추가하고 갱신된 likes 목록을 반환합니다."""
        found = self.get_post(post_id)
        if not found.ok:
            return found

        post = found.value
        likes: List[Dict[str, Any]] = post.get('likes', [])
        if any(is_owner(user_id, like) for like in likes):
            return ServiceResult.error(Outcome.CONFLICT, "ALREADY_LIKED", "이미 좋아요를 누른 게시글입니다.")

        post['likes'] = [asdict(Like(user_id=user_id))] + likes
        return self._save_and_return(post, 'likes')

    def unlike_post(self, post_id: str, user_id: str) -> ServiceResult:
        """요청자의 좋아요 하나만 제거하고 갱신된 likes 목록을 반환합니다."""
        found = self.get_post(post_id)
        if not found.ok:
            return found

        post = found.value
        likes: List[Dict[str, Any]] = post.get('likes', [])
        remove_index = next((i for i, like in enumerate(likes) if is_owner(user_id, like)), None)
        if remove_index is None:
            return ServiceResult.error(Outcome.CONFLICT, "NOT_LIKED_YET", "아직 좋아요를 누르지 않은 게시글입니다.")

        post['likes'] = likes[:remove_index] + likes[remove_index + 1:]
        return self._save_and_return(post, 'likes')

    def add_comment(self, post_id: str, user_id: str, text: str) -> ServiceResult:
        """댓글을 추가하고 갱신된 comments 목록을 반환합니다."""
        found = self.get_post(post_id)
        if not found.ok:
            return found
        author = self.user_service.get_user(user_id)
        if not author.ok:
            return author

        comment = Comment(
            comment_id=new_id(),
            user_id=user_id,
            name=author.value.get('name'),
            avatar=author.value.get('avatar'),
            text=text
        )
        post = found.value
        post['comments'] = [asdict(comment)] + post.get('comments', [])
        return self._save_and_return(post, 'comments')

    def delete_comment(self, post_id: str, comment_id: str, user_id: str) -> ServiceResult:
        """
        댓글을 삭제합니다. 권한은 게시글 작성자가 아닌 '댓글' 작성자 기준으로 확인하며,
        comment_id가 일치하는 댓글 하나만 제거합니다.
        """
        found = self.get_post(post_id)
        if not found.ok:
            return found

        post = found.value
        comments: List[Dict[str, Any]] = post.get('comments', [])
        comment = next((c for c in comments if c.get('comment_id') == comment_id), None)
        if comment is None:
            return ServiceResult.error(Outcome.NOT_FOUND, "COMMENT_NOT_FOUND", "삭제할 댓글을 찾을 수 없습니다.")
        if not is_owner(user_id, comment):
            return ServiceResult.error(Outcome.NOT_AUTHORIZED, "NOT_AUTHORIZED", "댓글을 삭제할 권한이 없습니다.")

        post['comments'] = [c for c in comments if c.get('comment_id') != comment_id]
        return self._save_and_return(post, 'comments')

    def _save_and_return(self, post: Dict[str, Any], field_name: str) -> ServiceResult:
        saved = self.store.save(POSTS, post['post_id'], post)
        if not saved.ok:
            return ServiceResult.from_store(saved, "POST_NOT_FOUND", POST_NOT_FOUND)
        return ServiceResult.success(post[field_name])
