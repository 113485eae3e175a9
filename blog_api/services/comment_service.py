import logging
import uuid
from datetime import datetime, UTC
from typing import Any, Dict, List, Mapping, Optional

from blog_api.core.cache import COMMENTS_PATH, DEFAULT_TTL, CacheBackend, invalidate_comment_cache
from blog_api.core.errors import NotFoundError, ValidationError
from blog_api.core.validation import parse_post_id, validate_comment
from blog_api.models.comment import Comment
from blog_api.repositories.comment_repository import CommentRepository
from blog_api.schemas.comment import CommentResponse

logger = logging.getLogger(__name__)


def _to_dict(comment: Comment) -> Dict[str, Any]:
    return CommentResponse.model_validate(comment).model_dump(mode="json", by_alias=True)


class CommentService:
    """Public comment operations: list per post and create"""

    def __init__(self, comment_repo: CommentRepository, cache: CacheBackend, ttl: int = DEFAULT_TTL):
        self.comment_repo = comment_repo
        self.cache = cache
        self.ttl = ttl

    def _ensure_published(self, post_id: int) -> None:
        if not self.comment_repo.post_exists(post_id):
            raise NotFoundError("Post not found")

    def list_comments(self, post_id: Any) -> List[Dict[str, Any]]:
        """获取文章的全部评论（按创建时间升序）"""
        pid = parse_post_id(post_id)

        def fetch() -> List[Dict[str, Any]]:
            self._ensure_published(pid)
            return [_to_dict(c) for c in self.comment_repo.find_by_post_id(pid)]

        return self.cache.get_or_set(f"{COMMENTS_PATH}/{pid}", fetch, self.ttl)

    def create_comment(self, post_id: Any, data: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """
        创建评论：
        1. 校验文章 ID
        2. 文章必须存在且已发布（先于请求体校验）
        3. 校验 content / author，一次报告全部错误
        4. 保存并使该文章的评论缓存失效
        """
        pid = parse_post_id(post_id)
        self._ensure_published(pid)

        errors = validate_comment(data)
        if errors:
            raise ValidationError(", ".join(errors))

        comment = Comment(
            id=str(uuid.uuid4()),
            post_id=pid,
            content=data["content"].strip(),
            author_name=data["author"].strip(),
            created_at=datetime.now(UTC),
        )
        self.comment_repo.create(comment)
        invalidate_comment_cache(self.cache, pid)
        logger.info(f"Created comment id={comment.id} on post id={pid}")
        return _to_dict(comment)
