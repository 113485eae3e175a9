import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from blog_api.core.cache import (
    DEFAULT_TTL,
    POSTS_PATH,
    CacheBackend,
    generate_cache_key,
    invalidate_post_cache,
)
from blog_api.core.errors import NotFoundError, ValidationError
from blog_api.core.validation import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_SORT,
    MAX_ID,
    parse_post_id,
    parse_query_int,
    parse_sort,
    validate_pagination,
)
from blog_api.models.post import Post
from blog_api.repositories.post_repository import PostRepository
from blog_api.schemas.post import PostDetail, PostPage, PostSummary

logger = logging.getLogger(__name__)

NUMERIC_ID = re.compile(r"^[0-9]+$")


@dataclass(frozen=True)
class PostLookup:
    """Outcome of a slug-or-id lookup: either a redirect target or a post body"""
    redirect_slug: Optional[str] = None
    post: Optional[Dict[str, Any]] = None

    @property
    def is_redirect(self) -> bool:
        return self.redirect_slug is not None


def _post_fields(post: Post, tags: list[str]) -> Dict[str, Any]:
    return {
        "id": post.id,
        "slug": post.slug,
        "title": post.title,
        "summary": post.summary,
        "tags": tags,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
        "views": post.views,
    }


class PostService:
    """
    Read side of posts: paginated listing, slug/id lookup and the view counter.

    Results are returned as JSON-ready dicts (camelCase keys) so they can be
    cached and served as-is.
    """

    def __init__(self, post_repo: PostRepository, cache: CacheBackend, ttl: int = DEFAULT_TTL):
        self.post_repo = post_repo
        self.cache = cache
        self.ttl = ttl

    def list_posts(
        self,
        tag: Optional[str] = None,
        page: Any = DEFAULT_PAGE,
        size: Any = DEFAULT_PAGE_SIZE,
        sort: Optional[str] = DEFAULT_SORT,
    ) -> Dict[str, Any]:
        """
        分页获取已发布文章：
        - 可按标签名过滤
        - sort 形如 "views,desc"
        - 空参数使用默认值
        - totalElements 与分页参数无关
        """
        page = parse_query_int(page, DEFAULT_PAGE)
        size = parse_query_int(size, DEFAULT_PAGE_SIZE)
        errors = validate_pagination(page, size)
        try:
            sort_field, direction = parse_sort(sort or DEFAULT_SORT)
        except ValidationError as e:
            errors.append(e.message)
        if errors:
            raise ValidationError(", ".join(errors))

        tag = tag or None
        sort = f"{sort_field},{direction}"
        key = generate_cache_key(POSTS_PATH, {"tag": tag, "page": page, "size": size, "sort": sort})
        return self.cache.get_or_set(
            key,
            lambda: self._fetch_page(tag, page, size, sort_field, direction),
            self.ttl,
        )

    def _fetch_page(self, tag: Optional[str], page: int, size: int, sort_field: str, direction: str) -> Dict[str, Any]:
        offset = page * size
        if offset > MAX_ID:
            posts = []
        else:
            posts = self.post_repo.find_all(
                tag=tag,
                offset=offset,
                limit=size,
                sort_field=sort_field,
                direction=direction,
            )
        total = self.post_repo.count(tag)
        tags_by_post = self.post_repo.get_tags_for_posts([post.id for post in posts])

        result = PostPage(
            content=[PostSummary(**_post_fields(post, tags_by_post.get(post.id, []))) for post in posts],
            total_elements=total,
            page_number=page,
            page_size=size,
        )
        logger.debug(f"Fetched {len(posts)} of {total} posts (tag={tag}, page={page}, size={size})")
        return result.model_dump(mode="json", by_alias=True)

    def get_post(self, slug_or_id: str) -> PostLookup:
        """
        通过 slug 或数字 ID 获取文章：
        - 数字 ID 只返回重定向目标（规范 slug）
        - slug 返回完整文章（含标签）
        """
        if not slug_or_id:
            raise ValidationError("Slug parameter is required")

        if NUMERIC_ID.match(slug_or_id):
            post_id = int(slug_or_id)
            post = self.post_repo.find_by_id(post_id) if post_id <= MAX_ID else None
            if not post:
                raise NotFoundError("Post not found")
            return PostLookup(redirect_slug=post.slug)

        data = self.cache.get_or_set(
            f"{POSTS_PATH}/{slug_or_id}",
            lambda: self._fetch_detail(slug_or_id),
            self.ttl,
        )
        return PostLookup(post=data)

    def _fetch_detail(self, slug: str) -> Dict[str, Any]:
        post = self.post_repo.find_by_slug(slug)
        if not post:
            raise NotFoundError("Post not found")

        tags = self.post_repo.get_tags_for_post(post.id)
        detail = PostDetail(**_post_fields(post, tags), content=post.content)
        return detail.model_dump(mode="json", by_alias=True)

    def increment_views(self, post_id: Any) -> Dict[str, int]:
        """Add one view to a published post and return the stored count"""
        pid = parse_post_id(post_id)

        if not self.post_repo.increment_views(pid):
            raise NotFoundError("Post not found")

        row = self.post_repo.get_views(pid)
        if row is None:
            raise NotFoundError("Post not found")

        views, slug = row
        invalidate_post_cache(self.cache, pid, slug)
        logger.info(f"Incremented views for post id={pid}, views={views}")
        return {"views": views}
