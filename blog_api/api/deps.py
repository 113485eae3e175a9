import logging
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from blog_api.core.cache import CacheBackend, NullCache, RedisCache
from blog_api.core.config import get_settings
from blog_api.db.database import get_session
from blog_api.repositories.comment_repository import CommentRepository
from blog_api.repositories.post_repository import PostRepository
from blog_api.repositories.tag_repository import TagRepository
from blog_api.services.comment_service import CommentService
from blog_api.services.post_service import PostService
from blog_api.services.sitemap_service import SitemapService
from blog_api.services.tag_service import TagService

logger = logging.getLogger(__name__)


@lru_cache()
def get_cache() -> CacheBackend:
    """获取缓存后端：配置了 REDIS_URL 时使用 Redis，否则不缓存"""
    settings = get_settings()
    if settings.redis_url:
        logger.info("Using Redis response cache")
        return RedisCache.from_url(settings.redis_url)
    logger.info("REDIS_URL not set, response caching disabled")
    return NullCache()


def get_post_service(
    session: Session = Depends(get_session),
    cache: CacheBackend = Depends(get_cache),
) -> PostService:
    return PostService(PostRepository(session), cache, ttl=get_settings().cache_ttl)


def get_comment_service(
    session: Session = Depends(get_session),
    cache: CacheBackend = Depends(get_cache),
) -> CommentService:
    return CommentService(CommentRepository(session), cache, ttl=get_settings().cache_ttl)


def get_tag_service(
    session: Session = Depends(get_session),
    cache: CacheBackend = Depends(get_cache),
) -> TagService:
    return TagService(TagRepository(session), cache, ttl=get_settings().cache_ttl)


def get_sitemap_service(
    session: Session = Depends(get_session),
    cache: CacheBackend = Depends(get_cache),
) -> SitemapService:
    return SitemapService(PostRepository(session), cache, ttl=get_settings().cache_ttl)
