from typing import List

from blog_api.core.cache import DEFAULT_TTL, SITEMAP_PATH, CacheBackend
from blog_api.repositories.post_repository import PostRepository


class SitemapService:
    """Slugs of every published post, newest first, for crawlers"""

    def __init__(self, post_repo: PostRepository, cache: CacheBackend, ttl: int = DEFAULT_TTL):
        self.post_repo = post_repo
        self.cache = cache
        self.ttl = ttl

    def generate_sitemap(self) -> List[str]:
        return self.cache.get_or_set(SITEMAP_PATH, self.post_repo.find_all_published_slugs, self.ttl)
