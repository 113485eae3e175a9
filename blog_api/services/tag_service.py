from typing import Any, Dict, List

from blog_api.core.cache import DEFAULT_TTL, TAGS_PATH, CacheBackend
from blog_api.repositories.tag_repository import TagRepository
from blog_api.schemas.tag import TagResponse


class TagService:
    def __init__(self, tag_repo: TagRepository, cache: CacheBackend, ttl: int = DEFAULT_TTL):
        self.tag_repo = tag_repo
        self.cache = cache
        self.ttl = ttl

    def list_tags(self) -> List[Dict[str, Any]]:
        """All tags with at least one post, sorted by name"""
        return self.cache.get_or_set(TAGS_PATH, self._fetch, self.ttl)

    def _fetch(self) -> List[Dict[str, Any]]:
        return [
            TagResponse.model_validate(tag).model_dump(mode="json", by_alias=True)
            for tag in self.tag_repo.find_all_active()
        ]
