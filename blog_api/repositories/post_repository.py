from typing import Optional, Sequence

from sqlalchemy import distinct, func, select, update
from sqlalchemy.orm import Session

from blog_api.models.post import Post, PostState
from blog_api.models.post_tag import PostTag
from blog_api.models.tag import Tag

SORT_COLUMNS = {
    "createdAt": Post.created_at,
    "updatedAt": Post.updated_at,
    "views": Post.views,
    "title": Post.title,
}


class PostRepository:
    """
    Data access for posts.

    Every query is restricted to published posts unless stated otherwise.
    """

    def __init__(self, session: Session):
        self.session = session

    def _published(self, tag: Optional[str] = None):
        query = self.session.query(Post).filter(Post.state == PostState.PUBLISHED)
        if tag:
            query = (
                query.join(PostTag, PostTag.post_id == Post.id)
                .join(Tag, Tag.id == PostTag.tag_id)
                .filter(Tag.name == tag)
            )
        return query

    def find_all(
        self,
        tag: Optional[str] = None,
        offset: int = 0,
        limit: int = 10,
        sort_field: str = "createdAt",
        direction: str = "desc",
    ) -> list[Post]:
        """Return one page of published posts, optionally filtered by tag name"""
        column = SORT_COLUMNS[sort_field]
        order = column.asc() if direction == "asc" else column.desc()
        tiebreak = Post.id.asc() if direction == "asc" else Post.id.desc()
        return (
            self._published(tag)
            .distinct()
            .order_by(order, tiebreak)
            .offset(offset)
            .limit(limit)
            .all()
        )

    def count(self, tag: Optional[str] = None) -> int:
        """Count published posts matching the same filter as find_all"""
        return self._published(tag).with_entities(func.count(distinct(Post.id))).scalar() or 0

    def find_by_slug(self, slug: str) -> Optional[Post]:
        return self._published().filter(Post.slug == slug).first()

    def find_by_id(self, post_id: int) -> Optional[Post]:
        return self._published().filter(Post.id == post_id).first()

    def increment_views(self, post_id: int) -> int:
        """
        Atomically add one view to a published post.

        Returns the number of rows updated: 0 means no published post has
        this id and nothing was changed.
        """
        result = self.session.execute(
            update(Post)
            .where(Post.id == post_id, Post.state == PostState.PUBLISHED)
            .values(views=Post.views + 1)
            .execution_options(synchronize_session=False)
        )
        self.session.commit()
        return result.rowcount

    def get_views(self, post_id: int) -> Optional[tuple[int, str]]:
        """Return ``(views, slug)`` of a published post, or None"""
        row = self.session.execute(
            select(Post.views, Post.slug).where(Post.id == post_id, Post.state == PostState.PUBLISHED)
        ).first()
        return (row.views, row.slug) if row else None

    def get_tags_for_post(self, post_id: int) -> list[str]:
        return self.get_tags_for_posts([post_id]).get(post_id, [])

    def get_tags_for_posts(self, post_ids: Sequence[int]) -> dict[int, list[str]]:
        """Fetch tag names for many posts in one query, keyed by post id"""
        if not post_ids:
            return {}

        rows = self.session.execute(
            select(PostTag.post_id, Tag.name)
            .select_from(PostTag)
            .join(Tag, Tag.id == PostTag.tag_id)
            .where(PostTag.post_id.in_(list(post_ids)))
            .order_by(PostTag.post_id, Tag.name)
        ).all()

        tags_by_post: dict[int, list[str]] = {}
        for post_id, name in rows:
            names = tags_by_post.setdefault(post_id, [])
            if name not in names:
                names.append(name)
        return tags_by_post

    def find_all_published_slugs(self) -> list[str]:
        rows = self.session.execute(
            select(Post.slug)
            .where(Post.state == PostState.PUBLISHED)
            .order_by(Post.created_at.desc(), Post.id.desc())
        ).all()
        return [row.slug for row in rows]
