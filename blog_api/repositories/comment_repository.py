from sqlalchemy import select
from sqlalchemy.orm import Session

from blog_api.models.comment import Comment
from blog_api.models.post import Post, PostState


class CommentRepository:
    """Data access for comments"""

    def __init__(self, session: Session):
        self.session = session

    def find_by_post_id(self, post_id: int) -> list[Comment]:
        """All comments of a post, oldest first"""
        return (
            self.session.query(Comment)
            .filter(Comment.post_id == post_id)
            .order_by(Comment.created_at.asc(), Comment.id.asc())
            .all()
        )

    def create(self, comment: Comment) -> Comment:
        self.session.add(comment)
        self.session.commit()
        return comment

    def post_exists(self, post_id: int) -> bool:
        """True if a published post with this id exists"""
        row = self.session.execute(
            select(Post.id).where(Post.id == post_id, Post.state == PostState.PUBLISHED)
        ).first()
        return row is not None
