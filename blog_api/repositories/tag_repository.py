from sqlalchemy.orm import Session

from blog_api.models.tag import Tag


class TagRepository:
    """Data access for tags"""

    def __init__(self, session: Session):
        self.session = session

    def find_all_active(self) -> list[Tag]:
        """Tags used by at least one post, by name"""
        return (
            self.session.query(Tag)
            .filter(Tag.post_count > 0)
            .order_by(Tag.name.asc())
            .all()
        )
