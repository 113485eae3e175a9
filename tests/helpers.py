"""测试数据构造工具"""
from datetime import datetime, timedelta, UTC
from blog_api.models.comment import Comment
from blog_api.models.post import Post, PostState
from blog_api.models.post_tag import PostTag
from blog_api.models.tag import Tag

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)

def make_post(session, slug, *, state=PostState.PUBLISHED, tags=(), minutes=0, views=0, title=None, **fields):
    """创建文章；minutes 为相对 BASE_TIME 的创建时间偏移"""
    created = BASE_TIME + timedelta(minutes=minutes)
    post = Post(
        slug=slug,
        title=title or slug.replace("-", " ").title(),
        content=fields.pop("content", f"Content of {slug}"),
        summary=fields.pop("summary", f"Summary of {slug}"),
        state=state,
        views=views,
        created_at=created,
        updated_at=fields.pop("updated_at", created),
        **fields
    )
    session.add(post)
    session.flush()

    for name in tags:
        tag = session.query(Tag).filter(Tag.name == name).first()
        if not tag:
            tag = Tag(name=name, post_count=0, created_at=BASE_TIME)
            session.add(tag)
            session.flush()
        tag.post_count += 1
        session.add(PostTag(post_id=post.id, tag_id=tag.id))

    session.commit()
    return post

def make_comment(session, post, *, content="Nice post", author="alice", minutes=0):
    comment = Comment(
        post_id=post.id,
        content=content,
        author_name=author,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )
    session.add(comment)
    session.commit()
    return comment
