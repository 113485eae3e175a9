import uuid
from blog_api.models.comment import Comment
from blog_api.models.post import PostState
from tests.helpers import make_comment, make_post

class TestCommentList:
    def test_list_comments_oldest_first(self, client, db):
        """测试评论按创建时间升序"""
        post = make_post(db, "hello")
        make_comment(db, post, content="second", minutes=5)
        make_comment(db, post, content="first", minutes=1)

        response = client.get(f"/comments/{post.id}")
        assert response.status_code == 200
        comments = response.json()["data"]
        assert [c["content"] for c in comments] == ["first", "second"]
        assert comments[0]["authorName"] == "alice"
        assert comments[0]["postId"] == post.id

    def test_empty_list_is_cached(self, client, db, cache, statements):
        """测试空列表同样缓存命中"""
        post = make_post(db, "quiet")
        assert client.get(f"/comments/{post.id}").json()["data"] == []

        statements.reset()
        assert client.get(f"/comments/{post.id}").json()["data"] == []
        assert statements.count == 0
        assert cache.keys() == [f"/comments/{post.id}"]

    def test_list_on_draft(self, client, db):
        """测试草稿文章的评论不可见"""
        draft = make_post(db, "draft", state=PostState.DRAFT)
        make_comment(db, draft)
        response = client.get(f"/comments/{draft.id}")
        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Post not found"

    def test_list_on_missing_post(self, client):
        assert client.get("/comments/42").status_code == 404

    def test_list_invalid_post_id(self, client):
        response = client.get("/comments/abc")
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Invalid post ID"

class TestCommentCreation:
    def test_create_comment(self, client, db):
        """测试创建评论"""
        post = make_post(db, "hello")
        response = client.post(f"/comments/{post.id}", json={"content": "Great read", "author": "bob"})
        assert response.status_code == 200

        body = response.json()
        assert body["success"] is True
        comment = body["data"]
        uuid.UUID(comment["id"])
        assert comment["content"] == "Great read"
        assert comment["authorName"] == "bob"
        assert comment["postId"] == post.id
        assert comment["createdAt"]

    def test_create_strips_whitespace(self, client, db):
        """测试保存去除首尾空白后的内容"""
        post = make_post(db, "hello")
        response = client.post(f"/comments/{post.id}", json={"content": "  hi  ", "author": "  bob "})
        data = response.json()["data"]
        assert data["content"] == "hi"
        assert data["authorName"] == "bob"

        stored = db.query(Comment).filter(Comment.id == data["id"]).one()
        assert stored.content == "hi"
        assert stored.author_name == "bob"

    def test_create_invalidates_list_cache(self, client, db, cache):
        """测试创建评论后列表缓存失效"""
        post = make_post(db, "hello")
        assert client.get(f"/comments/{post.id}").json()["data"] == []

        client.post(f"/comments/{post.id}", json={"content": "first!", "author": "carol"})
        assert f"/comments/{post.id}" not in cache.keys()

        comments = client.get(f"/comments/{post.id}").json()["data"]
        assert [c["content"] for c in comments] == ["first!"]

    def test_missing_fields(self, client, db):
        """测试一次报告所有字段错误"""
        post = make_post(db, "hello")
        response = client.post(f"/comments/{post.id}", json={})
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "content is required, author is required"

    def test_missing_body(self, client, db):
        post = make_post(db, "hello")
        response = client.post(f"/comments/{post.id}")
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "content is required, author is required"

    def test_length_limits(self, client, db):
        """测试长度校验"""
        post = make_post(db, "hello")
        response = client.post(f"/comments/{post.id}", json={"content": "x" * 501, "author": "a"})
        assert response.status_code == 400
        assert response.json()["error"]["message"] == (
            "content must not exceed 500 characters, author must be at least 2 characters"
        )

        response = client.post(f"/comments/{post.id}", json={"content": "x" * 500, "author": "y" * 21})
        assert response.json()["error"]["message"] == "author must not exceed 20 characters"

    def test_whitespace_only_content(self, client, db):
        post = make_post(db, "hello")
        response = client.post(f"/comments/{post.id}", json={"content": "   ", "author": "bob"})
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "content must be at least 1 characters"

    def test_non_string_fields(self, client, db):
        post = make_post(db, "hello")
        response = client.post(f"/comments/{post.id}", json={"content": ["a"], "author": 12})
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "content must be a string, author must be a string"

    def test_post_checked_before_body(self, client, db):
        """测试先检查文章存在性，再校验请求体"""
        draft = make_post(db, "draft", state=PostState.DRAFT)
        response = client.post(f"/comments/{draft.id}", json={})
        assert response.status_code == 404

        response = client.post("/comments/999", json={"content": "hi", "author": "bob"})
        assert response.status_code == 404
        assert db.query(Comment).count() == 0

    def test_invalid_post_id(self, client):
        response = client.post("/comments/-3", json={"content": "hi", "author": "bob"})
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Invalid post ID: must be a positive integer"

    def test_malformed_json(self, client, db):
        post = make_post(db, "hello")
        response = client.post(
            f"/comments/{post.id}",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["success"] is False

class TestCommentIdRange:
    def test_list_huge_post_id(self, client):
        """测试超出整数范围的文章 ID 返回 404"""
        response = client.get("/comments/99999999999999999999999")
        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Post not found"

    def test_create_huge_post_id(self, client):
        response = client.post("/comments/99999999999999999999999", json={"content": "hi", "author": "bob"})
        assert response.status_code == 404

    def test_created_at_is_utc(self, client, db):
        post = make_post(db, "hello")
        make_comment(db, post)
        comment = client.get(f"/comments/{post.id}").json()["data"][0]
        assert comment["createdAt"] == "2024-01-01T12:00:00Z"
