from blog_api.core.cache import invalidate_tag_cache
from blog_api.models.tag import Tag
from tests.helpers import BASE_TIME, make_post

class TestTagList:
    def test_list_tags_by_name(self, client, db):
        """测试标签按名称排序，且只返回有文章的标签"""
        make_post(db, "one", tags=["web", "python"])
        make_post(db, "two", tags=["python"])
        db.add(Tag(name="unused", post_count=0, created_at=BASE_TIME))
        db.commit()

        response = client.get("/tags")
        assert response.status_code == 200
        tags = response.json()["data"]
        assert [t["name"] for t in tags] == ["python", "web"]
        assert tags[0]["postCount"] == 2
        assert tags[1]["postCount"] == 1
        assert "id" in tags[0] and "createdAt" in tags[0]

    def test_no_tags(self, client):
        response = client.get("/tags")
        assert response.json() == {"success": True, "data": [], "error": None}

    def test_tags_cached_until_invalidated(self, client, db, cache):
        """测试标签缓存与失效"""
        make_post(db, "one", tags=["python"])
        assert len(client.get("/tags").json()["data"]) == 1

        make_post(db, "two", tags=["go"])
        assert len(client.get("/tags").json()["data"]) == 1

        invalidate_tag_cache(cache)
        assert [t["name"] for t in client.get("/tags").json()["data"]] == ["go", "python"]
