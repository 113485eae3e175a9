from fastapi import APIRouter
from blog_api.api.endpoints import (
    posts,
    comments,
    tags,
    sitemap,
    health
)

api_router = APIRouter()

api_router.include_router(posts.router, prefix="/posts", tags=["posts"])
api_router.include_router(comments.router, prefix="/comments", tags=["comments"])
api_router.include_router(tags.router, prefix="/tags", tags=["tags"])
api_router.include_router(sitemap.router, prefix="/sitemap", tags=["sitemap"])
api_router.include_router(health.router, prefix="/health", tags=["health"])
