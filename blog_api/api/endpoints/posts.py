import logging
from typing import Optional
from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse
from blog_api.api.deps import get_post_service
from blog_api.schemas.post import PostDetail, PostPage, PostViews
from blog_api.schemas.response import ApiResponse, success_response
from blog_api.services.post_service import PostService

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", response_model=ApiResponse[PostPage], summary="List published posts")
def list_posts(
    tag: Optional[str] = None,
    page: Optional[str] = None,
    size: Optional[str] = None,
    sort: Optional[str] = None,
    service: PostService = Depends(get_post_service)
):
    """List published posts, optionally filtered by tag name

    Defaults: page=0, size=10, sort=createdAt,desc. Empty values use the defaults.
    """
    data = service.list_posts(tag=tag, page=page, size=size, sort=sort)
    return success_response(data)

@router.get(
    "/{slug_or_id}",
    response_model=ApiResponse[PostDetail],
    responses={301: {"description": "Numeric id, redirects to the canonical slug URL"}},
    summary="Get a post by slug or id"
)
def get_post(
    slug_or_id: str,
    request: Request,
    service: PostService = Depends(get_post_service)
):
    """Get a published post by slug; a numeric id redirects to the slug URL"""
    result = service.get_post(slug_or_id)

    if result.is_redirect:
        location = str(request.url_for("get_post", slug_or_id=result.redirect_slug))
        logger.info(f"Redirecting post {slug_or_id} to {location}")
        return RedirectResponse(location, status_code=301)

    return success_response(result.post)

@router.patch("/{post_id}/views", response_model=ApiResponse[PostViews], summary="Increment post views")
def increment_views(
    post_id: str,
    service: PostService = Depends(get_post_service)
):
    """Increment the view counter of a published post"""
    return success_response(service.increment_views(post_id))
