from typing import List
from fastapi import APIRouter, Depends
from blog_api.api.deps import get_sitemap_service
from blog_api.schemas.response import ApiResponse, success_response
from blog_api.services.sitemap_service import SitemapService

router = APIRouter()

@router.get("", response_model=ApiResponse[List[str]], summary="Slugs of all published posts")
def get_sitemap(service: SitemapService = Depends(get_sitemap_service)):
    """Slugs of all published posts, newest first"""
    return success_response(service.generate_sitemap())
