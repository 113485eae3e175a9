from typing import List
from fastapi import APIRouter, Depends
from blog_api.api.deps import get_tag_service
from blog_api.schemas.response import ApiResponse, success_response
from blog_api.schemas.tag import TagResponse
from blog_api.services.tag_service import TagService

router = APIRouter()

@router.get("", response_model=ApiResponse[List[TagResponse]], summary="List all tags")
def list_tags(service: TagService = Depends(get_tag_service)):
    """List all tags that have at least one post"""
    return success_response(service.list_tags())
