from typing import List, Optional
from fastapi import APIRouter, Depends
from blog_api.api.deps import get_comment_service
from blog_api.schemas.comment import CommentCreate, CommentResponse
from blog_api.schemas.response import ApiResponse, success_response
from blog_api.services.comment_service import CommentService

router = APIRouter()

@router.get("/{post_id}", response_model=ApiResponse[List[CommentResponse]], summary="List all comments on a post")
def list_comments(
    post_id: str,
    service: CommentService = Depends(get_comment_service)
):
    """List all comments on a post"""
    return success_response(service.list_comments(post_id))

@router.post("/{post_id}", response_model=ApiResponse[CommentResponse], summary="Create a comment on a post")
def create_comment(
    post_id: str,
    comment: Optional[CommentCreate] = None,
    service: CommentService = Depends(get_comment_service)
):
    """Create a comment on a post"""
    data = comment.model_dump() if comment else None
    return success_response(service.create_comment(post_id, data))
