from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from blog_api.schemas.fields import UTCDateTime
from typing import Any, Optional

class CommentCreate(BaseModel):
    """创建评论请求模型

    Type and length checks run in the comment service, after the post lookup.
    """
    content: Optional[Any] = Field(None, description="评论内容")
    author: Optional[Any] = Field(None, description="评论者名称")

class CommentResponse(BaseModel):
    """评论响应模型"""
    id: str = Field(..., description="评论ID")
    content: str = Field(..., description="评论内容")
    author_name: str = Field(..., description="评论者名称")
    created_at: UTCDateTime = Field(..., description="创建时间")
    post_id: int = Field(..., description="文章ID")

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
