from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from blog_api.schemas.fields import UTCDateTime
from typing import Optional, List

class PostBase(BaseModel):
    """文章基础模型"""
    id: int
    slug: str
    title: str
    summary: Optional[str] = None
    tags: List[str] = Field(default_factory=list, description="标签名称列表，按名称排序")
    created_at: UTCDateTime
    updated_at: UTCDateTime
    views: int

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

class PostSummary(PostBase):
    """文章列表项"""
    pass

class PostDetail(PostBase):
    """文章详情"""
    content: str

class PostPage(BaseModel):
    """分页文章列表"""
    content: List[PostSummary]
    total_elements: int
    page_number: int
    page_size: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class PostViews(BaseModel):
    views: int
