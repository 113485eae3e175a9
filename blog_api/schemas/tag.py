from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from blog_api.schemas.fields import UTCDateTime

class TagResponse(BaseModel):
    """标签响应模型"""
    id: int = Field(..., description="标签ID")
    name: str = Field(..., description="标签名称")
    post_count: int = Field(..., description="已发布文章数")
    created_at: UTCDateTime = Field(..., description="创建时间")

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
