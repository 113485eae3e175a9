from typing import Any, Generic, Optional, TypeVar
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

T = TypeVar("T")

class ErrorBody(BaseModel):
    """错误信息"""
    code: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="Human readable error message")

class ApiResponse(BaseModel, Generic[T]):
    """统一响应信封"""
    success: bool
    data: Optional[T] = None
    error: Optional[ErrorBody] = None

def success_response(data: Any, status_code: int = 200) -> JSONResponse:
    return JSONResponse(
        content={"success": True, "data": jsonable_encoder(data), "error": None},
        status_code=status_code
    )

def error_response(message: str, status_code: int = 400, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        content={
            "success": False,
            "data": None,
            "error": {"code": status_code, "message": message},
        },
        status_code=status_code,
        headers=headers
    )
