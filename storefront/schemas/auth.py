"""
인증 관련 Pydantic 스키마

API 요청/응답 모델을 정의합니다.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """
    로그인 요청 스키마

    Example:
        {
            "username": "admin",
            "password": "password"
        }
    """

    username: str = Field(..., description="사용자명", examples=["admin"])
    password: str = Field(..., description="비밀번호", examples=["password"])


class SessionResponse(BaseModel):
    """
    세션 확인 응답 스키마

    Example:
        {
            "isAuthenticated": true,
            "username": "admin"
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    is_authenticated: bool = Field(..., alias="isAuthenticated")
    username: Optional[str] = Field(None, description="인증된 경우에만 포함")
