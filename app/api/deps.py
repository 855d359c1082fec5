from typing import Any

from fastapi import Body, Depends, HTTPException, Request, status
import secrets

from app.config import Settings

def get_app_settings(request: Request) -> Settings:
    """앱 생성 시 주입된 설정"""
    return request.app.state.settings

def verify_admin_key(
    data: Any = Body(None),
    settings: Settings = Depends(get_app_settings)
) -> None:
    """공유 키 검증 (정확히 일치해야 통과)"""
    # 객체가 아닌 바디, 문자열이 아닌 키는 모두 불일치
    admin_key = data.get("adminKey") if isinstance(data, dict) else None

    if not isinstance(admin_key, str) or not secrets.compare_digest(
        admin_key.encode(), settings.admin_key.encode()
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid admin key"
        )
