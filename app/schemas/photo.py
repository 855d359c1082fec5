from pydantic import BaseModel
from datetime import datetime

class PhotoResponse(BaseModel):
    """사진 응답"""
    id: int
    filename: str
    original_name: str | None
    path: str
    size: int | None
    timestamp: datetime | None

    class Config:
        from_attributes = True

class PhotoUploadResponse(BaseModel):
    """사진 업로드 응답"""
    success: bool = True
    message: str
    photo: PhotoResponse

class PhotoListResponse(BaseModel):
    """사진 목록 응답"""
    success: bool = True
    photos: list[PhotoResponse]
