from fastapi import APIRouter, Depends, UploadFile, File, HTTPException, status
from starlette.datastructures import UploadFile as StarletteUploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import Settings
from app.database import get_db
from app.schemas.photo import PhotoResponse, PhotoUploadResponse, PhotoListResponse
from app.services import photo_service
from app.api.deps import get_app_settings
from app.core.logger import logger

router = APIRouter(prefix="/api", tags=["사진"])

# 동기 핸들러: 파일 쓰기와 DB 커밋은 스레드풀에서 실행
@router.post("/upload-photo", response_model=PhotoUploadResponse)
def upload_photo(
    photo: UploadFile | str | None = File(None),
    settings: Settings = Depends(get_app_settings),
    db: Session = Depends(get_db)
):
    """사진 업로드 (최대 5MB)"""

    # 텍스트 필드로 온 photo는 파일 없음으로 취급
    if not isinstance(photo, StarletteUploadFile) or not photo.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file uploaded"
        )

    try:
        saved = photo_service.save_photo(
            db, photo, settings.upload_dir, settings.max_upload_size
        )
    except (SQLAlchemyError, OSError):
        db.rollback()
        logger.exception("Error saving photo")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save photo"
        )

    return PhotoUploadResponse(
        message="Photo uploaded successfully",
        photo=PhotoResponse.model_validate(saved)
    )

@router.get("/get-photos", response_model=PhotoListResponse)
def get_photos(db: Session = Depends(get_db)):
    """사진 목록 조회 (최신순)"""
    try:
        photos = photo_service.list_photos(db)
    except SQLAlchemyError:
        logger.exception("Error getting photos")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get photos"
        )

    return PhotoListResponse(
        photos=[PhotoResponse.model_validate(photo) for photo in photos]
    )
