from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.admin import MessageResponse
from app.schemas.response import CheckResponseResult, ResponseRecord
from app.schemas.photo import PhotoResponse, PhotoListResponse
from app.services import answer_service, photo_service
from app.api.deps import verify_admin_key
from app.core.logger import logger

# 모든 엔드포인트는 공유 키 필요
router = APIRouter(
    prefix="/api",
    tags=["관리자"],
    dependencies=[Depends(verify_admin_key)]
)

@router.post("/check-response", response_model=CheckResponseResult)
def check_response(db: Session = Depends(get_db)):
    """최근 답변 + 사진 개수"""
    try:
        latest, photo_count = answer_service.get_status(db)
    except SQLAlchemyError:
        logger.exception("Error checking response")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to check response"
        )

    return CheckResponseResult(
        has_answered=latest is not None,
        response=ResponseRecord.model_validate(latest) if latest else None,
        photo_count=photo_count
    )

@router.post("/delete-responses", response_model=MessageResponse)
def delete_responses(db: Session = Depends(get_db)):
    """모든 답변 삭제"""
    try:
        answer_service.clear_responses(db)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error deleting responses")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete responses"
        )

    return MessageResponse(message="All responses deleted")

@router.post("/admin-get-photos", response_model=PhotoListResponse)
def admin_get_photos(db: Session = Depends(get_db)):
    """사진 목록 조회 (관리자)"""
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
