from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.response import AnswerCreate, ResponseRecord, SaveAnswerResponse, ResponseStatus
from app.services import answer_service
from app.core.logger import logger

router = APIRouter(prefix="/api", tags=["답변"])

@router.post("/save-answer", response_model=SaveAnswerResponse)
def save_answer(
    data: AnswerCreate,
    db: Session = Depends(get_db)
):
    """답변 저장"""
    try:
        response = answer_service.submit_answer(db, data.answer, data.device)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error saving answer")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save answer"
        )

    return SaveAnswerResponse(
        message="Answer saved!",
        data=ResponseRecord.model_validate(response)
    )

@router.get("/response-status", response_model=ResponseStatus)
def get_response_status(db: Session = Depends(get_db)):
    """답변 여부 조회 (공개)"""
    try:
        latest, photo_count = answer_service.get_status(db)
    except SQLAlchemyError:
        logger.exception("Error getting status")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get status"
        )

    return ResponseStatus(
        has_answered=latest is not None,
        answer=latest.answer if latest else None,
        timestamp=latest.timestamp if latest else None,
        photo_count=photo_count
    )
