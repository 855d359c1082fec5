from sqlalchemy.orm import Session
from app.models.response import Response
from app.services.photo_service import count_photos
from app.core.logger import logger

DEFAULT_DEVICE = "unknown"

def submit_answer(db: Session, answer: str, device: str | None = None) -> Response:
    """답변 저장 (내용 검증 없음)"""

    response = Response(answer=answer, device=device or DEFAULT_DEVICE)
    db.add(response)
    db.commit()
    db.refresh(response)

    logger.info(f"Answer saved: {answer} (device={response.device}, id={response.id})")
    return response

def get_latest_response(db: Session) -> Response | None:
    """가장 최근 답변"""
    return db.query(Response)\
        .order_by(Response.timestamp.desc(), Response.id.desc())\
        .first()

def get_status(db: Session) -> tuple[Response | None, int]:
    """최근 답변 + 사진 개수"""
    return get_latest_response(db), count_photos(db)

def clear_responses(db: Session) -> int:
    """모든 답변 삭제 (복구 불가)"""

    deleted = db.query(Response).delete(synchronize_session=False)
    db.commit()

    logger.warning(f"All responses deleted by admin ({deleted} rows)")
    return deleted
