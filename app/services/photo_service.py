from sqlalchemy.orm import Session
from starlette.datastructures import UploadFile
import os

from app.models.photo import Photo
from app.core.file_security import validate_file_size, generate_stored_filename
from app.core.logger import logger

# 파일명 충돌 시 재시도 횟수
MAX_FILENAME_ATTEMPTS = 5

def _write_unique_file(upload_dir: str, original_name: str | None, content: bytes) -> str:
    """고유 파일명으로 저장 (기존 파일 덮어쓰기 금지)"""

    os.makedirs(upload_dir, exist_ok=True)

    for _ in range(MAX_FILENAME_ATTEMPTS):
        filename = generate_stored_filename(original_name)
        file_path = os.path.join(upload_dir, filename)
        try:
            with open(file_path, "xb") as buffer:
                buffer.write(content)
        except FileExistsError:
            logger.warning(f"Filename collision, regenerating: {filename}")
            continue
        return filename

    raise FileExistsError(f"Could not allocate a unique filename in {upload_dir}")

def save_photo(
    db: Session,
    file: UploadFile,
    upload_dir: str,
    max_size: int
) -> Photo:
    """사진 저장: 크기 검증 -> 디스크 쓰기 -> 메타데이터 저장"""

    # 크기 초과 시 디스크/DB 쓰기 전에 거부
    validate_file_size(file, max_size)

    content = file.file.read()
    filename = _write_unique_file(upload_dir, file.filename, content)

    # 디스크 쓰기와 DB 저장은 별개 (보상 처리 없음)
    photo = Photo(
        filename=filename,
        original_name=file.filename,
        path=f"/uploads/{filename}",
        size=len(content)
    )
    db.add(photo)
    db.commit()
    db.refresh(photo)

    logger.info(f"Photo uploaded: {file.filename} -> {filename} ({len(content)} bytes)")
    return photo

def list_photos(db: Session) -> list[Photo]:
    """전체 사진 (최신순)"""
    return db.query(Photo)\
        .order_by(Photo.timestamp.desc(), Photo.id.desc())\
        .all()

def count_photos(db: Session) -> int:
    """사진 개수"""
    return db.query(Photo).count()
