import os
import time
import secrets
from fastapi import UploadFile, HTTPException, status

# 설정
MAX_FILE_SIZE = 5 * 1024 * 1024  # 5MB
MAX_EXTENSION_LENGTH = 10

def get_file_size(file: UploadFile) -> int:
    """업로드 파일 크기 (bytes)"""
    file.file.seek(0, 2)  # 파일 끝으로 이동
    size = file.file.tell()  # 현재 위치 = 파일 크기
    file.file.seek(0)  # 다시 처음으로
    return size

def validate_file_size(file: UploadFile, max_size: int = MAX_FILE_SIZE) -> int:
    """파일 크기 검증 (디스크 쓰기 전)"""
    size = get_file_size(file)

    if size > max_size:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File too large. Max: {max_size // 1024 // 1024}MB"
        )
    return size

def safe_extension(filename: str | None) -> str:
    """원본 파일명에서 안전한 확장자 추출"""
    if not filename:
        return ""

    filename = os.path.basename(filename)  # 경로 제거
    _, ext = os.path.splitext(filename)

    # 알파벳, 숫자만 허용
    safe_ext = "".join(c for c in ext[1:] if c.isascii() and c.isalnum())
    if not safe_ext:
        return ""

    return f".{safe_ext[:MAX_EXTENSION_LENGTH].lower()}"

def generate_stored_filename(original_name: str | None) -> str:
    """충돌 방지 파일명 생성 (시간 + 난수 + 원본 확장자)"""
    millis = int(time.time() * 1000)
    suffix = secrets.randbelow(10**9)
    return f"{millis}-{suffix}{safe_extension(original_name)}"
