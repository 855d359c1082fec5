from loguru import logger
import sys
import os

from app.config import Settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<magenta>{extra[request_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[request_id]} | {name}:{function}:{line} - {message}"

# 요청 밖 로그에도 request_id 필드 존재
logger.configure(extra={"request_id": "-"})

def configure_logging(settings: Settings) -> None:
    """설정 기반 로그 싱크 재구성 (콘솔 + 전체 로그 + 에러 로그)"""

    os.makedirs(settings.log_dir, exist_ok=True)

    # 이전 싱크 제거 후 다시 등록
    logger.remove()

    logger.add(
        sys.stdout,
        colorize=True,
        format=CONSOLE_FORMAT,
        level=settings.log_level
    )

    # 모든 로그
    logger.add(
        os.path.join(settings.log_dir, "sweetbyte.log"),
        rotation=settings.log_rotation,
        retention=settings.log_retention,
        compression="zip",
        format=FILE_FORMAT,
        level="DEBUG"
    )

    # 에러 전용 (스토리지 실패 원인은 여기에만 남음)
    logger.add(
        os.path.join(settings.log_dir, "error.log"),
        rotation=settings.log_rotation,
        retention=settings.log_retention,
        compression="zip",
        format=FILE_FORMAT,
        level="ERROR"
    )
