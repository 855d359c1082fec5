from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker
from app.config import settings

# SQLite는 스레드 간 커넥션 공유 허용 필요
_connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}

# 데이터베이스 엔진 생성
engine = create_engine(
    settings.database_url,
    connect_args=_connect_args,
    echo=settings.debug  # SQL 쿼리 로그 출력
)

# 세션 팩토리
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base 클래스 (모든 모델의 부모)
Base = declarative_base()

# DB 세션 의존성 (FastAPI에서 사용)
def get_db():
    """DB 세션 생성 및 종료"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db(bind=None) -> None:
    """누락된 테이블 생성"""
    # 메타데이터 등록을 위해 모델 import
    import app.models.response  # noqa: F401
    import app.models.photo  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)
