from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from app.database import Base

class Photo(Base):
    """사진 모델"""
    __tablename__ = "photos"

    # 기본 필드
    id = Column(Integer, primary_key=True, autoincrement=True)

    # 파일 정보
    filename = Column(String, unique=True, nullable=False)  # 서버 생성 파일명
    original_name = Column(String)  # 클라이언트 원본 파일명
    path = Column(String, nullable=False)  # 공개 경로 (/uploads/...)
    size = Column(Integer)  # 파일 크기 (bytes)

    # 타임스탬프
    timestamp = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    def __repr__(self):
        return f"<Photo {self.filename}>"
