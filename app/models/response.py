from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from app.database import Base

class Response(Base):
    """답변 모델"""
    __tablename__ = "responses"

    # 기본 필드
    id = Column(Integer, primary_key=True, autoincrement=True)
    answer = Column(String)  # 내용 검증 없음
    device = Column(String, default="unknown")

    # 타임스탬프 (서버 시각)
    timestamp = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    def __repr__(self):
        return f"<Response {self.id} {self.answer}>"
