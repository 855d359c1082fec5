from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime

class AnswerCreate(BaseModel):
    """답변 저장 요청"""
    answer: str
    device: str | None = None

class ResponseRecord(BaseModel):
    """저장된 답변"""
    id: int
    answer: str | None
    device: str | None
    timestamp: datetime | None

    class Config:
        from_attributes = True

class SaveAnswerResponse(BaseModel):
    """답변 저장 응답"""
    success: bool = True
    message: str
    data: ResponseRecord

class ResponseStatus(BaseModel):
    """공개 상태 조회 응답"""
    model_config = ConfigDict(populate_by_name=True)

    has_answered: bool = Field(alias="hasAnswered")
    answer: str | None
    timestamp: datetime | None
    photo_count: int = Field(alias="photoCount")

class CheckResponseResult(BaseModel):
    """관리자 상태 조회 응답"""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    has_answered: bool = Field(alias="hasAnswered")
    response: ResponseRecord | None
    photo_count: int = Field(alias="photoCount")
