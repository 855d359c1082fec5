from pydantic import BaseModel

class MessageResponse(BaseModel):
    """단순 메시지 응답"""
    success: bool = True
    message: str
