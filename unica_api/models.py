from pydantic import BaseModel, Field
from typing import List, Literal, Optional
class ChatMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str
class ChatRequest(BaseModel):
    messages: List[ChatMessage] = Field(default_factory=list)
class ChatResponse(BaseModel):
    content: str
class ErrorResponse(BaseModel):
    error: str
class SimulateRequest(BaseModel):
    message: str
class SimilarCaseOut(BaseModel):
    project: str
    quantity: int
    shipDate: str
    leadTimeDays: int
    outcome: str
    note: str
class ScheduleBlockOut(BaseModel):
    id: str
    timeFrame: str
    focus: str
    owner: str
    status: Literal["確定", "調整中", "要確認"]
    note: str
class SimulateResponse(BaseModel):
    content: str
    projectName: Optional[str] = None
    quantity: Optional[int] = None
    matchedKey: Optional[str] = None
    quantityDelta: Optional[int] = None
    shipDate: Optional[str] = None
    history: List[SimilarCaseOut] = Field(default_factory=list)
    schedule: List[ScheduleBlockOut] = Field(default_factory=list)
