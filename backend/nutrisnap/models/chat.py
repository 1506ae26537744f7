from typing import List, Literal

from pydantic import BaseModel


class ChatMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    history: List[ChatMessage]  # full conversation, oldest first


class ChatResponse(BaseModel):
    reply: str


class ErrorResponse(BaseModel):
    error: str
