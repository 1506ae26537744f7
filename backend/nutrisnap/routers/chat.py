from __future__ import annotations

import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from nutrisnap.config import settings
from nutrisnap.models.chat import ChatMessage, ChatRequest, ChatResponse, ErrorResponse
from nutrisnap.services.llm_client import (
    CompletionClient,
    ProviderError,
    get_completion_client,
)
from nutrisnap.utils.logger import log_relay_call

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["chat"],
)

UNAVAILABLE_MESSAGE = "AI is busy. Try again."


def build_messages(
    history: List[ChatMessage],
    system_prompt: str,
    max_messages: Optional[int] = None,
) -> List[Dict[str, str]]:
    """
    System instruction first, then the caller's turns in order.
    With max_messages set only the most recent turns are kept.
    """
    turns = history
    if max_messages is not None:
        turns = history[-max_messages:] if max_messages > 0 else []

    messages: List[Dict[str, str]] = [{"role": "system", "content": system_prompt}]
    messages.extend(msg.model_dump() for msg in turns)
    return messages


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={503: {"model": ErrorResponse}},
)
def chat(
    request: ChatRequest,
    client: CompletionClient = Depends(get_completion_client),
):
    history_len = len(request.history)
    logger.info("Received request with %d messages in history", history_len)

    messages = build_messages(
        request.history,
        settings.system_prompt,
        settings.max_history_messages,
    )
    forwarded_len = len(messages) - 1

    try:
        reply = client.generate(messages)
    except ProviderError as exc:
        logger.error("Completion failed: %s", exc)
        log_relay_call(history_len, forwarded_len, reply=None, error=str(exc))
        return JSONResponse(
            status_code=503,
            content=ErrorResponse(error=UNAVAILABLE_MESSAGE).model_dump(),
        )

    logger.info("Provider replied (%d chars)", len(reply))
    log_relay_call(history_len, forwarded_len, reply=reply)
    return ChatResponse(reply=reply)
