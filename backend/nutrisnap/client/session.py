from __future__ import annotations

import logging
import threading
from typing import Optional

from nutrisnap.client.history import HistoryManager, Message, to_relay_history
from nutrisnap.client.relay import RelayClient, RelayError

logger = logging.getLogger(__name__)

CONNECTION_ERROR_TEXT = "I'm having trouble connecting. Is the backend live?"


class ChatSession:
    """
    Send flow for one client: at most one relay call in flight.

    The busy gate is a lock taken with a non-blocking acquire, so checking
    and setting it is a single step.
    """

    def __init__(self, history: HistoryManager, relay: RelayClient) -> None:
        self.history = history
        self.relay = relay
        self._busy = threading.Lock()

    @property
    def is_busy(self) -> bool:
        return self._busy.locked()

    def send(self, text: str) -> Optional[Message]:
        """
        Returns the appended assistant message, or None when the send was
        suppressed (blank input or a reply still pending).
        """
        if not text or not text.strip():
            return None
        if not self._busy.acquire(blocking=False):
            logger.debug("Send ignored, a reply is still pending")
            return None

        try:
            self.history.append(Message(role="user", text=text))
            payload = to_relay_history(self.history.messages)

            try:
                reply = self.relay.send(payload)
            except RelayError as exc:
                logger.error("Relay call failed: %s", exc)
                answer = Message(role="assistant", text=CONNECTION_ERROR_TEXT, error=True)
            else:
                answer = Message(role="assistant", text=reply)

            self.history.append(answer)
            return answer
        finally:
            self._busy.release()
