from __future__ import annotations

import json
import logging
from typing import Dict, List, Literal, Tuple

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from nutrisnap.client.storage import JsonFileStore, StorageError

logger = logging.getLogger(__name__)

HISTORY_KEY = "@nutrisnap_history"


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"]
    text: str
    error: bool = False  # synthetic connectivity-error turn


_messages_adapter = TypeAdapter(List[Message])


def to_relay_history(messages) -> List[Dict[str, str]]:
    """Map client turns to the relay request shape, dropping error turns."""
    return [
        {"role": "user" if msg.role == "user" else "assistant", "content": msg.text}
        for msg in messages
        if not msg.error
    ]


class HistoryManager:
    """
    Owns the in-memory conversation and mirrors it to local storage.

    Storage problems are logged and never raised: the conversation keeps
    going in memory.
    """

    def __init__(self, store: JsonFileStore, key: str = HISTORY_KEY) -> None:
        self.store = store
        self.key = key
        self._messages: List[Message] = []
        self._reset_requested = False

    @property
    def messages(self) -> Tuple[Message, ...]:
        return tuple(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def load(self) -> Tuple[Message, ...]:
        self._messages = []
        try:
            raw = self.store.get_item(self.key)
        except StorageError as exc:
            logger.error("Failed to load history: %s", exc)
            return self.messages
        if raw is None:
            return self.messages

        try:
            self._messages = _messages_adapter.validate_python(json.loads(raw))
        except (TypeError, ValueError, ValidationError) as exc:
            logger.error("Discarding unreadable history: %s", exc)
        return self.messages

    def append(self, message: Message) -> None:
        self._messages.append(message)
        self.persist()

    def persist(self) -> None:
        payload = json.dumps(
            [m.model_dump() for m in self._messages], ensure_ascii=False
        )
        try:
            self.store.set_item(self.key, payload)
        except StorageError as exc:
            logger.error("Failed to save history: %s", exc)

    # reset is two-step: request, then confirm (or cancel)

    @property
    def reset_requested(self) -> bool:
        return self._reset_requested

    def request_reset(self) -> None:
        self._reset_requested = True

    def cancel_reset(self) -> None:
        self._reset_requested = False

    def confirm_reset(self) -> bool:
        if not self._reset_requested:
            return False
        self._reset_requested = False
        self._messages = []
        try:
            self.store.remove_item(self.key)
        except StorageError as exc:
            logger.error("Failed to remove stored history: %s", exc)
        return True
