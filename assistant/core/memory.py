"""Server-side conversation memory.

Each memory id owns a bounded transcript of user/assistant messages. Once the
window is full the oldest message is evicted. Transcripts live in process
memory only and are lost on restart.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Sequence

from langchain_core.chat_history import BaseChatMessageHistory
from langchain_core.messages import BaseMessage


logger = logging.getLogger(__name__)


class MessageWindowChatHistory(BaseChatMessageHistory):
    """Chat history that keeps at most ``max_messages`` messages."""

    def __init__(self, max_messages: int = 10) -> None:
        if max_messages < 1:
            raise ValueError("max_messages must be at least 1")
        self.max_messages = max_messages
        self._messages: List[BaseMessage] = []
        self._lock = threading.Lock()

    @property
    def messages(self) -> List[BaseMessage]:  # type: ignore[override]
        with self._lock:
            return list(self._messages)

    def add_message(self, message: BaseMessage) -> None:
        self.add_messages([message])

    def add_messages(self, messages: Sequence[BaseMessage]) -> None:
        with self._lock:
            self._messages.extend(messages)
            overflow = len(self._messages) - self.max_messages
            if overflow > 0:
                del self._messages[:overflow]
                logger.debug("Evicted %s oldest message(s) from memory window", overflow)

    def clear(self) -> None:
        with self._lock:
            self._messages.clear()


class ChatMemoryStore:
    """Memory id -> MessageWindowChatHistory, created on first use."""

    def __init__(self, max_messages: int = 10) -> None:
        if max_messages < 1:
            raise ValueError("max_messages must be at least 1")
        self.max_messages = max_messages
        self._histories: Dict[str, MessageWindowChatHistory] = {}
        self._lock = threading.Lock()

    def get(self, memory_id: str) -> MessageWindowChatHistory:
        with self._lock:
            history = self._histories.get(memory_id)
            if history is None:
                history = MessageWindowChatHistory(self.max_messages)
                self._histories[memory_id] = history
                logger.info("Created memory window for id=%s (max=%s)", memory_id, self.max_messages)
            return history

    def clear(self, memory_id: str) -> bool:
        with self._lock:
            history = self._histories.pop(memory_id, None)
        if history is None:
            return False
        history.clear()
        return True

    def ids(self) -> List[str]:
        with self._lock:
            return list(self._histories)
