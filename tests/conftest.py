"""Shared fakes for the assistant test suite."""

from typing import List

import pytest
from langchain_core.embeddings import Embeddings
from langchain_core.language_models.fake_chat_models import GenericFakeChatModel
from langchain_core.messages import BaseMessage
from pydantic import Field

from config.settings import Settings


KEYWORDS = ["delta", "united", "medallion", "premier", "miles", "pizza"]


class KeywordEmbeddings(Embeddings):
    """Bag-of-keywords vectors so similarity is predictable in tests."""

    def _embed(self, text: str) -> List[float]:
        lowered = text.lower()
        vector = [float(lowered.count(word)) for word in KEYWORDS] + [0.0]
        if not any(vector):
            vector[-1] = 1.0
        return vector

    def embed_documents(self, texts: List[str]) -> List[List[float]]:
        return [self._embed(text) for text in texts]

    def embed_query(self, text: str) -> List[float]:
        return self._embed(text)


class ScriptedChatModel(GenericFakeChatModel):
    """Fake chat model that replays scripted replies and records its inputs."""

    received: List[List[BaseMessage]] = Field(default_factory=list)

    def bind_tools(self, tools, **kwargs):
        return self

    def _generate(self, messages, stop=None, run_manager=None, **kwargs):
        self.received.append(list(messages))
        return super()._generate(messages, stop=stop, run_manager=run_manager, **kwargs)


@pytest.fixture
def keyword_embeddings():
    return KeywordEmbeddings()


@pytest.fixture
def scripted_model():
    def factory(*replies):
        return ScriptedChatModel(messages=iter(replies))

    return factory


@pytest.fixture
def settings():
    return Settings()
