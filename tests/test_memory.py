"""Tests for the bounded conversation memory."""

import pytest
from langchain_core.messages import AIMessage, HumanMessage

from assistant.core import memory
from assistant.core.memory import ChatMemoryStore, MessageWindowChatHistory


class TestMessageWindowChatHistory:

    def test_keeps_messages_in_insertion_order(self):
        history = MessageWindowChatHistory(max_messages=5)
        history.add_message(HumanMessage(content="q1"))
        history.add_message(AIMessage(content="a1"))

        assert [m.content for m in history.messages] == ["q1", "a1"]

    def test_never_exceeds_max_messages(self):
        history = MessageWindowChatHistory(max_messages=3)
        for i in range(10):
            history.add_message(HumanMessage(content=f"m{i}"))
            assert len(history.messages) <= 3

    def test_evicts_oldest_first(self):
        history = MessageWindowChatHistory(max_messages=3)
        for i in range(5):
            history.add_message(HumanMessage(content=f"m{i}"))

        assert [m.content for m in history.messages] == ["m2", "m3", "m4"]

    def test_batch_add_larger_than_window(self):
        history = MessageWindowChatHistory(max_messages=2)
        history.add_messages([HumanMessage(content=f"m{i}") for i in range(4)])

        assert [m.content for m in history.messages] == ["m2", "m3"]

    def test_messages_returns_copy(self):
        history = MessageWindowChatHistory(max_messages=2)
        history.add_message(HumanMessage(content="q"))
        history.messages.append(HumanMessage(content="sneaky"))

        assert len(history.messages) == 1

    def test_clear(self):
        history = MessageWindowChatHistory(max_messages=2)
        history.add_message(HumanMessage(content="q"))
        history.clear()
        assert history.messages == []

    def test_rejects_non_positive_window(self):
        with pytest.raises(ValueError):
            MessageWindowChatHistory(max_messages=0)


class TestChatMemoryStore:

    def test_same_id_returns_same_history(self):
        store = ChatMemoryStore(max_messages=4)
        assert store.get("a") is store.get("a")

    def test_ids_are_isolated(self):
        store = ChatMemoryStore(max_messages=4)
        store.get("a").add_message(HumanMessage(content="for a"))

        assert store.get("b").messages == []
        assert sorted(store.ids()) == ["a", "b"]

    def test_window_size_applies_to_new_histories(self):
        store = ChatMemoryStore(max_messages=2)
        assert store.get("x").max_messages == 2

    def test_clear_removes_history(self):
        store = ChatMemoryStore()
        store.get("a").add_message(HumanMessage(content="q"))

        assert store.clear("a") is True
        assert store.clear("a") is False
        assert store.get("a").messages == []


def test_module_docstring():
    assert memory.__doc__.startswith("Server-side conversation memory.")
