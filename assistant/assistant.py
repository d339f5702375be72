from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from langchain.agents import create_agent
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage
from langchain_core.tools import BaseTool
from langchain_core.vectorstores import InMemoryVectorStore

from assistant.core.memory import ChatMemoryStore
from assistant.core.messages import message_text
from assistant.core.prompt import SYSTEM_PROMPT
from assistant.guardrail import InputGuardrail, InputGuardrailException
from assistant.rag.retriever import DocumentRetriever
from assistant.tools import build_airline_tools
from config.settings import Settings


logger = logging.getLogger(__name__)


class AirlineLoyaltyAssistant:
    """Answers loyalty program questions, optionally with memory, RAG, tools and a guardrail.

    Each feature is off when its collaborator is ``None`` (or ``tools`` is
    empty), so the same class covers the plain chatbot and the fully wired one.
    """

    def __init__(
        self,
        chat_model: BaseChatModel,
        memory: Optional[ChatMemoryStore] = None,
        retriever: Optional[DocumentRetriever] = None,
        tools: Sequence[BaseTool] = (),
        guardrail: Optional[InputGuardrail] = None,
        system_prompt: str = SYSTEM_PROMPT,
    ) -> None:
        self.chat_model = chat_model
        self.memory = memory
        self.retriever = retriever
        self.tools = list(tools)
        self.guardrail = guardrail
        self.system_prompt = system_prompt
        self.agent = create_agent(
            model=chat_model,
            tools=self.tools,
            system_prompt=system_prompt,
        )

    @property
    def features(self) -> Dict[str, bool]:
        return {
            "memory": self.memory is not None,
            "rag": self.retriever is not None,
            "tools": bool(self.tools),
            "guardrail": self.guardrail is not None,
        }

    def history(self, memory_id: str) -> List[BaseMessage]:
        if self.memory is None:
            return []
        return self.memory.get(memory_id).messages

    def chat(self, memory_id: str, question: str) -> str:
        if self.guardrail is not None:
            result = self.guardrail.validate(question)
            if not result.passed:
                raise InputGuardrailException(result.message or "Question rejected")

        user_text = question
        if self.retriever is not None:
            documents = self.retriever.retrieve(question)
            user_text = self.retriever.augment(question, documents)

        messages = self.history(memory_id) + [HumanMessage(content=user_text)]
        logger.info(
            "Invoking model: memory_id=%s history=%s augmented=%s tools=%s",
            memory_id,
            len(messages) - 1,
            user_text != question,
            len(self.tools),
        )
        result = self.agent.invoke({"messages": messages})
        answer = message_text(result["messages"][-1]).strip()

        if self.memory is not None:
            self.memory.get(memory_id).add_messages(
                [HumanMessage(content=question), AIMessage(content=answer)]
            )
        return answer


def build_assistant(
    settings: Settings,
    chat_model: BaseChatModel,
    vector_store: Optional[InMemoryVectorStore] = None,
) -> AirlineLoyaltyAssistant:
    memory = ChatMemoryStore(settings.memory_max_messages) if settings.memory_enabled else None

    retriever = None
    if settings.rag_enabled and vector_store is not None:
        retriever = DocumentRetriever(
            vector_store,
            max_results=settings.rag_max_results,
            min_score=settings.rag_min_score,
        )

    tools = build_airline_tools() if settings.tools_enabled else []

    guardrail = None
    if settings.guardrail_enabled:
        guardrail = InputGuardrail(chat_model, fail_open=settings.guardrail_fail_open)

    assistant = AirlineLoyaltyAssistant(
        chat_model,
        memory=memory,
        retriever=retriever,
        tools=tools,
        guardrail=guardrail,
    )
    logger.info("Assistant ready with features: %s", assistant.features)
    return assistant
