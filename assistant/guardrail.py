from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from langchain_core.language_models.chat_models import BaseChatModel

from assistant.core.messages import message_text
from assistant.core.prompt import GUARDRAIL_PROMPT, REJECTION_MESSAGE


logger = logging.getLogger(__name__)


class InputGuardrailException(Exception):
    """Raised when a question is rejected before reaching the model."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass
class GuardrailResult:
    passed: bool
    message: Optional[str] = None


class InputGuardrail:
    """LLM classifier that only lets airline loyalty questions through.

    The model is asked for a single YES/NO word. When the classification call
    itself errors the question is let through if ``fail_open`` is set,
    otherwise it is rejected like an off-topic question.
    """

    def __init__(self, chat_model: BaseChatModel, fail_open: bool = True) -> None:
        self.chat_model = chat_model
        self.fail_open = fail_open

    def validate(self, question: str) -> GuardrailResult:
        logger.info("Guardrail validating with LLM: %s", question[:50])
        prompt = f"{GUARDRAIL_PROMPT}\n\nUser question: {question}"
        try:
            response = self.chat_model.invoke(prompt)
            answer = message_text(response).strip().upper()
        except Exception as exc:
            logger.exception("Error during LLM guardrail validation: %s", exc)
            if self.fail_open:
                logger.warning("Guardrail validation failed, allowing question through (fail-open)")
                return GuardrailResult(passed=True)
            return GuardrailResult(passed=False, message=REJECTION_MESSAGE)

        logger.info("LLM validation response: %s", answer)
        if answer.startswith("YES"):
            logger.info("Guardrail PASSED - question is airline loyalty related")
            return GuardrailResult(passed=True)

        logger.info("Guardrail FAILED - question is not airline loyalty related")
        return GuardrailResult(passed=False, message=REJECTION_MESSAGE)
