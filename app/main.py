from __future__ import annotations

import html
import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse
from langchain_core.vectorstores import InMemoryVectorStore
from pydantic import BaseModel, Field

from app.mcp_server import mcp
from assistant.assistant import AirlineLoyaltyAssistant, build_assistant
from assistant.guardrail import InputGuardrailException
from assistant.models import build_chat_model, build_embeddings
from assistant.rag.ingestion import DocumentIngestionService
from config.settings import get_settings


logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s - %(message)s")
logger = logging.getLogger("loyalty")

# Single conversation for the whole application; a real deployment would key this per user
MEMORY_ID = "demo-conversation"
EMPTY_QUESTION_ERROR = "Please enter a question about airline loyalty programs."


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info(
        "Config: provider=%s memory=%s rag=%s tools=%s guardrail=%s",
        settings.llm_provider,
        settings.memory_enabled,
        settings.rag_enabled,
        settings.tools_enabled,
        settings.guardrail_enabled,
    )
    chat_model = build_chat_model(settings)

    vector_store: Optional[InMemoryVectorStore] = None
    if settings.rag_enabled:
        vector_store = InMemoryVectorStore(build_embeddings(settings))
        ingestion = DocumentIngestionService(
            vector_store,
            settings.document_urls,
            segment_size=settings.rag_segment_size,
            segment_overlap=settings.rag_segment_overlap,
            timeout=settings.scrape_timeout,
            user_agent=settings.scrape_user_agent,
        )
        ingestion.ingest()

    app.state.assistant = build_assistant(settings, chat_model, vector_store)
    yield


app = FastAPI(title="Airline Loyalty Assistant", version="1.0.0", lifespan=lifespan)
app.mount("/mcp", mcp.sse_app())


def get_assistant(request: Request) -> AirlineLoyaltyAssistant:
    assistant = getattr(request.app.state, "assistant", None)
    if assistant is None:
        raise HTTPException(status_code=503, detail="Assistant is not ready")
    return assistant


class ChatRequest(BaseModel):
    question: str = Field(..., description="User's question")
    memory_id: str = Field(MEMORY_ID, description="Conversation the question belongs to")


def answer_question(assistant: AirlineLoyaltyAssistant, memory_id: str, question: str) -> Dict[str, str]:
    """Run one question through the assistant, collapsing failures into a user-facing error."""
    if not question or not question.strip():
        logger.warning("Empty question submitted")
        return {"answer": "", "error": EMPTY_QUESTION_ERROR}

    try:
        logger.info("Processing question: memory_id=%s question=%s...", memory_id, question[:50])
        answer = assistant.chat(memory_id, question)
        logger.info("Response generated: %s chars", len(answer))
        return {"answer": answer, "error": ""}
    except InputGuardrailException as e:
        logger.info("Question rejected by guardrail")
        return {"answer": "", "error": e.message}
    except Exception as e:
        logger.exception("Error processing question: %s", e)
        return {"answer": "", "error": f"Sorry, I encountered an error: {e}. Please try again."}


def render_page(question: str = "", answer: str = "", error: str = "", has_memory: bool = True) -> str:
    blocks = []
    if error:
        blocks.append(f'<div class="error">{html.escape(error)}</div>')
    if answer:
        blocks.append(f'<div class="answer">{html.escape(answer)}</div>')
    memory_note = '<p class="memory">Conversation memory is active.</p>' if has_memory else ""
    return f"""<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Airline Loyalty Assistant</title></head>
<body>
<h1>Airline Loyalty Assistant</h1>
{memory_note}
<form method="post" action="/">
<textarea name="question" rows="4" cols="80">{html.escape(question)}</textarea>
<button type="submit">Ask</button>
</form>
{"".join(blocks)}
</body>
</html>"""


@app.get("/", response_class=HTMLResponse)
def show_form(assistant: AirlineLoyaltyAssistant = Depends(get_assistant)) -> str:
    return render_page(has_memory=assistant.memory is not None)


@app.post("/", response_class=HTMLResponse)
def ask_question(
    question: str = Form(""),
    assistant: AirlineLoyaltyAssistant = Depends(get_assistant),
) -> str:
    result = answer_question(assistant, MEMORY_ID, question)
    return render_page(
        question=question if question.strip() else "",
        answer=result["answer"],
        error=result["error"],
        has_memory=assistant.memory is not None,
    )


@app.post("/assistant/chat")
def chat(req: ChatRequest, assistant: AirlineLoyaltyAssistant = Depends(get_assistant)) -> Dict[str, Any]:
    result = answer_question(assistant, req.memory_id, req.question)
    if result["error"]:
        return {"error": result["error"]}
    return {"answer": result["answer"]}


@app.delete("/assistant/memory/{memory_id}")
def clear_memory(memory_id: str, assistant: AirlineLoyaltyAssistant = Depends(get_assistant)) -> Dict[str, Any]:
    if assistant.memory is None:
        raise HTTPException(status_code=404, detail="Conversation memory is disabled")
    return {"memory_id": memory_id, "cleared": assistant.memory.clear(memory_id)}


@app.get("/health")
def health():
    return {"status": "ok"}
