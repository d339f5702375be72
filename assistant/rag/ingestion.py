from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from langchain_core.documents import Document
from langchain_core.vectorstores import VectorStore
from langchain_text_splitters import RecursiveCharacterTextSplitter

from assistant.tools.scraper import airline_from_url, fetch_page


logger = logging.getLogger(__name__)


class DocumentIngestionService:
    """Scrapes the loyalty program pages and loads them into a vector store.

    Pages are fetched concurrently, one worker per URL, and joined before
    anything is embedded. A page that fails to load is logged and skipped so
    the remaining sources are still ingested.
    """

    def __init__(
        self,
        vector_store: VectorStore,
        urls: Sequence[str],
        segment_size: int = 500,
        segment_overlap: int = 50,
        timeout: float = 30.0,
        user_agent: str = "",
    ) -> None:
        self.vector_store = vector_store
        self.urls = list(urls)
        self.timeout = timeout
        self.user_agent = user_agent
        self.splitter = RecursiveCharacterTextSplitter(
            chunk_size=segment_size,
            chunk_overlap=segment_overlap,
        )

    def load_document(self, url: str) -> Document:
        logger.info("Loading document from: %s", url)
        page = fetch_page(url, timeout=self.timeout, user_agent=self.user_agent)
        logger.info("Loaded document from %s: %s (%s characters)", url, page.title, len(page.text))
        return Document(
            page_content=page.text,
            metadata={
                "source": url,
                "title": page.title,
                "airline": airline_from_url(url),
            },
        )

    def _load_or_none(self, url: str) -> Optional[Document]:
        try:
            return self.load_document(url)
        except Exception:
            logger.exception("Failed to load document from %s", url)
            return None

    def load_documents(self) -> List[Document]:
        if not self.urls:
            return []
        with ThreadPoolExecutor(max_workers=len(self.urls)) as pool:
            results = list(pool.map(self._load_or_none, self.urls))
        return [doc for doc in results if doc is not None and doc.page_content]

    def ingest(self) -> int:
        """Load, split and store all documents. Returns the number of segments stored."""
        logger.info("Starting document ingestion from %s URLs...", len(self.urls))
        documents = self.load_documents()
        if not documents:
            logger.warning("No documents were loaded. RAG will not be available.")
            return 0

        logger.info("Loaded %s documents. Starting embedding and ingestion...", len(documents))
        try:
            segments = self.splitter.split_documents(documents)
            self.vector_store.add_documents(segments)
        except Exception:
            logger.exception("Failed to ingest documents")
            raise

        logger.info("Document ingestion completed: %s segments stored. RAG is ready.", len(segments))
        return len(segments)
