from __future__ import annotations

import logging
from typing import List, Sequence

from langchain_core.documents import Document
from langchain_core.vectorstores import InMemoryVectorStore

from assistant.core.prompt import RETRIEVAL_TEMPLATE


logger = logging.getLogger(__name__)


def relevance_from_cosine(cosine: float) -> float:
    return (cosine + 1) / 2


class DocumentRetriever:
    """Top-k lookup over the ingested segments with a relevance floor."""

    def __init__(
        self,
        vector_store: InMemoryVectorStore,
        max_results: int = 5,
        min_score: float = 0.6,
    ) -> None:
        self.vector_store = vector_store
        self.max_results = max_results
        self.min_score = min_score

    def retrieve(self, query: str) -> List[Document]:
        hits = self.vector_store.similarity_search_with_score(query, k=self.max_results)
        documents = [
            doc for doc, cosine in hits if relevance_from_cosine(cosine) >= self.min_score
        ]
        logger.info(
            "Retrieved %s/%s segments above min_score=%s", len(documents), len(hits), self.min_score
        )
        return documents

    @staticmethod
    def augment(question: str, documents: Sequence[Document]) -> str:
        if not documents:
            return question
        contents = "\n\n".join(doc.page_content for doc in documents)
        return RETRIEVAL_TEMPLATE.format(question=question, contents=contents)
