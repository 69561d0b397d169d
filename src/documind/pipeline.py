import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from documind.chunking.chunking import chunk_document
from documind.chunking.models import Chunk, ChunkKind
from documind.embeddings.base import EmbeddingsClient
from documind.generate.citation import GeneratedAnswer, process_answer
from documind.generate.prompt import CitationLegendEntry, PromptBuilder, build_citation_legend
from documind.generate.stream import collect_stream
from documind.index.indexer import DEFAULT_BATCH_SIZE, index_chunks
from documind.index.parentstore import ParentStore
from documind.ingest.loader import load_documents
from documind.ingest.metadata import parse_document
from documind.llms.base import LLMClient, Message, Role
from documind.observability.base import MetricsHook, NoOpMetricsHook
from documind.retrieve.expander import expand_to_parents
from documind.retrieve.models import SearchHit
from documind.retrieve.search import DEFAULT_TOP_K, Retriever
from documind.vectorstores.base import VectorStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Answer:
    answer: GeneratedAnswer
    parents: list[Chunk]
    hits: list[SearchHit]
    legend: list[CitationLegendEntry]


class Documind:
    """Wires ingestion, indexing and question answering together.

    Collaborators are injected; the pipeline owns no global state.
    """

    def __init__(
        self,
        *,
        parent_store: ParentStore,
        embeddings_client: EmbeddingsClient | None = None,
        vector_store: VectorStore | None = None,
        llm_client: LLMClient | None = None,
        prompt_builder: PromptBuilder | None = None,
        batch_size: int = DEFAULT_BATCH_SIZE,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.parent_store = parent_store
        self._embeddings = embeddings_client
        self._vector_store = vector_store
        self._llm = llm_client
        self._prompts = prompt_builder or PromptBuilder()
        self._batch_size = batch_size
        self.metrics_hook = metrics_hook

    def ingest(self, source_dir: str | Path) -> list[Chunk]:
        """Load, parse and chunk every Markdown file under ``source_dir``.

        Raises:
            SectionPathError: If a document lives outside a ``docs`` tree.
        """
        chunks: list[Chunk] = []
        for raw in load_documents(source_dir):
            document = parse_document(raw)
            chunks.extend(chunk_document(document, metrics_hook=self.metrics_hook))

        parents = sum(1 for c in chunks if c.kind == ChunkKind.PARENT)
        logger.info(
            "Created %d chunks (%d parents, %d children)",
            len(chunks),
            parents,
            len(chunks) - parents,
        )
        return chunks

    async def index(self, chunks: Sequence[Chunk]) -> int:
        """Store parents for lookup and embed children for search.

        Returns:
            Number of child chunks indexed.
        """
        embeddings, vector_store = self._require_search_stack()
        parents = [c for c in chunks if c.kind == ChunkKind.PARENT]
        children = [c for c in chunks if c.kind == ChunkKind.CHILD]
        logger.info("%d parents, %d children", len(parents), len(children))

        self.parent_store.save(parents)
        return await index_chunks(
            children,
            embeddings,
            vector_store,
            batch_size=self._batch_size,
            metrics_hook=self.metrics_hook,
        )

    async def retrieve(
        self, question: str, top_k: int = DEFAULT_TOP_K
    ) -> tuple[list[SearchHit], list[Chunk]]:
        embeddings, vector_store = self._require_search_stack()
        retriever = Retriever(embeddings, vector_store, metrics_hook=self.metrics_hook)
        hits = await retriever.search(question, top_k=top_k)
        parents = expand_to_parents(hits, self.parent_store, metrics_hook=self.metrics_hook)
        return hits, parents

    async def ask(
        self,
        question: str,
        *,
        top_k: int = DEFAULT_TOP_K,
        on_fragment: Callable[[str], None] | None = None,
    ) -> Answer:
        """Answer ``question`` from the indexed documents.

        With ``on_fragment`` the reply is streamed and each text fragment is
        handed to the callback as it arrives. Citations are processed once
        the full text is in.
        """
        if self._llm is None:
            raise RuntimeError("Documind was created without an LLM client")

        hits, parents = await self.retrieve(question, top_k=top_k)
        prompt = self._prompts.build(question, parents)
        messages = [Message(role=Role.USER, content=prompt)]

        if on_fragment is not None:
            text = await collect_stream(self._llm.stream(messages=messages), on_fragment)
        else:
            text = (await self._llm.complete(messages=messages)).content

        answer = process_answer(text, len(parents), metrics_hook=self.metrics_hook)
        logger.info(
            "Answered with %d parents, confidence=%s",
            len(parents),
            answer.confidence.value,
        )
        return Answer(
            answer=answer,
            parents=parents,
            hits=hits,
            legend=build_citation_legend(parents),
        )

    def _require_search_stack(self) -> tuple[EmbeddingsClient, VectorStore]:
        if self._embeddings is None or self._vector_store is None:
            raise RuntimeError("Documind was created without embeddings or a vector store")
        return self._embeddings, self._vector_store
