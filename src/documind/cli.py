"""``documind`` command line: ingest, index and query Markdown docs."""

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from documind.chunking.models import ChunkKind
from documind.chunking.serialization import dump_chunks, load_chunks
from documind.config import Settings, load_settings
from documind.embeddings.factory import create_embeddings_client
from documind.errors import DocumindError
from documind.index.parentstore import ParentStore
from documind.llms.factory import create_llm_client
from documind.pipeline import Answer, Documind
from documind.vectorstores.qdrantvectorstore import QdrantVectorStore

logger = logging.getLogger(__name__)

CHUNKS_FILE = "chunks.json"


def build_pipeline(settings: Settings, *, with_search: bool, with_llm: bool) -> Documind:
    """Composition root: turn settings into a wired pipeline."""
    parent_store = ParentStore(settings.parent_store_path)
    parent_store.load()

    embeddings = vector_store = llm = None
    if with_search:
        embeddings = create_embeddings_client(settings.embeddings_config())
        vector_store = QdrantVectorStore(
            url=settings.qdrant_url,
            path=settings.qdrant_path,
            api_key=settings.qdrant_api_key,
            collection_name=settings.collection,
            vector_size=settings.vector_size,
        )
    if with_llm:
        llm = create_llm_client(settings.llm_config())

    return Documind(
        parent_store=parent_store,
        embeddings_client=embeddings,
        vector_store=vector_store,
        llm_client=llm,
        batch_size=settings.batch_size,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="documind", description="Document intelligence CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    ingest = sub.add_parser("ingest", help="Chunk Markdown documents into a JSON file")
    ingest.add_argument("-s", "--source", required=True, help="Directory containing .md files")
    ingest.add_argument("-o", "--output", required=True, help=f"Directory for {CHUNKS_FILE}")

    index = sub.add_parser("index", help="Store parents and index children in the vector DB")
    index.add_argument("-c", "--chunks", required=True, help=f"Path to {CHUNKS_FILE}")

    query = sub.add_parser("query", help="Answer a question from the indexed documents")
    query.add_argument("question")
    query.add_argument("-k", "--top-k", type=int, default=None, help="Fragments to retrieve")
    query.add_argument("--stream", action="store_true", help="Print the answer as it arrives")

    return parser


def run_ingest(args: argparse.Namespace, settings: Settings) -> int:
    pipeline = build_pipeline(settings, with_search=False, with_llm=False)
    chunks = pipeline.ingest(args.source)
    output = Path(args.output) / CHUNKS_FILE
    dump_chunks(chunks, output)

    parents = sum(1 for c in chunks if c.kind == ChunkKind.PARENT)
    print(f"Created {len(chunks)} chunks")
    print(f"   - Parents: {parents}")
    print(f"   - Children: {len(chunks) - parents}")
    print(f"Saved to {output}")
    return 0


async def run_index(args: argparse.Namespace, settings: Settings) -> int:
    chunks = load_chunks(args.chunks)
    pipeline = build_pipeline(settings, with_search=True, with_llm=False)
    indexed = await pipeline.index(chunks)
    print(f"Indexing complete: {indexed} fragments, {len(pipeline.parent_store)} parents")
    return 0


async def run_query(args: argparse.Namespace, settings: Settings) -> int:
    pipeline = build_pipeline(settings, with_search=True, with_llm=True)
    top_k = args.top_k or settings.top_k

    if args.stream:
        result = await pipeline.ask(
            args.question,
            top_k=top_k,
            on_fragment=lambda text: print(text, end="", flush=True),
        )
        print()
    else:
        result = await pipeline.ask(args.question, top_k=top_k)
        print(result.answer.text)

    print_sources(result)
    return 0


def print_sources(result: Answer) -> None:
    answer = result.answer
    print()
    print(f"Confidence: {answer.confidence.value}")
    if not result.legend:
        print("No sources were retrieved.")
        return
    print("Sources:")
    for entry in result.legend:
        cited = "*" if entry.number in answer.unique_citations else " "
        section = f" ({entry.section})" if entry.section else ""
        print(f" {cited}[{entry.number}] {entry.source}{section}")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "ingest":
            return run_ingest(args, settings)
        if args.command == "index":
            return asyncio.run(run_index(args, settings))
        return asyncio.run(run_query(args, settings))
    except DocumindError as exc:
        logger.error("%s", exc)
        print(f"[ERROR] {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
