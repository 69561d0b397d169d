# src/documind/observability/names.py

"""Standard metric names for documind.

All duration metrics are in milliseconds.
"""

# ============================================================================
# Chunking
# ============================================================================

CHUNKING_DURATION = "chunking_duration"
CHUNKING_CHUNKS_CREATED = "chunking_chunks_created"
CHUNKING_DOCUMENTS_TOTAL = "chunking_documents_total"


# ============================================================================
# Embeddings
# ============================================================================

EMBEDDINGS_DURATION = "embeddings_duration"
EMBEDDINGS_REQUESTS_TOTAL = "embeddings_requests_total"
EMBEDDINGS_BATCH_SIZE = "embeddings_batch_size"


# ============================================================================
# Vector store (Qdrant)
# ============================================================================

QDRANT_UPSERT_DURATION = "qdrant_upsert_duration"
QDRANT_QUERY_DURATION = "qdrant_query_duration"
QDRANT_OPERATIONS_TOTAL = "qdrant_operations_total"


# ============================================================================
# Indexing
# ============================================================================

INDEX_BATCHES_TOTAL = "index_batches_total"
INDEX_CHUNKS_TOTAL = "index_chunks_total"


# ============================================================================
# Parent store
# ============================================================================

PARENT_STORE_SIZE = "parent_store_size"
PARENT_STORE_MISSES_TOTAL = "parent_store_misses_total"


# ============================================================================
# Retrieval
# ============================================================================

SEARCH_DURATION = "search_duration"
EXPANSION_MISSING_PARENTS_TOTAL = "expansion_missing_parents_total"


# ============================================================================
# Generation
# ============================================================================

LLM_COMPLETION_DURATION = "llm_completion_duration"
LLM_REQUESTS_TOTAL = "llm_requests_total"
LLM_TOKENS_PROMPT = "llm_tokens_prompt"
LLM_TOKENS_COMPLETION = "llm_tokens_completion"

CITATIONS_INVALID_TOTAL = "citations_invalid_total"
ANSWERS_TOTAL = "answers_total"
