"""ragdesk - Document knowledge base for retrieval-augmented chat.

Documents are split into overlapping sentence chunks, embedded (remotely
through LiteLLM, with a deterministic local fallback) and kept in memory.
Queries return a source-tagged context string for the chat prompt.

Quick Start:
    from ragdesk import KnowledgeBase, LiteLLMProvider

    kb = KnowledgeBase(provider=LiteLLMProvider(embedding="mistral/mistral-embed"))

    # Add documents
    kb.add_document("faq.txt", text)
    kb.ingest_file("handbook.pdf")

    # Query
    context = kb.search("How do I reset my password?")
    sources = kb.get_sources(context)

Offline (hash embeddings only):
    from ragdesk import KnowledgeBase, LocalProvider

    kb = KnowledgeBase(provider=LocalProvider())
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("ragdesk")
except PackageNotFoundError:
    # Source tree without an installed distribution
    __version__ = "unknown"

from ragdesk.chunker import Chunker, SentenceChunker, split_text
from ragdesk.configuration import LiteLLMProvider, LocalProvider, ProviderConfig
from ragdesk.embedder import ClientEmbedder, Embedder, HashEmbedder
from ragdesk.exceptions import (
    DocumentNotFound,
    EmbeddingResponseError,
    IngestionFailed,
    RagdeskError,
    UnsupportedFileType,
)
from ragdesk.ingestor import Ingestor, ProgressCallback
from ragdesk.knowledge_base import KnowledgeBase
from ragdesk.loaders import Loader, LoaderRegistry
from ragdesk.models import Chunk, Document, DocumentStats, ScoredChunk, StoreStats
from ragdesk.ranker import Ranker, cosine_similarity, format_context
from ragdesk.retriever import Retriever, get_sources
from ragdesk.settings import Settings
from ragdesk.stores import DocumentStore, InMemoryDocumentStore

__all__ = [
    "__version__",
    # Central class
    "KnowledgeBase",
    # Configuration
    "Settings",
    "ProviderConfig",
    "LiteLLMProvider",
    "LocalProvider",
    # Models
    "Chunk",
    "Document",
    "DocumentStats",
    "ScoredChunk",
    "StoreStats",
    # Components
    "Chunker",
    "SentenceChunker",
    "split_text",
    "Embedder",
    "ClientEmbedder",
    "HashEmbedder",
    "Ranker",
    "cosine_similarity",
    "format_context",
    "DocumentStore",
    "InMemoryDocumentStore",
    "Loader",
    "LoaderRegistry",
    # Pipelines
    "Ingestor",
    "ProgressCallback",
    "Retriever",
    "get_sources",
    # Errors
    "RagdeskError",
    "DocumentNotFound",
    "IngestionFailed",
    "UnsupportedFileType",
    "EmbeddingResponseError",
]
