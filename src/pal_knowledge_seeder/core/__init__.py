"""
Core module - shared protocols, types and errors.

USAGE:
------
from pal_knowledge_seeder.core import EmbeddingProvider, VectorCollection

class MyCollection:
    '''Implements VectorCollection protocol.'''
    ...
"""

from pal_knowledge_seeder.core.errors import (
    SeedError,
    DatasetLoadError,
    StoreConnectionError,
)
from pal_knowledge_seeder.core.protocols import (
    # Protocols
    EmbeddingProvider,
    VectorCollection,
    VectorStoreClient,
    # Data classes
    SourceIntent,
    CandidateDocument,
    BatchResult,
    SeedReport,
    SeedStatus,
)

__all__ = [
    # Errors
    "SeedError",
    "DatasetLoadError",
    "StoreConnectionError",
    # Protocols
    "EmbeddingProvider",
    "VectorCollection",
    "VectorStoreClient",
    # Data classes
    "SourceIntent",
    "CandidateDocument",
    "BatchResult",
    "SeedReport",
    "SeedStatus",
]
