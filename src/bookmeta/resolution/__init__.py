"""Resolution layer for fetching metadata from external sources."""

from bookmeta.resolution.base import (
    AbstractSource,
    LookupResult,
    SourceConfig,
)
from bookmeta.resolution.chain import (
    ChainResolver,
    FallbackConfig,
    ResolutionOutcome,
    enrich,
)
from bookmeta.resolution.registry import SourceRegistry

__all__ = [
    # Base
    "AbstractSource",
    "LookupResult",
    "SourceConfig",
    # Chain
    "ChainResolver",
    "FallbackConfig",
    "ResolutionOutcome",
    "enrich",
    # Registry
    "SourceRegistry",
]
