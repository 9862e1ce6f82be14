"""Chain resolver for prioritised fallback resolution."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field

from bookmeta.core.models import Book, Candidate
from bookmeta.core.normalization import join_text
from bookmeta.core.sizing import classify_by_code, classify_by_text
from bookmeta.core.types import SizeClass
from bookmeta.resolution.base import AbstractSource, LookupResult

logger = logging.getLogger(__name__)


@dataclass
class FallbackConfig:
    """Configuration for fallback resolution."""

    # Results requested from keyword search
    keyword_max_results: int = 10

    # Deadline for the entire fallback chain (seconds), None to disable
    total_timeout: float | None = 30.0


@dataclass
class ResolutionOutcome:
    """
    Result of one resolution.

    ``book`` is None when every source missed. Whether a source missed
    because it had no record or because it failed is deliberately not
    reported here.
    """

    book: Book | None = None
    sources_tried: list[str] = field(default_factory=list)
    duration_ms: float = 0.0

    @property
    def found(self) -> bool:
        return self.book is not None


def enrich(candidate: Candidate) -> Book:
    """
    Build the canonical Book, assigning its size class.

    A known size from the C-code is kept as is. Otherwise the title and the
    author/publisher text are tried; if they give nothing either the
    code-based UNKNOWN stays.
    """
    size_class = classify_by_code(candidate.classification_code)

    if size_class == SizeClass.UNKNOWN:
        from_text = classify_by_text(
            candidate.title,
            join_text(candidate.author, candidate.publisher),
        )
        if from_text != SizeClass.UNKNOWN:
            size_class = from_text

    return Book(
        isbn=candidate.isbn,
        title=candidate.title,
        author=candidate.author,
        cover_image_url=candidate.cover_image_url,
        page_count=candidate.page_count,
        size_class=size_class,
        source=candidate.source,
    )


class ChainResolver:
    """
    Orchestrates resolution across sources in priority order.

    Identifier lookups run one source at a time and stop at the first hit.
    When all of them miss and a keyword is given, keyword-capable sources
    are searched and their first result is taken. No retries, no parallel
    fan-out. Holds no per-call state, so one instance can serve concurrent
    resolutions.
    """

    def __init__(
        self,
        sources: list[AbstractSource],
        config: FallbackConfig | None = None,
    ) -> None:
        # Sort by priority (lower = higher priority)
        self._sources = sorted(sources, key=lambda s: s.priority)
        self.config = config or FallbackConfig()

    @property
    def sources(self) -> list[AbstractSource]:
        return list(self._sources)

    async def resolve(
        self,
        isbn: str,
        keyword: str | None = None,
    ) -> ResolutionOutcome:
        """Resolve an ISBN, falling back to keyword search when given."""
        start = time.monotonic()
        outcome = ResolutionOutcome()

        try:
            async with asyncio.timeout(self.config.total_timeout):
                candidate = await self._run_identifier_stage(isbn, outcome)

                if candidate is None and keyword and keyword.strip():
                    candidate = await self._run_keyword_stage(keyword, outcome)

        except TimeoutError:
            logger.warning(f"Resolution of {isbn} timed out after {self.config.total_timeout}s")
            candidate = None

        if candidate is not None:
            outcome.book = enrich(candidate)

        outcome.duration_ms = (time.monotonic() - start) * 1000
        logger.info(
            f"Resolution of {isbn} {'found' if outcome.found else 'not found'} "
            f"in {outcome.duration_ms:.0f}ms (tried: {', '.join(outcome.sources_tried) or '-'})"
        )
        return outcome

    def _active_sources(self) -> list[AbstractSource]:
        return [s for s in self._sources if s.is_enabled]

    async def _try_source(self, source: AbstractSource, isbn: str) -> LookupResult | None:
        """Look up one source; an exception escaping the adapter counts as a miss."""
        try:
            return await source.lookup_by_isbn(isbn)
        except Exception as e:
            logger.exception(f"Source {source.source_name} failed: {e}")
            return None

    async def _run_identifier_stage(
        self,
        isbn: str,
        outcome: ResolutionOutcome,
    ) -> Candidate | None:
        for source in self._active_sources():
            outcome.sources_tried.append(source.source_name.value)
            result = await self._try_source(source, isbn)

            if result is not None and result.found:
                return result.candidate

            logger.debug(
                f"{source.source_name} missed {isbn}: "
                f"{result.status if result else 'exception'}"
            )

        return None

    async def _run_keyword_stage(
        self,
        keyword: str,
        outcome: ResolutionOutcome,
    ) -> Candidate | None:
        for source in self._active_sources():
            if not source.supports_keyword_search:
                continue

            outcome.sources_tried.append(f"{source.source_name.value}:keyword")
            try:
                candidates = await source.search_by_keyword(
                    keyword, self.config.keyword_max_results
                )
            except Exception as e:
                logger.exception(f"Keyword search on {source.source_name} failed: {e}")
                continue

            if candidates:
                return candidates[0]

        return None

    async def close(self) -> None:
        """Close all sources."""
        for source in self._sources:
            await source.close()

    async def __aenter__(self) -> "ChainResolver":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
