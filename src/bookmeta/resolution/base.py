"""Abstract base source with HTTP client management and error mapping."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, ClassVar

import httpx
from pydantic import BaseModel

from bookmeta.core.exceptions import SourceError
from bookmeta.core.models import Candidate
from bookmeta.core.types import LookupStatus, SourceName

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "bookmeta/0.1"


class SourceConfig(BaseModel):
    """Configuration for a source adapter."""

    api_key: str | None = None
    base_url: str | None = None
    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    enabled: bool = True


class LookupResult(BaseModel):
    """Result of an identifier lookup against one source."""

    status: LookupStatus
    candidate: Candidate | None = None
    error_message: str | None = None
    source: SourceName
    duration_ms: float = 0.0

    @property
    def found(self) -> bool:
        return self.status == LookupStatus.FOUND and self.candidate is not None


class AbstractSource(ABC):
    """
    Abstract base class for bibliographic sources.

    Provides:
    - HTTP client management with connection pooling
    - Per-request timeout from configuration
    - Mapping of transport, status and payload failures to SourceError
    - Uniform found / not found / error results that never raise
    """

    # Class-level configuration (to be overridden by subclasses)
    SOURCE_NAME: ClassVar[SourceName]
    BASE_URL: ClassVar[str]
    SUPPORTS_KEYWORD_SEARCH: ClassVar[bool] = False

    def __init__(self, config: SourceConfig | None = None) -> None:
        self.config = config or SourceConfig()
        self._client: httpx.AsyncClient | None = None

    @property
    def source_name(self) -> SourceName:
        """The source type for this adapter."""
        return self.SOURCE_NAME

    @property
    def is_enabled(self) -> bool:
        """Whether this source is enabled."""
        return self.config.enabled

    @property
    def supports_keyword_search(self) -> bool:
        return self.SUPPORTS_KEYWORD_SEARCH

    @property
    def priority(self) -> int:
        """Priority for fallback ordering (lower = higher priority)."""
        return 100  # Default, override in subclasses

    @asynccontextmanager
    async def _get_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Get or create HTTP client with proper lifecycle."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url or self.BASE_URL,
                timeout=httpx.Timeout(self.config.timeout),
                headers=self._get_default_headers(),
                follow_redirects=True,
            )

        try:
            yield self._client
        except httpx.TimeoutException as e:
            raise SourceError(
                message=f"Timed out: {e}",
                source=self.source_name.value,
            ) from e
        except httpx.HTTPError as e:
            raise SourceError(
                message=f"HTTP error: {e}",
                source=self.source_name.value,
            ) from e

    def _get_default_headers(self) -> dict[str, str]:
        """Get default headers for requests. Override to add auth."""
        return {
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
        }

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """GET a URL and decode its JSON body, raising SourceError on any failure."""
        async with self._get_client() as client:
            response = await client.get(url, params=params)

        if not response.is_success:
            raise SourceError(
                message=f"Unexpected status {response.status_code}",
                source=self.source_name.value,
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise SourceError(
                message=f"Undecodable response body: {e}",
                source=self.source_name.value,
                status_code=response.status_code,
            ) from e

    async def lookup_by_isbn(self, isbn: str) -> LookupResult:
        """
        Look up a single book by ISBN.

        Args:
            isbn: Thirteen-digit identifier

        Returns:
            LookupResult with status found, not_found or error. Failures are
            logged and reported in the result, never raised.
        """
        start = time.monotonic()

        try:
            candidate = await self._fetch_by_isbn(isbn)
        except Exception as e:
            logger.warning(f"{self.source_name} lookup failed for {isbn}: {e}")
            return LookupResult(
                status=LookupStatus.ERROR,
                source=self.source_name,
                error_message=str(e),
                duration_ms=(time.monotonic() - start) * 1000,
            )

        return LookupResult(
            status=LookupStatus.FOUND if candidate else LookupStatus.NOT_FOUND,
            candidate=candidate,
            source=self.source_name,
            duration_ms=(time.monotonic() - start) * 1000,
        )

    async def search_by_keyword(self, text: str, max_results: int = 10) -> list[Candidate]:
        """Search by free text. Returns an empty list on any failure."""
        if not self.supports_keyword_search:
            return []

        try:
            return await self._search(text, max_results)
        except Exception as e:
            logger.warning(f"{self.source_name} keyword search failed for {text!r}: {e}")
            return []

    # Abstract methods
    @abstractmethod
    async def _fetch_by_isbn(self, isbn: str) -> Candidate | None:
        """
        Fetch and convert the source's record for an ISBN.

        Returns:
            The candidate, or None when the source has no usable record.
            Any exception counts as a source error.
        """
        ...

    async def _search(self, text: str, max_results: int) -> list[Candidate]:
        """Keyword search; only sources with SUPPORTS_KEYWORD_SEARCH override this."""
        return []

    async def __aenter__(self) -> "AbstractSource":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
