"""Main library client for standalone usage."""

from __future__ import annotations

import logging

from bookmeta.config import BookmetaSettings, get_settings
from bookmeta.core.identifiers import ISBN13, is_valid_isbn13
from bookmeta.resolution.chain import ChainResolver, FallbackConfig, ResolutionOutcome
from bookmeta.resolution.registry import SourceRegistry

logger = logging.getLogger(__name__)


class BookmetaClient:
    """
    Main client for the bookmeta library.

    Resolves a scanned or typed ISBN-13 to a single canonical book record,
    trying openBD first, then Google Books, then (when a keyword is given)
    a Google Books keyword search.

    Usage:
        async with BookmetaClient() as client:
            outcome = await client.resolve_book("9784873119038")
            if outcome.found:
                print(outcome.book.title, outcome.book.size_class)

    Settings are loaded from environment variables or can be passed explicitly.
    """

    def __init__(
        self,
        settings: BookmetaSettings | None = None,
        *,
        registry: SourceRegistry | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            settings: Application settings. If not provided, loaded from environment.
            registry: Pre-built source registry, mainly for substituting test doubles.
        """
        self._settings = settings or get_settings()
        self._registry: SourceRegistry | None = registry

    async def __aenter__(self) -> BookmetaClient:
        """Initialize resources on context entry."""
        await self._initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Clean up resources on context exit."""
        await self.close()

    async def _initialize(self) -> None:
        """Initialize client resources."""
        logging.getLogger("bookmeta").setLevel(self._settings.log_level.upper())

        if self._registry is None:
            self._registry = SourceRegistry.from_settings(self._settings)
            logger.debug(
                f"Source registry initialized: "
                f"{[s.source_name.value for s in self._registry.sources]}"
            )

    async def close(self) -> None:
        """Close all resources."""
        if self._registry:
            await self._registry.close_all()
            self._registry = None

    def _ensure_initialized(self) -> SourceRegistry:
        """Ensure client is initialized."""
        if self._registry is None:
            raise RuntimeError(
                "Client not initialized. Use 'async with BookmetaClient() as client:'"
            )
        return self._registry

    @staticmethod
    def validate_isbn(value: str) -> bool:
        """Check an ISBN-13 string without touching the network."""
        return is_valid_isbn13(value)

    async def resolve_book(
        self,
        isbn: str,
        keyword: str | None = None,
        *,
        validate: bool | None = None,
        fallback_config: FallbackConfig | None = None,
    ) -> ResolutionOutcome:
        """
        Resolve a book by ISBN-13.

        Args:
            isbn: Thirteen-digit identifier
            keyword: Free text used for a keyword search when every
                identifier lookup misses
            validate: Reject invalid identifiers before any request.
                Defaults to the ``validate_isbn`` setting.
            fallback_config: Configuration for fallback resolution

        Returns:
            Outcome holding the book, or no book when nothing was found

        Raises:
            ValidationError: validation was requested and the ISBN is invalid
        """
        registry = self._ensure_initialized()

        if validate is None:
            validate = self._settings.validate_isbn
        if validate:
            ISBN13.parse(isbn)

        chain: ChainResolver = registry.get_chain(fallback_config)
        return await chain.resolve(isbn, keyword)


# Convenience function for one-off resolutions
async def resolve_book(
    isbn: str,
    keyword: str | None = None,
    *,
    settings: BookmetaSettings | None = None,
    validate: bool | None = None,
) -> ResolutionOutcome:
    """
    Resolve a book (convenience function).

    For multiple resolutions, use BookmetaClient for better performance.
    """
    async with BookmetaClient(settings) as client:
        return await client.resolve_book(isbn, keyword, validate=validate)
