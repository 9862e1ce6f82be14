"""Source registry for creating configured source instances."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bookmeta.resolution.base import AbstractSource, SourceConfig
from bookmeta.resolution.books.google_books import GoogleBooksSource
from bookmeta.resolution.books.openbd import OpenBDSource
from bookmeta.resolution.chain import ChainResolver, FallbackConfig

if TYPE_CHECKING:
    from bookmeta.config import BookmetaSettings


class SourceRegistry:
    """
    Factory for creating and managing source instances.

    Builds each source from settings and hands out chain resolvers
    sharing those sources (and their HTTP connection pools).
    """

    def __init__(self, fallback_config: FallbackConfig | None = None) -> None:
        self._sources: list[AbstractSource] = []
        self._fallback_config = fallback_config

    @property
    def sources(self) -> list[AbstractSource]:
        return list(self._sources)

    def register(self, source: AbstractSource) -> None:
        """Register a source."""
        self._sources.append(source)

    def get_chain(self, config: FallbackConfig | None = None) -> ChainResolver:
        """Get a chain resolver over the registered sources."""
        return ChainResolver(self._sources, config or self._fallback_config)

    @classmethod
    def from_settings(cls, settings: "BookmetaSettings") -> "SourceRegistry":
        """Create a registry with sources configured from settings."""
        registry = cls(
            FallbackConfig(
                keyword_max_results=settings.keyword_max_results,
                total_timeout=settings.total_timeout,
            )
        )

        # openBD (primary, no API key)
        registry.register(
            OpenBDSource(
                SourceConfig(
                    base_url=settings.openbd_base_url,
                    timeout=settings.request_timeout,
                    user_agent=settings.user_agent,
                    enabled=settings.openbd_enabled,
                )
            )
        )

        # Google Books (fallback, optional API key)
        registry.register(
            GoogleBooksSource(
                SourceConfig(
                    api_key=settings.google_books_api_key,
                    base_url=settings.google_books_base_url,
                    timeout=settings.request_timeout,
                    user_agent=settings.user_agent,
                    enabled=settings.google_books_enabled,
                )
            )
        )

        return registry

    async def close_all(self) -> None:
        """Close all registered sources."""
        for source in self._sources:
            await source.close()
