"""Identifiers of entities as published by a particular feed provider."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

P = TypeVar("P")


class FeedIdFormatError(ValueError):
    """The text is not of the form ``<provider>:<id>``."""

    def __init__(self) -> None:
        super().__init__("feed ID should be in the form <provider>:<id>")


@dataclass(frozen=True)
class FeedId(Generic[P]):
    """An entity ID qualified by the provider that issued it."""

    provider: P
    entity_id: str

    @classmethod
    def parse(cls, text: str, parse_provider: Callable[[str], P]) -> FeedId[P]:
        """Parse ``<provider>:<id>``, splitting at the first colon.

        Errors raised by ``parse_provider`` propagate unchanged.
        """
        provider_text, separator, entity_id = text.partition(":")
        if not separator:
            raise FeedIdFormatError()
        return cls(parse_provider(provider_text), entity_id)

    def take(self) -> tuple[P, str]:
        """Return the provider and entity ID as a pair."""
        return self.provider, self.entity_id