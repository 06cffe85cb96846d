"""Write-side requests understood by :class:`FavoriteSourceCommandService`."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CreateFavoriteSourceCommand:
    """Mark ``source_id`` as a favorite for the owner of ``news_api_key``."""

    news_api_key: str
    source_id: str

    def is_blank(self) -> bool:
        """Return ``True`` when either field is empty once whitespace is removed."""

        return not self.news_api_key.strip() or not self.source_id.strip()
