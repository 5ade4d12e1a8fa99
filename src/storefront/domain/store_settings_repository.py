"""Store settings domain repository interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .entities import StoreSettings


class StoreSettingsRepository(ABC):
    """Abstract repository interface for StoreSettings."""

    @abstractmethod
    async def get(self, store: str) -> Optional[StoreSettings]:
        """Get the stored settings for a store, if any."""
        pass

    @abstractmethod
    async def save(self, settings: StoreSettings) -> StoreSettings:
        """Insert or replace a store's settings."""
        pass
