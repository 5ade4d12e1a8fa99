"""Store settings repository implementation over a storage abstraction."""

from __future__ import annotations

from typing import Optional

from ...domain.entities import StoreSettings
from ...domain.store_settings_repository import StoreSettingsRepository
from ..storage import KeyValueStore


class StoreSettingsRepositoryImpl(StoreSettingsRepository):
    """One JSON document per store under `store_settings:<store>`."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    async def get(self, store: str) -> Optional[StoreSettings]:
        data = await self.store.get(f"store_settings:{store}")
        if not data:
            return None
        return StoreSettings.model_validate_json(data)

    async def save(self, settings: StoreSettings) -> StoreSettings:
        await self.store.set(f"store_settings:{settings.store}", settings.model_dump_json())
        return settings
