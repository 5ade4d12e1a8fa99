"""Store settings use cases."""

from __future__ import annotations

from ...domain.entities import StoreSettings
from ...domain.store_settings_repository import StoreSettingsRepository
from ..dtos import StoreSettingsResponseDTO, UpdateStoreSettingsDTO


class StoreSettingsService:
    """Reads and upserts the settings of one store.

    When nothing has been saved yet the store is reported open, with no
    observation and the configured default WhatsApp number.
    """

    def __init__(
        self,
        settings_repository: StoreSettingsRepository,
        store: str,
        default_whatsapp_number: str,
    ):
        self.settings_repository = settings_repository
        self.store = store
        self.default_whatsapp_number = default_whatsapp_number

    async def load(self) -> StoreSettings:
        stored = await self.settings_repository.get(self.store)
        if stored is not None:
            return stored
        return StoreSettings(
            store=self.store, whatsapp_number=self.default_whatsapp_number
        )

    async def get_settings(self) -> StoreSettingsResponseDTO:
        settings = await self.load()
        return StoreSettingsResponseDTO(**settings.model_dump())

    async def update_settings(
        self, dto: UpdateStoreSettingsDTO
    ) -> StoreSettingsResponseDTO:
        current = await self.load()
        changes = {
            k: v
            for k, v in dto.model_dump(exclude_unset=True).items()
            if v is not None
        }
        # Re-validate so the whatsapp number is normalized to digits.
        settings = StoreSettings.model_validate(
            {**current.model_dump(), **changes}
        )
        settings.touch()
        saved = await self.settings_repository.save(settings)
        return StoreSettingsResponseDTO(**saved.model_dump())
