"""
Appliance Use Cases - Application Layer

Classification enrichment plus the list/save/delete pass-throughs to
the appliance record store. Results and errors from the ports are
returned unchanged; nothing here retries.
"""

import asyncio
from datetime import datetime
from typing import Any, Callable, List, Optional, Tuple

from dependency_injector.wiring import Provide, inject

from appliance_identifier.domain.entities.appliance import (
    ApplianceRecord,
    ApplianceRecordDraft,
    StorageHandle,
    utc_now,
)
from appliance_identifier.domain.entities.energy import EnergyProfile
from appliance_identifier.domain.entities.errors import ImageEncodingError
from appliance_identifier.domain.ports.image_classifier import IImageClassifier
from appliance_identifier.domain.ports.image_encoder import IImageEncoder
from appliance_identifier.domain.repositories.appliance_repository import (
    IApplianceRepository,
)
from appliance_identifier.domain.repositories.energy_profile_repository import (
    IEnergyProfileRepository,
)
from appliance_identifier.domain.services import normalize_appliance_label
from appliance_identifier.shared import get_logger

logger = get_logger(__name__)


class ClassifyApplianceUseCase:
    """Turn an image into an enriched, unsaved appliance draft."""

    @inject
    def __init__(
        self,
        image_classifier: IImageClassifier = Provide["image_classifier"],
        energy_profile_repository: IEnergyProfileRepository = Provide[
            "energy_profile_repository"
        ],
        image_encoder: IImageEncoder = Provide["image_encoder"],
        clock: Callable[[], datetime] = utc_now,
    ):
        self.image_classifier = image_classifier
        self.energy_profile_repository = energy_profile_repository
        self.image_encoder = image_encoder
        self.clock = clock

    async def execute(self, image: Any) -> ApplianceRecordDraft:
        """
        Classify an image and enrich the result with reference energy data.

        Args:
            image: The captured still image

        Returns:
            Draft carrying the normalized name, category, wattage estimate,
            confidence, capture time and (when encodable) the image bytes

        Raises:
            ClassifierNoResultError: If the classifier predicted nothing
            ClassifierBackendError: If the classifier failed
        """
        result = await self.image_classifier.classify(image)
        name = normalize_appliance_label(result.label)

        draft = ApplianceRecordDraft(
            name=name,
            category=self.energy_profile_repository.category_of(name),
            estimated_wattage_watts=self.energy_profile_repository.estimate_wattage(
                name
            ),
            confidence=float(result.confidence),
            captured_at=self.clock(),
            image_bytes=await self._encode(image),
        )
        logger.info(
            "appliance.classified",
            label=result.label,
            name=draft.name,
            category=draft.category,
            confidence=draft.confidence,
        )
        return draft

    async def _encode(self, image: Any) -> Optional[bytes]:
        # JPEG encoding is CPU bound; keep it off the event loop
        try:
            return await asyncio.to_thread(self.image_encoder.encode, image)
        except ImageEncodingError as e:
            logger.warning("image.encode_failed", error=str(e))
            return None


class GetAppliancesUseCase:
    """Use case for listing saved appliances."""

    @inject
    def __init__(
        self,
        appliance_repository: IApplianceRepository = Provide["appliance_repository"],
    ):
        self.appliance_repository = appliance_repository

    async def execute(self) -> List[ApplianceRecord]:
        """Return every saved appliance, most recent first."""
        return await self.appliance_repository.list_all()


class SaveApplianceUseCase:
    """Use case for persisting a classified appliance."""

    @inject
    def __init__(
        self,
        appliance_repository: IApplianceRepository = Provide["appliance_repository"],
    ):
        self.appliance_repository = appliance_repository

    async def execute(self, draft: ApplianceRecordDraft) -> ApplianceRecord:
        """
        Save a draft.

        Raises:
            StorageFailureError: If the record store rejects the write
        """
        return await self.appliance_repository.save(draft)


class DeleteApplianceUseCase:
    """Use case for deleting a saved appliance."""

    @inject
    def __init__(
        self,
        appliance_repository: IApplianceRepository = Provide["appliance_repository"],
    ):
        self.appliance_repository = appliance_repository

    async def execute(self, handle: StorageHandle) -> None:
        """
        Delete the appliance addressed by ``handle``.

        Raises:
            ApplianceNotFoundError: If no record has the handle
        """
        await self.appliance_repository.delete(handle)


class ClassifyAndSaveApplianceUseCase:
    """Classify an image and save the result in one step.

    A failed classification saves nothing.
    """

    @inject
    def __init__(
        self,
        classify_use_case: ClassifyApplianceUseCase = Provide[
            "classify_appliance_use_case"
        ],
        save_use_case: SaveApplianceUseCase = Provide["save_appliance_use_case"],
    ):
        self.classify_use_case = classify_use_case
        self.save_use_case = save_use_case

    async def execute(self, image: Any) -> ApplianceRecord:
        draft = await self.classify_use_case.execute(image)
        return await self.save_use_case.execute(draft)


class GetApplianceImageUseCase:
    """Use case for fetching the stored photo of an appliance."""

    @inject
    def __init__(
        self,
        appliance_repository: IApplianceRepository = Provide["appliance_repository"],
    ):
        self.appliance_repository = appliance_repository

    async def execute(self, handle: StorageHandle) -> Optional[bytes]:
        """
        Return the stored JPEG bytes, or None when no image was kept.

        Raises:
            ApplianceNotFoundError: If no record has the handle
        """
        record = await self.appliance_repository.find_by_handle(handle)
        return record.image_bytes


class GetReferenceProfilesUseCase:
    """Use case exposing the reference energy table."""

    @inject
    def __init__(
        self,
        energy_profile_repository: IEnergyProfileRepository = Provide[
            "energy_profile_repository"
        ],
    ):
        self.energy_profile_repository = energy_profile_repository

    async def execute(self) -> List[Tuple[str, EnergyProfile]]:
        return self.energy_profile_repository.profiles()
