"""
Appliance DTOs - Application Layer

Serializable views of appliance drafts, records and reference
profiles. Image bytes are never inlined; records expose a
``has_image`` flag and the image is served by its own endpoint.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from appliance_identifier.domain.entities.appliance import (
    ApplianceRecord,
    ApplianceRecordDraft,
)
from appliance_identifier.domain.entities.energy import EnergyProfile


class ApplianceDraftDTO(BaseModel):
    """An identification that has not been saved."""

    name: str = Field(description="Normalized appliance name")
    category: str = Field(description="Reference category, or 'Unknown'")
    estimated_wattage_watts: float = Field(gt=0.0, description="Estimated power draw")
    confidence: float = Field(ge=0.0, le=1.0, description="Classifier confidence")
    captured_at: datetime
    daily_kilowatt_hours: float = Field(description="Energy per day at 24h usage")
    has_image: bool

    @classmethod
    def from_domain(cls, draft: ApplianceRecordDraft) -> "ApplianceDraftDTO":
        return cls(
            name=draft.name,
            category=draft.category,
            estimated_wattage_watts=draft.estimated_wattage_watts,
            confidence=draft.confidence,
            captured_at=draft.captured_at,
            daily_kilowatt_hours=draft.daily_kilowatt_hours,
            has_image=draft.image_bytes is not None,
        )


class ApplianceResponseDTO(BaseModel):
    """A saved appliance identification."""

    id: UUID
    handle: str = Field(description="Opaque token addressing this record")
    name: str
    category: str
    estimated_wattage_watts: float
    confidence: float = Field(ge=0.0, le=1.0)
    captured_at: datetime
    daily_kilowatt_hours: float
    monthly_cost_estimate: float
    has_image: bool

    @classmethod
    def from_domain(cls, record: ApplianceRecord) -> "ApplianceResponseDTO":
        return cls(
            id=record.id,
            handle=record.storage_handle.token,
            name=record.name,
            category=record.category,
            estimated_wattage_watts=record.estimated_wattage_watts,
            confidence=record.confidence,
            captured_at=record.captured_at,
            daily_kilowatt_hours=record.daily_kilowatt_hours,
            monthly_cost_estimate=record.monthly_cost_estimate,
            has_image=record.has_image,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
                "handle": "appliance_identifier.appliances:9b1deb4d3b7d4bad9bdd2b0d7b3dcb6d",
                "name": "washing machine",
                "category": "Laundry",
                "estimated_wattage_watts": 500.0,
                "confidence": 0.88,
                "captured_at": "2025-10-13T16:00:00Z",
                "daily_kilowatt_hours": 12.0,
                "monthly_cost_estimate": 57.6,
                "has_image": True,
            }
        }
    }


class EnergyProfileDTO(BaseModel):
    """One row of the reference energy table."""

    name: str
    category: str
    typical_wattage_watts: float
    usage_hours_per_day: float
    daily_kilowatt_hours: float

    @classmethod
    def from_domain(cls, name: str, profile: EnergyProfile) -> "EnergyProfileDTO":
        return cls(
            name=name,
            category=profile.category,
            typical_wattage_watts=profile.typical_wattage_watts,
            usage_hours_per_day=profile.usage_hours_per_day,
            daily_kilowatt_hours=profile.daily_kilowatt_hours,
        )
