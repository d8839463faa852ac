from __future__ import annotations

from uuid import uuid4

import pytest

from appliance_identifier.application.dtos.appliance_dto import (
    ApplianceDraftDTO,
    ApplianceResponseDTO,
    EnergyProfileDTO,
)
from appliance_identifier.domain.entities.appliance import ApplianceRecord, StorageHandle
from appliance_identifier.domain.entities.energy import EnergyProfile


def test_response_dto_exposes_handle_token_and_derived_values(make_draft) -> None:
    handle = StorageHandle(store_id="appliance_identifier.appliances", key="abc")
    record = ApplianceRecord.from_draft(make_draft(), uuid4(), handle)

    dto = ApplianceResponseDTO.from_domain(record)

    assert dto.handle == "appliance_identifier.appliances:abc"
    assert dto.daily_kilowatt_hours == pytest.approx(12.0)
    assert dto.monthly_cost_estimate == pytest.approx(57.6)
    assert dto.has_image is True
    assert "image_bytes" not in dto.model_dump()


def test_draft_dto_reports_missing_image(make_draft) -> None:
    dto = ApplianceDraftDTO.from_domain(make_draft(wattage=100.0, image_bytes=None))

    assert dto.has_image is False
    assert dto.daily_kilowatt_hours == pytest.approx(2.4)


def test_energy_profile_dto() -> None:
    dto = EnergyProfileDTO.from_domain("microwave", EnergyProfile("Kitchen", 1200, 0.5))

    assert dto.name == "microwave"
    assert dto.typical_wattage_watts == 1200
    assert dto.daily_kilowatt_hours == pytest.approx(0.6)
