from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import timezone

import pytest

from appliance_identifier.domain.entities.health import (
    ClassifierHealth,
    ServiceStatus,
    StorageHealth,
    SystemHealth,
)


def _storage(status: ServiceStatus, durable: bool = True) -> StorageHealth:
    return StorageHealth(backend="mongo", status=status, durable=durable)


def _classifier(status: ServiceStatus) -> ClassifierHealth:
    return ClassifierHealth(status=status)


def test_only_an_up_store_accepts_saves() -> None:
    assert _storage(ServiceStatus.UP).accepts_saves is True
    assert _storage(ServiceStatus.UNKNOWN).accepts_saves is False
    assert _storage(ServiceStatus.DOWN).accepts_saves is False


def test_storage_health_is_frozen_and_timestamped() -> None:
    storage = _storage(ServiceStatus.UP, durable=False)

    assert storage.checked_at.tzinfo == timezone.utc
    with pytest.raises(FrozenInstanceError):
        storage.durable = True  # type: ignore[misc]


def test_classifier_health_reads_model_metadata() -> None:
    classifier = ClassifierHealth.from_metadata(
        ServiceStatus.UP,
        {"version": "1.0.0", "model_type": "StaticPredictor", "label": "lamp"},
    )

    assert classifier.model_version == "1.0.0"
    assert classifier.model_type == "StaticPredictor"
    assert classifier.metadata["label"] == "lamp"


def test_classifier_health_without_metadata_is_unknown_model() -> None:
    classifier = ClassifierHealth.from_metadata(ServiceStatus.UP, {})

    assert classifier.model_version == "unknown"
    assert classifier.model_type == "unknown"


@pytest.mark.parametrize(
    "storage_status, classifier_status, expected",
    [
        (ServiceStatus.UP, ServiceStatus.UP, ServiceStatus.UP),
        (ServiceStatus.UNKNOWN, ServiceStatus.UP, ServiceStatus.UNKNOWN),
        (ServiceStatus.UNKNOWN, ServiceStatus.DEGRADED, ServiceStatus.DEGRADED),
        (ServiceStatus.UP, ServiceStatus.DOWN, ServiceStatus.DOWN),
        (ServiceStatus.DOWN, ServiceStatus.DEGRADED, ServiceStatus.DOWN),
    ],
)
def test_system_status_is_the_worst_component(
    storage_status: ServiceStatus,
    classifier_status: ServiceStatus,
    expected: ServiceStatus,
) -> None:
    health = SystemHealth(
        storage=_storage(storage_status), classifier=_classifier(classifier_status)
    )
    assert health.status is expected
