"""Use cases for health and application info endpoints."""

import asyncio
from datetime import datetime, timezone
from typing import Optional

from appliance_identifier.application.dtos.health_dto import (
    ApplicationInfoDTO,
    SystemHealthDTO,
)
from appliance_identifier.domain.entities.health import (
    ApplicationInfo,
    ServiceIdentity,
    SystemHealth,
)
from appliance_identifier.domain.ports.health_monitor import IHealthMonitor
from appliance_identifier.domain.repositories.energy_profile_repository import (
    IEnergyProfileRepository,
)


async def _collect_health(health_monitor: IHealthMonitor) -> SystemHealth:
    storage, classifier = await asyncio.gather(
        health_monitor.check_storage(), health_monitor.check_classifier()
    )
    return SystemHealth(storage=storage, classifier=classifier)


class GetHealthStatusUseCase:
    """Use case responsible for returning health status."""

    def __init__(self, health_monitor: IHealthMonitor) -> None:
        self._health_monitor = health_monitor

    async def execute(self) -> SystemHealthDTO:
        system_health = await _collect_health(self._health_monitor)
        return SystemHealthDTO.from_domain(system_health)


class GetApplicationInfoUseCase:
    """
    Use case responsible for returning application info.

    Combines the build identity with the live health of the record store
    and classifier, and the size of the bundled reference table.
    """

    def __init__(
        self,
        health_monitor: IHealthMonitor,
        energy_profile_repository: IEnergyProfileRepository,
        identity: ServiceIdentity,
    ) -> None:
        self._health_monitor = health_monitor
        self._energy_profile_repository = energy_profile_repository
        self._identity = identity

    async def execute(self, started_at: Optional[datetime]) -> ApplicationInfoDTO:
        system_health = await _collect_health(self._health_monitor)

        now = datetime.now(timezone.utc)
        started = started_at or now

        info = ApplicationInfo(
            identity=self._identity,
            started_at=started,
            uptime_seconds=max(0.0, (now - started).total_seconds()),
            health=system_health,
            reference_profile_count=len(self._energy_profile_repository.profiles()),
        )
        return ApplicationInfoDTO.from_domain(info)
