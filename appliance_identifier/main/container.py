"""
Dependency container injection module - Main Layer

Composition root: builds the record store, reference data, classifier
and use cases from the application settings.
"""

from contextlib import asynccontextmanager
from typing import Any, Dict

from dependency_injector import containers, providers

from appliance_identifier.application.use_cases.appliance_use_cases import (
    ClassifyAndSaveApplianceUseCase,
    ClassifyApplianceUseCase,
    DeleteApplianceUseCase,
    GetApplianceImageUseCase,
    GetAppliancesUseCase,
    GetReferenceProfilesUseCase,
    SaveApplianceUseCase,
)
from appliance_identifier.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from appliance_identifier.domain.entities.health import ServiceIdentity
from appliance_identifier.infrastructure.classifiers import (
    CallbackImageClassifier,
    StaticPredictor,
    ThreadPoolClassificationEngine,
)
from appliance_identifier.infrastructure.database import MongoDatabase
from appliance_identifier.infrastructure.imaging import PillowJpegEncoder
from appliance_identifier.infrastructure.repositories import (
    InMemoryApplianceRepository,
    MongoApplianceRepository,
    StaticEnergyProfileRepository,
)
from appliance_identifier.infrastructure.services import HealthCheckService
from appliance_identifier.shared import EnumStorageBackend, get_logger

from .config import AppSettings

logger = get_logger(__name__)


def _enum_value(value: Any) -> str:
    return value.value if hasattr(value, "value") else str(value)


def _static_classifier_metadata(model_version: str, label: str) -> Dict[str, str]:
    return {
        "version": model_version,
        "model_type": "StaticPredictor",
        "framework": "none",
        "label": label,
        "note": "Static predictor; deploy a trained model for real identification.",
    }


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    config = providers.Configuration()

    storage_backend = providers.Callable(_enum_value, config.storage.backend)

    # Infrastructure
    mongo_database = providers.Singleton(
        MongoDatabase,
        mongo_uri=config.database.mongo_uri,
        db_name=config.database.database_name,
        server_selection_timeout_ms=config.database.server_selection_timeout_ms,
    )

    appliance_repository = providers.Selector(
        storage_backend,
        mongo=providers.Singleton(
            MongoApplianceRepository,
            mongo_database=mongo_database,
            collection_name=config.database.collection_name,
        ),
        memory=providers.Singleton(InMemoryApplianceRepository),
    )

    energy_profile_repository = providers.Singleton(StaticEnergyProfileRepository)

    classification_engine = providers.Singleton(
        ThreadPoolClassificationEngine,
        predictor=providers.Singleton(
            StaticPredictor,
            label=config.classifier.label,
            confidence=config.classifier.confidence,
        ),
        max_workers=config.classifier.max_workers,
        metadata=providers.Callable(
            _static_classifier_metadata,
            config.classifier.model_version,
            config.classifier.label,
        ),
    )

    image_classifier = providers.Singleton(
        CallbackImageClassifier,
        engine=classification_engine,
    )

    image_encoder = providers.Singleton(
        PillowJpegEncoder,
        quality=config.image.jpeg_quality,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        storage_backend=storage_backend,
        appliance_repository=appliance_repository,
        image_classifier=image_classifier,
        mongo_database=providers.Selector(
            storage_backend,
            mongo=mongo_database,
            memory=providers.Object(None),
        ),
    )

    service_identity = providers.Singleton(
        ServiceIdentity,
        name=config.ge.title,
        description=config.ge.description,
        version=config.ge.version,
        environment=providers.Callable(_enum_value, config.environment),
        git_commit=config.ge.git_commit,
        build_time=config.ge.build_time,
    )

    # Application (use cases)
    classify_appliance_use_case = providers.Factory(
        ClassifyApplianceUseCase,
        image_classifier=image_classifier,
        energy_profile_repository=energy_profile_repository,
        image_encoder=image_encoder,
    )

    get_appliances_use_case = providers.Factory(
        GetAppliancesUseCase,
        appliance_repository=appliance_repository,
    )

    save_appliance_use_case = providers.Factory(
        SaveApplianceUseCase,
        appliance_repository=appliance_repository,
    )

    delete_appliance_use_case = providers.Factory(
        DeleteApplianceUseCase,
        appliance_repository=appliance_repository,
    )

    classify_and_save_appliance_use_case = providers.Factory(
        ClassifyAndSaveApplianceUseCase,
        classify_use_case=classify_appliance_use_case,
        save_use_case=save_appliance_use_case,
    )

    get_appliance_image_use_case = providers.Factory(
        GetApplianceImageUseCase,
        appliance_repository=appliance_repository,
    )

    get_reference_profiles_use_case = providers.Factory(
        GetReferenceProfilesUseCase,
        energy_profile_repository=energy_profile_repository,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_monitor=health_check_service,
    )

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        health_monitor=health_check_service,
        energy_profile_repository=energy_profile_repository,
        identity=service_identity,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Start and stop the resources owned by the container.

    MongoDB indexes are created on start-up when the durable store is in
    use; the database connection and the inference threads are released
    on shutdown.
    """
    container = get_container()
    uses_mongo = container.storage_backend() == EnumStorageBackend.MONGO.value
    mongo_database = container.mongo_database() if uses_mongo else None

    try:
        if mongo_database is not None:
            logger.info("container.mongo.ensure_indexes")
            await mongo_database.create_indexes(container.config.database.collection_name())
        logger.info("container.resources.initialized")
        yield container
    finally:
        if mongo_database is not None:
            logger.info("container.mongo.close")
            mongo_database.close()
        container.classification_engine().shutdown()
        logger.info("container.resources.shutdown")
