"""Dependency container wiring for the application."""

from dataclasses import dataclass

from bodycalc.adapters.json_file_storage import JsonFileStorage
from bodycalc.config import Settings
from bodycalc.services.lookup import LookupPolicy, get_policy
from bodycalc.services.progress import ProgressService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    progress_service: ProgressService
    lookup_policy: LookupPolicy


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    storage = JsonFileStorage(resolved_settings.progress_store_path)
    progress_service = ProgressService(
        storage=storage,
        storage_key=resolved_settings.progress_storage_key,
    )
    return AppContainer(
        settings=resolved_settings,
        progress_service=progress_service,
        lookup_policy=get_policy(resolved_settings.enum_key_policy),
    )
