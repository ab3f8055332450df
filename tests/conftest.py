"""Shared test fixtures."""

import itertools
from collections.abc import Callable
from dataclasses import dataclass, field

import pytest

from bodycalc.config import Settings
from bodycalc.containers import AppContainer
from bodycalc.services.lookup import lenient_lookup
from bodycalc.services.progress import STORAGE_KEY, ProgressService, ProgressStorage


@dataclass
class InMemoryStorage(ProgressStorage):
    """In-memory key-value storage for tests."""

    items: dict[str, str] = field(default_factory=dict)
    writes: int = 0
    fail_writes: bool = False

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise OSError("disk full")
        self.writes += 1
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        if self.fail_writes:
            raise OSError("disk full")
        self.items.pop(key, None)


def sequential_ids(prefix: str = "id") -> Callable[[], str]:
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(progress_store_path=tmp_path / "progress.json")


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def progress_service(storage: InMemoryStorage) -> ProgressService:
    return ProgressService(storage=storage, storage_key=STORAGE_KEY)


@pytest.fixture
def container(settings: Settings, progress_service: ProgressService) -> AppContainer:
    return AppContainer(
        settings=settings,
        progress_service=progress_service,
        lookup_policy=lenient_lookup,
    )
