"""Base repository implementation for in-code definitions."""
from __future__ import annotations

from typing import Dict, Generic, Iterable, TypeVar

from libris.data.errors import DataValidationError

T = TypeVar("T")


class RepositoryBase(Generic[T]):
    """Common caching and loading behavior for repositories."""

    def __init__(self) -> None:
        self._definitions: Dict[str, T] | None = None

    def _load_raw(self) -> Iterable[T]:
        """Return the definitions this repository serves."""
        raise NotImplementedError

    def _build(self, raw: Iterable[T]) -> Dict[str, T]:
        """Index raw definitions by id."""
        raise NotImplementedError

    def _ensure_loaded(self) -> None:
        if self._definitions is None:
            self._definitions = self._build(self._load_raw())

    def get(self, def_id: str) -> T:
        """Return a definition by id."""
        self._ensure_loaded()
        assert self._definitions is not None
        try:
            return self._definitions[def_id]
        except KeyError as exc:
            raise KeyError(def_id) from exc

    def all(self) -> list[T]:
        """Return all definitions sorted deterministically by id."""
        self._ensure_loaded()
        assert self._definitions is not None
        return [self._definitions[key] for key in sorted(self._definitions.keys())]

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str) or not value:
            raise DataValidationError(f"{context} must be a non-empty string.")
        return value
