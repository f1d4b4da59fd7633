"""Preset book: named selection sets saved for reuse."""

from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from demofilter.domain.exceptions import (
    InvalidSelectionError,
    PresetNotFoundError,
    PresetsDisabledError,
)
from demofilter.domain.model.preset import FilterPreset

if TYPE_CHECKING:
    from demofilter.application.selection_store import SelectionStore
    from demofilter.domain.model.config import FilterConfig


class PresetBook:
    """In-memory collection of filter presets.

    Only usable when presets are enabled in configuration.
    """

    def __init__(
        self,
        config: FilterConfig,
        *,
        now: Callable[[], datetime] = lambda: datetime.now(UTC),
        new_id: Callable[[], str] = lambda: uuid.uuid4().hex,
    ) -> None:
        """Initialize book.

        Args:
            config: Filter configuration.
            now: Timestamp source for created_at.
            new_id: Id generator.
        """
        self._config = config
        self._now = now
        self._new_id = new_id
        self._presets: dict[str, FilterPreset] = {}

    def _require_enabled(self) -> None:
        if not self._config.enable_presets:
            raise PresetsDisabledError

    def save(
        self,
        name: str,
        store: SelectionStore,
        *,
        description: str | None = None,
        created_by: str | None = None,
    ) -> FilterPreset:
        """Save the store's current selections as a new preset.

        Raises:
            PresetsDisabledError: If presets are disabled
        """
        self._require_enabled()
        preset = FilterPreset(
            id=self._new_id(),
            name=name,
            filters=store.selections,
            created_at=self._now(),
            description=description,
            created_by=created_by,
        )
        self._presets[preset.id] = preset
        return preset

    def get(self, preset_id: str) -> FilterPreset:
        """Look up a preset by id.

        Raises:
            PresetsDisabledError: If presets are disabled
            PresetNotFoundError: If no such preset
        """
        self._require_enabled()
        try:
            return self._presets[preset_id]
        except KeyError:
            raise PresetNotFoundError(preset_id) from None

    def delete(self, preset_id: str) -> None:
        """Remove a preset.

        Raises:
            PresetsDisabledError: If presets are disabled
            PresetNotFoundError: If no such preset
        """
        self.get(preset_id)
        del self._presets[preset_id]

    def presets(self) -> tuple[FilterPreset, ...]:
        """All presets in save order."""
        self._require_enabled()
        return tuple(self._presets.values())

    def apply(self, preset_id: str, store: SelectionStore) -> None:
        """Replace the store's selections with a preset's.

        Raises:
            PresetsDisabledError: If presets are disabled
            PresetNotFoundError: If no such preset
            InvalidSelectionError: If the preset exceeds the store's cap
        """
        preset = self.get(preset_id)
        cap = store.max_selections
        if cap is not None and len(preset.filters) > cap:
            raise InvalidSelectionError(
                f"preset '{preset.name}' has {len(preset.filters)} selections, cap is {cap}"
            )
        store.replace(preset.filters)
