"""Case-insensitive lookup of races, classes and backgrounds.

Lookups return ``None`` when a name is unknown. Callers decide how to
proceed; the stat engine logs the miss and falls back to documented
defaults, since homebrew content is common.

Example:
    >>> catalog = ReferenceCatalog.default()
    >>> catalog.class_hit_die("fighter")
    10
    >>> catalog.get_race("Warforged") is None
    True
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any, TypeVar

from pydantic import ValidationError as PydanticValidationError

from dnd_forge.core.config import get_settings
from dnd_forge.core.exceptions import ReferenceDataError
from dnd_forge.core.logging import get_logger
from dnd_forge.models.enums import Ability, Skill
from dnd_forge.reference.definitions import (
    BackgroundDefinition,
    ClassDefinition,
    RaceDefinition,
    ReferenceRecord,
)
from dnd_forge.reference.srd import SRD_BACKGROUNDS, SRD_CLASSES, SRD_RACES


logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=ReferenceRecord)


def _index(records: Iterable[RecordT]) -> dict[str, RecordT]:
    return {record.key: record for record in records}


def _lookup_key(name: str) -> str:
    return name.strip().casefold()


def _parse_records(
    model: type[RecordT],
    raw: Any,
    *,
    source: str,
) -> list[RecordT]:
    """Validate raw JSON records into typed definitions.

    Accepts either a list of records or a mapping of id -> record; with a
    mapping the id doubles as the name when the record has none.

    Raises:
        ReferenceDataError: If the section is not a list/mapping or a record
            fails validation.
    """
    if raw is None:
        return []
    if isinstance(raw, Mapping):
        if not all(isinstance(record, Mapping) for record in raw.values()):
            raise ReferenceDataError(
                f"{model.__name__} records must be JSON objects",
                source=source,
            )
        items = [{"name": record_id, **record} for record_id, record in raw.items()]
    elif isinstance(raw, list):
        items = raw
    else:
        raise ReferenceDataError(
            f"Expected a list or mapping of {model.__name__} records",
            source=source,
        )

    records: list[RecordT] = []
    for item in items:
        try:
            records.append(model.model_validate(item))
        except PydanticValidationError as exc:
            raise ReferenceDataError(
                f"Invalid {model.__name__} record: {exc.error_count()} error(s)",
                source=source,
                details={"record": item.get("name") if isinstance(item, Mapping) else item},
            ) from exc
    return records


class ReferenceCatalog:
    """In-memory reference data keyed by case-insensitive name."""

    def __init__(
        self,
        *,
        races: Iterable[RaceDefinition] = (),
        classes: Iterable[ClassDefinition] = (),
        backgrounds: Iterable[BackgroundDefinition] = (),
    ) -> None:
        self._races = _index(races)
        self._classes = _index(classes)
        self._backgrounds = _index(backgrounds)

    @classmethod
    def from_data(cls, data: Mapping[str, Any], *, source: str = "<memory>") -> ReferenceCatalog:
        """Build a catalog from a ``{races, classes, backgrounds}`` mapping.

        Args:
            data: Raw reference data.
            source: Name used in error messages.

        Returns:
            A populated catalog.

        Raises:
            ReferenceDataError: If any record is malformed.
        """
        if not isinstance(data, Mapping):
            raise ReferenceDataError("Reference data must be a JSON object", source=source)
        return cls(
            races=_parse_records(RaceDefinition, data.get("races"), source=source),
            classes=_parse_records(ClassDefinition, data.get("classes"), source=source),
            backgrounds=_parse_records(
                BackgroundDefinition, data.get("backgrounds"), source=source
            ),
        )

    @classmethod
    def from_json(cls, path: Path | str) -> ReferenceCatalog:
        """Load a catalog from a JSON file.

        Raises:
            ReferenceDataError: If the file cannot be read or parsed.
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ReferenceDataError(
                f"Failed to read reference data: {exc}",
                source=str(path),
            ) from exc

        catalog = cls.from_data(data, source=str(path))
        logger.info(
            "Reference data loaded",
            source=str(path),
            races=len(catalog._races),
            classes=len(catalog._classes),
            backgrounds=len(catalog._backgrounds),
        )
        return catalog

    @classmethod
    def default(cls) -> ReferenceCatalog:
        """Catalog populated with the built-in SRD data."""
        return cls.from_data(
            {"races": SRD_RACES, "classes": SRD_CLASSES, "backgrounds": SRD_BACKGROUNDS},
            source="srd",
        )

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def get_race(self, name: str) -> RaceDefinition | None:
        return self._races.get(_lookup_key(name))

    def get_class(self, name: str) -> ClassDefinition | None:
        return self._classes.get(_lookup_key(name))

    def get_background(self, name: str) -> BackgroundDefinition | None:
        return self._backgrounds.get(_lookup_key(name))

    def racial_bonuses(self, race_name: str) -> dict[Ability, int] | None:
        """Ability score increases for a race, or None if the race is unknown."""
        race = self.get_race(race_name)
        if race is None:
            return None
        return dict(race.ability_score_increase)

    def class_hit_die(self, class_name: str) -> int | None:
        """Hit die size for a class, or None if the class is unknown."""
        character_class = self.get_class(class_name)
        if character_class is None:
            return None
        return character_class.hit_die

    def default_skills(self, background_name: str) -> list[Skill]:
        """Skill proficiencies granted by a background.

        Class skills are chosen by the player during creation, so only the
        background's fixed proficiencies are returned. Unknown backgrounds
        grant nothing.
        """
        background = self.get_background(background_name)
        if background is None:
            logger.warning("reference_data_missing", kind="background", name=background_name)
            return []
        return list(background.skill_proficiencies)

    @property
    def race_names(self) -> list[str]:
        return sorted(race.name for race in self._races.values())

    @property
    def class_names(self) -> list[str]:
        return sorted(definition.name for definition in self._classes.values())

    @property
    def background_names(self) -> list[str]:
        return sorted(background.name for background in self._backgrounds.values())


@lru_cache(maxsize=1)
def get_catalog() -> ReferenceCatalog:
    """Get the shared reference catalog.

    Uses the configured reference data file when set, otherwise the
    built-in SRD data.
    """
    path = get_settings().rules.reference_data_path
    if path is not None:
        return ReferenceCatalog.from_json(path)
    return ReferenceCatalog.default()


def clear_catalog_cache() -> None:
    """Drop the shared catalog so the next access reloads it."""
    get_catalog.cache_clear()


__all__ = [
    "ReferenceCatalog",
    "get_catalog",
    "clear_catalog_cache",
]
