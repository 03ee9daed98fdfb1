"""Seeds listing sections and cities from a YAML file.

Expected layout::

    sections:
      - Furniture
      - Electronics
    cities:
      - New York
      - Chicago

Seeding is idempotent: names that already exist are skipped.
"""

import logging
from pathlib import Path

import yaml

from app.application.interfaces import CityRepository, SectionRepository
from app.domain.entities import City, Section

logger = logging.getLogger(__name__)


class ReferenceDataSeeder:

    def __init__(
        self,
        section_repository: SectionRepository,
        city_repository: CityRepository,
        data_file: str | Path,
    ):
        self._sections = section_repository
        self._cities = city_repository
        self._data_file = Path(data_file)

    async def seed(self) -> int:
        """Insert missing sections and cities. Returns the number created."""
        if not self._data_file.exists():
            logger.warning("Reference data file not found: %s", self._data_file)
            return 0

        data = self._load_yaml(self._data_file) or {}
        created = 0

        for name in self._names(data, "sections"):
            if await self._sections.get_by_name(name) is None:
                await self._sections.create(Section(name=name))
                created += 1

        for name in self._names(data, "cities"):
            if await self._cities.get_by_name(name) is None:
                await self._cities.create(City(name=name))
                created += 1

        logger.info("Reference data seeded: %d new entries", created)
        return created

    @staticmethod
    def _names(data: dict, key: str) -> list[str]:
        return [str(name).strip() for name in data.get(key) or [] if str(name).strip()]

    def _load_yaml(self, path: Path) -> dict | None:
        """Load and parse a YAML file, returning None on error."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except Exception:
            logger.exception("Failed to parse YAML file: %s", path)
            return None
