"""Bootstrap seeding of the menu from a static file."""
import json
import logging
from pathlib import Path
from typing import Any, List

import yaml
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tableorder.services.menu.base import MenuItemData, normalize_menu_item
from tableorder.services.menu.repository import MenuRepository

logger = logging.getLogger(__name__)


def load_seed_file(seed_file: Path) -> List[MenuItemData]:
    """Read and normalize seed descriptors from a JSON or YAML file.

    The file holds either an array of descriptors or an object with an
    ``items`` array. Entries that are not objects or have no name are
    skipped.
    """
    with open(seed_file, "r", encoding="utf-8") as f:
        if seed_file.suffix.lower() in (".yaml", ".yml"):
            data: Any = yaml.safe_load(f)
        else:
            data = json.load(f)

    if isinstance(data, dict):
        data = data.get("items", [])
    if not isinstance(data, list):
        raise ValueError(f"Seed file {seed_file} must contain a list of menu items")

    items = [normalize_menu_item(raw) for raw in data if isinstance(raw, dict)]
    return [item for item in items if item.name]


async def seed_menu_if_empty(
    sessionmaker: async_sessionmaker[AsyncSession], seed_file: str
) -> int:
    """Populate an empty menu from ``seed_file``.

    Returns the number of items inserted. Never raises: failures are logged
    and startup continues.
    """
    path = Path(seed_file)
    try:
        async with sessionmaker() as session:
            repository = MenuRepository(session)
            existing = await repository.count()
            if existing > 0:
                logger.info(f"[SEED] Menu already has {existing} items, skipping")
                return 0
            if not path.exists():
                logger.info(f"[SEED] No seed file at {path}, skipping")
                return 0

            items = load_seed_file(path)
            if not items:
                logger.info(f"[SEED] Seed file {path} has no usable items")
                return 0
            inserted = await repository.insert_many(items)
            logger.info(f"[SEED] Inserted {inserted} menu items from {path}")
            return inserted
    except Exception as e:
        logger.error(f"[SEED] Menu seeding failed - {type(e).__name__}: {e}", exc_info=True)
        # Don't raise - startup must not fail because of seeding
        return 0
