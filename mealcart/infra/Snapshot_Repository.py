import json
import logging
from pathlib import Path

from mealcart.domain.AppData import AppData

logger = logging.getLogger(__name__)


class SnapshotRepository:
    """Reads and writes the AppData JSON document (recipes, plan, preferences)."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> AppData:
        """Read the snapshot file with proper error handling; an empty AppData on failure."""
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f) or {}
            return AppData.from_dict(data)
        except FileNotFoundError:
            logger.warning(f"Snapshot file not found: {self.path}. Returning empty data.")
            return AppData()
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in snapshot file: {e}")
            return AppData()

    def save(self, app_data: AppData) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(app_data.to_dict(), f, indent=2, ensure_ascii=False)
        logger.info(f"Saved snapshot with {len(app_data.recipes)} recipes to {self.path}")
