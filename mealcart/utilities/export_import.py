"""
Export and Import functionality for the AppData snapshot (recipes, plan, preferences).
"""
import json
from datetime import date
from pathlib import Path
from typing import Optional
import logging

from pydantic import ValidationError

from mealcart.domain.AppData import AppData
from mealcart.domain.Plan import Plan
from mealcart.domain.Preference import UserPreference
from mealcart.domain.Recipe import Recipe
from mealcart.infra.Snapshot_Repository import SnapshotRepository
from mealcart.utilities.backup import BackupManager
from mealcart.utilities.constants import EXPORT_FILENAME_TEMPLATE
from mealcart.utilities.validators import AppDataInput

logger = logging.getLogger(__name__)


def parse_snapshot(payload: dict) -> AppData:
    """Validate an imported document and convert it to AppData.

    Raises:
        pydantic.ValidationError: when recipes/plan are missing or malformed.
    """
    validated = AppDataInput.model_validate(payload)
    data = validated.model_dump()
    return AppData(
        recipes=[Recipe.from_dict(r) for r in data['recipes']],
        plan=Plan.from_dict(data['plan']),
        preferences=UserPreference.from_dict(data['preferences']) if data.get('preferences') else None,
        version=data['version'],
        export_date=data['exportDate'],
    )


class DataExporter:
    """Export the meal planner snapshot as a JSON document."""

    def __init__(self, repository: SnapshotRepository):
        self.repository = repository

    def build_export(self) -> dict:
        return self.repository.load().stamp().to_dict()

    def export_snapshot(self, output_path: Path = None) -> Optional[Path]:
        """Export recipes, plan and preferences to a JSON file."""
        if output_path is None:
            output_path = Path(EXPORT_FILENAME_TEMPLATE.format(date=date.today().isoformat()))

        try:
            data = self.build_export()
            with open(output_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            logger.info(f"Exported {len(data['recipes'])} recipes to {output_path}")
            return Path(output_path)
        except OSError as e:
            logger.error(f"Export failed: {e}")
            return None


class DataImporter:
    """Import a snapshot, replacing the current recipes and plan."""

    def __init__(self, repository: SnapshotRepository, backup_manager: Optional[BackupManager] = None):
        self.repository = repository
        self.backup_manager = backup_manager

    def apply(self, imported: AppData) -> AppData:
        """Replace recipes and plan; preferences only when the document carries them."""
        current = self.repository.load()
        if self.backup_manager is not None and self.repository.exists():
            self.backup_manager.create_backup(self.repository.path.name)
        current.recipes = imported.recipes
        current.plan = imported.plan
        if imported.preferences is not None:
            current.preferences = imported.preferences
        current.version = imported.version
        self.repository.save(current)
        logger.info(f"Imported {len(imported.recipes)} recipes and {len(imported.plan.meals)} plan days")
        return current

    def import_snapshot(self, input_path: Path) -> bool:
        """
        Import a snapshot from a JSON file.

        Args:
            input_path: Path to a JSON file with recipes, plan and optional preferences
        """
        try:
            with open(input_path, 'r', encoding='utf-8') as f:
                payload = json.load(f)
            imported = parse_snapshot(payload)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Import failed, file unreadable: {e}")
            return False
        except ValidationError as e:
            logger.error(f"Import failed, invalid snapshot: {e.error_count()} errors")
            return False

        self.apply(imported)
        return True


# CLI interface
if __name__ == "__main__":
    import argparse
    from mealcart.infra.paths import BACKUP_DIR, SNAPSHOT_FILE

    parser = argparse.ArgumentParser(description='Export/Import meal plan data')
    parser.add_argument('action', choices=['export', 'import'], help='Action to perform')
    parser.add_argument('--file', help='Input/output file path')

    args = parser.parse_args()
    repo = SnapshotRepository(SNAPSHOT_FILE)

    if args.action == 'export':
        result = DataExporter(repo).export_snapshot(Path(args.file) if args.file else None)
        print(f"✓ Exported to: {result}")

    elif args.action == 'import':
        if not args.file:
            print("Error: --file is required for import")
            raise SystemExit(1)

        importer = DataImporter(repo, BackupManager(SNAPSHOT_FILE.parent, BACKUP_DIR))
        if importer.import_snapshot(Path(args.file)):
            print(f"✓ Successfully imported from: {args.file}")
        else:
            print("✗ Import failed")
            raise SystemExit(1)
