"""
Backup utility for the mealcart snapshot file.
Creates timestamped copies before the snapshot is overwritten (e.g. by an import).
"""
import re
import shutil
from datetime import datetime
from pathlib import Path
import logging

logger = logging.getLogger(__name__)

_BACKUP_NAME = re.compile(r'^(?P<stem>.+)_\d{8}_\d{6}(?:_\d+)?(?P<suffix>\.[^.]*)$')


class BackupManager:
    """Manages timestamped backups of data files."""

    def __init__(self, data_dir: Path, backup_dir: Path = None, keep: int = 10):
        self.data_dir = Path(data_dir)
        self.backup_dir = Path(backup_dir) if backup_dir else (self.data_dir / 'backups')
        self.keep = keep

    def create_backup(self, filename: str) -> bool:
        """Create a timestamped backup of a data file."""
        source = self.data_dir / filename
        if not source.exists():
            logger.warning(f"File not found for backup: {filename}")
            return False
        try:
            self.backup_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            destination = self.backup_dir / f"{source.stem}_{timestamp}{source.suffix}"
            # two backups within the same second
            counter = 1
            while destination.exists():
                destination = self.backup_dir / f"{source.stem}_{timestamp}_{counter}{source.suffix}"
                counter += 1

            # plain copy: the backup mtime is when it was taken, list_backups sorts on it
            shutil.copy(source, destination)
            logger.info(f"Backup created: {destination.name}")

            self._cleanup_old_backups(source.name)
            return True
        except OSError as e:
            logger.error(f"Backup failed for {filename}: {e}")
            return False

    def _cleanup_old_backups(self, filename: str):
        """Remove old backups, keeping only the most recent ones."""
        backups = self.list_backups(filename)
        for backup in backups[self.keep:]:
            try:
                (self.backup_dir / backup['name']).unlink()
                logger.info(f"Removed old backup: {backup['name']}")
            except OSError as e:
                logger.error(f"Failed to remove old backup {backup['name']}: {e}")

    def restore_backup(self, backup_filename: str) -> bool:
        """Restore a specific backup file over its original."""
        backup_path = self.backup_dir / backup_filename
        match = _BACKUP_NAME.match(backup_filename)
        if not backup_path.exists() or not match:
            logger.error(f"Backup not found: {backup_filename}")
            return False
        original_name = match.group('stem') + match.group('suffix')
        destination = self.data_dir / original_name
        try:
            # Create backup of current file before restoring
            if destination.exists():
                self.create_backup(destination.name)
            shutil.copy2(backup_path, destination)
            logger.info(f"Restored backup: {backup_filename} -> {original_name}")
            return True
        except OSError as e:
            logger.error(f"Restore failed for {backup_filename}: {e}")
            return False

    def list_backups(self, filename: str = None) -> list:
        """List all backups or backups for a specific file, newest first."""
        if not self.backup_dir.exists():
            return []
        if filename:
            pattern = f"{Path(filename).stem}_*{Path(filename).suffix}"
        else:
            pattern = "*"

        backups = sorted(
            self.backup_dir.glob(pattern),
            key=lambda p: (p.stat().st_mtime, p.name),
            reverse=True
        )

        return [
            {
                'name': b.name,
                'size': b.stat().st_size,
                'created': datetime.fromtimestamp(b.stat().st_mtime).strftime('%Y-%m-%d %H:%M:%S')
            }
            for b in backups
        ]
