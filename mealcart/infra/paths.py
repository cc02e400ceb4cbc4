from mealcart.utilities.config import DATA_DIR, SNAPSHOT_FILE

# Centralized paths for data files (single source of truth)
BACKUP_DIR = DATA_DIR / 'backups'

__all__ = ['DATA_DIR', 'SNAPSHOT_FILE', 'BACKUP_DIR']
