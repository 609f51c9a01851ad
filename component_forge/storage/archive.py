"""
Archive store for named blueprints.

Each blueprint is one ``<name>.json`` file under the archive root.
Saving an existing name overwrites it.
"""

from pathlib import Path
from typing import Union

from ..codegen.core.blueprint import Blueprint, BlueprintError, parse_blueprint
from ..logging_config import get_logger
from .results import StoreError, StoreResult

logger = get_logger(__name__)

ARCHIVE_SUFFIX = ".json"


class ArchiveStore:
    """Create, read, list and delete archived blueprints."""

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    def _path_for(self, name: str) -> Path:
        if not isinstance(name, str) or not name.strip():
            raise StoreError("Archive name must be a non-empty string")
        if "/" in name or "\\" in name or "\x00" in name or name.startswith("."):
            raise StoreError(f"Invalid archive name: {name}")
        return self.root / f"{name}{ARCHIVE_SUFFIX}"

    def save(self, name: str, blueprint) -> StoreResult:
        """
        Store a blueprint under a name, replacing any previous entry.

        Args:
            name: Archive key
            blueprint: Blueprint, decoded JSON object, or JSON text

        Returns:
            StoreResult whose value is the written path
        """
        try:
            path = self._path_for(name)
            parsed = parse_blueprint(blueprint)
            self.root.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(parsed.to_json())
                f.write("\n")
        except (StoreError, BlueprintError) as e:
            return StoreResult.failure(str(e))
        except OSError as e:
            logger.error("Failed to write %s: %s", name, e)
            return StoreResult.failure(f"Failed to save blueprint {name}: {e}")

        logger.debug("Archived %s at %s", name, path)
        return StoreResult.ok(path, f"Saved blueprint: {name}")

    def load(self, name: str) -> StoreResult:
        """Load an archived blueprint; the value is a Blueprint."""
        try:
            path = self._path_for(name)
        except StoreError as e:
            return StoreResult.failure(str(e))

        if not path.is_file():
            return StoreResult.failure(f"Blueprint not found: {name}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                blueprint = Blueprint.from_json(f.read())
        except BlueprintError as e:
            return StoreResult.failure(f"Archived blueprint {name} is invalid: {e}")
        except OSError as e:
            return StoreResult.failure(f"Failed to read blueprint {name}: {e}")

        return StoreResult.ok(blueprint)

    def list_names(self) -> StoreResult:
        """Sorted names of every archived blueprint."""
        if not self.root.is_dir():
            return StoreResult.ok([])
        names = sorted(
            path.stem
            for path in self.root.glob(f"*{ARCHIVE_SUFFIX}")
            if path.is_file() and not path.name.startswith(".")
        )
        return StoreResult.ok(names)

    def delete(self, name: str) -> StoreResult:
        """Remove an archived blueprint."""
        try:
            path = self._path_for(name)
        except StoreError as e:
            return StoreResult.failure(str(e))

        if not path.is_file():
            return StoreResult.failure(f"Blueprint not found: {name}")

        try:
            path.unlink()
        except OSError as e:
            return StoreResult.failure(f"Failed to delete blueprint {name}: {e}")

        logger.debug("Deleted archived blueprint %s", name)
        return StoreResult.ok(name, f"Deleted blueprint: {name}")
