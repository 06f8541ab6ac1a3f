"""Snapshot loading.

The store reads the cache (and optional vars) file once at startup and
then only hands out references to the same frozen objects. Requests never
copy or mutate the snapshot.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from ..constants import CACHE_FILE, VARS_FILE
from ..exceptions import SnapshotLoadError
from .models import Snapshot, VarsFile

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _load_json_model(path: Path, model: Type[M]) -> M:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise SnapshotLoadError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SnapshotLoadError(f"Invalid JSON in {path}: {e}") from e

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise SnapshotLoadError(
            f"{path} does not match the {model.__name__} schema: {e.error_count()} error(s)\n{e}"
        ) from e


class SnapshotStore:
    """Holds the read-only snapshot shared by all requests.

    Args:
        snapshot: Loaded code intelligence snapshot
        vars_file: Loaded variables, or None when the project has none
        project_root: Directory the files were read from (informational)
    """

    def __init__(
        self,
        snapshot: Snapshot,
        vars_file: Optional[VarsFile] = None,
        project_root: Optional[Path] = None,
    ):
        self._snapshot = snapshot
        self._vars = vars_file
        self.project_root = project_root

    @classmethod
    def from_project(cls, project_root: Union[str, Path]) -> "SnapshotStore":
        """Load ``.acp/acp.cache.json`` (required) and ``.acp/acp.vars.json``.

        Raises:
            SnapshotLoadError: If the cache file is missing or invalid, or a
                present vars file is invalid
        """
        root = Path(project_root)
        cache_path = root / CACHE_FILE
        if not cache_path.exists():
            raise SnapshotLoadError(
                f"No snapshot at {cache_path}. Run the indexer (acp index) first."
            )

        snapshot = _load_json_model(cache_path, Snapshot)
        logger.info(
            f"Loaded snapshot with {len(snapshot.files)} files, "
            f"{len(snapshot.symbols)} symbols, {len(snapshot.domains)} domains"
        )

        vars_path = root / VARS_FILE
        vars_file = None
        if vars_path.exists():
            vars_file = _load_json_model(vars_path, VarsFile)
            logger.info(f"Loaded {len(vars_file.variables)} variables from {vars_path}")
        else:
            logger.info(f"No vars file at {vars_path}; variable expansion disabled")

        return cls(snapshot, vars_file, project_root=root)

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    @property
    def vars(self) -> Optional[VarsFile]:
        return self._vars
