"""
Goal tracker storage.

Targets live in a small JSON key/value file under a single key, with no
database table behind them.
"""
import json
import logging
import os
import tempfile
import threading
import time
from datetime import datetime
from typing import List, Optional

from unitflow.core.config import settings
from unitflow.schemas.target import Target, TargetCreate, TargetUpdate

logger = logging.getLogger(__name__)

TARGETS_KEY = "unitflow_targets"

# Sync endpoints run in a threadpool; every read-modify-write of the file holds this
_write_lock = threading.RLock()


class TargetStore:
    def __init__(self, path: str):
        self.path = path

    def _read(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.error(f"Could not read targets file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.error(f"Targets file {self.path} does not hold a key/value object, ignoring it")
            return {}
        return data

    def _write(self, data: dict) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=directory, prefix=".targets-", suffix=".tmp", delete=False
        ) as f:
            tmp_path = f.name
            json.dump(data, f, indent=2)
        try:
            os.replace(tmp_path, self.path)
        except OSError:
            os.unlink(tmp_path)
            raise

    def list_targets(self) -> List[Target]:
        return [Target.model_validate(raw) for raw in self._read().get(TARGETS_KEY, [])]

    def get(self, target_id: str) -> Optional[Target]:
        for target in self.list_targets():
            if target.id == target_id:
                return target
        return None

    def save_all(self, targets: List[Target]) -> None:
        with _write_lock:
            data = self._read()
            data[TARGETS_KEY] = [t.model_dump(mode="json") for t in targets]
            self._write(data)

    def create(self, target_data: TargetCreate) -> Target:
        with _write_lock:
            targets = self.list_targets()
            existing_ids = {t.id for t in targets}

            # Millisecond timestamp ids, bumped on collision
            new_id = int(time.time() * 1000)
            while str(new_id) in existing_ids:
                new_id += 1

            target = Target(
                id=str(new_id),
                created_at=datetime.utcnow(),
                completed=False,
                **target_data.model_dump(),
            )
            targets.append(target)
            self.save_all(targets)
            return target

    def update(self, target_id: str, target_data: TargetUpdate) -> Optional[Target]:
        with _write_lock:
            targets = self.list_targets()
            for index, target in enumerate(targets):
                if target.id == target_id:
                    changes = {k: v for k, v in target_data.model_dump(exclude_unset=True).items() if v is not None}
                    updated = target.model_copy(update=changes)
                    # Re-validate so enum/date fields stay typed
                    targets[index] = Target.model_validate(updated.model_dump())
                    self.save_all(targets)
                    return targets[index]
            return None

    def delete(self, target_id: str) -> bool:
        with _write_lock:
            targets = self.list_targets()
            remaining = [t for t in targets if t.id != target_id]
            if len(remaining) == len(targets):
                return False
            self.save_all(remaining)
            return True


def get_target_store() -> TargetStore:
    return TargetStore(settings.TARGETS_FILE)
