from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Callable


class JsonDocumentStore:
    """A single JSON document on disk, replaced atomically on every write."""

    def __init__(self, path: str | Path, *, default: Any):
        self._path = Path(path)
        self._default = default
        self._lock = threading.RLock()

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> Any:
        with self._lock:
            if not self._path.exists():
                return json.loads(json.dumps(self._default))
            with self._path.open("r", encoding="utf-8") as f:
                return json.load(f)

    def write(self, data: Any) -> None:
        with self._lock:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=self._path.name, suffix=".tmp", dir=str(self._path.parent))
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, ensure_ascii=False, indent=4)
                os.replace(tmp_name, self._path)
            except Exception:
                if os.path.exists(tmp_name):
                    os.remove(tmp_name)
                raise

    def update(self, mutate: Callable[[Any], Any]) -> Any:
        """Read, mutate and write back under one lock; returns mutate's result."""
        with self._lock:
            data = self.read()
            result = mutate(data)
            self.write(data)
            return result
