from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Union

from .schemas import DEFAULT_INPUTS, FIELD_ALIASES, STORE_KEY, ProjectionInputs

logger = logging.getLogger(__name__)

DEFAULT_STORE_PATH = Path.home() / ".buy_vs_rent.json"


@dataclass
class InputStore:
    """Keeps the last-used inputs in a small JSON file between runs.

    The file is a JSON object; only ``key`` is read and written, other keys
    are left alone.
    """

    path: Union[str, Path] = DEFAULT_STORE_PATH
    key: str = STORE_KEY

    def __post_init__(self) -> None:
        self.path = Path(self.path).expanduser()

    def load(self) -> Dict[str, Any]:
        """Return the saved record merged over the defaults."""
        saved = self._read_document().get(self.key)
        if saved is None:
            return dict(DEFAULT_INPUTS)
        if not isinstance(saved, dict):
            logger.warning("Ignoring saved inputs in %s: not an object", self.path)
            return dict(DEFAULT_INPUTS)

        merged = dict(DEFAULT_INPUTS)
        for name, value in saved.items():
            name = FIELD_ALIASES.get(name, name)
            if name in DEFAULT_INPUTS:
                merged[name] = value
            else:
                logger.debug("Dropping unknown saved field %r", name)
        return merged

    def save(self, inputs: ProjectionInputs) -> None:
        document = self._read_document()
        document[self.key] = asdict(inputs)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        logger.info("Saved inputs to %s", self.path)

    def clear(self) -> bool:
        document = self._read_document()
        if self.key not in document:
            return False
        del document[self.key]
        self.path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        logger.info("Cleared saved inputs in %s", self.path)
        return True

    def _read_document(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Could not read saved inputs from %s: %s", self.path, exc)
            return {}
        if not isinstance(document, dict):
            logger.warning("Ignoring %s: expected a JSON object", self.path)
            return {}
        return document
