"""Persistence of the undo ledger as JSON."""

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ..errors import SerializationError
from ..utils.logging import get_logger
from .models import History

logger = get_logger(__name__)

# [[[original, staged], ...], ...]
LEDGER_SCHEMA = TypeAdapter(list[list[tuple[str, str]]])

EMPTY_LEDGER = "[]"


class Ledger:
    """Reads and writes a History to a JSON file."""

    def __init__(self, path: Path):
        """
        Initialize the ledger.

        Args:
            path: Location of the JSON ledger file
        """
        self.path = Path(path)

    def load(self) -> History:
        """
        Load history from the ledger file.

        Returns:
            History with batches ordered oldest to newest

        Raises:
            SerializationError: If the file cannot be read or has the wrong shape
        """
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise SerializationError(f"Unable to read ledger {self.path}: {e}") from e

        # json keeps surrogate escapes from non UTF-8 file names intact
        try:
            data = LEDGER_SCHEMA.validate_python(json.loads(raw))
        except (ValueError, ValidationError) as e:
            raise SerializationError(f"Malformed ledger {self.path}: {e}") from e

        history = History.from_json(data)
        logger.debug(f"Loaded {len(history)} batch(es) from {self.path}")
        return history

    def save(self, history: History) -> None:
        """
        Write history to the ledger file.

        The file is replaced in one step so a crash never leaves a truncated ledger.

        Raises:
            SerializationError: If the file cannot be written
        """
        tmp_path: Path | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_path = Path(tmp.name)
                json.dump(history.to_json(), tmp, indent=2)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_path is not None:
                with suppress(OSError):
                    tmp_path.unlink()
            raise SerializationError(f"Unable to write ledger {self.path}: {e}") from e

        logger.debug(f"Saved {len(history)} batch(es) to {self.path}")

    def reset(self) -> None:
        """Replace the ledger with an empty one."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(EMPTY_LEDGER, encoding="utf-8")
        except OSError as e:
            raise SerializationError(f"Unable to write ledger {self.path}: {e}") from e
