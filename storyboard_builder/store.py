"""Durable key-value storage for the storyboard collection.

Stores hand records back exactly as persisted (plain dicts in the shared
camelCase schema). Fields written by other tools are never dropped, and
records this package cannot model are carried through untouched.
"""

import copy
import json
import logging
import os
import tempfile

from storyboard_builder.constants import STORAGE_KEY, STORE_PATH

logger = logging.getLogger(__name__)


class UnreadableStoreError(Exception):
    """The store file exists but its contents cannot be decoded."""


class JsonFileStore:
    """Storyboard collection kept under one key of a JSON object file.

    load() never raises: a missing or unreadable file reads as an empty
    collection. save() never raises either and reports failure by returning
    False. An existing file that cannot be decoded is never replaced, and
    other keys in the file are left as they were.
    """

    def __init__(self, path: str = STORE_PATH, key: str = STORAGE_KEY):
        self.path = path
        self.key = key

    def _read_slots(self) -> dict:
        """Return the file's key-value slots; {} when the file does not exist."""
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                slots = json.load(f)
        except ValueError as e:
            raise UnreadableStoreError(f"invalid JSON: {e}") from e
        if not isinstance(slots, dict):
            raise UnreadableStoreError(f"expected a JSON object, got {type(slots).__name__}")
        collection = slots.get(self.key, [])
        if not isinstance(collection, list):
            raise UnreadableStoreError(
                f"'{self.key}' must hold a list, got {type(collection).__name__}"
            )
        return slots

    def load(self) -> list[dict]:
        try:
            records = self._read_slots().get(self.key, [])
        except (OSError, UnreadableStoreError) as e:
            logger.warning("Unreadable store %s (%s); treating as empty", self.path, e)
            return []
        logger.info("Loaded %d storyboards from %s", len(records), self.path)
        return records

    def save(self, records: list[dict]) -> bool:
        try:
            slots = self._read_slots()
        except UnreadableStoreError as e:
            logger.error("Refusing to overwrite unreadable store %s (%s)", self.path, e)
            return False
        except OSError as e:
            logger.error("Error reading store %s before save: %s", self.path, e)
            return False

        slots[self.key] = records
        try:
            directory = os.path.dirname(os.path.abspath(self.path))
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".storyboards-", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(slots, f, indent=2)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise
        except (OSError, TypeError, ValueError) as e:
            logger.error("Error saving to store %s: %s", self.path, e)
            return False
        logger.info("Saved %d storyboards to %s", len(records), self.path)
        return True


class MemoryStore:
    """In-memory store with the same contract, holding independent copies."""

    def __init__(self, initial: list[dict] | None = None, fail_on_save: bool = False):
        self.records = copy.deepcopy(initial or [])
        self.fail_on_save = fail_on_save
        self.save_calls = 0

    def load(self) -> list[dict]:
        return copy.deepcopy(self.records)

    def save(self, records: list[dict]) -> bool:
        self.save_calls += 1
        if self.fail_on_save:
            logger.error("Error saving to in-memory store: writes disabled")
            return False
        self.records = copy.deepcopy(records)
        return True
