"""Create-and-persist orchestration over an explicit storyboard collection."""

import logging

from storyboard_builder.constants import SCRIPT_TITLE
from storyboard_builder.errors import PersistenceError, StoryboardNotFoundError
from storyboard_builder.models import Storyboard
from storyboard_builder.parser import parse_script

logger = logging.getLogger(__name__)


def prepend_storyboard(records: list[dict], storyboard: Storyboard) -> list[dict]:
    """Return a new collection with storyboard first.

    Existing records are passed through as-is; only the new storyboard is
    serialized. The input list is untouched.
    """
    return [storyboard.to_dict()] + list(records)


def create_storyboard(text: str, store, title: str = SCRIPT_TITLE) -> Storyboard:
    """Parse text and persist the new storyboard at the front of the store.

    Load, prepend and save run as one sequence that assumes exclusive access
    to the store. Parse errors surface before the store is read; a failed save
    raises PersistenceError and leaves the stored collection unchanged.
    """
    storyboard = parse_script(text, title=title)

    records = store.load()
    updated = prepend_storyboard(records, storyboard)

    if not store.save(updated):
        raise PersistenceError(
            "Failed to save the storyboard to the store. Storage might be full or inaccessible."
        )

    logger.info("Stored storyboard %s with %d scenes", storyboard.id, len(storyboard.scenes))
    return storyboard


def decode_storyboards(records: list) -> list[Storyboard]:
    """Build Storyboard views of stored records, skipping ones that don't fit the model."""
    storyboards = []
    for i, record in enumerate(records):
        try:
            storyboards.append(Storyboard.from_dict(record))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping malformed storyboard record %d: %r", i, e)
    return storyboards


def status_message(scene_count: int) -> str:
    return f"Successfully created {scene_count} scenes!"


def find_storyboard(collection: list[Storyboard], ref: str) -> Storyboard:
    """Look up a storyboard by id, or "latest" for the most recently created one."""
    if ref == "latest":
        if collection:
            return collection[0]
        raise StoryboardNotFoundError("No storyboards stored yet.")
    for storyboard in collection:
        if storyboard.id == ref:
            return storyboard
    raise StoryboardNotFoundError(f"Storyboard '{ref}' not found.")
