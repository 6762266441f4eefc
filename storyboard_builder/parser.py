"""Parse a delimited script into storyboard scenes."""

import logging
import re

from storyboard_builder.constants import SCENE_DELIMITER, SCRIPT_LABEL, SCRIPT_TITLE
from storyboard_builder.errors import InvalidInputError, NoScenesFoundError
from storyboard_builder.models import Storyboard

logger = logging.getLogger(__name__)

# A line holding only the delimiter, with optional surrounding whitespace
_DELIMITER_RE = re.compile(rf"^\s*{re.escape(SCENE_DELIMITER)}\s*$", re.MULTILINE)

# Retained note lines are always separated by a blank line
_NOTES_SEPARATOR = "\n\n"


def split_blocks(text: str) -> list[str]:
    """Split text on delimiter lines, returning trimmed non-empty blocks in order."""
    blocks = (block.strip() for block in _DELIMITER_RE.split(text))
    return [block for block in blocks if block]


def strip_wrapping_quotes(value: str) -> str:
    """Remove one pair of surrounding double quotes; a lone stray quote stays."""
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value


def extract_scene_fields(block: str) -> tuple[str, str, bool]:
    """Pull the voice-over line out of a block.

    Returns (vo_script, notes, label_found). Only the first line whose trimmed
    text starts with the label (any case) counts; everything after its first
    colon is the voice-over. All other lines become the notes.
    """
    lines = [line.rstrip("\r") for line in block.split("\n")]

    label_index = -1
    vo_script = ""
    for i, line in enumerate(lines):
        if line.strip().lower().startswith(SCRIPT_LABEL):
            label_index = i
            vo_script = strip_wrapping_quotes(line[line.index(":") + 1:].strip())
            break

    if label_index == -1:
        notes_lines = lines
    else:
        notes_lines = [line for i, line in enumerate(lines) if i != label_index]

    notes = _NOTES_SEPARATOR.join(notes_lines).strip()
    return vo_script, notes, label_index != -1


def parse_script(text: str, title: str = SCRIPT_TITLE) -> Storyboard:
    """Parse script text into a new Storyboard.

    Blocks are separated by lines holding only "---". Each block becomes one
    scene, numbered from 1. A block without a "Script Segment:" line is kept
    with an empty voice-over and the whole block as notes.

    Raises InvalidInputError for missing, non-string or empty text and
    NoScenesFoundError when no non-empty block remains. Nothing is persisted.
    """
    if not isinstance(text, str) or not text:
        raise InvalidInputError("Invalid input: text must be a non-empty string")

    blocks = split_blocks(text)
    if not blocks:
        raise NoScenesFoundError(
            'No valid scene blocks found. Ensure blocks are separated by "---" on its own line.'
        )

    storyboard = Storyboard(title=title)
    for block in blocks:
        vo_script, notes, label_found = extract_scene_fields(block)
        scene = storyboard.add_scene(vo_script=vo_script, notes=notes)
        if not label_found:
            logger.warning(
                'Scene %d: "Script Segment:" line not found. Entire block added to notes.',
                scene.number,
            )

    logger.info("Parsed %d scenes", len(storyboard.scenes))
    return storyboard
