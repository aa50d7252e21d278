"""Line reader and tag classifier for SFM/Toolbox dictionary text."""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class Tag(str, Enum):
    """Recognized field markers."""

    LEXEME = "\\lx"
    VARIANT = "\\va"
    PRIMARY_DIALECT_LABEL = "\\pdl"
    PRIMARY_DIALECT_VARIANT = "\\pdv"
    SENSE_NUMBER = "\\sn"
    PART_OF_SPEECH = "\\ps"
    GLOSS = "\\ge"
    SOURCE = "\\so"
    SEMANTIC_DOMAIN = "\\sd"
    DEFINITION = "\\de"


_TAGS_BY_TEXT = {tag.value: tag for tag in Tag}


@dataclass(frozen=True)
class TagLine:
    """A line whose leading token is a recognized tag."""

    tag: Tag
    value: str


def iter_lines(text: str) -> Iterator[str]:
    """Yield the stripped, non-blank lines of text in their original order.

    Args:
        text: Raw dictionary text

    Yields:
        Each line with surrounding whitespace removed; blank lines are skipped
    """
    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if line:
            yield line


def extract_value(line: str, tag: Tag) -> str:
    """Return the text following the tag marker, trimmed.

    The marker length comes from the tag itself, so three-letter markers
    like \\pdl strip one character more than \\lx.
    """
    return line[len(tag.value) :].strip()


def classify(line: str) -> TagLine | None:
    """Classify a stripped line by its leading tag.

    The whole first token must equal a known marker; a longer marker that
    merely starts with one (``\\geo``, ``\\lxx``) is unrecognized.

    Args:
        line: A non-blank, stripped line

    Returns:
        TagLine with the tag and its value, or None for unrecognized markers
    """
    token = line.split(None, 1)[0] if line else ""
    tag = _TAGS_BY_TEXT.get(token)
    if tag is None:
        return None
    return TagLine(tag=tag, value=extract_value(line, tag))


def read_tag_lines(text: str) -> Iterator[TagLine]:
    """Yield classified lines, dropping lines with unrecognized markers."""
    for line in iter_lines(text):
        tag_line = classify(line)
        if tag_line is not None:
            yield tag_line
