"""State machine that turns tagged dictionary lines into lexeme entries."""

import logging
from enum import Enum
from pathlib import Path

from toolbox_lexicon.config import LexiconConfig
from toolbox_lexicon.exceptions import LexiconParseError
from toolbox_lexicon.models import Entry, Sense

from .tag_reader import Tag, TagLine, read_tag_lines

logger = logging.getLogger(__name__)

# Tags that set a field on the currently open sense
_SENSE_FIELDS = {
    Tag.PART_OF_SPEECH: "part_of_speech",
    Tag.GLOSS: "gloss",
    Tag.SOURCE: "source",
    Tag.SEMANTIC_DOMAIN: "semantic_domain",
    Tag.DEFINITION: "definition",
}


class ParserState(Enum):
    """Which records are currently open."""

    NO_ENTRY = "no_entry"
    ENTRY_OPEN = "entry_open"
    SENSE_OPEN = "sense_open"


class EntryBuilder:
    """Accumulates entries from tag lines fed in document order.

    A builder is used for a single parse and then discarded; call
    ``finish()`` once after the last line to flush open records.
    """

    def __init__(self):
        self.entries: list[Entry] = []
        self.state = ParserState.NO_ENTRY
        self._entry: Entry | None = None
        self._sense: Sense | None = None

    def feed(self, tag_line: TagLine) -> None:
        """Apply one classified line to the current state."""
        tag, value = tag_line.tag, tag_line.value

        if tag is Tag.LEXEME:
            self._flush_entry()
            self._entry = Entry(lexeme=value)
            self.state = ParserState.ENTRY_OPEN
            return

        if self.state is ParserState.NO_ENTRY:
            return

        entry = self._entry
        if entry is None:
            return

        if tag is Tag.VARIANT:
            entry.variants.append(value)
        elif tag is Tag.PRIMARY_DIALECT_LABEL:
            entry.primary_dialect_label = value
        elif tag is Tag.PRIMARY_DIALECT_VARIANT:
            entry.primary_dialect_variant = value
        elif tag is Tag.SENSE_NUMBER:
            self._flush_sense()
            self._sense = Sense(sense_number=value)
            self.state = ParserState.SENSE_OPEN
        elif tag in _SENSE_FIELDS and self.state is ParserState.SENSE_OPEN:
            setattr(self._sense, _SENSE_FIELDS[tag], value)

    def finish(self) -> list[Entry]:
        """Flush any open sense and entry and return all entries."""
        self._flush_entry()
        return self.entries

    def _flush_sense(self) -> None:
        if self._sense is not None and self._entry is not None:
            self._entry.senses.append(self._sense)
        self._sense = None
        if self._entry is not None:
            self.state = ParserState.ENTRY_OPEN

    def _flush_entry(self) -> None:
        self._flush_sense()
        if self._entry is not None:
            self.entries.append(self._entry)
        self._entry = None
        self.state = ParserState.NO_ENTRY


def parse_text(text: str) -> list[Entry]:
    """Parse SFM/Toolbox dictionary text into entries.

    Args:
        text: Complete dictionary text

    Returns:
        Entries in the order their \\lx lines appear. Empty input gives
        an empty list; lines with unrecognized markers are skipped.
    """
    builder = EntryBuilder()
    for tag_line in read_tag_lines(text):
        builder.feed(tag_line)

    entries = builder.finish()
    logger.debug(f"Parsed {len(entries)} entries")
    return entries


class EntryParserService:
    """Parse dictionary files into entries (stateless service)."""

    def __init__(self, config: LexiconConfig):
        """Initialize the parser.

        Args:
            config: Configuration for reading files
        """
        self.config = config

    def parse_text(self, text: str) -> list[Entry]:
        """Parse dictionary text already held in memory."""
        return parse_text(text)

    def parse_file(self, path: Path) -> list[Entry]:
        """Read and parse a dictionary file.

        Args:
            path: Path to a Toolbox/SFM text file

        Returns:
            List of parsed entries

        Raises:
            LexiconParseError: If the file cannot be read
        """
        try:
            text = Path(path).read_text(encoding=self.config.encoding)
        except FileNotFoundError as e:
            raise LexiconParseError(f"Dictionary file not found: {path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise LexiconParseError(f"Failed to read dictionary file: {e}") from e

        entries = parse_text(text)
        logger.info(f"Parsed {len(entries)} entries from {path}")
        return entries
