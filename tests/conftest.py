"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from toolbox_lexicon.config import LexiconConfig
from toolbox_lexicon.models import Entry, Sense
from toolbox_lexicon.presenters import NullPresenter

FIXTURES_DIR = Path(__file__).parent / "fixtures"

CAT_DOG_TEXT = "\\lx cat\n\\sn 1\n\\ge feline\n\\lx dog\n\\sn 1\n\\ge canine\n"


@pytest.fixture
def sample_dictionary_path():
    """Path to the sample Toolbox dictionary shipped with the tests."""
    return FIXTURES_DIR / "sample_dictionary.txt"


@pytest.fixture
def sample_dictionary_text(sample_dictionary_path):
    """Contents of the sample Toolbox dictionary."""
    return sample_dictionary_path.read_text(encoding="utf-8")


@pytest.fixture
def cat_dog_text():
    """Two-entry dictionary used across parser and search tests."""
    return CAT_DOG_TEXT


@pytest.fixture
def test_config(tmp_path):
    """Provide a test configuration pointing at a temporary file."""
    return LexiconConfig(
        source_location=str(tmp_path / "data.txt"),
        request_timeout=1.0,
    )


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def make_sense():
    """Factory fixture for creating Sense instances with sensible defaults."""

    def _make(
        sense_number="1",
        part_of_speech=None,
        gloss=None,
        source=None,
        semantic_domain=None,
        definition=None,
    ):
        return Sense(
            sense_number=sense_number,
            part_of_speech=part_of_speech,
            gloss=gloss,
            source=source,
            semantic_domain=semantic_domain,
            definition=definition,
        )

    return _make


@pytest.fixture
def make_entry():
    """Factory fixture for creating Entry instances with sensible defaults."""

    def _make(
        lexeme="cat",
        variants=None,
        primary_dialect_label=None,
        primary_dialect_variant=None,
        senses=None,
    ):
        return Entry(
            lexeme=lexeme,
            variants=list(variants) if variants else [],
            primary_dialect_label=primary_dialect_label,
            primary_dialect_variant=primary_dialect_variant,
            senses=list(senses) if senses else [],
        )

    return _make


class RecordingPresenter:
    """A real PresenterProtocol implementation that records all calls for assertion."""

    def __init__(self):
        self.infos = []
        self.warnings = []
        self.errors = []
        self.results = []

    def show_info(self, message: str) -> None:
        self.infos.append(message)

    def show_warning(self, message: str) -> None:
        self.warnings.append(message)

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def show_results(self, result) -> None:
        self.results.append(result)


@pytest.fixture
def recording_presenter():
    """Provide a presenter that records all calls for assertion."""
    return RecordingPresenter()
