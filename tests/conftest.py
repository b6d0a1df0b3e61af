import pytest

from meeting_notes.errors import ResourceUnavailable
from meeting_notes.tagger import LexiconTagger, PerceptronTagger


@pytest.fixture
def lexicon_tagger():
    return LexiconTagger()


@pytest.fixture(scope="session")
def perceptron_tagger():
    try:
        return PerceptronTagger()
    except ResourceUnavailable as ex:
        pytest.skip(f"nltk data not installed: {ex}")


@pytest.fixture
def lexicon_config(tmp_path):
    path = tmp_path / "notes.json"
    path.write_text('{"tagger": "lexicon", "top_k": 5, "log_level": "WARNING"}')
    return path
