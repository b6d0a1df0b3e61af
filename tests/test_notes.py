from meeting_notes.notes import extract_notes, is_note
from meeting_notes.tagger import Token


TOKENS = [
    Token("The", "DT"),
    Token("Budget", "NNP"),
    Token("was", "VBD"),
    Token("approved", "VBN"),
    Token("quickly", "RB"),
    Token("budget", "NN"),
    Token("budget", "NNS"),
    Token(".", "."),
]


def test_keeps_nouns_and_verbs_in_order_with_duplicates():
    assert extract_notes(TOKENS) == ["Budget", "was", "approved", "budget", "budget"]


def test_no_matches_is_empty():
    assert extract_notes([Token("very", "RB"), Token("well", "RB")]) == []
    assert extract_notes([]) == []


def test_custom_prefixes():
    assert extract_notes(TOKENS, prefixes=["VB"]) == ["was", "approved"]


def test_normalize_hook():
    assert extract_notes(TOKENS, prefixes=["NN"], normalize=str.lower) == ["budget"] * 3


def test_is_note():
    assert is_note(Token("ran", "VBD"))
    assert not is_note(Token("ran", "VBD"), prefixes=("NN",))
    assert not is_note(Token("the", "DT"))
