import pytest

from meeting_notes.config import NotesConfig, write_default_config
from meeting_notes.errors import InvalidArgument


def test_defaults_from_empty_json():
    cfg = NotesConfig.load_json_str("{}")
    assert cfg == NotesConfig()
    assert cfg.note_tag_prefixes == ["NN", "VB"]
    assert cfg.tagger == "perceptron"


def test_load_and_dump(tmp_path):
    path = tmp_path / "notes.json"
    path.write_text(
        '{"top_k": 3, "tagger": "lexicon", "lowercase": true, '
        '"lexicon": {"standup": "NN"}, "note_tag_prefixes": ["VB"]}'
    )
    cfg = NotesConfig.load(path)
    assert cfg.top_k == 3
    assert cfg.lowercase is True
    assert cfg.lexicon == {"standup": "NN"}
    assert cfg.note_tag_prefixes == ["VB"]
    assert NotesConfig.load_json_str(cfg.dump()) == cfg


def test_negative_top_k_rejected():
    with pytest.raises(InvalidArgument):
        NotesConfig.load_json_str('{"top_k": -2}')


def test_write_default_config_refuses_overwrite(tmp_path):
    path = tmp_path / "notes.json"
    write_default_config(path)
    assert NotesConfig.load(path) == NotesConfig()
    with pytest.raises(FileExistsError):
        write_default_config(path)


@pytest.mark.parametrize("raw", ['"five"', "2.5", "true", "null"])
def test_non_integer_top_k_rejected(raw):
    with pytest.raises(InvalidArgument):
        NotesConfig.load_json_str('{"top_k": %s}' % raw)


@pytest.mark.parametrize("raw", ['"NN"', '["NN", 3]', '["NN", ""]', '{"NN": 1}'])
def test_bad_note_tag_prefixes_rejected(raw):
    with pytest.raises(InvalidArgument):
        NotesConfig.load_json_str('{"note_tag_prefixes": %s}' % raw)
