from __future__ import annotations
import io
import json

import pytest

from tokenized_string.cli import main


@pytest.fixture
def vocab_config(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text("tokens:\n  name: Ada\n  greeting: Hello\n", encoding="utf-8")
    return str(p)


def test_parse(capsys):
    assert main(["parse", "Hello %[name]."]) == 0
    out = capsys.readouterr().out
    assert json.loads(out) == [{"string": "Hello "}, {"token": "name"}, {"string": "."}]


def test_parse_custom_delimiters(capsys):
    assert main(["parse", "{{a}}!", "--prefix", "{{", "--suffix", "}}"]) == 0
    assert json.loads(capsys.readouterr().out) == [{"token": "a"}, {"string": "!"}]


def test_parse_error_exit_code(capsys):
    assert main(["parse", "Hello %[name"]) == 1
    assert "without a corresponding suffix" in capsys.readouterr().err


def test_unknown_token_with_vocabulary(capsys, vocab_config):
    assert main(["parse", "%[nobody]", "--config", vocab_config]) == 1
    assert "nobody" in capsys.readouterr().err


def test_empty_prefix_is_an_error(capsys):
    assert main(["parse", "x", "--prefix", ""]) == 1


def test_serialize_from_file(tmp_path, capsys):
    p = tmp_path / "records.json"
    p.write_text(json.dumps([{"token": "a"}, {"string": " b"}]), encoding="utf-8")
    assert main(["serialize", str(p)]) == 0
    assert capsys.readouterr().out == "%[a] b\n"


def test_serialize_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO('[{"string": "x"}, {"token": "y"}]'))
    assert main(["serialize"]) == 0
    assert capsys.readouterr().out == "x%[y]\n"


def test_serialize_rejects_bad_records(tmp_path, capsys):
    p = tmp_path / "records.json"
    p.write_text('[{"token": "a", "string": "b"}]', encoding="utf-8")
    assert main(["serialize", str(p)]) == 1


def test_preview_with_vocabulary(capsys, vocab_config):
    assert main(["preview", "%[greeting], %[name]!", "--config", vocab_config]) == 0
    assert capsys.readouterr().out == "Hello, Ada!\n"


def test_preview_without_vocabulary_shows_ids(capsys):
    assert main(["preview", "%[a]-%[b]", "--separator", "|"]) == 0
    assert capsys.readouterr().out == "a|-|b\n"


def test_inspect(capsys):
    assert main(["inspect", "Hi %[name]"]) == 0
    out = capsys.readouterr().out
    assert "token" in out and "'name'" in out and "'Hi '" in out


@pytest.mark.parametrize("body", ["tokens: [unclosed\n", "vocabulary_file: 5\n"])
def test_bad_config_exit_code(tmp_path, capsys, body):
    p = tmp_path / "cfg.yaml"
    p.write_text(body, encoding="utf-8")
    assert main(["parse", "x", "--config", str(p)]) == 1
    assert capsys.readouterr().err.startswith("error: ")


def test_missing_config_file(tmp_path, capsys):
    assert main(["parse", "x", "--config", str(tmp_path / "nope.yaml")]) == 1


def test_log_level_is_case_insensitive(capsys):
    assert main(["parse", "%[a]", "--log-level", "debug"]) == 0


def test_invalid_log_level_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["parse", "x", "--log-level", "foo"])
    assert exc.value.code == 2
    assert "invalid choice" in capsys.readouterr().err
