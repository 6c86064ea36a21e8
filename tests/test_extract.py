"""Optional-chained transcript extraction tests"""
import pytest

from dictation.transcription.extract import dig, extract_transcript


def make_response(transcript="hello world"):
    return {"results": {"channels": [{"alternatives": [{"transcript": transcript}]}]}}


def test_dig_follows_keys_and_indexes():
    doc = {"a": [{"b": "x"}]}
    assert dig(doc, "a", 0, "b") == "x"


def test_dig_with_empty_path_returns_document():
    doc = {"a": 1}
    assert dig(doc) is doc


@pytest.mark.parametrize(
    "doc, path",
    [
        ({}, ("a",)),
        ({"a": []}, ("a", 0)),
        ({"a": [1]}, ("a", -1)),
        ({"a": [1]}, ("a", 5)),
        ({"a": "text"}, ("a", 0)),
        ({"a": {"0": 1}}, ("a", 0)),
        ([1, 2], ("a",)),
        (None, ("a",)),
    ],
)
def test_dig_returns_none_on_first_missing_step(doc, path):
    assert dig(doc, *path) is None


def test_extract_transcript_success():
    assert extract_transcript(make_response()) == "hello world"


@pytest.mark.parametrize(
    "document",
    [
        {},
        {"results": {}},
        {"results": {"channels": []}},
        {"results": {"channels": [{}]}},
        {"results": {"channels": [{"alternatives": []}]}},
        {"results": {"channels": [{"alternatives": [{}]}]}},
        {"results": {"channels": [{"alternatives": [{"transcript": None}]}]}},
        {"results": {"channels": [{"alternatives": [{"transcript": 42}]}]}},
        {"results": "oops"},
        [],
        "hello world",
    ],
)
def test_extract_transcript_absent_at_every_level(document):
    assert extract_transcript(document) is None


def test_extract_transcript_empty_string_is_absent():
    assert extract_transcript(make_response("")) is None


def test_extract_transcript_uses_first_channel_and_alternative():
    doc = {
        "results": {
            "channels": [
                {"alternatives": [{"transcript": "first"}, {"transcript": "second"}]},
                {"alternatives": [{"transcript": "other channel"}]},
            ]
        }
    }
    assert extract_transcript(doc) == "first"
