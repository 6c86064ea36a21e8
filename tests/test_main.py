"""Console entry point tests"""
import pytest

from dictation import main as entry
from dictation.command import TranscriptionResult


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    monkeypatch.setattr("dictation.config.load_dotenv", lambda **_: True)
    monkeypatch.setattr(entry, "_setup_logging", lambda level: None)


def test_main_prints_transcript(monkeypatch, tmp_path, capsys):
    clip = tmp_path / "clip.webm"
    clip.write_bytes(b"opus-bytes")
    seen = []

    async def fake_transcribe(audio, client):
        seen.append(audio)
        return TranscriptionResult.success("hello world")

    monkeypatch.setattr(entry, "transcribe_audio", fake_transcribe)

    assert entry.main([str(clip)]) == 0
    assert capsys.readouterr().out.strip() == "hello world"
    assert seen == [b"opus-bytes"]


def test_main_reports_error(monkeypatch, tmp_path, capsys):
    clip = tmp_path / "clip.webm"
    clip.write_bytes(b"")

    async def fake_transcribe(audio, client):
        return TranscriptionResult.failure("No transcript found in response")

    monkeypatch.setattr(entry, "transcribe_audio", fake_transcribe)

    assert entry.main([str(clip)]) == 1
    assert "No transcript found" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert entry.main([str(tmp_path / "nope.webm")]) == 1
    assert "Could not read audio file" in capsys.readouterr().err
