"""Entry point — wires Config → DeepgramTranscriptionClient → transcribe_audio."""
import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from rich.logging import RichHandler

from dictation.command import transcribe_audio
from dictation.config import Config
from dictation.constants import MSG_ERR_READ_FILE, MSG_USAGE
from dictation.transcription.deepgram import DeepgramTranscriptionClient


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="dictation", description=MSG_USAGE)
    parser.add_argument("audio", type=Path, help="audio clip (webm/opus)")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    config = Config.from_env()
    _setup_logging(config.log_level)

    try:
        audio = args.audio.read_bytes()
    except OSError as exc:
        print(MSG_ERR_READ_FILE % exc, file=sys.stderr)
        return 1

    client = DeepgramTranscriptionClient(timeout=config.request_timeout)
    result = asyncio.run(transcribe_audio(audio, client))

    if not result.ok:
        print(result.error, file=sys.stderr)
        return 1
    print(result.transcript)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
