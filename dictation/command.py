"""transcribe_audio — the one operation the desktop shell invokes."""
from dataclasses import dataclass
from typing import Optional
import logging

from dictation.constants import MSG_TRANSCRIPTION_FAILED
from dictation.errors import TranscriptionError
from dictation.transcription.client import TranscriptionClient
from dictation.transcription.deepgram import DeepgramTranscriptionClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranscriptionResult:
    transcript: Optional[str] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.transcript is None) == (self.error is None):
            raise ValueError("exactly one of transcript or error must be set")

    @classmethod
    def success(cls, transcript: str) -> "TranscriptionResult":
        return cls(transcript=transcript)

    @classmethod
    def failure(cls, error: str) -> "TranscriptionResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.transcript is not None


async def transcribe_audio(
    audio: bytes,
    client: Optional[TranscriptionClient] = None,
) -> TranscriptionResult:
    """Transcribe one clip; every taxonomy failure comes back as an error string."""
    transcriber = client or DeepgramTranscriptionClient()
    try:
        transcript = await transcriber.transcribe(audio)
    except TranscriptionError as exc:
        logger.warning(MSG_TRANSCRIPTION_FAILED, exc)
        return TranscriptionResult.failure(str(exc))
    return TranscriptionResult.success(transcript)
