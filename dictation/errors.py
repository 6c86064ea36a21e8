"""Transcription error taxonomy — every failure a single call can end in."""
import httpx

from dictation.constants import (
    MSG_ERR_NO_TRANSCRIPT,
    MSG_ERR_PARSE,
    MSG_ERR_REMOTE,
    MSG_ERR_REQUEST,
)


class TranscriptionError(Exception):
    """Base class; str(error) is the message handed back to the caller."""


class ConfigurationError(TranscriptionError):
    pass


class NetworkError(TranscriptionError):

    def __init__(self, cause: Exception) -> None:
        super().__init__(MSG_ERR_REQUEST % cause)
        self.cause = cause


class RemoteError(TranscriptionError):

    def __init__(self, status_code: int, body: str) -> None:
        status = f"{status_code} {httpx.codes.get_reason_phrase(status_code)}".strip()
        super().__init__(MSG_ERR_REMOTE % (status, body))
        self.status_code = status_code
        self.body = body


class ParseError(TranscriptionError):

    def __init__(self, cause: Exception) -> None:
        super().__init__(MSG_ERR_PARSE % cause)
        self.cause = cause


class NoTranscriptError(TranscriptionError):

    def __init__(self) -> None:
        super().__init__(MSG_ERR_NO_TRANSCRIPT)
