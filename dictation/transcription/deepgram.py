"""DeepgramTranscriptionClient — Deepgram pre-recorded speech-to-text backend."""
import json
import logging
from typing import Any, Callable, Optional

import httpx

from dictation.config import resolve_api_key
from dictation.constants import (
    AUDIO_CONTENT_TYPE,
    DEEPGRAM_AUTH_SCHEME,
    DEEPGRAM_LISTEN_URL,
    DEEPGRAM_QUERY_PARAMS,
    DEFAULT_TIMEOUT,
    MSG_AUDIO_RECEIVED,
    MSG_ERR_UNKNOWN_BODY,
    MSG_KEY_LOADED,
    MSG_RESPONSE_BODY,
    MSG_RESPONSE_STATUS,
)
from dictation.errors import NetworkError, NoTranscriptError, ParseError, RemoteError
from dictation.transcription.client import TranscriptionClient
from dictation.transcription.extract import extract_transcript

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], httpx.AsyncClient]


def _read_error_body(response: httpx.Response) -> str:
    try:
        return response.text
    except (httpx.ResponseNotRead, httpx.StreamError):
        return MSG_ERR_UNKNOWN_BODY


def _parse_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise ParseError(exc) from exc


class DeepgramTranscriptionClient(TranscriptionClient):

    def __init__(
        self,
        api_key_resolver: Callable[[], str] = resolve_api_key,
        client_factory: Optional[ClientFactory] = None,
        timeout: float = float(DEFAULT_TIMEOUT),
    ) -> None:
        self._resolve_api_key = api_key_resolver
        self._client_factory = client_factory or (
            lambda: httpx.AsyncClient(timeout=timeout)
        )

    async def send(self, audio: bytes, api_key: str) -> httpx.Response:
        """POST the clip verbatim; send failures become NetworkError."""
        headers = {
            "Authorization": f"{DEEPGRAM_AUTH_SCHEME} {api_key}",
            "Content-Type": AUDIO_CONTENT_TYPE,
        }
        # header values must be ASCII; httpx raises while building the request
        try:
            async with self._client_factory() as client:
                return await client.post(
                    DEEPGRAM_LISTEN_URL,
                    params=DEEPGRAM_QUERY_PARAMS,
                    headers=headers,
                    content=audio,
                )
        except (httpx.HTTPError, UnicodeEncodeError) as exc:
            raise NetworkError(exc) from exc

    async def transcribe(self, audio: bytes) -> str:
        api_key = self._resolve_api_key()
        logger.info(MSG_AUDIO_RECEIVED, len(audio))
        logger.info(MSG_KEY_LOADED, len(api_key))

        response = await self.send(audio, api_key)
        logger.info(MSG_RESPONSE_STATUS, response.status_code)

        if not response.is_success:
            raise RemoteError(response.status_code, _read_error_body(response))

        document = _parse_json(response)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(MSG_RESPONSE_BODY, json.dumps(document, indent=2))

        match extract_transcript(document):
            case None:
                raise NoTranscriptError()
            case transcript:
                return transcript
