"""All magic values live here — no inline literals anywhere else."""

# Environment
ENV_API_KEY = "DEEPGRAM_API_KEY"
ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_TIMEOUT = "DEEPGRAM_TIMEOUT"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_TIMEOUT = "30"

# .env lookup order after python-dotenv's own discovery
ENV_FALLBACK_PATHS: tuple[str, ...] = ("../.env", ".env")

# Deepgram request shape (fixed)
DEEPGRAM_LISTEN_URL = "https://api.deepgram.com/v1/listen"
DEEPGRAM_QUERY_PARAMS: dict[str, str] = {
    "model": "nova-2",
    "language": "en",
    "punctuate": "true",
}
DEEPGRAM_AUTH_SCHEME = "Token"
AUDIO_CONTENT_TYPE = "audio/webm;codecs=opus"

# Path into the Deepgram response document
TRANSCRIPT_PATH: tuple[str | int, ...] = (
    "results", "channels", 0, "alternatives", 0, "transcript",
)

# Log messages
MSG_ENV_NOT_FOUND = "Warning: .env file not found. Make sure DEEPGRAM_API_KEY is set."
MSG_AUDIO_RECEIVED = "Received %d bytes of audio data"
MSG_KEY_LOADED = "API key loaded (length: %d chars)"
MSG_RESPONSE_STATUS = "Deepgram API response status: %s"
MSG_RESPONSE_BODY = "Deepgram response: %s"
MSG_TRANSCRIPTION_FAILED = "Transcription failed: %s"

# Error messages surfaced to the caller
MSG_ERR_MISSING_KEY = (
    "Missing DEEPGRAM_API_KEY environment variable. "
    "Please create a .env file with: DEEPGRAM_API_KEY=your_key_here"
)
MSG_ERR_EMPTY_KEY = "DEEPGRAM_API_KEY is empty. Please set a valid API key in your .env file."
MSG_ERR_REQUEST = "Request failed: %s"
MSG_ERR_REMOTE = "Deepgram API error (%s): %s"
MSG_ERR_UNKNOWN_BODY = "Unknown error"
MSG_ERR_PARSE = "Failed to parse JSON: %s"
MSG_ERR_NO_TRANSCRIPT = "No transcript found in response"
MSG_ERR_BAD_TIMEOUT = "DEEPGRAM_TIMEOUT must be a positive number of seconds"

# Console entry point
MSG_USAGE = "Transcribe an audio clip with Deepgram"
MSG_ERR_READ_FILE = "Could not read audio file: %s"
