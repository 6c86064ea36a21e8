from dataclasses import dataclass
from typing import Mapping, Optional
import logging
import os

from dotenv import load_dotenv

from dictation.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMEOUT,
    ENV_API_KEY,
    ENV_FALLBACK_PATHS,
    ENV_LOG_LEVEL,
    ENV_TIMEOUT,
    MSG_ENV_NOT_FOUND,
    MSG_ERR_BAD_TIMEOUT,
    MSG_ERR_EMPTY_KEY,
    MSG_ERR_MISSING_KEY,
)
from dictation.errors import ConfigurationError

logger = logging.getLogger(__name__)


def load_env_files() -> bool:
    """Load the first .env found; process variables always win."""
    found = load_dotenv() or any(
        load_dotenv(dotenv_path=path) for path in ENV_FALLBACK_PATHS
    )
    if not found:
        logger.warning(MSG_ENV_NOT_FOUND)
    return found


def resolve_api_key(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the trimmed Deepgram key or raise ConfigurationError.

    Without an explicit mapping the .env files are loaded first and the
    process environment is read.
    """
    if environ is None:
        load_env_files()
        environ = os.environ
    match environ.get(ENV_API_KEY):
        case None:
            raise ConfigurationError(MSG_ERR_MISSING_KEY)
        case raw if not raw.strip():
            raise ConfigurationError(MSG_ERR_EMPTY_KEY)
        case raw:
            return raw.strip()


@dataclass(frozen=True)
class Config:
    log_level: str
    request_timeout: float

    @classmethod
    def from_env(cls) -> "Config":
        load_env_files()

        log_level = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)
        raw_timeout = os.getenv(ENV_TIMEOUT, DEFAULT_TIMEOUT)

        return cls._validate(log_level=log_level, raw_timeout=raw_timeout)

    @staticmethod
    def _validate(log_level: str, raw_timeout: str) -> "Config":
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(MSG_ERR_BAD_TIMEOUT) from None

        match timeout:
            case t if t > 0:
                pass
            case _:
                raise ValueError(MSG_ERR_BAD_TIMEOUT)

        return Config(log_level=log_level, request_timeout=timeout)
