"""Pull the transcript out of a Deepgram response without trusting its shape."""
from typing import Any, Optional

from dictation.constants import TRANSCRIPT_PATH


def _step(node: Any, key: str | int) -> Optional[Any]:
    match (node, key):
        case (dict(), str()):
            return node.get(key)
        case (list(), int()) if 0 <= key < len(node):
            return node[key]
        case _:
            return None


def dig(document: Any, *path: str | int) -> Optional[Any]:
    """Follow `path` into nested dicts/lists; None at the first missing step."""
    node = document
    for key in path:
        node = _step(node, key)
        if node is None:
            return None
    return node


def extract_transcript(document: Any) -> Optional[str]:
    """Return the first alternative's transcript, or None if unusable."""
    match dig(document, *TRANSCRIPT_PATH):
        case str() as text if text:
            return text
        case _:
            return None
