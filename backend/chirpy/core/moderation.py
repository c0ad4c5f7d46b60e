"""Content Moderation — length validation and banned-word filtering for chirp bodies.

Invariants:
    - Bodies longer than MAX_CHIRP_LENGTH bytes (UTF-8) are rejected, never truncated
    - Tokens are split on the literal space character only; runs of spaces
      yield empty tokens and survive the round trip unchanged
    - A token is replaced only when its lowercase form equals a banned word exactly
      ("Kerfuffle" matches, "kerfuffle!" does not)
    - Pure: no IO, no state
"""

from chirpy.core.errors import ChirpTooLongError

MAX_CHIRP_LENGTH = 140
BANNED_WORDS = frozenset({"kerfuffle", "sharbert", "fornax"})
REPLACEMENT = "****"


def body_length(body: str) -> int:
    """Length of body as received on the wire: UTF-8 bytes."""
    return len(body.encode("utf-8"))


def check_length(body: str) -> None:
    """Raise ChirpTooLongError if body exceeds MAX_CHIRP_LENGTH bytes."""
    length = body_length(body)
    if length > MAX_CHIRP_LENGTH:
        raise ChirpTooLongError(length, MAX_CHIRP_LENGTH)


def clean_body(body: str) -> str:
    """Replace banned whole-word tokens with REPLACEMENT."""
    words = body.split(" ")
    return " ".join(
        REPLACEMENT if word.lower() in BANNED_WORDS else word
        for word in words
    )


def moderate(body: str) -> str:
    """Validate length then filter banned words. Returns the cleaned body."""
    check_length(body)
    return clean_body(body)
