"""Sheet tokens: ``{workspace}|{issued ms}`` XOR'd with the shared secret, Base64 encoded.

The repeating key stream is recoverable from any known plaintext, so this
only proves the caller knows the secret; it is not encryption in any strong
sense. Validating with the wrong secret usually fails on format, but can
coincidentally produce a parseable token with a different workspace id.
"""
import base64
import binascii
import time
from dataclasses import dataclass

from sheetsync.exceptions import ConfigurationError, DecodeError, ExpiredError, FormatError

TOKEN_TTL_MS = 86_400_000
DELIMITER = '|'


@dataclass(frozen=True)
class SheetToken:
    workspace_id: str
    issued_at: int


def now_ms():
    return int(time.time() * 1000)


def _xor(data: bytes, key: bytes) -> bytes:
    key_len = len(key)
    return bytes(b ^ key[i % key_len] for i, b in enumerate(data))


def encode(plaintext, secret):
    if not secret:
        raise ConfigurationError('Secret key is required for encryption')
    cipher = _xor(plaintext.encode('utf-8'), secret.encode('utf-8'))
    return base64.b64encode(cipher).decode('ascii')


def decode(token, secret):
    if not secret:
        raise DecodeError('Decryption failed: secret key is not configured')
    try:
        cipher = base64.b64decode(token, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError('Decryption failed: Invalid token') from exc
    # A wrong secret yields arbitrary bytes; keep going so the caller sees a format error.
    return _xor(cipher, secret.encode('utf-8')).decode('utf-8', errors='replace')


def issue(workspace_id, secret, now=None):
    if not secret:
        raise ConfigurationError('Secret key is not configured. Cannot generate authentication token.')
    issued_at = now_ms() if now is None else now
    return encode(f"{workspace_id}{DELIMITER}{issued_at}", secret)


def validate(token, secret, now=None) -> SheetToken:
    """Decode ``token`` and check its shape and age.

    Raises DecodeError, FormatError or ExpiredError. A token exactly
    ``TOKEN_TTL_MS`` old is still valid.
    """
    parts = decode(token, secret).split(DELIMITER)
    if len(parts) != 2:
        raise FormatError('Invalid token format')

    workspace_id, raw_timestamp = parts
    if not (raw_timestamp.isascii() and raw_timestamp.isdigit()):
        raise FormatError('Invalid token timestamp')
    issued_at = int(raw_timestamp)

    current = now_ms() if now is None else now
    if current - issued_at > TOKEN_TTL_MS:
        raise ExpiredError('Token expired')

    return SheetToken(workspace_id=workspace_id, issued_at=issued_at)
