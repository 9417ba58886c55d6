"""Restrictive URL encoding for path-info names and values.

Every byte except 0-9, A-Z and a-z is escaped, leaving all punctuation free
for use as pair or key/value separators. Decoding is lenient: broken escapes
pass through unchanged.

Lone surrogates survive a round trip. os.environ decodes non-UTF-8 bytes of
PATH_INFO to U+DC80..U+DCFF (surrogateescape); those go back to the raw
byte. Any other lone surrogate is written as its 3-byte UTF-8 form.
"""

import codecs
import urllib.parse

# Bytes left as-is by url_encode
_SAFE_BYTES = frozenset(
    b"0123456789" b"ABCDEFGHIJKLMNOPQRSTUVWXYZ" b"abcdefghijklmnopqrstuvwxyz"
)

SURROGATE_ERRORS = "path_params.surrogates"


def _surrogate_handler(exc: UnicodeError) -> tuple[str | bytes, int]:
    """Codec error handler mapping lone surrogates to bytes and back."""
    if isinstance(exc, UnicodeEncodeError):
        out = bytearray()
        for char in exc.object[exc.start : exc.end]:
            code = ord(char)
            if 0xDC80 <= code <= 0xDCFF:
                out.append(code - 0xDC00)
            else:
                out += char.encode("utf-8", "surrogatepass")
        return bytes(out), exc.end

    if isinstance(exc, UnicodeDecodeError):
        data = exc.object
        try:
            char = data[exc.start : exc.start + 3].decode("utf-8", "surrogatepass")
        except UnicodeDecodeError:
            return chr(0xDC00 + data[exc.start]), exc.start + 1
        return char, exc.start + 3

    raise exc


codecs.register_error(SURROGATE_ERRORS, _surrogate_handler)


def url_encode(value: str | None) -> str:
    """Percent-encode every non-alphanumeric byte of a string.

    The string is encoded as UTF-8 first, so a non-ASCII character becomes
    one ``%XX`` escape per byte. Space is escaped as ``%20`` (never ``+``)
    so the result survives url_decode unchanged.

    Args:
        value: String to encode. None is treated as empty.

    Returns:
        Encoded string (e.g., "a b/c" → "a%20b%2Fc", "\\udcff" → "%FF").
    """
    if not value:
        return ""
    return "".join(
        chr(byte) if byte in _SAFE_BYTES else f"%{byte:02X}"
        for byte in value.encode("utf-8", SURROGATE_ERRORS)
    )


def url_decode(value: str | None) -> str:
    """Decode a percent-encoded path-info name or value.

    Literal ``+`` becomes a space, then each ``%XX`` escape (hex digits in
    either case) is replaced by its byte. A ``%`` not followed by two hex
    digits is kept as a literal ``%``. Escapes are decoded once only.
    Escaped bytes that are not valid UTF-8 become U+DC80..U+DCFF.

    Args:
        value: Encoded string. None is treated as empty.

    Returns:
        Decoded string (e.g., "BRK%2EB" → "BRK.B", "100%" → "100%").
    """
    if not value:
        return ""
    return urllib.parse.unquote_plus(value, errors=SURROGATE_ERRORS)
