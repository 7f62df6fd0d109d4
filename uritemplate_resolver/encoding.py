"""Percent-encoding for expanded values.

Two policies, selected by the expression operator:
- unreserved only: everything outside A-Z a-z 0-9 - . _ ~ becomes %XX
- reserved allowed ({+var}, {#var}): RFC 3986 gen-delims, sub-delims and
  '%' also pass through as-is

Non-ASCII text is encoded byte-wise from UTF-8 with uppercase hex digits.
"""

from urllib.parse import quote

GEN_DELIMS = ":/?#[]@"
SUB_DELIMS = "!$&'()*+,;="
RESERVED = GEN_DELIMS + SUB_DELIMS

# quote() always keeps A-Z a-z 0-9 and "_.-~"
_RESERVED_SAFE = RESERVED + "%"


def encode(text: str, allow_reserved: bool = False) -> str:
    """Percent-encode `text` for inclusion in an expanded template."""
    if not text:
        return ""
    return quote(text, safe=_RESERVED_SAFE if allow_reserved else "")
