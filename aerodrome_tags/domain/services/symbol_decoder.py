from __future__ import annotations

import re

_BYTES32_HEX = re.compile(r"(?:0x)?([0-9a-fA-F]{64})")
_NON_PRINTABLE = re.compile(r"[^\u0002-\u007f]")

MIN_SYMBOL_LENGTH = 2
MAX_SYMBOL_LENGTH = 32


def decode_symbol(raw: str) -> str:
    """Return a printable token symbol/name, or "" when the value is unusable.

    Some tokens expose ``symbol()``/``name()`` as a bytes32 instead of a string,
    which the subgraph then stores as 64 hex characters padded with NUL bytes.
    """
    text = raw
    match = _BYTES32_HEX.fullmatch(raw)
    if match:
        text = bytes.fromhex(match.group(1)).decode("utf-8", errors="replace").replace("\x00", "")

    text = _NON_PRINTABLE.sub("", text).strip()
    if MIN_SYMBOL_LENGTH <= len(text) <= MAX_SYMBOL_LENGTH:
        return text
    return ""
