"""Decoding of the C-style quoted paths git prints for unusual file names."""

from __future__ import annotations

import re

_OCTAL_RE = re.compile(r"[0-7]{3}")

_ESCAPES = {
    "a": 0x07,
    "b": 0x08,
    "t": 0x09,
    "n": 0x0A,
    "v": 0x0B,
    "f": 0x0C,
    "r": 0x0D,
    '"': 0x22,
    "\\": 0x5C,
}


def unquote_path(path: str) -> str:
    """Undo git's path quoting: ``"caf\\303\\251.txt"`` → ``café.txt``.

    Unquoted paths are returned unchanged. Octal escapes are raw bytes of
    the UTF-8 encoded name, so the result is rebuilt as bytes and decoded.
    """
    if len(path) < 2 or not (path.startswith('"') and path.endswith('"')):
        return path

    body = path[1:-1]
    out = bytearray()
    idx = 0
    while idx < len(body):
        ch = body[idx]
        if ch == "\\" and idx + 1 < len(body):
            octal = _OCTAL_RE.match(body, idx + 1)
            if octal:
                out.append(int(octal.group(0), 8))
                idx += 4
                continue
            escaped = _ESCAPES.get(body[idx + 1])
            if escaped is not None:
                out.append(escaped)
                idx += 2
                continue
        out.extend(ch.encode("utf-8"))
        idx += 1

    return out.decode("utf-8", errors="replace")
