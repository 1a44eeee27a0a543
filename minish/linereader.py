"""Reading one line at a time from a raw file descriptor."""

from __future__ import annotations

import os

BUFFER_SIZE = 2


def split_first_line(buffer: str) -> tuple[str | None, str]:
    """Split ``buffer`` into its first line (newline kept) and the rest.

    An empty buffer has no line, so ``(None, "")`` is returned.
    """
    if not buffer:
        return None, ""
    line, newline, rest = buffer.partition("\n")
    return line + newline, rest


def get_next_line(fd: int, buffer_size: int = BUFFER_SIZE) -> str | None:
    """Read from ``fd`` in chunks until a newline or end of file; return the first line.

    Reading stops after the chunk that contains a newline; anything in that
    chunk past the newline is not kept between calls. Returns ``None`` at end
    of file.
    """
    if fd < 0:
        raise ValueError("file descriptor must be non-negative")
    if buffer_size <= 0:
        raise ValueError("buffer size must be positive")
    chunks = []
    while True:
        data = os.read(fd, buffer_size)
        chunks.append(data)
        if not data or b"\n" in data:
            break
    buffer = b"".join(chunks).decode("utf-8", errors="surrogateescape")
    line, _ = split_first_line(buffer)
    return line