#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/utils/io_utils.py
"""I/O utilities for rendered markdown.

Rendered text can be written to a file path, a text stream or a binary
stream; document trees are read from a file path or a text stream.

"""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from events2md.exceptions import OutputWriteError

OutputDestination = Union[str, Path, IO[bytes], IO[str]]


def _is_binary_stream(output: object) -> bool:
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_text(text: str, output: OutputDestination) -> None:
    """Write rendered text to a file path or stream.

    Parameters
    ----------
    text : str
        Rendered markdown
    output : str, Path, IO[bytes] or IO[str]
        Destination. Paths are written as UTF-8; binary streams receive the
        UTF-8 encoding of the text.

    Raises
    ------
    OutputWriteError
        If the file cannot be written
    TypeError
        If the destination is neither a path nor a writable stream

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_text("# Title", buffer)
        >>> buffer.getvalue()
        b'# Title'

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if _is_binary_stream(output):
        cast(IO[bytes], output).write(text.encode("utf-8"))
    else:
        cast(IO[str], output).write(text)


def read_text(source: Union[str, Path, IO[str]]) -> str:
    """Read a UTF-8 text file or the remaining content of a text stream."""
    if isinstance(source, (str, Path)):
        return Path(source).read_text(encoding="utf-8")
    return source.read()


__all__ = ["OutputDestination", "read_text", "write_text"]
