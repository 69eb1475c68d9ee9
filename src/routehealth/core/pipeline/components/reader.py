from __future__ import annotations

"""
Strict File Reading Component.

Unlike a transcription pass, a health scan must notice undecodable files, so
content is decoded strictly and every failure is surfaced as FileReadError.
"""

from routehealth.domain.errors import FileReadError


def read_text(file_path: str, encoding: str = "utf-8") -> str:
    """
    Read a whole file as text.

    Args:
        file_path: Absolute path to the target file.
        encoding: Expected text encoding.

    Returns:
        str: Decoded file content.

    Raises:
        FileReadError: If the file cannot be opened or decoded.
    """
    try:
        with open(file_path, "r", encoding=encoding) as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileReadError(file_path, f"not valid {encoding} text ({e.reason})") from e
    except OSError as e:
        raise FileReadError(file_path, e.strerror or str(e)) from e
