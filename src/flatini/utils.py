from pathlib import Path
from typing import Iterable, Iterator
from charset_normalizer import from_bytes as read_from_bytes


def decode_file(path: str | Path, encoding: str | None = None) -> str:
    """Read a file and decode it.

    Args:
        path (str | Path): Path to the file.
        encoding (str | None, optional): Encoding to decode with. If None, the
            encoding is detected. Defaults to None.

    Raises:
        OSError: If the file can't be read.
        ValueError: If the content can't be decoded.

    Returns:
        str: The file content.
    """
    raw = Path(path).read_bytes()
    if encoding is not None:
        return raw.decode(encoding)
    if (best := read_from_bytes(raw).best()) is None:
        raise ValueError(f"Could not detect the encoding of {path}.")
    return str(best)


def iter_lines(source: Iterable[str]) -> Iterator[str]:
    """Iterate over the lines of a line source (list of strings, text stream, ...).

    Raises:
        TypeError: If source is a plain string or yields anything but strings.
    """
    if isinstance(source, (str, bytes)):
        raise TypeError(
            "Expected an iterable of lines, got a string. "
            "Use IniDocument.from_string or IniDocument.from_path instead."
        )
    for line in source:
        if not isinstance(line, str):
            raise TypeError(f"Lines must be strings, got {type(line).__name__}.")
        yield line
