"""Properties text loading.

Parses the line-oriented ``key=value`` properties format and builds a fresh
``dict[str, str]`` from a byte stream, text reader, file path or package
resource. Sources are closed quietly exactly once when requested; any read or
parse failure is re-raised as :class:`IoFailureError`.

Format summary:
  - ``#`` and ``!`` start comment lines; blank lines are skipped
  - a line ending in an odd number of backslashes continues on the next line
  - keys end at the first unescaped ``=``, ``:`` or whitespace
  - ``\\t \\n \\r \\f \\uXXXX`` escapes; any other escaped char is itself
"""
from __future__ import annotations

import logging
import re
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

from defkit.core.config import get_setting
from defkit.core.exceptions import IoFailureError
from defkit.core.logging import TRACE, log
from defkit.core.utils.validation import ensure_object, ensure_string

from .core import PathLike, close_quietly

LOGGER = logging.getLogger(__name__)

_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_COMMENT_MARKERS = "#!"
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_SIMPLE_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _continues(part: str) -> bool:
    """True when ``part`` ends with an odd number of backslashes."""
    count = len(part) - len(part.rstrip("\\"))
    return count % 2 == 1


def _logical_lines(text: str) -> Iterator[str]:
    """Join continued natural lines, dropping blanks and comments."""
    pending: Optional[str] = None
    for raw in _LINE_BREAK_RE.split(text):
        part = raw.lstrip(_WHITESPACE)
        if pending is None:
            if not part or part[0] in _COMMENT_MARKERS:
                continue
            line = part
        else:
            line = pending + part

        if _continues(part):
            pending = line[:-1]
            continue

        pending = None
        yield line

    # Continuation at end of input.
    if pending is not None:
        yield pending


def _split_key_value(line: str) -> Tuple[str, str]:
    length = len(line)
    index = 0
    value_start = length
    has_separator = False
    preceding_backslash = False

    while index < length:
        char = line[index]
        if preceding_backslash:
            preceding_backslash = False
        elif char == "\\":
            preceding_backslash = True
        elif char in _SEPARATORS:
            value_start = index + 1
            has_separator = True
            break
        elif char in _WHITESPACE:
            value_start = index + 1
            break
        index += 1

    key_end = index
    while value_start < length:
        char = line[value_start]
        if char in _WHITESPACE:
            value_start += 1
        elif not has_separator and char in _SEPARATORS:
            has_separator = True
            value_start += 1
        else:
            break

    return line[:key_end], line[value_start:]


def _unescape(text: str) -> str:
    if "\\" not in text:
        return text

    out: List[str] = []
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        index += 1
        if char != "\\":
            out.append(char)
            continue
        if index >= length:
            break

        char = text[index]
        index += 1
        if char == "u":
            digits = text[index:index + 4]
            if len(digits) < 4 or not _HEX_DIGITS.issuperset(digits):
                raise ValueError(f"Malformed \\uxxxx encoding: \\u{digits}")
            out.append(chr(int(digits, 16)))
            index += 4
        else:
            out.append(_SIMPLE_ESCAPES.get(char, char))
    return "".join(out)


def parse_properties(text: str) -> Dict[str, str]:
    """Parse properties text into a new dict.

    Later duplicates of a key override earlier ones.

    Raises:
        ValueError: On a malformed ``\\uXXXX`` escape

    Example:
        >>> parse_properties("# db\\nhost = localhost\\nport:5432\\n")
        {'host': 'localhost', 'port': '5432'}
    """
    result: Dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_key_value(line)
        result[_unescape(key)] = _unescape(value)
    return result


def load_properties(
    source: Any,
    close_after: bool = False,
    *,
    encoding: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> Dict[str, str]:
    """Build a properties dict from a byte stream or text reader.

    Args:
        source: Object whose ``read()`` returns ``bytes`` or ``str``
        close_after: Quietly close ``source`` once reading is done,
            whether or not it succeeded
        encoding: Decoding for byte streams (default:
            ``properties.stream_encoding``)
        logger: Optional logger for diagnostics

    Raises:
        InvalidArgumentError: If ``source`` is None
        IoFailureError: If reading, decoding or parsing fails
    """
    log_to = logger or LOGGER
    ensure_object(source, "Must provide an input stream or reader!", logger=logger)

    try:
        content = source.read()
        if isinstance(content, (bytes, bytearray)):
            content = bytes(content).decode(encoding or get_setting("properties.stream_encoding"))
        elif not isinstance(content, str):
            raise TypeError(f"read() returned {type(content).__name__}, expected bytes or str")

        properties = parse_properties(content)
        log(log_to, TRACE, "Loaded [%d] properties from [%r]", len(properties), source)
        return properties
    except Exception as exc:
        log_to.warning(f"Trouble reading properties from {source!r}", exc_info=True)
        raise IoFailureError(cause=exc, context={"source": repr(source)}) from exc
    finally:
        if close_after:
            close_quietly(source, logger=logger)


def load_properties_file(
    path: PathLike,
    *,
    encoding: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> Dict[str, str]:
    """Build a properties dict from a file, always closing it.

    Raises:
        InvalidArgumentError: If ``path`` is None
        IoFailureError: If the file is missing, unreadable or malformed
    """
    ensure_object(path, "Must provide a file!", logger=logger)
    file_path = Path(path)

    try:
        stream = file_path.open("rb")
    except OSError as exc:
        (logger or LOGGER).warning(f"Trouble opening properties file {file_path}: {exc}")
        raise IoFailureError(cause=exc, context={"path": str(file_path)}) from exc

    return load_properties(
        stream,
        True,
        encoding=encoding or get_setting("properties.file_encoding"),
        logger=logger,
    )


def load_properties_resource(
    package: str,
    resource: str,
    *,
    encoding: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> Dict[str, str]:
    """Build a properties dict from a resource bundled in ``package``.

    Example:
        >>> load_properties_resource("myapp.data", "defaults.properties")

    Raises:
        InvalidArgumentError: If ``package`` or ``resource`` is blank
        IoFailureError: If the package or resource cannot be found or read
    """
    ensure_string(package, "Must provide a package!", logger=logger)
    ensure_string(resource, "Must provide a resource!", logger=logger)

    try:
        stream = resources.files(package).joinpath(resource).open("rb")
    except (ImportError, OSError, TypeError, ValueError) as exc:
        (logger or LOGGER).warning(f"Trouble opening resource {resource} in {package}: {exc}")
        raise IoFailureError(
            cause=exc, context={"package": package, "resource": resource}
        ) from exc

    return load_properties(stream, True, encoding=encoding, logger=logger)


__all__ = [
    "parse_properties",
    "load_properties",
    "load_properties_file",
    "load_properties_resource",
]
