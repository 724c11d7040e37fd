import io
from collections import Counter
from enum import Enum
from typing import Iterable, Iterator, Union

import regex


# Unicode word characters, combining marks included
WORD_RE = regex.compile(r"[\w\p{M}]+")

# unit text -> occurrences
FrequencyTable = Counter


class CountMode(str, Enum):
    """Unit that :func:`count` tallies.

    - CHAR: every Unicode code point
    - WORD: every run of Unicode word characters
    - LINE: every line, terminator stripped
    """

    CHAR = "char"
    WORD = "word"
    LINE = "line"

    @classmethod
    def default(cls) -> "CountMode":
        return cls.WORD

    @classmethod
    def parse(cls, value: Union["CountMode", str]) -> "CountMode":
        """Return the member for an enum value or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown count mode {value!r}, expected one of: {choices}") from None


class InvalidEncodingError(ValueError):
    """Raised when a line of input is not valid UTF-8."""

    def __init__(self, line_number: int, reason: str) -> None:
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Line {line_number} is not valid UTF-8: {reason}")


def _strip_terminator(line):
    # "\n" first, then the "\r" of a "\r\n" pair
    if line[-1:] in ("\n", b"\n"):
        line = line[:-1]
        if line[-1:] in ("\r", b"\r"):
            line = line[:-1]
    return line


def iter_lines(stream: Iterable[Union[bytes, str]]) -> Iterator[str]:
    """
    Yield decoded lines from a line-oriented stream with terminators removed.

    Parameters
    ----------
    stream : iterable of bytes or str
        Binary file object (or any iterable of byte lines), or a text stream
        whose lines are already decoded. Text streams split lines with their
        own newline setting: a default ``open(path)`` also breaks on a bare
        ``\\r``, so open with ``newline="\\n"`` to match the binary rules.

    Yields
    ------
    str
        Each line without its trailing ``\\n`` or ``\\r\\n``.

    Raises
    ------
    InvalidEncodingError
        If a byte line fails strict UTF-8 decoding.
    """
    for line_number, raw in enumerate(stream, start=1):
        raw = _strip_terminator(raw)

        if isinstance(raw, (bytes, bytearray)):
            try:
                yield raw.decode("utf-8")
            except UnicodeDecodeError as err:
                raise InvalidEncodingError(line_number, err.reason) from err
        else:
            yield raw


def count(
    stream: Iterable[Union[bytes, str]],
    mode: Union[CountMode, str] = CountMode.WORD,
) -> FrequencyTable:
    """
    Count unit frequencies in a UTF-8 text stream.

    The stream is read one line at a time in a single pass. Which units are
    counted depends on ``mode``:

    * ``CountMode.CHAR``: each Unicode code point
    * ``CountMode.WORD``: each run of Unicode word characters (``\\w``, combining marks included)
    * ``CountMode.LINE``: each line separated by ``\\n`` or ``\\r\\n``

    Parameters
    ----------
    stream : iterable of bytes or str
        Line-oriented input. Only borrowed, never closed.
    mode : CountMode or str, optional
        Unit to count. Defaults to ``CountMode.WORD``.

    Returns
    -------
    collections.Counter
        Mapping of unit text to its number of occurrences.

    Raises
    ------
    InvalidEncodingError
        If any line is not valid UTF-8. Nothing is returned in that case.

    Examples
    --------
    >>> import io
    >>> freqs = count(io.BytesIO(b"aa bb cc bb"), CountMode.WORD)
    >>> freqs["aa"], freqs["bb"], freqs["cc"]
    (1, 2, 1)
    """
    mode = CountMode.parse(mode)
    freqs: FrequencyTable = Counter()

    for line in iter_lines(stream):
        if mode is CountMode.CHAR:
            freqs.update(line)
        elif mode is CountMode.WORD:
            freqs.update(m.group() for m in WORD_RE.finditer(line))
        else:
            freqs[line] += 1

    return freqs


def count_text(text: str, mode: Union[CountMode, str] = CountMode.WORD) -> FrequencyTable:
    """Count units in an in-memory string using the same line rules as :func:`count`."""
    return count(io.StringIO(text, newline="\n"), mode)


def total_units(table: FrequencyTable) -> int:
    """Total number of units counted, i.e. the sum of all counts."""
    return sum(table.values())
