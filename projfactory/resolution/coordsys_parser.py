"""Coordinate-system definition file parser.

Definition files (the PROJ.4 ``epsg``, ``nad83``, ``world`` ... files) are
sequences of named blocks::

    # WGS 84 / UTM zone 31N
    <32631> +proj=utm +zone=31 +ellps=WGS84 +units=m +no_defs <>

Grammar (``#`` starts a comment running to end of line)::

    file   := block*
    block  := '<' NAME '>' entry* '<' '>'
    entry  := ['+'] KEY '=' VALUE

Tokenizing is purely lexical. Letters, digits, Latin-1 letters and the
characters ``' " _ . - + ,`` form words, so ``-85d50``, ``+proj`` and
``0.9996`` are single word tokens, never numbers or operators. Every
other non-blank character is a one-character token.

Parsing details:
- A key not followed by ``=`` (``+no_defs``) is skipped.
- A value may start with any token other than ``<``/``>``; tokens glued
  to it without whitespace join the value, so ``+nadgrids=@null`` and
  ``+init=epsg:32631`` survive whole.
- Block scanning stops at the first token that is not ``<``.

Structural errors raise ``ParseError`` with the 1-based line number.
"""

from __future__ import annotations

import contextlib
import importlib.resources
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from projfactory.core.config import FactoryConfig, is_valid_file_id
from projfactory.core.constants import COORDSYS_PACKAGE
from projfactory.core.exceptions import ParseError, UnknownIdentifierError

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from typing import TextIO

logger = logging.getLogger("projfactory.resolution.coordsys_parser")

_WORD_CHARS = r"A-Za-z0-9\u00a0-\u00ff'\"_.\-+,"

_TOKEN_RE = re.compile(
    rf"(?P<newline>\n)"
    rf"|(?P<blank>[\x00-\x09\x0b-\x20]+)"
    rf"|(?P<comment>#[^\n]*)"
    rf"|(?P<word>[{_WORD_CHARS}]+)"
    rf"|(?P<char>.)",
)

_WORD = "word"
_CHAR = "char"
_EOF = "eof"

_FILE_ENCODING = "latin-1"


@dataclass(frozen=True, slots=True)
class _Token:
    kind: str
    text: str
    line: int
    start: int
    end: int

    def is_char(self, char: str) -> bool:
        return self.kind == _CHAR and self.text == char


class _Tokenizer:
    """Pull tokenizer over a whole source text, tracking line numbers."""

    def __init__(self, text: str) -> None:
        self._matches = _TOKEN_RE.finditer(text)
        self._line = 1
        self._length = len(text)

    def next_token(self) -> _Token:
        for match in self._matches:
            kind = match.lastgroup
            if kind == "newline":
                self._line += 1
                continue
            if kind in ("blank", "comment"):
                continue
            return _Token(kind or _CHAR, match.group(), self._line, match.start(), match.end())
        return _Token(_EOF, "", self._line, self._length, self._length)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _read_value(tokens: _Tokenizer, source_name: str) -> tuple[str, _Token]:
    """Read the value following ``=``; return it with the next unread token.

    Tokens glued to the first one without whitespace join the value, so
    ``epsg:32631`` and ``@null`` are read whole.
    """
    tok = tokens.next_token()
    if tok.kind == _EOF or tok.is_char("<") or tok.is_char(">"):
        raise ParseError("Value expected after '='", line_number=tok.line, source=source_name)

    parts = [tok.text]
    end = tok.end
    tok = tokens.next_token()
    while tok.kind != _EOF and tok.start == end and not (tok.is_char("<") or tok.is_char(">")):
        parts.append(tok.text)
        end = tok.end
        tok = tokens.next_token()
    return "".join(parts), tok


def iter_blocks(source: TextIO, *, source_name: str = "") -> Iterator[tuple[str, list[str]]]:
    """Yield ``(name, arguments)`` for each block of a definition file.

    Arguments are ``+key=value`` strings in file order. Iteration is lazy:
    a caller that stops early never reads or validates later blocks.

    Raises:
        ParseError: On a structural grammar violation.
    """
    tokens = _Tokenizer(source.read())
    tok = tokens.next_token()

    while tok.is_char("<"):
        tok = tokens.next_token()
        if tok.kind != _WORD:
            raise ParseError("Word expected after '<'", line_number=tok.line, source=source_name)
        name = tok.text

        tok = tokens.next_token()
        if not tok.is_char(">"):
            raise ParseError("'>' expected", line_number=tok.line, source=source_name)

        tok = tokens.next_token()
        arguments: list[str] = []
        while not tok.is_char("<"):
            key = tok.text[1:] if tok.kind == _WORD and tok.text.startswith("+") else tok.text
            if tok.kind != _WORD or not key:
                raise ParseError("Key expected", line_number=tok.line, source=source_name)
            tok = tokens.next_token()
            if tok.is_char("="):
                value, tok = _read_value(tokens, source_name)
                arguments.append(f"+{key}={value}")

        tok = tokens.next_token()
        if not tok.is_char(">"):
            raise ParseError("'<>' expected", line_number=tok.line, source=source_name)
        tok = tokens.next_token()

        yield name, arguments


def find_block(source: TextIO, name: str, *, source_name: str = "") -> list[str] | None:
    """Return the arguments of the first block called *name*, or ``None``."""
    for block_name, arguments in iter_blocks(source, source_name=source_name):
        if block_name == name:
            return arguments
    return None


def format_block(name: str, arguments: Sequence[str]) -> str:
    """Render a block in canonical ``<name> +key=value ... <>`` form."""
    return " ".join([f"<{name}>", *arguments, "<>"])


# ---------------------------------------------------------------------------
# Source acquisition
# ---------------------------------------------------------------------------


@contextlib.contextmanager
def open_coordsys_file(file_id: str, config: FactoryConfig | None = None) -> Iterator[TextIO]:
    """Open a definition file for reading; the handle is closed on every exit path.

    The configured ``coordsys_dir`` is consulted first, then the bundled
    resources.

    Raises:
        UnknownIdentifierError: If *file_id* is not a bare file name or no
            such file exists.
    """
    if not is_valid_file_id(file_id):
        raise UnknownIdentifierError("coordinate system file", file_id)

    config = config or FactoryConfig()
    if config.coordsys_dir:
        path = Path(config.coordsys_dir) / file_id
        if path.is_file():
            logger.debug("Opening definition file | file=%s | path=%s", file_id, path)
            with path.open(encoding=_FILE_ENCODING) as handle:
                yield handle
            return

    resource = importlib.resources.files(COORDSYS_PACKAGE).joinpath(file_id)
    if not resource.is_file():
        raise UnknownIdentifierError("coordinate system file", file_id)
    logger.debug("Opening bundled definition file | file=%s", file_id)
    with resource.open("r", encoding=_FILE_ENCODING) as handle:
        yield handle
