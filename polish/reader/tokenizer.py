"""
  Polish tokenizer

Source text is a sequence of whitespace-delimited words:

    - `# ...`      comment to end of line (only at the start of a word)
    - `\\name`      declaration name
    - `->`         arrow marker
    - `123`        unsigned 64-bit decimal literal
    - `"..."`      text literal with \\n \\t \\" \\\\ escapes
    - anything else is a name (`-` alone is the subtraction name)

Every token carries the Span of source it came from, for diagnostics only.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from polish import Value
from polish.errors import PolishSyntaxError
from polish.types.span import Span
from polish.types.value import MAX_NUMBER


class TokenKind(Enum):
    DECL = "declaration"
    NAME = "name"
    NUM = "number"
    TEXT = "text"
    ARROW = "<arrow>"

    def __str__(self):
        return self.value


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    value: Value
    span: Span

    def __str__(self) -> str:
        return f"{self.kind.name}({self.value!r})"


TOKEN_RE = re.compile(
    r"(?P<comment>#[^\n]*)"  # comment to end of line
    r'|(?P<text>"(?:\\.|[^\\"])*")'  # double-quoted text
    r"|(?P<word>\S+)",  # everything else up to whitespace
    re.DOTALL,
)

WHITESPACE_RE = re.compile(r"\s*")

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    '"': '"',
    "\\": "\\",
}


def _unescape(literal: str, start: int) -> str:
    """Decode the body of a text literal; `start` is the offset of its opening quote."""
    out = []
    i = 1
    end = len(literal) - 1
    while i < end:
        ch = literal[i]
        if ch == "\\":
            esc = literal[i + 1]
            if esc not in ESCAPES:
                raise PolishSyntaxError(
                    f"unknown escape sequence \\{esc}", Span(start + i, start + i + 2)
                )
            out.append(ESCAPES[esc])
            i += 2
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def _word_token(word: str, start: int) -> Token:
    span = Span(start, start + len(word))

    if word.startswith('"'):
        raise PolishSyntaxError("unterminated text literal", span)

    if word == "->":
        return Token(TokenKind.ARROW, word, span)

    if word.startswith("\\"):
        if len(word) == 1:
            raise PolishSyntaxError("expected declaration name after '\\'", span)
        return Token(TokenKind.DECL, word[1:], Span(start + 1, span.end))

    if word[0].isdigit():
        if not word.isdigit() or not word.isascii() or int(word) > MAX_NUMBER:
            raise PolishSyntaxError("invalid number literal", span)
        return Token(TokenKind.NUM, int(word), span)

    return Token(TokenKind.NAME, word, span)


def tokenize(source: str) -> list[Token]:
    """Split `source` into tokens, raising PolishSyntaxError on malformed literals."""
    tokens: list[Token] = []
    pos = 0
    n = len(source)

    while True:
        pos = WHITESPACE_RE.match(source, pos).end()
        if pos >= n:
            break

        m = TOKEN_RE.match(source, pos)
        if m.group("comment"):
            pos = m.end()
            continue

        if m.group("text"):
            literal = m.group("text")
            tokens.append(
                Token(TokenKind.TEXT, _unescape(literal, pos), Span(pos, m.end()))
            )
        else:
            tokens.append(_word_token(m.group("word"), pos))
        pos = m.end()

    return tokens
