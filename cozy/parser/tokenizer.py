# Cozy Flag Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Tokenizer for raw argument vectors.

Rewrites raw arguments into a flat stream of `Token`s so the dispatcher never
looks at raw characters:

    ["-vx=3", "--out=a.txt", "file", "--", "-z"]

    -v          FLAG            (from "-vx=3")
    -x          FLAG            (from "-vx=3")
    3           ATTACHED_VALUE  (from "-vx=3")
    --out       FLAG            (from "--out=a.txt")
    a.txt       ATTACHED_VALUE  (from "--out=a.txt")
    file        LITERAL
    --          TERMINATOR
    -z          LITERAL         (after the terminator)

Rules:
- Arguments not starting with `-`, and the bare `-`, are literals.
- The first `--` becomes a TERMINATOR token and ends flag recognition;
  everything after it is a literal, including a second `--`.
- Short arguments expand POSIX-style: `-abc` is `-a`, `-b`, `-c`.
- A value after the first `=` becomes one attached value following the flag
  token(s) of the same argument.
- A short argument with no flag characters before the `=` (`-=v`) stays one
  FLAG token spelled as the whole argument.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from cozy.parser.flag_name import MARKER, SEPARATOR, TERMINATOR, is_long_flag


class TokenKind(Enum):
    LITERAL = "literal"
    FLAG = "flag"
    ATTACHED_VALUE = "attached-value"
    TERMINATOR = "terminator"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """
    One classified piece of the argument vector.

    Attributes:
        text (str): The flag spelling with markers for FLAG tokens, the
            value text for ATTACHED_VALUE tokens, the argument for LITERALs.
        kind (TokenKind): Classification of the token.
        raw (str): The raw argument this token was produced from.
    """

    text: str
    kind: TokenKind
    raw: str


def _tokenize_flag(arg: str) -> list[Token]:
    name, separator, value = arg.partition(SEPARATOR)
    if name == MARKER:
        return [Token(arg, TokenKind.FLAG, arg)]
    if is_long_flag(name):
        tokens = [Token(name, TokenKind.FLAG, arg)]
    else:
        tokens = [Token(f"{MARKER}{char}", TokenKind.FLAG, arg) for char in name[1:]]
    if separator:
        tokens.append(Token(value, TokenKind.ATTACHED_VALUE, arg))
    return tokens


def tokenize(args: Sequence[str]) -> list[Token]:
    """Classify `args` into flag, attached-value, terminator and literal tokens."""
    tokens: list[Token] = []
    for index, arg in enumerate(args):
        if arg == TERMINATOR:
            tokens.append(Token(arg, TokenKind.TERMINATOR, arg))
            tokens.extend(Token(rest, TokenKind.LITERAL, rest) for rest in args[index + 1 :])
            break
        if not arg.startswith(MARKER) or len(arg) == 1:
            tokens.append(Token(arg, TokenKind.LITERAL, arg))
            continue
        tokens.extend(_tokenize_flag(arg))
    return tokens
