"""A small lexical analyser for C-like source lines."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Sequence

OPERATORS = frozenset("+-*/=")
DELIMITERS = frozenset("{}()[],;")
SEPARATORS = frozenset(" \t\n")
KEYWORDS = frozenset(
    {
        "auto", "break", "case", "char", "const", "continue", "default", "do",
        "double", "else", "enum", "extern", "float", "for", "goto", "if", "int",
        "long", "register", "return", "short", "signed", "sizeof", "static",
        "struct", "switch", "typedef", "union", "unsigned", "void", "volatile",
        "while",
    }
)


class TokenKind(Enum):
    OPERATOR = "Operator"
    DELIMITER = "Delimiter"
    KEYWORD = "Keyword"
    NUMBER = "Number"
    IDENTIFIER = "Identifier"


@dataclass(frozen=True)
class Token:
    text: str
    kind: TokenKind

    def __str__(self) -> str:
        return f"{self.text} - {self.kind.value}"


def _is_number(word: str) -> bool:
    digits = word.replace(".", "", 1)
    return word.count(".") <= 1 and all(ch.isdigit() for ch in digits)


def classify_word(word: str) -> TokenKind:
    """Keyword, number (integer or one-dot float) or identifier."""
    if word in KEYWORDS:
        return TokenKind.KEYWORD
    if _is_number(word):
        return TokenKind.NUMBER
    return TokenKind.IDENTIFIER


def tokenize_line(line: str) -> list[Token]:
    """Split one line into tokens.

    An operator or delimiter is reported before the word it ends. A word is
    only finished by an operator, delimiter, space, tab or newline.
    """
    tokens: list[Token] = []
    word = ""
    for ch in line:
        if ch in OPERATORS:
            tokens.append(Token(ch, TokenKind.OPERATOR))
        elif ch in DELIMITERS:
            tokens.append(Token(ch, TokenKind.DELIMITER))
        elif ch not in SEPARATORS:
            word += ch
            continue
        if word:
            tokens.append(Token(word, classify_word(word)))
            word = ""
    return tokens


def tokenize(lines: Iterable[str]) -> Iterator[tuple[str, list[Token]]]:
    """Yield each non-comment line with its tokens.

    Lines holding ``//`` are skipped. A line holding ``/*`` is skipped along
    with the following lines up to and including one that holds ``*/``.
    """
    source = iter(lines)
    for line in source:
        if "//" in line:
            continue
        if "/*" in line:
            for inner in source:
                if "*/" in inner:
                    break
            continue
        yield line, tokenize_line(line)


def main(argv: Sequence[str] | None = None) -> int:
    """Print each line of a file followed by its classified tokens."""
    parser = argparse.ArgumentParser(prog="lexer", description="Classify the tokens of a source file.")
    parser.add_argument("file", nargs="?", default="input.txt", help="source file (default: input.txt)")
    args = parser.parse_args(argv)
    try:
        with open(args.file, encoding="utf-8") as handle:
            for line, tokens in tokenize(handle):
                print(f"\n{line}")
                for token in tokens:
                    print(token)
    except OSError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())