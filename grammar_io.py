"""
grammar_io.py
This module is in charge of reading a grammar that is already in Chomsky
Normal Form from a .txt file and turning it into the Grammar store the CYK
parser expects. It also provides the tokenizer used by the command line.
"""

from __future__ import annotations

from pathlib import Path
import re
from typing import List

from grammar import Grammar, Production, make_grammar, nonterminal_production, terminal_production


# _COMMENT_RE matches anything after a hash symbol that is outside quotes,
# allowing inline comments inside the grammar file
_COMMENT_RE = re.compile(r"""^((?:[^#'"]|'[^']*'|"[^"]*")*)#.*$""")

# _LITERAL_RE recognises a single quoted literal such as 'dog' or "the"
_LITERAL_RE = re.compile(r"""^(?:'([^']*)'|"([^"]*)")$""")

# Marker for a terminal production that currently matches no token
_EMPTY_MARKER = "~"

_WHITESPACE_RE = re.compile(r"\s+")


def load_grammar(path: str) -> Grammar:
    """
    Read a CNF grammar definition from path.

    Parameters
    ----------
    path:
        Path to the plain-text grammar description

        * Empty lines are ignored.
        * Everything that follows a # is considered a comment.
        * Productions use the ASCII arrow -> (the loader also replaces the
          Unicode right-arrow → automatically)
        * Quoted alternatives build one terminal production, bare pairs of
          symbols build one nonterminal production per alternative.
          Example:

              DT -> 'the' | 'a'
              N  -> 'panda' | 'shoots'
              NP -> DT N
              JJ -> ~

    Returns
    -------
    Grammar
        Store with the productions in file order.
    Raises
    ------
    FileNotFoundError
        If the provided path does not exist.
    ValueError
        If the file does not declare any production or contains malformed
        lines.
    """
    raw_text = Path(path).read_text(encoding="utf-8")
    return parse_grammar(raw_text)


def parse_grammar(text: str) -> Grammar:
    """
    Same as load_grammar but reads the definition from a string
    """

    productions: List[Production] = []

    for line_number, original_line in enumerate(text.splitlines(), start=1):
        cleaned = _strip_comment(original_line).strip()
        if not cleaned:
            continue

        cleaned = cleaned.replace("→", "->")

        # All remaining lines must represent productions, with the form LHS -> RHS
        if "->" not in cleaned:
            raise ValueError(
                f"Line {line_number}: production must contain '->'. Found: "
                f"{original_line!r}"
            )

        lhs_text, rhs_text = cleaned.split("->", 1)
        key = lhs_text.strip()
        if not key:
            raise ValueError(
                f"Line {line_number}: production is missing a left-hand side."
            )
        if _WHITESPACE_RE.search(key):
            raise ValueError(
                f"Line {line_number}: left-hand side must be a single symbol, got {key!r}"
            )

        rhs = rhs_text.strip()
        if rhs == _EMPTY_MARKER:
            productions.append(terminal_production(key, []))
            continue

        alternatives = _split_alternatives(rhs, line_number)
        if not all(alternatives):
            raise ValueError(
                f"Line {line_number}: found an empty alternative in {original_line!r}"
            )

        literals = [_LITERAL_RE.match(alt) for alt in alternatives]
        if all(literals):
            nominals = [match.group(1) if match.group(1) is not None else match.group(2)
                        for match in literals]
            productions.append(terminal_production(key, nominals))
            continue

        if any(literals):
            raise ValueError(
                f"Line {line_number}: a production cannot mix quoted literals "
                f"and symbol pairs in {original_line!r}"
            )

        for alternative in alternatives:
            symbols = _WHITESPACE_RE.split(alternative)
            if len(symbols) != 2:
                raise ValueError(
                    f"Line {line_number}: {key} -> {alternative} is not in Chomsky "
                    "Normal Form, expected exactly two symbols or quoted literals."
                )
            if any(symbol[0] in "'\"" for symbol in symbols):
                raise ValueError(
                    f"Line {line_number}: unexpected quote in {alternative!r}"
                )
            productions.append(nonterminal_production(key, symbols[0], symbols[1]))

    if not productions:
        raise ValueError(
            "The grammar does not contain any productions.  Please add at "
            "least one rule."
        )

    return make_grammar(productions)


def tokenize(sentence: str, lowercase: bool = True) -> List[str]:
    """
    Tokenise sentence on whitespace
    """

    # Normalise to lower case to match the terminals defined in the grammar
    if lowercase:
        sentence = sentence.lower()
    return sentence.split()


def _strip_comment(line: str) -> str:
    """
    Remove a trailing # comment, leaving hashes inside quotes alone.
    """

    match = _COMMENT_RE.match(line)
    return match.group(1) if match else line


def _split_alternatives(rhs: str, line_number: int) -> List[str]:
    """
    Split the right-hand side on | without breaking quoted literals.
    """

    alternatives: List[str] = []
    buffer: List[str] = []
    quote = None
    for char in rhs:
        if quote:
            buffer.append(char)
            if char == quote:
                quote = None
        elif char in "'\"":
            quote = char
            buffer.append(char)
        elif char == "|":
            alternatives.append("".join(buffer).strip())
            buffer = []
        else:
            buffer.append(char)

    if quote:
        raise ValueError(f"Line {line_number}: unterminated quote in {rhs!r}")

    alternatives.append("".join(buffer).strip())
    return alternatives
