"""
grammar.py
This module holds the grammar store: the productions of a context-free
grammar already written in Chomsky Normal Form, plus the lookup indexes
the CYK parser queries for every cell.

* A -> B C        (nonterminal production, two component symbols)
* A -> {a, b, c}  (terminal production, a set of literal tokens)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

Symbol = str
Token = str
Pair = Tuple[Symbol, Symbol]


@dataclass(frozen=True)
class Production:
    """
    Immutable CNF production

    Attributes
    ----------
    key:
        Name of the symbol that this production defines
    nominals:
        Literal tokens for a terminal production (may be empty), None for
        a nonterminal production
    left, right:
        Component symbols for a nonterminal production, None for a
        terminal production
    """

    key: Symbol
    nominals: Optional[Tuple[Token, ...]] = None
    left: Optional[Symbol] = None
    right: Optional[Symbol] = None

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("A production needs a non-empty key.")

        has_pair = self.left is not None or self.right is not None
        if self.nominals is not None:
            if has_pair:
                raise ValueError(
                    f"Production {self.key!r} cannot declare both nominals "
                    "and component symbols."
                )
            # frozen dataclass, so the normalisation goes through object.__setattr__
            object.__setattr__(self, "nominals", tuple(self.nominals))
        elif not (self.left and self.right):
            raise ValueError(
                f"Production {self.key!r} must declare either nominals or "
                "both a left and a right component."
            )

    def is_terminal(self) -> bool:
        return self.nominals is not None

    def __str__(self) -> str:
        if self.nominals is not None:
            literals = " | ".join(repr(n) for n in self.nominals) or "~"
            return f"{self.key} -> {literals}"
        return f"{self.key} -> {self.left} {self.right}"


def terminal_production(key: Symbol, nominals: Iterable[Token]) -> Production:
    """
    Create a terminal production that matches any of the literal nominals
    """

    return Production(key=key, nominals=tuple(nominals))


def nonterminal_production(key: Symbol, left: Symbol, right: Symbol) -> Production:
    """
    Create a nonterminal production key -> left right
    """

    return Production(key=key, left=left, right=right)


@dataclass(frozen=True)
class Grammar:
    """
    Ordered CNF productions together with the lookup tables used by CYK

    Attributes
    ----------
    productions:
        Every production in definition order
    unary:
        Mapping literal token -> terminal productions containing it
    binary:
        Mapping (left, right) -> nonterminal productions with that pair

    Both mappings keep the definition order inside each bucket, so the
    first-defined rule is always the first match.
    """

    productions: Tuple[Production, ...]
    unary: Mapping[Token, Tuple[Production, ...]]
    binary: Mapping[Pair, Tuple[Production, ...]]

    def matches_literal(self, token: Token) -> Tuple[Production, ...]:
        return self.unary.get(token, ())

    def matches_pair(self, left: Symbol, right: Symbol) -> Tuple[Production, ...]:
        return self.binary.get((left, right), ())

    def keys(self) -> List[Symbol]:
        """
        Distinct production keys in definition order
        """
        return list(dict.fromkeys(p.key for p in self.productions))

    def __iter__(self):
        return iter(self.productions)

    def __len__(self) -> int:
        return len(self.productions)


def make_grammar(productions: Iterable[Production]) -> Grammar:
    """
    Freeze productions into a Grammar and build its lookup indexes once

    Parameters
    ----------
    productions:
        Productions in the order they should be matched

    Returns
    -------
    Grammar
        Read-only store that can be shared between parse calls
    """

    ordered = tuple(productions)

    unary_rules: Dict[Token, List[Production]] = {}
    binary_rules: Dict[Pair, List[Production]] = {}

    for production in ordered:
        if production.nominals is not None:
            # a literal listed twice in the same production still matches once
            for nominal in dict.fromkeys(production.nominals):
                unary_rules.setdefault(nominal, []).append(production)
        else:
            pair = (production.left, production.right)
            binary_rules.setdefault(pair, []).append(production)

    return Grammar(
        productions=ordered,
        unary={token: tuple(found) for token, found in unary_rules.items()},
        binary={pair: tuple(found) for pair, found in binary_rules.items()},
    )
