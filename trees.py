"""
trees.py
This module defines the parse-tree node produced by the CYK table and the
queries used to read derivations back out of a finished parse.
"""

from __future__ import annotations

from dataclasses import dataclass
import itertools
from typing import List, Optional

from grammar import Production, Symbol, Token


@dataclass(frozen=True)
class Parse:
    """
    Immutable parse-tree node

    A leaf carries the terminal token it matched, an internal node carries
    its left and right children. production is only referenced, it belongs
    to the grammar.
    """

    production: Production
    terminal: Optional[Token] = None
    left: Optional["Parse"] = None
    right: Optional["Parse"] = None

    def __post_init__(self) -> None:
        is_leaf = self.terminal is not None and self.left is None and self.right is None
        is_internal = (
            self.terminal is None and self.left is not None and self.right is not None
        )
        if not (is_leaf or is_internal):
            raise ValueError(
                "A parse node is either a leaf with a terminal token or an "
                "internal node with both a left and a right child."
            )

    @property
    def key(self) -> Symbol:
        return self.production.key

    def is_leaf(self) -> bool:
        return self.terminal is not None

    def production_keys(self) -> List[Symbol]:
        """
        Keys of every node in pre-order (self, left subtree, right subtree)

        Reading the result gives the derivation top-down, left-to-right,
        and it always starts with the key of this node.
        """

        keys: List[Symbol] = [self.key]
        if not self.is_leaf():
            keys.extend(self.left.production_keys())
            keys.extend(self.right.production_keys())
        return keys

    def production_terminals(self, production_key: Symbol) -> List[List[Token]]:
        """
        Return each token span represented by production_key in this parse

        For example, with a production key of "VP" this returns every
        terminal sequence covered by a "VP" node. Nodes are visited left,
        right, then self, so nested spans come out innermost first. An
        unknown key gives an empty list.
        """

        spans: List[List[Token]] = []
        for node in _traverse_to_key(self, production_key):
            spans.extend(_node_terminals(node))
        return spans

    def tokens(self) -> List[Token]:
        """
        Leaf tokens of the tree from left to right
        """

        if self.is_leaf():
            return [self.terminal]
        return self.left.tokens() + self.right.tokens()


def _traverse_to_key(node: Optional[Parse], production_key: Symbol) -> List[Parse]:
    """
    Collect nodes whose key is production_key, left subtree first, self last
    """

    if node is None:
        return []
    matches = _traverse_to_key(node.left, production_key)
    matches.extend(_traverse_to_key(node.right, production_key))
    if node.key == production_key:
        matches.append(node)
    return matches


def _node_terminals(node: Parse) -> List[List[Token]]:
    """
    Terminal sequences spanned by node

    Internal nodes combine every left span with every right span; for a
    regular binary tree that is a single combination.
    """

    if node.is_leaf():
        return [[node.terminal]]

    left_spans = _node_terminals(node.left)
    right_spans = _node_terminals(node.right)
    return [
        left_span + right_span
        for left_span, right_span in itertools.product(left_spans, right_spans)
    ]


def render_ascii(tree: Parse) -> str:
    """
    Render "tree" as a ASCII diagram
    """

    lines: List[str] = []

    def walk(node: Parse, prefix: str, is_last: bool) -> None:
        """
        Recursively append lines to "lines" in a depth-first traversal
        """

        connector = "`-- " if prefix else ""
        lines.append(f"{prefix}{connector}{node.key}")
        child_prefix = f"{prefix}{'    ' if is_last else '|   '}"
        if node.is_leaf():
            lines.append(f"{child_prefix}`-- {node.terminal}")
            return
        walk(node.left, child_prefix, False)
        walk(node.right, child_prefix, True)

    walk(tree, prefix="", is_last=True)
    return "\n".join(lines)
