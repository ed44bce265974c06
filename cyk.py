# cyk.py
from __future__ import annotations
from typing import Collection, List, Sequence, Tuple
from time import perf_counter

from grammar import Grammar, Symbol, Token
from trees import Parse

# Cada celda es la lista de árboles que cubren exactamente tokens[inicio:fin]
Cell = List[Parse]
Table = List[List[Cell]]

def _empty_table(n: int) -> Table:
    return [[[] for _ in range(n + 1)] for _ in range(n)]

def seed(token: Token, grammar: Grammar) -> List[Parse]:
    """Una hoja por cada producción terminal que contiene el token."""
    return [
        Parse(production=production, terminal=token)
        for production in grammar.matches_literal(token)
    ]

def combine(left_candidates: Sequence[Parse], right_candidates: Sequence[Parse],
            grammar: Grammar) -> List[Parse]:
    """
    Devuelve un nodo interno por cada par (izquierdo, derecho) y cada
    producción que lo genera. No se deduplican derivaciones distintas.
    """
    combined: List[Parse] = []
    for left in left_candidates:
        for right in right_candidates:
            for production in grammar.matches_pair(left.key, right.key):
                combined.append(Parse(production=production, left=left, right=right))
    return combined

def cyk(tokens: Sequence[Token], grammar: Grammar
        ) -> Tuple[List[Parse], Table, float]:
    """
    Ejecuta CYK sobre tokens usando una gramática en CNF.

    Devuelve:
        parses: todos los árboles que cubren la secuencia completa
        table: tabla CYK, table[inicio][fin] -> árboles de ese span
        elapsed_ms: float (ms)
    """
    n = len(tokens)
    table: Table = _empty_table(n)

    t0 = perf_counter()

    # Relleno de long = 1 (hojas); un token sin producción deja la celda vacía
    for i, tok in enumerate(tokens):
        table[i][i + 1] = seed(tok, grammar)

    # Spans más largos
    for span_len in range(2, n + 1):           # longitud del span
        for i in range(0, n - span_len + 1):   # inicio
            j = i + span_len                   # fin (exclusivo)
            cell: Cell = []
            # Todos los splits posibles, en orden
            for k in range(i + 1, j):
                left_cell = table[i][k]
                right_cell = table[k][j]
                if not left_cell or not right_cell:
                    continue
                cell.extend(combine(left_cell, right_cell, grammar))
            table[i][j] = cell

    elapsed_ms = (perf_counter() - t0) * 1000.0
    # sin tokens no existe la celda (0, 0)
    full_span = table[0][n] if n > 0 else []
    return full_span, table, elapsed_ms

def parses(tokens: Sequence[Token], grammar: Grammar) -> List[Parse]:
    """Todos los árboles de derivación de la secuencia completa."""
    if not tokens:
        return []
    found, _, _ = cyk(tokens, grammar)
    return found

def matching_parses(tokens: Sequence[Token], grammar: Grammar,
                    target_keys: Collection[Symbol]) -> List[Parse]:
    """Solo los árboles cuya raíz pertenece a target_keys, en el mismo orden."""
    targets = set(target_keys)
    return [parse for parse in parses(tokens, grammar) if parse.key in targets]
