# main.py
from __future__ import annotations
import argparse
from typing import List, Optional, Sequence

from grammar_io import load_grammar, tokenize
from cyk import cyk
from trees import render_ascii

def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Parser CYK para gramáticas en forma normal de Chomsky"
    )
    parser.add_argument("--grammar", required=True, help="Ruta al archivo .txt de la gramática (ya en CNF)")
    parser.add_argument("--sentence", required=False, help="Oración a evaluar, entre comillas")
    parser.add_argument("--target", action="append", default=[], help="Conservar solo los árboles cuya raíz es este símbolo (repetible)")
    parser.add_argument("--keep-case", action="store_true", help="No convertir la oración a minúsculas")
    parser.add_argument("--print-tree", action="store_true", help="Imprimir árbol(es) de parseo en ASCII")
    parser.add_argument("--max-trees", type=int, default=1, help="Cuántos árboles imprimir (si hay ambigüedad)")
    parser.add_argument("--keys", action="store_true", help="Imprimir los símbolos de cada árbol en pre-orden")
    parser.add_argument("--spans", action="append", default=[], help="Imprimir los tramos de tokens de este símbolo (repetible)")
    args = parser.parse_args(argv)

    try:
        G = load_grammar(args.grammar)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"No se pudo leer la gramática: {exc}")

    if args.sentence is None:
        raise SystemExit("Falta --sentence \"...\"")

    known = set(G.keys())
    for key in dict.fromkeys(args.target + args.spans):
        if key not in known:
            print(f"aviso: el símbolo {key!r} no aparece en la gramática")

    tokens = tokenize(args.sentence, lowercase=not args.keep_case)

    trees, _, elapsed_ms = cyk(tokens, G)
    if args.target:
        targets = set(args.target)
        trees = [t for t in trees if t.key in targets]

    print("SI" if trees else "NO")
    print(f"arboles: {len(trees)}")
    print(f"tiempo_ms: {elapsed_ms:.2f}")

    show_details = args.print_tree or args.keys or args.spans
    if not trees or not show_details:
        return 0

    for idx, t in enumerate(trees[: max(1, args.max_trees)], start=1):
        print(f"\nÁrbol {idx}:")
        if args.keys:
            print("simbolos: " + " ".join(t.production_keys()))
        for key in args.spans:
            spans: List[List[str]] = t.production_terminals(key)
            rendered = ", ".join("[" + " ".join(span) + "]" for span in spans)
            print(f"{key}: {rendered or '(ninguno)'}")
        if args.print_tree:
            print(render_ascii(t))
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
