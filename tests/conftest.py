import pytest

from grammar import make_grammar, nonterminal_production, terminal_production


@pytest.fixture
def panda_grammar():
    return make_grammar([
        terminal_production("DT", ["the"]),
        terminal_production("N", ["panda", "shoots", "leaves"]),
        terminal_production("V", ["eats", "shoots", "leaves"]),
        terminal_production("CC", ["and"]),
        nonterminal_production("CCN", "CC", "N"),    # and leaves
        nonterminal_production("NP0", "N", "CCN"),   # shoots and leaves
        nonterminal_production("CCV", "CC", "V"),    # and leaves
        nonterminal_production("VP0", "V", "CCV"),   # shoots and leaves
        nonterminal_production("VP1", "V", "VP0"),   # eats shoots and leaves (all verbs)
        nonterminal_production("VP2", "V", "NP0"),   # eats shoots and leaves (nouns)
        nonterminal_production("DN0", "DT", "N"),    # the panda
        nonterminal_production("DN1", "DT", "NP0"),  # the shoots and leaves
        nonterminal_production("S0", "DN0", "V"),
        nonterminal_production("S1", "DN0", "VP0"),
        nonterminal_production("S2", "DN0", "VP1"),
        nonterminal_production("S3", "DN0", "VP2"),
        nonterminal_production("S4", "DN1", "V"),
        nonterminal_production("S5", "DN1", "VP0"),
        nonterminal_production("S6", "DN1", "VP1"),
        nonterminal_production("S7", "DN1", "VP2"),
    ])


@pytest.fixture
def book_flight_grammar():
    return make_grammar([
        terminal_production("DT", ["the", "that", "a"]),
        terminal_production("N", ["book", "flight"]),
        terminal_production("V", ["book"]),
        terminal_production("JJ", []),
        nonterminal_production("NP", "DT", "N"),
        nonterminal_production("VP", "V", "NP"),
    ])


@pytest.fixture
def big_dog_grammar():
    return make_grammar([
        terminal_production("N", ["dog"]),
        terminal_production("DT", ["the"]),
        terminal_production("J", ["big", "gray", "furry"]),
        nonterminal_production("N", "DT", "N"),
        nonterminal_production("N", "J", "N"),
        nonterminal_production("N", "J", "NP"),
        nonterminal_production("N", "DT", "NP"),
    ])
