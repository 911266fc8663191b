from typing import Iterable, List, Sequence

MIN_HITS = 3  # de 4 ingredientes consultados

def normalize(s: str) -> str:
    return (s or "").strip().lower()

def term_hits(term: str, base_ingredients: Iterable[str]) -> bool:
    """
    Un término "acierta" si está contenido en algún ingrediente base o
    algún ingrediente base está contenido en él. Los términos vacíos nunca aciertan.
    """
    t = normalize(term)
    if not t:
        return False
    for raw in base_ingredients:
        b = normalize(raw)
        if not b:
            continue
        if t in b or b in t:
            return True
    return False

def count_hits(query: Sequence[str], base_ingredients: Iterable[str]) -> int:
    base: List[str] = list(base_ingredients)
    return sum(1 for term in query if term_hits(term, base))

def matches(query: Sequence[str], base_ingredients: Iterable[str], min_hits: int = MIN_HITS) -> bool:
    """True si al menos `min_hits` de los términos de `query` aciertan contra los ingredientes base."""
    return count_hits(query, base_ingredients) >= min_hits
