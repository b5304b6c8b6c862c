import math
from typing import Dict, List, Tuple

from ..errors import QueryEncodingError
from ..index_io import load_index
from ..preprocessing.tokenizer import Lexer


def tf(term: str, term_freq: Dict[str, int]) -> float:
    """
    Compute the term frequency of a term in one document.
    TF(t,d) = f(t,d) / sum of all counts in d, or 0 for an empty document

    Args:
        term: Token to look up
        term_freq: Token counts of the document

    Returns:
        Relative frequency of the term
    """
    total = sum(term_freq.values())
    if total == 0:
        return 0.0
    return term_freq.get(term, 0) / total


def idf(term: str, index: Dict[str, Dict[str, int]]) -> float:
    """
    Compute the inverse document frequency of a term.
    IDF(t) = log10(N / max(1, DF(t)))

    A term found in no document gets log10(N), the highest possible value.
    An empty index has IDF 0 for every term.

    Args:
        term: Token to look up
        index: Corpus index

    Returns:
        IDF value for the term
    """
    n = len(index)
    if n == 0:
        return 0.0
    df = sum(1 for term_freq in index.values() if term in term_freq)
    return math.log10(n / max(1, df))


def rank(tokens: List[str], index: Dict[str, Dict[str, int]]) -> List[Tuple[str, float]]:
    """
    Score every document of the index against a tokenized query.

    Args:
        tokens: Query tokens
        index: Corpus index

    Returns:
        List of (path, score) tuples for all documents, highest score first.
        Documents with equal scores are ordered by path.
    """
    cached_idf = [idf(token, index) for token in tokens]

    results = []
    for path, term_freq in index.items():
        score = 0.0
        for token, token_idf in zip(tokens, cached_idf):
            score += tf(token, term_freq) * token_idf
        results.append((path, score))

    results.sort(key=lambda x: (-x[1], x[0]))
    return results


def search_query(query: str, index: Dict[str, Dict[str, int]]) -> List[Tuple[str, float]]:
    """
    Tokenize a free text query and rank the index against it.
    """
    return rank(list(Lexer(query)), index)


def decode_query(raw: bytes) -> str:
    """
    Decode raw query bytes as UTF-8.

    Raises:
        QueryEncodingError: If the bytes are not valid UTF-8
    """
    try:
        return raw.decode('utf-8')
    except UnicodeDecodeError as e:
        raise QueryEncodingError(f"Query must be a valid utf-8: {e}") from e


class TFIDFSearchEngine:
    """TF-IDF search engine over one corpus index"""

    def __init__(self, index: Dict[str, Dict[str, int]]):
        """
        Initialize the search engine.

        Args:
            index: Corpus index; it is only read, never modified
        """
        self.index = index

    @classmethod
    def from_file(cls, index_file) -> 'TFIDFSearchEngine':
        """Create a search engine from a saved index."""
        return cls(load_index(index_file))

    def __len__(self):
        return len(self.index)

    def search(self, query: str, top_k=None) -> List[Tuple[str, float]]:
        """
        Search for documents matching the query.

        Args:
            query: Query string
            top_k: Number of top results to return, or None for all of them

        Returns:
            List of (path, score) tuples
        """
        results = search_query(query, self.index)
        if top_k is not None:
            results = results[:top_k]
        return results
