from collections import Counter
from typing import Dict

from .extract import extract_text
from .tokenizer import Lexer


class Document:
    """
    A single file of the corpus.
    Stores the extracted text and the counts of its tokens.
    """

    def __init__(self, path, text: str = ""):
        """
        Initialize a document.

        Args:
            path: Filesystem path, used as the document identifier
            text: Plain text of the document
        """
        self.path = str(path)
        self.text = text
        self.term_freq = None

    @classmethod
    def from_file(cls, path) -> 'Document':
        """
        Create a document from a markup file on disk.

        Raises:
            ExtractionError: If the file cannot be read or parsed
        """
        return cls(path, extract_text(path))

    def count_terms(self) -> Dict[str, int]:
        """
        Count the occurrences of every token of the document.

        Returns:
            Dictionary mapping tokens to their counts
        """
        if self.term_freq is None:
            self.term_freq = dict(Counter(Lexer(self.text)))
        return self.term_freq

    def __repr__(self):
        return f"Document({self.path!r})"
