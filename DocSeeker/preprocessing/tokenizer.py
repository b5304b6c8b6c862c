"""
Tokenizer shared by indexing and querying.

Tokens come in three kinds, picked by the first pending character:
numbers (a digit followed by digits and ASCII punctuation, kept verbatim),
words (a letter followed by letters and digits, upper-cased) and single
symbols (any other non-whitespace character, kept verbatim).
"""
import string
from typing import Iterator, List

ASCII_WHITESPACE = frozenset(" \t\n\r\x0c")
ASCII_PUNCTUATION = frozenset(string.punctuation)

# Only ASCII letters change case, so a token never changes length
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


class Lexer:
    """
    Single-pass iterator over the tokens of a text.

    The lexer keeps a cursor into the text and only moves it forward, so a
    Lexer cannot be restarted; create a new one to tokenize again.
    """

    def __init__(self, content: str):
        self.content = content
        self.pos = 0

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def _trim_left(self):
        while self.pos < len(self.content) and self.content[self.pos] in ASCII_WHITESPACE:
            self.pos += 1

    def _strip_left(self, n: int) -> str:
        token = self.content[self.pos:self.pos + n]
        self.pos += n
        return token

    def _strip_left_while(self, predicate) -> str:
        end = self.pos
        while end < len(self.content) and predicate(self.content[end]):
            end += 1
        return self._strip_left(end - self.pos)

    def next_token(self):
        """
        Consume and return the next token, or None when the text is exhausted.
        """
        self._trim_left()

        if self.pos >= len(self.content):
            return None

        first = self.content[self.pos]

        if first.isdecimal():
            return self._strip_left_while(lambda c: c.isdecimal() or c in ASCII_PUNCTUATION)

        if first.isalpha():
            return self._strip_left_while(str.isalnum).translate(_ASCII_UPPER)

        return self._strip_left(1)


def tokenize(text: str) -> List[str]:
    """Tokenize text into a list of tokens."""
    return list(Lexer(text))
