"""
Preprocessing module turning documents into token counts.
Includes markup text extraction and tokenization.
"""
from .tokenizer import Lexer, tokenize
from .extract import extract_text, parse_text
from .document import Document
