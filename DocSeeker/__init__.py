"""
DocSeeker - TF-IDF search over a directory tree of XML documents.
"""
from DocSeeker.build_index import build_index, IndexBuilder
from DocSeeker.index_io import save_index, load_index
from DocSeeker.tfidf_search import search_query, TFIDFSearchEngine

__version__ = "0.1.0"
