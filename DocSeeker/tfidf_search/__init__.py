"""
TF-IDF search module ranking documents of a corpus index.
Scores are sums of TF * IDF over the query tokens.
"""
from .tfidf_search import tf, idf, rank, search_query, decode_query, TFIDFSearchEngine
