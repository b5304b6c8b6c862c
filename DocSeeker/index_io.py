"""
Reading and writing corpus indexes as JSON.

The file holds one object per document, keyed by path, mapping every token
to its count: {"<path>": {"<TOKEN>": <count>, ...}, ...}
"""
import json
import logging
import os

from DocSeeker.errors import LoadError, PersistError

logger = logging.getLogger(__name__)


def _is_path(obj):
    return isinstance(obj, (str, bytes, os.PathLike))


def save_index(index, target):
    """
    Save a corpus index as JSON.

    Args:
        index: Mapping from document path to token counts
        target: Output path or a writable text stream

    Raises:
        PersistError: If the target cannot be written or the index cannot be serialized
    """
    name = target if _is_path(target) else getattr(target, "name", "<stream>")
    try:
        if _is_path(target):
            with open(target, 'w', encoding='utf-8') as f:
                json.dump(index, f, ensure_ascii=False, sort_keys=True)
        else:
            json.dump(index, target, ensure_ascii=False, sort_keys=True)
    except (OSError, TypeError, ValueError) as e:
        raise PersistError(name, e) from e

    logger.info("Index with %d documents saved to %s", len(index), name)


def load_index(source):
    """
    Load a corpus index saved by save_index.

    Args:
        source: Input path or a readable text stream

    Returns:
        dict: Mapping from document path to token counts

    Raises:
        LoadError: If the source cannot be read or does not hold a valid index
    """
    name = source if _is_path(source) else getattr(source, "name", "<stream>")
    try:
        if _is_path(source):
            with open(source, 'r', encoding='utf-8') as f:
                data = json.load(f)
        else:
            data = json.load(source)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        raise LoadError(name, e) from e

    _validate(data, name)
    logger.info("Loaded index with %d documents from %s", len(data), name)
    return data


def _validate(data, name):
    """Check that decoded JSON has the shape of a corpus index."""
    if not isinstance(data, dict):
        raise LoadError(name, f"expected an object of documents, got {type(data).__name__}")

    for path, term_freq in data.items():
        if not isinstance(term_freq, dict):
            raise LoadError(name, f"document {path!r}: expected an object of token counts")
        for token, count in term_freq.items():
            # bool is a subclass of int but never a valid count
            if isinstance(count, bool) or not isinstance(count, int) or count < 1:
                raise LoadError(name, f"document {path!r}: invalid count {count!r} for token {token!r}")
