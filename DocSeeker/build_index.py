import logging
import os
import time
from typing import Dict

from DocSeeker.errors import DirectoryWalkError, ExtractionError
from DocSeeker.preprocessing.document import Document

logger = logging.getLogger(__name__)

TermFreq = Dict[str, int]
CorpusIndex = Dict[str, TermFreq]


class IndexBuilder:
    def __init__(self):
        self.index = {}     # path -> {token: count}
        self.skipped = []   # ExtractionError for every document left out
        self.document_count = 0

    def build(self, root_path) -> CorpusIndex:
        """
        Walk a directory tree and index every file in it.

        Files that cannot be extracted are logged and skipped. A directory
        that cannot be listed aborts the walk.

        Args:
            root_path: Directory to index

        Returns:
            dict: Mapping from file path to the file's token counts

        Raises:
            DirectoryWalkError: If a directory or one of its entries cannot be read
        """
        self.index = {}
        self.skipped = []
        self.document_count = 0

        start_time = time.time()
        self._walk(str(root_path))
        end_time = time.time()

        logger.info("Indexed %d documents in %.2f seconds", self.document_count, end_time - start_time)
        if self.skipped:
            logger.warning("%d documents could not be extracted and were skipped", len(self.skipped))

        return self.index

    def _walk(self, dir_path):
        try:
            with os.scandir(dir_path) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            raise DirectoryWalkError(dir_path, e.strerror or e) from e

        for entry in entries:
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as e:
                raise DirectoryWalkError(entry.path, e.strerror or e) from e

            if is_dir:
                self._walk(entry.path)
            else:
                self._index_document(entry.path)

    def _index_document(self, path):
        """
        Index a single file, recording it as skipped if extraction fails.
        """
        logger.debug("Indexing %s", path)
        try:
            document = Document.from_file(path)
        except ExtractionError as e:
            logger.warning("Skipping %s", e)
            self.skipped.append(e)
            return

        self.index[document.path] = document.count_terms()
        self.document_count += 1


def build_index(root_path) -> CorpusIndex:
    """Build a corpus index from every file under root_path."""
    return IndexBuilder().build(root_path)
