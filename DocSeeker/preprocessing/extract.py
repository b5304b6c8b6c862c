"""
Plain text extraction from XML/XHTML documents.

Only character data is kept. Tags, attributes, comments and processing
instructions produce no output.
"""
import logging

from lxml import etree

from ..errors import ExtractionError

logger = logging.getLogger(__name__)


class TextCollector:
    """
    lxml parser target that records character data events.

    lxml may deliver one run of text in several data() calls, so pieces are
    buffered until the next markup event. Every non-blank segment is then
    followed by a single space so that text from neighbouring elements never
    runs together.
    """

    def __init__(self):
        self.parts = []
        self.pending = []

    def _flush(self):
        segment = "".join(self.pending)
        self.pending = []
        if segment.strip():
            self.parts.append(segment)
            self.parts.append(" ")

    def start(self, tag, attrib):
        self._flush()

    def end(self, tag):
        self._flush()

    def comment(self, text):
        self._flush()

    def pi(self, target, data=None):
        self._flush()

    def data(self, text):
        self.pending.append(text)

    def close(self):
        self._flush()
        return "".join(self.parts)


def parse_text(raw: bytes, path="<bytes>") -> str:
    """
    Extract the character data from an in-memory document.

    Args:
        raw: Raw document bytes
        path: Identifier used in error reports

    Returns:
        Concatenated text segments

    Raises:
        ExtractionError: If the markup cannot be parsed
    """
    parser = etree.XMLParser(
        target=TextCollector(),
        resolve_entities=False,
        no_network=True,
        huge_tree=True,
    )
    try:
        return etree.fromstring(raw, parser)
    except etree.XMLSyntaxError as e:
        raise ExtractionError(path, e.msg, position=e.position) from e


def extract_text(path) -> str:
    """
    Read a document from disk and extract its character data.

    Raises:
        ExtractionError: If the file cannot be opened or parsed
    """
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise ExtractionError(path, e.strerror or e) from e

    text = parse_text(raw, path)
    logger.debug("Extracted %d characters from %s", len(text), path)
    return text
