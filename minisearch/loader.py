"""
Corpus loader for pipe-delimited text files.

Format, one document per line:
    title|content|url
    title|content

Lines without a pipe are skipped, not rejected: a corpus file with a few
stray lines should still load. File order determines document ids.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from .tfidf.engine import SearchEngine

logger = logging.getLogger(__name__)

DELIMITER = "|"


@dataclass
class LoadReport:
    """Outcome of loading one corpus file"""
    loaded: int = 0
    skipped: int = 0


def parse_line(line: str) -> Optional[Tuple[str, str, str]]:
    """
    Split one corpus line into (title, content, url).

    Returns:
        The triple, or None when the line has no delimiter

    Examples:
        >>> parse_line("Dogs|All about dogs|https://example.com/dogs")
        ('Dogs', 'All about dogs', 'https://example.com/dogs')

        >>> parse_line("Dogs|All about dogs")
        ('Dogs', 'All about dogs', '')

        >>> parse_line("no delimiter here") is None
        True
    """
    line = line.rstrip("\r\n")
    if DELIMITER not in line:
        return None

    # Anything after the second pipe belongs to the url
    parts = line.split(DELIMITER, 2)
    title, content = parts[0], parts[1]
    url = parts[2] if len(parts) == 3 else ""
    return title, content, url


def load_documents(engine: SearchEngine, path: Union[str, Path]) -> LoadReport:
    """
    Add every valid line of a corpus file to the engine.

    Args:
        engine: Target search engine
        path: UTF-8 text file in title|content|url format; undecodable
            bytes are replaced with U+FFFD rather than aborting the load

    Returns:
        LoadReport with loaded and skipped line counts

    Raises:
        FileNotFoundError: If path does not exist
        OSError: If path cannot be read (a directory, no permission)
    """
    path = Path(path)
    report = LoadReport()

    with open(path, "r", encoding="utf-8", errors="replace") as f:
        for line_no, line in enumerate(f, start=1):
            parsed = parse_line(line)
            if parsed is None:
                report.skipped += 1
                logger.debug(f"{path}:{line_no}: no '{DELIMITER}' delimiter, skipped")
                continue
            engine.add_document(*parsed)
            report.loaded += 1

    logger.info(f"Loaded {report.loaded} documents from {path} ({report.skipped} lines skipped)")
    return report
