"""Find parameter directive comments in source files."""

import logging
import re
from pathlib import Path

from .base import DirectiveComment

logger = logging.getLogger(__name__)

DEFAULT_MARKER = "http:param"


def extract_directives(file_path: Path, marker: str = DEFAULT_MARKER) -> list[DirectiveComment]:
    """Return every directive comment in a file, in line order.

    A directive comment is a ``#`` or ``//`` comment line whose text starts
    with the marker. The marker itself is stripped from the returned text.
    """
    logger.info("Scanning %s for %r directives", file_path, marker)
    text = file_path.read_text(encoding="utf-8")
    pattern = re.compile(rf"\s*(?:#|//)\s*{re.escape(marker)}(?:\s+(.*))?")

    found = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        match = pattern.fullmatch(line)
        if not match:
            continue
        body = (match.group(1) or "").strip()
        logger.debug("%s:%d: %s", file_path, lineno, body)
        found.append(DirectiveComment(line=lineno, text=body))
    return found
