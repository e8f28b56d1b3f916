"""
Input Classifier for 0x0 Uploads

Resolves the positional input descriptor to a file, standard input, or a
remote URL. A literal `-` always means standard input; an existing regular
file wins over a URL-shaped string.
"""

import logging
import os
import re

from .exceptions import InputError
from .models import FilePath, RemoteURL, Source, Stdin

logger = logging.getLogger(__name__)

STDIN_DESCRIPTOR = "-"
URL_PATTERN = re.compile(r"^https?://")


def classify_input(descriptor: str) -> Source:
    """Classify a descriptor; raises InputError when nothing matches."""
    if descriptor == STDIN_DESCRIPTOR:
        source = Stdin()
    elif os.path.isfile(descriptor):
        source = FilePath(descriptor)
    elif URL_PATTERN.match(descriptor):
        source = RemoteURL(descriptor)
    elif os.path.isdir(descriptor):
        raise InputError("is a directory", path=descriptor)
    else:
        raise InputError("no such file", path=descriptor)

    logger.debug(f"Classified {descriptor!r} as {type(source).__name__}")
    return source
