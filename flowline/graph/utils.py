"""Identifier helpers shared by flowchart entities."""

import itertools
import re
import unicodedata
from typing import Iterator


def id_generator(stub: str) -> Iterator[str]:
    """Yield an endless sequence of unique ids built from a stub.

    Args:
        stub: The prefix for each id, e.g. "node" yields node1, node2, ...

    Yields:
        A new id string on every call to next().
    """
    for counter in itertools.count(1):
        yield f"{stub}{counter}"


def slugify(text: str) -> str:
    """Convert text to a lower-case, hyphen-separated id.

    Accents are stripped, whitespace and non-word runs collapse to single
    hyphens, and no leading or trailing hyphen is kept.
    """
    text = unicodedata.normalize("NFD", str(text))
    text = "".join(c for c in text if not unicodedata.combining(c))
    text = text.lower().strip()
    text = re.sub(r"\s+", "-", text)
    text = re.sub(r"[^\w-]+", "", text, flags=re.ASCII)
    text = re.sub(r"--+", "-", text)
    return text.strip("-")


def whitespace_to_underscores(text: str) -> str:
    """Replace every whitespace character with an underscore."""
    return re.sub(r"\s", "_", text)
