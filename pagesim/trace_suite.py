from __future__ import annotations

"""
Reference strings for page replacement experiments.

Built-in workloads:
- default: the 33-reference workload the summary table is usually run on
- belady: the classic string on which FIFO faults more with more frames
- loop: a cyclic scan one page wider than the smallest table (LRU worst case)

Traces can also be kept in plain text files: integers separated by
whitespace or commas, ``#`` comments allowed.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Sequence, Union

logger = logging.getLogger(__name__)

PageSequence = List[int]

DEFAULT_TRACE: Sequence[int] = (
    1, 1, 1, 1, 0, 3, 1, 1, 3, 5, 1, 8, 1, 3, 5, 13,
    15, 6, 1, 1, 3, 6, 7, 8, 9, 3, 1, 1, 4, 4, 4, 1, 2,
)
DEFAULT_CAPACITIES: Sequence[int] = (3, 5, 7)
DEFAULT_DETAIL_CAPACITY = 3

_TOKEN_SPLIT = re.compile(r"[\s,]+")


@dataclass(frozen=True)
class TraceRecipe:
    key: str
    description: str
    pages: Sequence[int]


TRACE_RECIPES: List[TraceRecipe] = [
    TraceRecipe(
        key="default",
        description="33 references with a hot page 1 and scattered cold pages",
        pages=DEFAULT_TRACE,
    ),
    TraceRecipe(
        key="belady",
        description="Belady's anomaly: FIFO faults more with 4 frames than with 3",
        pages=(1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5),
    ),
    TraceRecipe(
        key="loop",
        description="cyclic scan over pages 1-4, every reference faults under LRU at 3 frames",
        pages=(1, 2, 3, 4) * 3,
    ),
]

TRACE_BY_KEY: Dict[str, TraceRecipe] = {recipe.key: recipe for recipe in TRACE_RECIPES}


def get_trace(key: str) -> PageSequence:
    """Return a fresh copy of a built-in trace."""
    try:
        recipe = TRACE_BY_KEY[key]
    except KeyError:
        known = ", ".join(TRACE_BY_KEY)
        raise KeyError(f"Unknown trace '{key}' (known traces: {known})") from None
    return list(recipe.pages)


def parse_trace(text: str) -> PageSequence:
    """
    Parse a reference string.

    Args:
        text: integers separated by whitespace and/or commas. Everything after
              a ``#`` on a line is ignored.

    Returns:
        The page references in order.

    Raises:
        ValueError: if a token is not an integer.
    """
    pages: PageSequence = []
    for line_no, line in enumerate(text.splitlines(), 1):
        content = line.split("#", 1)[0]
        for token in _TOKEN_SPLIT.split(content.strip()):
            if not token:
                continue
            try:
                pages.append(int(token))
            except ValueError:
                raise ValueError(f"Invalid page reference '{token}' on line {line_no}") from None
    return pages


def read_trace(path: Union[str, Path]) -> PageSequence:
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        pages = parse_trace(f.read())
    logger.debug("Read %d references from %s", len(pages), path)
    return pages


def write_trace(path: Union[str, Path], pages: Iterable[int]) -> None:
    """Write one page reference per line."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        f.write("\n".join(str(page) for page in pages))
        f.write("\n")
