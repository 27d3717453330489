"""
Review data source.

Reads Amazon-style review dumps (one JSON object per line, usually
gzip-compressed) and keeps only the two fields the graph needs: the
reviewer id and the product id (`asin`).
"""

from __future__ import annotations

import gzip
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from tqdm import tqdm

from sixdegrees.config import PRODUCT_FIELD, REVIEWER_FIELD


class ReviewParseError(ValueError):
    """Raised when a line of the review dump cannot be turned into a Review."""

    def __init__(self, path: Path, line_number: int, reason: str) -> None:
        self.path = path
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"{path}:{line_number}: {reason}")


@dataclass(frozen=True)
class Review:
    reviewer_id: str
    asin: str

    def as_pair(self) -> Tuple[str, str]:
        return (self.reviewer_id, self.asin)


def open_text(path: Path):
    if str(path).endswith(".gz"):
        return gzip.open(path, "rt", encoding="utf-8")
    return path.open("r", encoding="utf-8")


def parse_review(line: str, path: Path, line_number: int) -> Review:
    """Parse one JSON line into a Review.

    Args:
        line: Raw line content (already stripped).
        path: File the line came from, used in error messages.
        line_number: 1-based line number, used in error messages.

    Returns:
        Review with reviewer id and asin.

    Raises:
        ReviewParseError: If the line is not a JSON object with string
            `reviewerID` and `asin` fields.
    """
    try:
        obj = json.loads(line)
    except json.JSONDecodeError as e:
        raise ReviewParseError(path, line_number, f"invalid JSON ({e.msg})") from e

    if not isinstance(obj, dict):
        raise ReviewParseError(path, line_number, "expected a JSON object")

    reviewer_id = obj.get(REVIEWER_FIELD)
    asin = obj.get(PRODUCT_FIELD)
    if not isinstance(reviewer_id, str):
        raise ReviewParseError(path, line_number, f"missing or non-string '{REVIEWER_FIELD}'")
    if not isinstance(asin, str):
        raise ReviewParseError(path, line_number, f"missing or non-string '{PRODUCT_FIELD}'")

    return Review(reviewer_id=reviewer_id, asin=asin)


def load_reviews(path: Union[str, Path], show_progress: bool = True) -> List[Review]:
    """Load every review from a JSON-lines dump.

    Blank lines are skipped. Any other line that fails to decode or parse
    aborts the whole load, the dataset is expected to be well formed.

    Args:
        path: Path to a `.json`, `.jsonl` or `.json.gz` review dump.
        show_progress: Show a tqdm progress bar while reading.

    Returns:
        List of reviews in file order.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Review file not found: {path}")

    reviews: List[Review] = []
    line_number = 0
    try:
        with open_text(path) as f:
            for line in tqdm(f, desc="Loading reviews", unit="review", disable=not show_progress):
                line_number += 1
                line = line.strip()
                if not line:
                    continue
                reviews.append(parse_review(line, path, line_number))
    except UnicodeDecodeError as e:
        raise ReviewParseError(path, line_number + 1, f"invalid UTF-8 ({e.reason})") from e
    except (EOFError, gzip.BadGzipFile) as e:
        raise ReviewParseError(path, line_number + 1, f"unreadable gzip data ({e})") from e

    return reviews


def review_pairs(reviews: Iterable[Review]) -> List[Tuple[str, str]]:
    """Return the (reviewer_id, asin) pair of every review."""
    return [r.as_pair() for r in reviews]
