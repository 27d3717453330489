import gzip
import json
import sys
from pathlib import Path

# Add repo root to sys.path (works locally and in CI)
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pytest

from sixdegrees.graph import build_undirected
from sixdegrees.reviews import Review


@pytest.fixture
def path_graph():
    return build_undirected([("A", "B"), ("B", "C"), ("C", "D")])


@pytest.fixture
def reviews():
    return [
        Review(reviewer_id="A1", asin="B1"),
        Review(reviewer_id="A2", asin="B2"),
        Review(reviewer_id="A3", asin="B3"),
        Review(reviewer_id="A1", asin="B2"),
        Review(reviewer_id="A4", asin="B1"),
    ]


@pytest.fixture
def write_reviews(tmp_path):
    """Write review dicts as JSON lines, gzipped when the name ends in .gz."""

    def _write(rows, name="reviews.json.gz"):
        path = tmp_path / name
        text = "".join(
            (row if isinstance(row, str) else json.dumps(row)) + "\n" for row in rows
        )
        if name.endswith(".gz"):
            with gzip.open(path, "wt", encoding="utf-8") as f:
                f.write(text)
        else:
            path.write_text(text, encoding="utf-8")
        return path

    return _write
