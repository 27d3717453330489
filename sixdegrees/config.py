"""
Default settings for the six degrees analysis.

Command-line flags in `sixdegrees.cli` override every value here.
"""

from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DATA_DIR = PROJECT_ROOT / "data"

# Amazon 5-core video game reviews, one JSON object per line
DATA_FILE = DATA_DIR / "Video_Games_5.json.gz"

DEFAULT_SAMPLE_SIZE = 1500
SIX_DEGREES_THRESHOLD = 6.0

# JSON field names of the two endpoints in a review record
REVIEWER_FIELD = "reviewerID"
PRODUCT_FIELD = "asin"
