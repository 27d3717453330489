import gzip

import pytest

from sixdegrees.reviews import Review, ReviewParseError, load_reviews, review_pairs


def test_load_gzip_dump(write_reviews):
    path = write_reviews(
        [
            {"reviewerID": "A1", "asin": "B1", "overall": 5.0, "reviewText": "Great"},
            {"reviewerID": "A2", "asin": "B1", "overall": 3.0},
        ]
    )
    assert load_reviews(path, show_progress=False) == [Review("A1", "B1"), Review("A2", "B1")]


def test_load_plain_jsonl_skips_blank_lines(write_reviews):
    path = write_reviews(
        [{"reviewerID": "A1", "asin": "B1"}, "", "   ", {"reviewerID": "A3", "asin": "B7"}],
        name="reviews.jsonl",
    )
    reviews = load_reviews(str(path), show_progress=False)
    assert review_pairs(reviews) == [("A1", "B1"), ("A3", "B7")]


def test_invalid_json_is_fatal(write_reviews):
    path = write_reviews([{"reviewerID": "A1", "asin": "B1"}, "", "{not json"])
    with pytest.raises(ReviewParseError) as excinfo:
        load_reviews(path, show_progress=False)
    assert excinfo.value.line_number == 3
    assert excinfo.value.path == path


@pytest.mark.parametrize(
    "row",
    [
        {"asin": "B1"},
        {"reviewerID": "A1"},
        {"reviewerID": 12, "asin": "B1"},
        '["A1", "B1"]',
    ],
)
def test_record_without_both_ids_is_fatal(write_reviews, row):
    path = write_reviews([row], name="bad.json")
    with pytest.raises(ReviewParseError):
        load_reviews(path, show_progress=False)


def test_parse_error_is_a_value_error(write_reviews):
    path = write_reviews(["null"], name="bad.json")
    with pytest.raises(ValueError):
        load_reviews(path, show_progress=False)


def test_invalid_utf8_is_fatal(tmp_path):
    path = tmp_path / "latin.json.gz"
    with gzip.open(path, "wb") as f:
        f.write(b'{"reviewerID": "A1", "asin": "B\xff\xfe1"}\n')
    with pytest.raises(ReviewParseError) as excinfo:
        load_reviews(path, show_progress=False)
    assert "invalid UTF-8" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_truncated_gzip_is_fatal(write_reviews):
    path = write_reviews([{"reviewerID": f"A{i}", "asin": f"B{i}"} for i in range(50)])
    data = path.read_bytes()
    path.write_bytes(data[:-10])
    with pytest.raises(ReviewParseError) as excinfo:
        load_reviews(path, show_progress=False)
    assert "unreadable gzip data" in str(excinfo.value)


def test_corrupt_gzip_header_is_fatal(tmp_path):
    path = tmp_path / "reviews.json.gz"
    path.write_bytes(b'{"reviewerID": "A1", "asin": "B1"}\n')
    with pytest.raises(ReviewParseError):
        load_reviews(path, show_progress=False)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_reviews(tmp_path / "absent.json.gz", show_progress=False)
