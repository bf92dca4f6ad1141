"""Tests for the JSON file persistence layer."""

import json

import pytest

from review_board_api.app.core.storage import ReviewStorage, StorageError
from review_board_api.app.schemas.review import Review


def test_load_missing_file_is_empty(storage, reviews_file):
    assert storage.load() == []
    assert not reviews_file.exists()


def test_load_null_is_empty(storage, reviews_file):
    reviews_file.write_text("null", encoding="utf-8")
    assert storage.load() == []


def test_save_then_load_restores_reviews(storage):
    reviews = [
        Review(id=1, name="Ann", review="Great"),
        Review(id=3, name="Bob", review=""),
        Review(id=2, name="Zoë", review="Très bien"),
    ]
    assert storage.save(reviews) is True
    assert ReviewStorage(storage.path).load() == reviews


def test_save_writes_indented_array(storage, reviews_file):
    storage.save([Review(id=1, name="Ann", review="Great")])
    text = reviews_file.read_text(encoding="utf-8")
    assert text == '[\n  {\n    "id": 1,\n    "name": "Ann",\n    "review": "Great"\n  }\n]'


def test_save_empty_collection(storage, reviews_file):
    storage.save([])
    assert json.loads(reviews_file.read_text(encoding="utf-8")) == []


def test_save_creates_parent_directories(tmp_path):
    storage = ReviewStorage(tmp_path / "data" / "nested" / "reviews.json")
    assert storage.save([Review(id=1, name="a", review="b")]) is True
    assert storage.path.exists()


def test_save_failure_is_reported_not_raised(tmp_path, caplog):
    # The backing path is a directory, so writing it fails.
    target = tmp_path / "reviews.json"
    target.mkdir()
    storage = ReviewStorage(target)
    assert storage.save([Review(id=1, name="a", review="b")]) is False
    assert "Failed to write reviews" in caplog.text


def test_missing_text_fields_default_to_empty(storage, reviews_file):
    reviews_file.write_text('[{"id": 4}]', encoding="utf-8")
    assert storage.load() == [Review(id=4, name="", review="")]


@pytest.mark.parametrize(
    "content",
    [
        "",
        "{not json",
        '{"id": 1, "name": "a", "review": "b"}',
        '["just a string"]',
        '[{"name": "no id", "review": "x"}]',
        '[{"id": "1", "name": "a", "review": "b"}]',
        '[{"id": 1, "name": 5, "review": "b"}]',
    ],
)
def test_load_malformed_file_raises(storage, reviews_file, content):
    reviews_file.write_text(content, encoding="utf-8")
    with pytest.raises(StorageError):
        storage.load()


def test_load_duplicate_ids_raises(storage, reviews_file):
    reviews_file.write_text(
        '[{"id": 1, "name": "a", "review": "b"}, {"id": 1, "name": "c", "review": "d"}]',
        encoding="utf-8",
    )
    with pytest.raises(StorageError, match="Duplicate review id 1"):
        storage.load()


def test_relative_path_resolves_against_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    storage = ReviewStorage("reviews.json")
    assert storage.path == (tmp_path / "reviews.json").resolve()
