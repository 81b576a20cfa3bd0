"""
Unit Tests for SubmissionStore

Tests the key-value table, whole-history persistence and recovery from
unreadable stored data.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import json
from datetime import datetime, timezone

import pytest

from calculators.payload_builder import build_submission
from calculators.submission_store import SubmissionStore, get_submission_store


@pytest.fixture
def record(valid_form):
    return build_submission(valid_form, "1234567890", datetime(2025, 4, 7, 9, 30, tzinfo=timezone.utc))


class TestKeyValue:

    def test_missing_key_returns_none(self, store):
        assert store.get_item("nothing") is None

    def test_set_item_overwrites(self, store):
        store.set_item("k", "first")
        store.set_item("k", "second")

        assert store.get_item("k") == "second"

    def test_creates_parent_directory(self, tmp_path):
        db_path = tmp_path / "nested" / "dir" / "submissions.db"

        SubmissionStore(db_path=db_path)

        assert db_path.exists()


class TestHistory:

    def test_empty_store_has_no_history(self, store):
        assert store.load_history() == []

    def test_history_round_trip(self, store, record):
        store.save_history([record, record])

        loaded = store.load_history()

        assert loaded == [record, record]

    def test_history_stored_as_json_array_under_one_key(self, store, record):
        store.save_history([record])

        raw = json.loads(store.get_item("financialRecords"))

        assert isinstance(raw, list)
        assert raw[0]["vat"]["netVatDue"] == 300
        assert raw[0]["selfAssessment"]["allowances"] == 0
        assert raw[0]["utr"] == "1234567890"

    def test_save_overwrites_wholesale(self, store, record):
        store.save_history([record, record, record])
        store.save_history([record])

        assert len(store.load_history()) == 1

    def test_history_survives_reopen(self, tmp_path, record):
        db_path = tmp_path / "submissions.db"
        SubmissionStore(db_path=db_path).save_history([record])

        reopened = SubmissionStore(db_path=db_path)

        assert reopened.load_history() == [record]

    def test_custom_storage_key(self, tmp_path, record):
        store = SubmissionStore(db_path=tmp_path / "s.db", storage_key="otherRecords")
        store.save_history([record])

        assert store.get_item("financialRecords") is None
        assert len(store.load_history()) == 1


class TestCorruptedHistory:

    def test_invalid_json_is_treated_as_empty(self, store):
        store.set_item("financialRecords", "{not json")

        assert store.load_history() == []

    def test_non_list_is_treated_as_empty(self, store):
        store.set_item("financialRecords", json.dumps({"vat": {}}))

        assert store.load_history() == []

    def test_invalid_entries_are_skipped(self, store, record):
        entries = [record.to_storage(), {"timestamp": "2025-01-01T00:00:00.000Z"}, 42]
        store.set_item("financialRecords", json.dumps(entries))

        assert store.load_history() == [record]

    def test_partial_entries_are_kept(self, store):
        partial = {"vat": None, "timestamp": "2025-01-01T00:00:00.000Z", "utr": "1", "status": "Submitted"}
        store.set_item("financialRecords", json.dumps([partial]))

        loaded = store.load_history()

        assert len(loaded) == 1
        assert loaded[0].vat is None


def test_get_submission_store_is_shared_per_path(tmp_path):
    db_path = tmp_path / "shared.db"

    assert get_submission_store(db_path) is get_submission_store(str(db_path))
