"""Validation summary: duplicate NOPs and total mismatch anomalies."""
from __future__ import annotations

import threading

from conftest import make_record

from pbb_recap.records.store import RecordStore
from pbb_recap.records.summary import find_duplicate_nops, generate_summary


def test_duplicates_reported_once_in_first_repeat_order():
    assert find_duplicate_nops(["A", "B", "A", "C", "A"]) == ["A"]
    assert find_duplicate_nops(["X", "Y", "Y", "X"]) == ["Y", "X"]
    assert find_duplicate_nops(["A", "B"]) == []


def test_mismatched_total_is_anomaly():
    record = make_record("777", {2021: 50, 2022: 50}, total=85)
    summary = generate_summary([record])
    assert summary.anomalies == ["Ketidaksesuaian total untuk NOP 777"]


def test_total_within_tolerance_is_not_anomaly():
    record = make_record("1", {2021: 100.004}, total=100)
    assert generate_summary([record]).anomalies == []


def test_negative_and_none_ignored_when_recomputing():
    record = make_record("1", {2020: None, 2021: -30, 2022: 200}, total=200)
    assert generate_summary([record]).anomalies == []


def test_summary_counts_and_empty_list():
    records = [make_record("A", {}), make_record("B", {}), make_record("A", {})]
    summary = generate_summary(records)
    assert summary.total_records == 3
    assert summary.duplicates == ["A"]
    assert summary.anomalies == []

    empty = generate_summary([])
    assert empty.total_records == 0
    assert empty.duplicates == []
    assert empty.anomalies == []


def test_store_summary_tracks_contents():
    store = RecordStore()
    assert store.extend([make_record("A", {2022: 1}), make_record("A", {2022: 2})]) == 2
    assert store.summary().duplicates == ["A"]
    store.set_error("boom")
    store.clear()
    assert len(store) == 0
    assert store.error is None
    assert store.summary().total_records == 0


def test_error_banner_visible_across_threads():
    store = RecordStore()
    writer = threading.Thread(target=store.set_error, args=("quota",))
    writer.start()
    writer.join()
    assert store.error == "quota"
    store.set_error(None)
    assert store.error is None
