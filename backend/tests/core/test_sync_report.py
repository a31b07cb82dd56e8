"""Sync report tests — counters, ordering and the balance invariant.

Tests cover:
    - record_success / record_failure / record_skip bookkeeping
    - Skips land in errors without touching failed or success
    - to_dict exposes the API response shape
"""

from holocron.core.sync_report import SyncReport


def test_new_report_is_empty():
    report = SyncReport(message="Sync completed")
    assert (report.total, report.success, report.failed, report.skipped) == (0, 0, 0, 0)
    assert report.errors == []


def test_skip_is_reported_but_not_failed():
    report = SyncReport(message="m", total=1)
    report.record_skip('Film "A New Hope" skipped: it has been modified locally')
    assert report.failed == 0
    assert report.success == 0
    assert report.skipped == 1
    assert len(report.errors) == 1


def test_errors_keep_insertion_order():
    report = SyncReport(message="m", total=3)
    report.record_failure("Error with film 1: boom")
    report.record_success()
    report.record_skip("skipped 3")
    assert report.errors == ["Error with film 1: boom", "skipped 3"]
    assert report.success + report.failed + report.skipped == report.total


def test_to_dict_shape():
    report = SyncReport(message="Sync completed", total=2)
    report.record_success()
    report.record_failure("Error with film 2: duplicate")
    assert report.to_dict() == {
        "message": "Sync completed",
        "total": 2,
        "success": 1,
        "failed": 1,
        "skipped": 0,
        "errors": ["Error with film 2: duplicate"],
    }
