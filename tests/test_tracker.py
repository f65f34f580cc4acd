"""Tests for the in-memory audit session registry."""
from agents.auditor.models.schemas import AuditState
from agents.auditor.services import tracker as tracker_module
from agents.auditor.services.tracker import AuditTracker


class TestAuditTracker:

    def test_open_generates_id(self):
        tracker = AuditTracker(ttl_seconds=60)
        session = tracker.open()
        assert session.job_id
        assert tracker.get(session.job_id) is session

    def test_open_existing_returns_same_session(self):
        tracker = AuditTracker(ttl_seconds=60)
        first = tracker.open("job-1")
        assert tracker.open("job-1") is first

    def test_unknown_job(self):
        assert AuditTracker(ttl_seconds=60).get("missing") is None

    def test_finished_sessions_expire(self, monkeypatch):
        tracker = AuditTracker(ttl_seconds=10)
        now = [1000.0]
        monkeypatch.setattr(tracker_module.time, "time", lambda: now[0])

        tracker.open("job-1")
        now[0] += 11
        assert tracker.get("job-1") is None

    def test_busy_sessions_do_not_expire(self, monkeypatch):
        tracker = AuditTracker(ttl_seconds=10)
        now = [1000.0]
        monkeypatch.setattr(tracker_module.time, "time", lambda: now[0])

        session = tracker.open("job-1")
        session.state = AuditState.SUBMITTING
        now[0] += 100
        assert tracker.get("job-1") is session
        assert tracker.active_count == 1
