"""
Audit Tracker: in-memory registry of audit sessions keyed by job id, so the
form can poll the phase label while its submission is in flight. Finished
sessions expire after AUDIT_JOB_TTL_SECONDS.
"""
import time
from uuid import uuid4

from agents.auditor.services.workflow import AuditSession
from shared.config import settings


class AuditTracker:
    def __init__(self, ttl_seconds: int | None = None):
        self.ttl_seconds = ttl_seconds if ttl_seconds is not None else settings.AUDIT_JOB_TTL_SECONDS
        self._sessions: dict[str, tuple[AuditSession, float]] = {}

    def _cleanup_expired(self):
        now = time.time()
        expired = [
            job_id for job_id, (session, touched) in self._sessions.items()
            if not session.is_busy and (now - touched) > self.ttl_seconds
        ]
        for job_id in expired:
            del self._sessions[job_id]

    def open(self, job_id: str | None = None) -> AuditSession:
        """Return the session for `job_id`, creating it (with a fresh id if none)."""
        self._cleanup_expired()
        job_id = job_id or str(uuid4())
        entry = self._sessions.get(job_id)
        session = entry[0] if entry else AuditSession(job_id)
        self._sessions[job_id] = (session, time.time())
        return session

    def get(self, job_id: str) -> AuditSession | None:
        self._cleanup_expired()
        entry = self._sessions.get(job_id)
        return entry[0] if entry else None

    def touch(self, job_id: str):
        entry = self._sessions.get(job_id)
        if entry:
            self._sessions[job_id] = (entry[0], time.time())

    @property
    def active_count(self) -> int:
        return sum(1 for session, _ in self._sessions.values() if session.is_busy)


tracker = AuditTracker()
