"""Daily free-use quota per caller.

Server-side and authoritative: any client-side counter is a mirror only.
Counters are keyed by caller and reset when the stored UTC day no longer
matches today. Check-and-increment is atomic per gate.
"""

import logging
import threading
from collections.abc import Callable
from datetime import datetime, timezone

from models.schemas.quota_decision import QuotaDecision

logger = logging.getLogger(__name__)


def utc_today() -> str:
    return datetime.now(timezone.utc).date().isoformat()


class QuotaGate:
    def __init__(
        self,
        name: str,
        limit: int,
        clock: Callable[[], str] = utc_today,
    ) -> None:
        self.name = name
        self.limit = limit
        self.clock = clock
        self._lock = threading.Lock()
        self._usage: dict[str, tuple[str, int]] = {}
        self._day = ""

    def _used_today(self, caller: str, today: str) -> int:
        day, used = self._usage.get(caller, (today, 0))
        return used if day == today else 0

    def _decision(self, used: int, today: str, allowed: bool) -> QuotaDecision:
        remaining = max(self.limit - used, 0)
        return QuotaDecision(
            allowed=allowed,
            remaining=remaining,
            used=used,
            limit=self.limit,
            day=today,
            reason="ok" if allowed else "limit_reached",
        )

    def _owner(self, today: str) -> QuotaDecision:
        return QuotaDecision(
            allowed=True,
            remaining=self.limit,
            used=0,
            limit=self.limit,
            day=today,
            reason="owner",
        )

    def status(self, caller: str, privileged: bool = False) -> QuotaDecision:
        """Report the caller's standing without consuming a use."""
        today = self.clock()
        if privileged:
            return self._owner(today)
        with self._lock:
            used = self._used_today(caller, today)
        return self._decision(used, today, allowed=used < self.limit)

    def check_and_consume(self, caller: str, privileged: bool = False) -> QuotaDecision:
        """Consume one use if the caller is under the limit.

        Denied calls are not counted; privileged callers are never counted.
        """
        today = self.clock()
        if privileged:
            return self._owner(today)

        with self._lock:
            used = self._used_today(caller, today)
            if used >= self.limit:
                logger.info("Quota %s exhausted for caller %s (%d/%d)", self.name, caller, used, self.limit)
                return self._decision(used, today, allowed=False)
            if today != self._day:
                self._prune(today)
            used += 1
            self._usage[caller] = (today, used)

        return self._decision(used, today, allowed=True)

    def refund(self, caller: str, privileged: bool = False) -> None:
        """Give back a use consumed by a request that then failed."""
        if privileged:
            return
        today = self.clock()
        with self._lock:
            used = self._used_today(caller, today)
            if used > 0:
                self._usage[caller] = (today, used - 1)

    def _prune(self, today: str) -> None:
        """Drop counters from previous days. Caller must hold the lock."""
        stale = [caller for caller, (day, _) in self._usage.items() if day != today]
        for caller in stale:
            del self._usage[caller]
        self._day = today

    def reset(self) -> None:
        with self._lock:
            self._usage.clear()
            self._day = ""
