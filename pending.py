"""pending.py

Which argument the bot is waiting for, per (chat, user).

When /add or /set_rude_word arrives without arguments the bot answers with
a usage prompt and remembers what it asked for. The next message from the
same user in the same chat is taken as the answer. Records expire after a
TTL so a forgotten prompt does not swallow a message an hour later.

State lives in memory only; a restart forgets open prompts.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from config import DEFAULT_PENDING_TTL_S
from utils.helpers import monotonic


class PendingKind(Enum):
    AWAITING_USERNAMES = "awaiting_usernames"
    AWAITING_WORD = "awaiting_word"


@dataclass
class _Pending:
    kind: PendingKind
    expires_at: float


class PendingPrompts:
    """Expiring pending-operation records keyed by (chat_id, user_id)."""

    def __init__(self, ttl_s: float = DEFAULT_PENDING_TTL_S, clock: Callable[[], float] = monotonic):
        self.ttl_s = ttl_s
        self._clock = clock
        self._records: Dict[Tuple[int, int], _Pending] = {}

    def set(self, chat_id: int, user_id: int, kind: PendingKind) -> None:
        self._prune()
        self._records[(chat_id, user_id)] = _Pending(kind, self._clock() + self.ttl_s)

    def pop(self, chat_id: int, user_id: int) -> Optional[PendingKind]:
        """Consume the record; expired records count as absent."""
        rec = self._records.pop((chat_id, user_id), None)
        if rec is None or rec.expires_at <= self._clock():
            return None
        return rec.kind

    def discard(self, chat_id: int, user_id: int) -> None:
        self._records.pop((chat_id, user_id), None)

    def __len__(self) -> int:
        self._prune()
        return len(self._records)

    def _prune(self) -> None:
        now = self._clock()
        for key in [k for k, r in self._records.items() if r.expires_at <= now]:
            del self._records[key]
