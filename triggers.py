from __future__ import annotations

import random
from typing import Callable, Optional

from settings_store import SettingsStore
from utils.errors import StoreError, log_error
from utils.text import long_words


class RudeTrigger:
    """
    Decide whether a plain group message gets a rude auto-reply.

    Rules:
      - chat has rude mode enabled (no settings row = disabled)
      - a draw from 1..100 is <= probability
      - the message has at least one token of 5+ characters

    Reply shape: "<random long token> для <chat word or default word>".
    """

    def __init__(
        self,
        settings: SettingsStore,
        *,
        probability: int,
        default_word: str,
        rng_factory: Callable[[], random.Random] = random.Random,
    ):
        self.settings = settings
        self.probability = probability
        self.default_word = default_word
        self._rng_factory = rng_factory

    def maybe_reply(self, chat_id: int, text: str) -> Optional[str]:
        try:
            settings = self.settings.get(chat_id)
        except StoreError as exc:
            log_error(f"[Rude] Settings lookup failed for chat {chat_id}", exc)
            return None

        if settings is None or not settings.auto_reply_enabled:
            return None

        rng = self._rng_factory()
        if rng.randint(1, 100) > self.probability:
            return None

        candidates = long_words(text)
        if not candidates:
            return None

        token = rng.choice(candidates)
        word = settings.reply_word or self.default_word
        return f"{token} для {word}"
