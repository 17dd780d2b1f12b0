"""Shared fixtures: a throwaway database and a fully wired BotContext."""

import random

import pytest
from unittest.mock import AsyncMock


class FakePlatform:
    """Stands in for TelegramPlatform; admin status is set per test."""

    def __init__(self, admin: bool = True):
        self.is_bot_admin = AsyncMock(return_value=admin)


@pytest.fixture
def db(tmp_path):
    from db import Database

    database = Database(str(tmp_path / "data" / "bot.db"))
    yield database
    database.close()


@pytest.fixture
def make_ctx(db):
    """Build a BotContext over the temp database.

    probability / default_word / admin / seed can be overridden per test.
    """
    from config import BotConfig
    from core.context import BotContext
    from pending import PendingPrompts
    from roster_store import RosterStore
    from settings_store import SettingsStore
    from triggers import RudeTrigger

    def _make(probability=5, default_word="людей", admin=True, seed=1234, clock=None):
        config = BotConfig(bot_token="test-token", default_word=default_word, probability=probability)
        settings = SettingsStore(db)
        pending = PendingPrompts(ttl_s=300) if clock is None else PendingPrompts(ttl_s=300, clock=clock)
        return BotContext(
            config=config,
            roster=RosterStore(db),
            settings=settings,
            trigger=RudeTrigger(
                settings,
                probability=probability,
                default_word=default_word,
                rng_factory=lambda: random.Random(seed),
            ),
            pending=pending,
            platform=FakePlatform(admin=admin),
            bot_username="roster_bot",
        )

    return _make
