"""Tests for the rude auto-reply trigger."""

import random

import pytest


class ScriptedRng:
    """Random stand-in: fixed draw, picks the first candidate."""

    def __init__(self, draw: int):
        self.draw = draw
        self.choices = []

    def randint(self, a, b):
        assert (a, b) == (1, 100)
        return self.draw

    def choice(self, seq):
        self.choices.append(list(seq))
        return seq[0]


def _trigger(db, *, probability=5, default_word="людей", rng=None):
    from settings_store import SettingsStore
    from triggers import RudeTrigger

    settings = SettingsStore(db)
    factory = (lambda: rng) if rng is not None else random.Random
    return settings, RudeTrigger(settings, probability=probability, default_word=default_word, rng_factory=factory)


class TestRudeTrigger:
    """Tests for RudeTrigger.maybe_reply."""

    def test_no_settings_row_never_replies(self, db):
        """A chat that was never configured gets nothing, even at 100%."""
        _, trigger = _trigger(db, probability=100)

        for _ in range(50):
            assert trigger.maybe_reply(7, "привет хорошая погода") is None

    def test_disabled_never_replies(self, db):
        settings, trigger = _trigger(db, probability=100)
        settings.set_word(7, "слово")

        for _ in range(50):
            assert trigger.maybe_reply(7, "привет хорошая погода") is None

    def test_full_probability_always_replies(self, db):
        """probability=100 plus a long token always yields '<token> для <word>'."""
        settings, trigger = _trigger(db, probability=100)
        settings.set_enabled(7, True)
        text = "привет хорошая погода сегодня"

        for _ in range(50):
            reply = trigger.maybe_reply(7, text)
            token, sep, word = reply.partition(" для ")
            assert sep == " для "
            assert word == "людей"
            assert token in {"привет", "хорошая", "погода", "сегодня"}

    def test_uses_chat_word(self, db):
        settings, trigger = _trigger(db, probability=100)
        settings.set_enabled(7, True)
        settings.set_word(7, "слово")

        assert trigger.maybe_reply(7, "замечательно").endswith(" для слово")

    def test_uses_configured_default_word(self, db):
        settings, trigger = _trigger(db, probability=100, default_word="котиков")
        settings.set_enabled(7, True)

        assert trigger.maybe_reply(7, "замечательно") == "замечательно для котиков"

    def test_no_long_tokens(self, db):
        """Messages with only short tokens never trigger."""
        settings, trigger = _trigger(db, probability=100)
        settings.set_enabled(7, True)

        assert trigger.maybe_reply(7, "да нет ок") is None

    @pytest.mark.parametrize("draw,expected", [(5, True), (1, True), (6, False), (100, False)])
    def test_threshold(self, db, draw, expected):
        """Draws above the probability threshold are skipped."""
        rng = ScriptedRng(draw)
        settings, trigger = _trigger(db, probability=5, rng=rng)
        settings.set_enabled(7, True)

        reply = trigger.maybe_reply(7, "слишком длинное сообщение")

        assert (reply is not None) is expected
        if expected:
            assert reply == "слишком для людей"
            assert rng.choices == [["слишком", "длинное", "сообщение"]]

    def test_zero_probability_never_replies(self, db):
        settings, trigger = _trigger(db, probability=0)
        settings.set_enabled(7, True)

        for _ in range(50):
            assert trigger.maybe_reply(7, "замечательно") is None

    def test_store_failure_is_no_action(self, db, capsys):
        """A broken settings read is logged and treated as 'no reply'."""
        settings, trigger = _trigger(db, probability=100)
        settings.set_enabled(7, True)
        db.conn.close()

        assert trigger.maybe_reply(7, "замечательно") is None
        assert "[Rude]" in capsys.readouterr().out
