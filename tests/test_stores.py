"""Tests for the SQLite roster and settings stores."""

import sqlite3

import pytest


class TestDatabase:
    """Tests for the shared Database handle."""

    def test_creates_parent_dir_and_tables(self, tmp_path):
        """Opening a database should create its folder and both tables."""
        from db import Database

        path = tmp_path / "nested" / "bot.db"
        database = Database(str(path))
        try:
            assert path.exists()
            with database.cursor() as cur:
                cur.execute("SELECT name FROM sqlite_master WHERE type='table'")
                tables = {row["name"] for row in cur.fetchall()}
            assert {"users", "user_settings"} <= tables
        finally:
            database.close()

    def test_cursor_rolls_back_on_error(self, db):
        """A failing unit of work should leave no partial writes."""
        with pytest.raises(sqlite3.IntegrityError):
            with db.cursor() as cur:
                cur.execute("INSERT INTO users(chat_id, username) VALUES(1, '@a')")
                cur.execute("INSERT INTO users(chat_id, username) VALUES(1, '@a')")

        with db.cursor() as cur:
            cur.execute("SELECT COUNT(*) AS n FROM users")
            assert cur.fetchone()["n"] == 0

    def test_reopen_keeps_data(self, tmp_path):
        """Rows should survive closing and reopening the file."""
        from db import Database
        from roster_store import RosterStore

        path = str(tmp_path / "bot.db")
        first = Database(path)
        RosterStore(first).add(5, "@alice")
        first.close()

        second = Database(path)
        try:
            assert RosterStore(second).list(5) == {"@alice"}
        finally:
            second.close()


class TestRosterStore:
    """Tests for RosterStore."""

    def test_add_inserts(self, db):
        from roster_store import AddResult, RosterStore

        roster = RosterStore(db)

        assert roster.add(42, "@alice") is AddResult.INSERTED
        assert roster.list(42) == {"@alice"}

    def test_duplicate_is_already_present(self, db):
        """Adding the same name twice keeps exactly one entry."""
        from roster_store import AddResult, RosterStore

        roster = RosterStore(db)
        roster.add(42, "@alice")

        assert roster.add(42, "@alice") is AddResult.ALREADY_PRESENT
        with db.cursor() as cur:
            cur.execute("SELECT COUNT(*) AS n FROM users WHERE chat_id=42 AND username='@alice'")
            assert cur.fetchone()["n"] == 1

    def test_chats_are_separate(self, db):
        """The same username may sit in several chats."""
        from roster_store import AddResult, RosterStore

        roster = RosterStore(db)
        roster.add(1, "@alice")

        assert roster.add(2, "@alice") is AddResult.INSERTED
        assert roster.list(1) == {"@alice"}
        assert roster.list(2) == {"@alice"}

    def test_list_empty_chat(self, db):
        from roster_store import RosterStore

        assert RosterStore(db).list(999) == set()

    def test_clear_returns_count(self, db):
        """clear() removes every row of the chat and reports how many."""
        from roster_store import RosterStore

        roster = RosterStore(db)
        for name in ("@a", "@b", "@c"):
            roster.add(7, name)
        roster.add(8, "@keep")

        assert roster.clear(7) == 3
        assert roster.list(7) == set()
        assert roster.list(8) == {"@keep"}
        assert roster.clear(7) == 0

    def test_unexpected_error_becomes_store_error(self, db):
        """Database failures other than duplicates surface as StoreError."""
        from roster_store import RosterStore
        from utils.errors import StoreError

        roster = RosterStore(db)
        db.conn.close()

        with pytest.raises(StoreError):
            roster.add(1, "@alice")
        with pytest.raises(StoreError):
            roster.list(1)
        with pytest.raises(StoreError):
            roster.clear(1)


class TestSettingsStore:
    """Tests for SettingsStore."""

    def test_missing_row_is_none(self, db):
        from settings_store import SettingsStore

        assert SettingsStore(db).get(7) is None

    def test_set_enabled_creates_row(self, db):
        """Enabling creates the row without a word."""
        from settings_store import ChatSettings, SettingsStore

        settings = SettingsStore(db)
        settings.set_enabled(7, True)

        assert settings.get(7) == ChatSettings(chat_id=7, auto_reply_enabled=True, reply_word=None)

    def test_set_word_creates_disabled_row(self, db):
        """Setting a word does not turn rude mode on."""
        from settings_store import ChatSettings, SettingsStore

        settings = SettingsStore(db)
        settings.set_word(7, "слово")

        assert settings.get(7) == ChatSettings(chat_id=7, auto_reply_enabled=False, reply_word="слово")

    def test_set_word_keeps_enabled_flag(self, db):
        from settings_store import SettingsStore

        settings = SettingsStore(db)
        settings.set_enabled(7, True)
        settings.set_word(7, "слово")

        row = settings.get(7)
        assert row.auto_reply_enabled is True
        assert row.reply_word == "слово"

    def test_set_enabled_keeps_word(self, db):
        from settings_store import SettingsStore

        settings = SettingsStore(db)
        settings.set_word(7, "слово")
        settings.set_enabled(7, True)
        settings.set_enabled(7, False)

        row = settings.get(7)
        assert row.auto_reply_enabled is False
        assert row.reply_word == "слово"

    def test_one_row_per_chat(self, db):
        """Repeated upserts never add a second row."""
        from settings_store import SettingsStore

        settings = SettingsStore(db)
        settings.set_enabled(7, True)
        settings.set_word(7, "раз")
        settings.set_word(7, "два")
        settings.set_enabled(7, False)

        with db.cursor() as cur:
            cur.execute("SELECT COUNT(*) AS n FROM user_settings WHERE chat_id=7")
            assert cur.fetchone()["n"] == 1
        assert settings.get(7).reply_word == "два"

    def test_unexpected_error_becomes_store_error(self, db):
        from settings_store import SettingsStore
        from utils.errors import StoreError

        settings = SettingsStore(db)
        db.conn.close()

        with pytest.raises(StoreError):
            settings.get(7)
        with pytest.raises(StoreError):
            settings.set_enabled(7, True)
        with pytest.raises(StoreError):
            settings.set_word(7, "слово")
