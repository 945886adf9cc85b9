"""
Tests for the battle log manager.
"""
import os

from skirmish.game.log_manager import LogCategory, LogLevel, LogManager, LogMessage


class TestLogBuffer:
    """Buffering and retrieval."""

    def test_messages_are_buffered_in_order(self, log_manager):
        log_manager.battle("first")
        log_manager.movement("second")

        texts = [msg.text for msg in log_manager.get_messages()]
        assert texts == ["first", "second"]

    def test_buffer_is_bounded(self):
        manager = LogManager(max_messages=3)
        for i in range(5):
            manager.system(f"message {i}")

        texts = [msg.text for msg in manager.get_messages()]
        assert texts == ["message 2", "message 3", "message 4"]

    def test_count_returns_most_recent(self, log_manager):
        for i in range(4):
            log_manager.turn(f"turn {i}")

        texts = [msg.text for msg in log_manager.get_messages(count=2)]
        assert texts == ["turn 2", "turn 3"]

    def test_clear(self, log_manager):
        log_manager.system("hello")
        log_manager.clear()
        assert log_manager.get_messages() == []

    def test_format(self):
        message = LogMessage("Hero moves", LogCategory.MOVEMENT)
        assert message.format() == "[MOV] Hero moves"
        assert message.format(include_category=False) == "Hero moves"
        assert message.format(include_timestamp=True).startswith("[")


class TestLogFiltering:
    """Level and category filters."""

    def test_debug_hidden_at_info_level(self):
        manager = LogManager(default_level=LogLevel.INFO)
        manager.debug("noise")
        manager.battle("hit")

        texts = [msg.text for msg in manager.get_messages()]
        assert texts == ["hit"]

    def test_debug_still_buffered(self):
        manager = LogManager(default_level=LogLevel.INFO)
        manager.debug("noise")
        assert len(manager.messages) == 1

    def test_warning_level_hides_info(self):
        manager = LogManager(default_level=LogLevel.WARNING)
        manager.battle("hit")
        manager.warning("rejected")
        manager.error("broken")

        texts = [msg.text for msg in manager.get_messages()]
        assert texts == ["rejected", "broken"]

    def test_filter_by_category(self, log_manager):
        log_manager.battle("hit")
        log_manager.turn("next")
        log_manager.battle("miss")

        texts = [msg.text for msg in log_manager.get_messages(categories={LogCategory.BATTLE})]
        assert texts == ["hit", "miss"]

    def test_disabled_category_is_hidden(self, log_manager):
        log_manager.disable_category(LogCategory.MOVEMENT)
        log_manager.movement("step")
        log_manager.turn("next")

        assert [msg.text for msg in log_manager.get_messages()] == ["next"]
        assert log_manager.get_messages(categories={LogCategory.MOVEMENT}) == []

        log_manager.enable_category(LogCategory.MOVEMENT)
        assert len(log_manager.get_messages()) == 2

    def test_enabled_categories_on_construction(self):
        manager = LogManager(enabled_categories=[LogCategory.BATTLE])
        manager.battle("hit")
        manager.system("setup")
        assert [msg.text for msg in manager.get_messages()] == ["hit"]

    def test_toggle_debug(self):
        manager = LogManager(default_level=LogLevel.INFO)
        assert not manager.is_debug_enabled()

        manager.toggle_debug()
        assert manager.is_debug_enabled()
        assert manager.log_level == LogLevel.DEBUG

        manager.toggle_debug()
        assert not manager.is_debug_enabled()
        assert manager.log_level == LogLevel.INFO


class TestLogFile:
    """Saving the buffer to disk."""

    def test_save_log_to_file(self, tmp_path):
        manager = LogManager(log_directory=str(tmp_path / "logs"))
        manager.battle("Hero hits Goblin")
        manager.debug("hidden but saved")

        filepath = manager.save_log_to_file()

        assert filepath is not None
        assert os.path.basename(filepath).startswith("battle_")
        with open(filepath, encoding="utf-8") as f:
            content = f.read()
        assert "[BATTLE] Hero hits Goblin" in content
        assert "[DEBUG] hidden but saved" in content

    def test_save_empty_log(self, tmp_path):
        manager = LogManager(log_directory=str(tmp_path))
        filepath = manager.save_log_to_file()

        with open(filepath, encoding="utf-8") as f:
            assert "No messages to save." in f.read()

    def test_save_failure_returns_none(self, tmp_path):
        not_a_directory = tmp_path / "file.txt"
        not_a_directory.write_text("occupied")
        manager = LogManager(log_directory=str(not_a_directory))

        assert manager.save_log_to_file() is None
        errors = manager.get_messages(categories={LogCategory.ERROR})
        assert len(errors) == 1
