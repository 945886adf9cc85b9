"""
Log management for battle resolution.

This module provides centralized logging with categorization, filtering,
and a bounded in-memory buffer. Nothing here feeds back into battle state:
the log is a diagnostic trail next to the authoritative event list.
"""
import os
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Iterable, Optional


class LogCategory(Enum):
    """Categories for log messages."""
    SYSTEM = auto()     # Engine setup, configuration
    BATTLE = auto()     # Attack rolls, damage, deaths, combat end
    MOVEMENT = auto()   # Combatant movement
    TURN = auto()       # Turn hand-off and round changes
    DEBUG = auto()      # Debug messages
    WARNING = auto()    # Rejected commands
    ERROR = auto()      # Error messages


CATEGORY_TAGS = {
    LogCategory.SYSTEM: "SYS",
    LogCategory.BATTLE: "BTL",
    LogCategory.MOVEMENT: "MOV",
    LogCategory.TURN: "TRN",
    LogCategory.DEBUG: "DBG",
    LogCategory.WARNING: "WRN",
    LogCategory.ERROR: "ERR",
}


@dataclass
class LogMessage:
    """A single log message with metadata."""
    text: str
    category: LogCategory
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self, include_timestamp: bool = False, include_category: bool = True) -> str:
        """Format the message for display."""
        parts = []

        if include_timestamp:
            time_str = self.timestamp.strftime("%H:%M:%S")
            parts.append(f"[{time_str}]")

        if include_category:
            tag = CATEGORY_TAGS.get(self.category, "???")
            parts.append(f"[{tag}]")

        parts.append(self.text)
        return " ".join(parts)


class LogLevel(Enum):
    """Log levels for filtering."""
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


class LogManager:
    """Manages battle logging with categorization and filtering."""

    def __init__(
        self,
        max_messages: int = 1000,
        default_level: LogLevel = LogLevel.INFO,
        enabled_categories: Optional[Iterable[LogCategory]] = None,
        log_directory: str = "logs",
    ):
        """Initialize the log manager.

        Args:
            max_messages: Maximum number of messages to store in the buffer
            default_level: Default log level for filtering
            enabled_categories: Categories shown by get_messages (None for all)
            log_directory: Directory save_log_to_file writes into
        """
        self.messages: deque[LogMessage] = deque(maxlen=max_messages)
        self.log_level = default_level
        self.enabled_categories = set(enabled_categories) if enabled_categories is not None else set(LogCategory)
        self.log_directory = log_directory

        # Category-specific log level mappings
        self.category_levels = {
            LogCategory.DEBUG: LogLevel.DEBUG,
            LogCategory.WARNING: LogLevel.WARNING,
            LogCategory.ERROR: LogLevel.ERROR,
            # SYSTEM, BATTLE, MOVEMENT, TURN default to INFO
        }

    def log(self, text: str, category: LogCategory = LogCategory.SYSTEM) -> None:
        """Add a message to the log.

        Messages are always buffered; filtering happens when reading.
        """
        self.messages.append(LogMessage(text=text, category=category))

    # Convenience methods for common categories
    def system(self, text: str) -> None:
        self.log(text, LogCategory.SYSTEM)

    def battle(self, text: str) -> None:
        self.log(text, LogCategory.BATTLE)

    def movement(self, text: str) -> None:
        self.log(text, LogCategory.MOVEMENT)

    def turn(self, text: str) -> None:
        self.log(text, LogCategory.TURN)

    def debug(self, text: str) -> None:
        self.log(text, LogCategory.DEBUG)

    def warning(self, text: str) -> None:
        self.log(text, LogCategory.WARNING)

    def error(self, text: str) -> None:
        self.log(text, LogCategory.ERROR)

    def get_messages(self, count: Optional[int] = None,
                     categories: Optional[set[LogCategory]] = None) -> list[LogMessage]:
        """Get recent messages, optionally filtered by category.

        Args:
            count: Maximum number of messages to return (None for all)
            categories: Set of categories to include (None for all enabled)

        Returns:
            List of recent messages, oldest first
        """
        if categories:
            filtered = [msg for msg in self.messages
                        if msg.category in categories and msg.category in self.enabled_categories]
        else:
            filtered = []
            for msg in self.messages:
                if msg.category not in self.enabled_categories:
                    continue

                message_level = self.category_levels.get(msg.category, LogLevel.INFO)
                if message_level.value < self.log_level.value:
                    continue

                filtered.append(msg)

        if count is not None and count < len(filtered):
            return filtered[-count:]
        return filtered

    def clear(self) -> None:
        """Clear all messages from the log."""
        self.messages.clear()

    def enable_category(self, category: LogCategory) -> None:
        self.enabled_categories.add(category)

    def disable_category(self, category: LogCategory) -> None:
        self.enabled_categories.discard(category)

    def set_log_level(self, level: LogLevel) -> None:
        """Set the minimum log level."""
        self.log_level = level

    def is_debug_enabled(self) -> bool:
        """Check if debug messages are currently enabled."""
        return (LogCategory.DEBUG in self.enabled_categories and
                self.log_level == LogLevel.DEBUG)

    def toggle_debug(self) -> None:
        """Toggle debug message visibility."""
        if self.is_debug_enabled():
            self.disable_category(LogCategory.DEBUG)
            self.set_log_level(LogLevel.INFO)
        else:
            self.enable_category(LogCategory.DEBUG)
            self.set_log_level(LogLevel.DEBUG)

    def save_log_to_file(self) -> Optional[str]:
        """Save all buffered messages to a timestamped log file.

        Returns:
            Path of the written file, or None if writing failed
        """
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = os.path.join(self.log_directory, f"battle_{timestamp}.log")

        try:
            os.makedirs(self.log_directory, exist_ok=True)
            with open(filepath, 'w', encoding='utf-8') as f:
                f.write("Skirmish - Battle Log\n")
                f.write(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
                f.write("=" * 60 + "\n\n")

                if not self.messages:
                    f.write("No messages to save.\n")

                # Save every buffered message, ignoring the current filters
                for msg in self.messages:
                    timestamp_str = msg.timestamp.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
                    f.write(f"[{timestamp_str}] [{msg.category.name}] {msg.text}\n")
        except OSError as e:
            self.error(f"Failed to save log file: {e}")
            return None

        self.system(f"Battle log saved to {filepath}")
        return filepath
