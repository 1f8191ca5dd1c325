"""UI configuration constants.

Centralizes copy and configuration values for the UI module.
"""


class LogLevel:
    """Log level constants with numeric values for comparison.

    Standard logging hierarchy: DEBUG < INFO < WARNING < ERROR
    Lower numeric value = more verbose (shows more messages).
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls._from_string.get(level_str.lower(), cls.DEBUG)


# Window copy
APP_TITLE = "村山相談室"
APP_SUB_TITLE = "完結しない村の哲学を体現した相談室"

# Input copy
INPUT_PLACEHOLDER = "何か気になってることとか、話したいことあります？"
INPUT_HINT = "Enterで送信 / Shift+Enterで改行"

# Keys that insert a literal newline in the draft
NEWLINE_KEYS = ("shift+enter", "ctrl+j")

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"

# Chat display configuration
TURN_TIMESTAMP_FORMAT = "%H:%M"
