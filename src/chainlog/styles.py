from __future__ import annotations

from enum import Enum

from chainlog.levels import Severity


class Style(str, Enum):
    # modifiers
    RESET = "\x1b[0m"
    BRIGHT = "\x1b[1m"
    DIM = "\x1b[2m"
    UNDERSCORE = "\x1b[4m"
    BLINK = "\x1b[5m"
    REVERSE = "\x1b[7m"
    HIDDEN = "\x1b[8m"

    # foreground
    FG_BLACK = "\x1b[30m"
    FG_RED = "\x1b[31m"
    FG_GREEN = "\x1b[32m"
    FG_YELLOW = "\x1b[33m"
    FG_BLUE = "\x1b[34m"
    FG_MAGENTA = "\x1b[35m"
    FG_CYAN = "\x1b[36m"
    FG_WHITE = "\x1b[37m"
    FG_GRAY = "\x1b[90m"

    # background
    BG_BLACK = "\x1b[40m"
    BG_RED = "\x1b[41m"
    BG_GREEN = "\x1b[42m"
    BG_YELLOW = "\x1b[43m"
    BG_BLUE = "\x1b[44m"
    BG_MAGENTA = "\x1b[45m"
    BG_CYAN = "\x1b[46m"
    BG_WHITE = "\x1b[47m"
    BG_GRAY = "\x1b[100m"

    def __str__(self) -> str:
        return self.value


LEVEL_STYLES: dict[Severity, tuple[Style, Style]] = {
    Severity.SILLY: (Style.FG_GRAY, Style.BG_BLACK),
    Severity.TRACE: (Style.FG_WHITE, Style.BG_BLACK),
    Severity.DEBUG: (Style.FG_BLUE, Style.BG_BLACK),
    Severity.VERBOSE: (Style.FG_MAGENTA, Style.BG_BLACK),
    Severity.INFO: (Style.FG_CYAN, Style.BG_BLACK),
    Severity.HTTP: (Style.FG_MAGENTA, Style.BG_BLACK),
    Severity.SUCCESS: (Style.FG_GREEN, Style.BG_BLACK),
    Severity.WARN: (Style.FG_YELLOW, Style.BG_BLACK),
    Severity.ERROR: (Style.FG_RED, Style.BG_BLACK),
    Severity.FATAL: (Style.FG_WHITE, Style.BG_RED),
}

TIMER_OK_STYLE = (Style.FG_GREEN, Style.BG_BLACK)
TIMER_MISSING_STYLE = (Style.FG_RED, Style.BG_BLACK)

# generic log() has no fixed colors
PLAIN_STYLE = (Style.RESET, Style.RESET)


__all__ = ["LEVEL_STYLES", "PLAIN_STYLE", "Style", "TIMER_MISSING_STYLE", "TIMER_OK_STYLE"]
