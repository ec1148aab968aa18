"""Pattern objects for the date and time shapes found in shift messages.

Each shape is a small dedicated pattern; extractors try them in a fixed
priority order and the first usable hit wins. Horizontal whitespace only
(`[^\\S\\n]`) so a pattern never glues tokens from different lines.
"""

from __future__ import annotations

import re

_HSPACE = r"[^\S\n]*"

# Bare hour or H:MM / H.MM, never a fragment of a longer number or date
TIME_TOKEN = r"\d{1,2}(?:[:.]\d{2})?"

# Optional "from" prefix: Ukrainian/Russian "з"/"с", Latin lookalike "c"
_FROM_PREFIX = rf"(?:(?<!\w)[зсc]{_HSPACE})?"

DATE_DOTTED = re.compile(
    r"(?<![\d./])(\d{1,2})[./](\d{1,2})(?:[./](\d{2,4}))?(?!\d)"
    rf"(?:{_HSPACE}\([^)\n]*\))?",
)

DATE_ISO = re.compile(r"(?<!\d)(\d{4})-(\d{1,2})-(\d{1,2})(?!\d)")

TIME_FOUR_PARTS = re.compile(
    rf"(?<![\d.:])(\d{{1,2}}[:.]\d{{2}}){_HSPACE}(?:[-:.]{_HSPACE})?(\d{{1,2}}[:.]\d{{2}})(?![\d])",
)

TIME_RANGE = re.compile(
    rf"{_FROM_PREFIX}(?<![\d./:])(?P<start>{TIME_TOKEN})?{_HSPACE}[-–—]{_HSPACE}(?P<end>{TIME_TOKEN})?(?![\d])",
    re.IGNORECASE,
)

TIME_FROM_TO = re.compile(
    rf"{_FROM_PREFIX}(?<![\d./:])(?P<start>{TIME_TOKEN})?{_HSPACE}\b(?:до|to|по|till)\b{_HSPACE}(?P<end>{TIME_TOKEN})?(?![\d])",
    re.IGNORECASE,
)

CLOCK_TIME = re.compile(r"(?<![\d.:/])(\d{1,2}:\d{2})(?![\d:])")

# Letters plus inner apostrophes/hyphens ("Мар'яна", "Анна-Марія")
NAME_WORD = re.compile(r"[^\W\d_]+(?:['’ʼ-][^\W\d_]+)*")

DIGIT = re.compile(r"\d")

# Patterns blanked out of a line before deciding what is left is a place
DATE_PATTERNS = (DATE_DOTTED, DATE_ISO)
TIME_PATTERNS = (TIME_FOUR_PARTS, TIME_RANGE, TIME_FROM_TO, CLOCK_TIME)


def blank_matches(text: str, pattern: re.Pattern[str]) -> str:
    """Replace every match that carries a digit with a single space.

    Repeats until nothing changes: in "- 18-23" the first pass takes "- 18"
    and leaves "-23" for the next one.
    """

    def _replace(match: re.Match[str]) -> str:
        return " " if DIGIT.search(match.group(0)) else match.group(0)

    blanked = pattern.sub(_replace, text)
    while blanked != text:
        text = blanked
        blanked = pattern.sub(_replace, text)
    return blanked
