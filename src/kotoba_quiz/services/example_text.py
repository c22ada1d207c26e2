"""Helpers for example sentences stored with inline markup."""

import html
import re
from typing import List, Optional

_BREAK_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")
# Dialogue examples start lines with a speaker label such as "A：" or "B:"
_SPEAKER_RE = re.compile(r"^\s*[A-ZＡ-Ｚ]\s*[:：]\s*")
# Readings given in parentheses after kanji, e.g. 駅(えき)
_READING_RE = re.compile(r"[（(][ぁ-んァ-ンー]+[）)]")


def example_lines(example: Optional[str]) -> List[str]:
    """Split an example into display lines, dropping markup."""
    if not example:
        return []
    text = _BREAK_RE.sub("\n", example)
    text = html.unescape(_TAG_RE.sub("", text))
    return [line.strip() for line in text.splitlines() if line.strip()]


def speech_text_from_example(example: Optional[str]) -> str:
    """Japanese text of an example, ready for the speech engine."""
    lines = []
    for line in example_lines(example):
        line = _SPEAKER_RE.sub("", line)
        line = _READING_RE.sub("", line)
        if line:
            lines.append(line)
    return " ".join(lines)
