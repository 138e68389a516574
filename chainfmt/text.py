"""
Text helpers for chat/markdown output.
"""

import re

# Characters Telegram MarkdownV2 rejects unescaped in our messages
_MARKDOWN_SPECIAL = re.compile(r"([\\.\[\]()])")

# Pictographic emoji blocks plus the joiner and variation selector
_EMOJI = re.compile(
    "["
    "\U0001F000-\U0001FAFF"  # mahjong .. symbols & pictographs extended-A
    "\U00002600-\U000027BF"  # misc symbols, dingbats
    "\U00002B00-\U00002BFF"  # arrows, stars
    "\U0000231A-\U0000231B"
    "\U000023E9-\U000023FA"
    "\U0000200D"  # zero width joiner
    "\U0000FE0F"  # variation selector-16
    "\U000020E3"  # combining keycap
    "]"
)


def escape_markdown_v2(text: str) -> str:
    """
    Escape text for Telegram MarkdownV2 and strip emoji.

    Backslashes, periods, brackets and parentheses get a leading backslash.
    """
    if text is None:
        return ""
    cleaned = _EMOJI.sub("", str(text))
    return _MARKDOWN_SPECIAL.sub(r"\\\1", cleaned)
