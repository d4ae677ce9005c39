"""Name/username helpers."""

from __future__ import annotations

import re
import unicodedata

SLUG_PATTERN = re.compile(r"^[a-z\d]+(?:[.\-_][a-z\d]+)*$")
NAME_PATTERN = re.compile(r"^[\w'.\s-]+$")
USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 106

_WORD = re.compile(r"\w\S*")


def format_name(name: str) -> str:
    """앞뒤 공백 제거, 연속 공백 축소, 단어 첫 글자 대문자화."""
    collapsed = re.sub(r"\s\s+", " ", name.strip().replace("\n", " "))
    return _WORD.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:], collapsed)


def point_slug(value: str) -> str:
    """점(.)으로 단어를 구분하는 소문자 slug.

    "John Doe" -> "john.doe"
    """
    ascii_value = (
        unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    )
    cleaned = re.sub(r"['_.\-]", "", ascii_value.lower())
    words = re.findall(r"[a-z\d]+", cleaned)
    return ".".join(words)


def is_valid_username(value: str) -> bool:
    """로그인 식별자로 쓸 수 있는 사용자명인지 확인."""
    return (
        USERNAME_MIN_LENGTH <= len(value) <= USERNAME_MAX_LENGTH
        and SLUG_PATTERN.match(value) is not None
    )
