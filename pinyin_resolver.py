"""
look up the pinyin readings of a single hanzi with pypinyin
"""
from typing import NamedTuple, Optional, Tuple

from pypinyin import pinyin, Style


# ü is written as the digraph "u:", a toned ü keeps its tone mark on the u
U_COLON = {
    'ü': 'u:',
    'ǖ': 'ū:',
    'ǘ': 'ú:',
    'ǚ': 'ǔ:',
    'ǜ': 'ù:',
}


class PinyinFormat(NamedTuple):
    """拼音输出格式 (小写, ü 用 u: 表示)"""
    name: str
    style: Style


WITH_TONE = PinyinFormat('with_tone', Style.TONE)
WITHOUT_TONE = PinyinFormat('without_tone', Style.NORMAL)


class ResolutionError(LookupError):
    def __init__(self, char: str, fmt: PinyinFormat, cause: Exception):
        super().__init__(f"{char} ({fmt.name}): {cause!r}")
        self.char = char
        self.fmt = fmt
        self.cause = cause


class Resolution(NamedTuple):
    """
    Outcome of one lookup: readings found (possibly none), or the error that stopped the lookup.
    """
    readings: Tuple[str, ...] = ()
    error: Optional[ResolutionError] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


def replace_v(reading: str) -> str:
    return ''.join(U_COLON.get(c, c) for c in reading)


class PinyinResolver:
    def lookup(self, char: str, fmt: PinyinFormat):
        # errors='ignore' gives [] for characters pypinyin has no data for
        result = pinyin(char, style=fmt.style, heteronym=True, errors='ignore', v_to_u=True)
        return [replace_v(py.lower()) for item in result for py in item if py]

    def resolve(self, char: str, fmt: PinyinFormat) -> Resolution:
        try:
            readings = self.lookup(char, fmt)
        except Exception as e:
            error = ResolutionError(char, fmt, e)
            error.__cause__ = e
            return Resolution(error=error)
        return Resolution(readings=tuple(readings))
