from collections import OrderedDict
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple

from pinyin_resolver import PinyinFormat, Resolution, WITH_TONE, WITHOUT_TONE
from utils import dump_json_atomic, load_json


# CJK Unified Ideographs
START_CODEPOINT = 0x4E00
END_CODEPOINT = 0x9FFF


class PinyinRecord(NamedTuple):
    with_tone: Tuple[str, ...]
    without_tone: Tuple[str, ...]

    def to_json(self) -> Dict[str, List[str]]:
        return {'withTone': list(self.with_tone), 'withoutTone': list(self.without_tone)}

    @classmethod
    def from_json(cls, obj):
        return cls(tuple(obj['withTone']), tuple(obj['withoutTone']))


class LookupFailure(NamedTuple):
    char: str
    error: Exception


class BuildStats:
    def __init__(self, total: int):
        self.total = total
        self.success = 0
        self.failures: List[LookupFailure] = []

    def __repr__(self):
        return f"BuildStats(total={self.total}, success={self.success}, failures={len(self.failures)})"


def unique_pinyins(char: str, fmt: PinyinFormat, resolver) -> Resolution:
    """获取汉字在某种格式下去重后的拼音, 保留第一次出现的顺序"""
    resolution = resolver.resolve(char, fmt)
    if resolution.failed:
        return resolution
    return resolution._replace(readings=tuple(OrderedDict.fromkeys(resolution.readings or ())))


def build_record(char: str, resolver, with_tone_format: PinyinFormat = WITH_TONE,
                 without_tone_format: PinyinFormat = WITHOUT_TONE) -> Tuple[Optional[PinyinRecord], Optional[Exception]]:
    """
    :return: (record, None) for a character with readings in both formats,
             (None, None) when either side is empty,
             (None, error) when the resolver failed.
    """
    with_tone = unique_pinyins(char, with_tone_format, resolver)
    if with_tone.failed:
        return None, with_tone.error
    without_tone = unique_pinyins(char, without_tone_format, resolver)
    if without_tone.failed:
        return None, without_tone.error

    if not with_tone.readings or not without_tone.readings:
        return None, None
    return PinyinRecord(with_tone.readings, without_tone.readings), None


def check_range(start: int, end: int) -> None:
    if not START_CODEPOINT <= start <= end <= END_CODEPOINT:
        raise ValueError(f"invalid range {start:#x}-{end:#x}, "
                         f"must lie within {START_CODEPOINT:#x}-{END_CODEPOINT:#x}")


def build_database(resolver, start: int = START_CODEPOINT, end: int = END_CODEPOINT, *,
                   progress: Optional[Callable[[int, BuildStats], None]] = None, progress_every: int = 1000,
                   on_failure: Optional[Callable[[LookupFailure], None]] = None,
                   with_tone_format: PinyinFormat = WITH_TONE,
                   without_tone_format: PinyinFormat = WITHOUT_TONE) -> Tuple['OrderedDict[str, PinyinRecord]', BuildStats]:
    """
    Scan code points start..end (inclusive) in ascending order and collect a record for every
    character that has readings in both formats.

    A failed lookup skips that character only; it is kept in ``stats.failures`` and passed to
    ``on_failure``. ``progress(scanned, stats)`` is called every ``progress_every`` code points
    and once more after the last one.
    """
    check_range(start, end)
    if progress_every < 1:
        raise ValueError(f"progress_every must be positive, got {progress_every}")

    database = OrderedDict()
    stats = BuildStats(total=end - start + 1)
    for scanned, codepoint in enumerate(range(start, end + 1), 1):
        char = chr(codepoint)
        record, error = build_record(char, resolver, with_tone_format, without_tone_format)
        if error is not None:
            failure = LookupFailure(char, error)
            stats.failures.append(failure)
            if on_failure is not None:
                on_failure(failure)
        elif record is not None:
            database[char] = record
            stats.success += 1

        if progress is not None and (scanned % progress_every == 0 or scanned == stats.total):
            progress(scanned, stats)
    return database, stats


def to_json(database) -> 'OrderedDict[str, Dict[str, List[str]]]':
    return OrderedDict((char, record.to_json()) for char, record in database.items())


def save_database(database, path, indent=4):
    dump_json_atomic(to_json(database), path, indent=indent)


def load_database(path) -> 'OrderedDict[str, PinyinRecord]':
    data = load_json(path)
    return OrderedDict((char, PinyinRecord.from_json(obj)) for char, obj in data.items())
