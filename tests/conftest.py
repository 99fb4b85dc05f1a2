"""Shared fixtures: a table-driven resolver standing in for pypinyin."""

import pytest

from pinyin_resolver import Resolution, ResolutionError


class FakeResolver:
    """Answers from ``table[(char, fmt.name)]``; an exception value is reported as a failure."""

    def __init__(self, table=None):
        self.table = dict(table or {})
        self.calls = []

    def resolve(self, char, fmt):
        self.calls.append((char, fmt.name))
        value = self.table.get((char, fmt.name), ())
        if isinstance(value, Exception):
            return Resolution(error=ResolutionError(char, fmt, value))
        if value is None:
            return Resolution(readings=None)
        return Resolution(readings=tuple(value))


def entry(char, with_tone, without_tone):
    return {(char, 'with_tone'): with_tone, (char, 'without_tone'): without_tone}


@pytest.fixture
def fake_resolver():
    table = {}
    table.update(entry('中', ['zhōng'], ['zhong']))
    table.update(entry('重', ['zhòng', 'chóng'], ['zhong', 'chong']))
    table.update(entry('乐', ['lè', 'lè', 'yuè'], ['le', 'le', 'yue']))
    table.update(entry('丁', ['dīng'], []))
    return FakeResolver(table)
