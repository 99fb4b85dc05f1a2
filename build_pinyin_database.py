"""
build pinyin database
生成汉字拼音库 (Unicode 0x4E00-0x9FFF), 输出为`pinyin_database.json`
包含带声调拼音(如 zhōng)和不带声调拼音(如 zhong)
"""
import argparse
import os
import sys

from tqdm import tqdm

from pinyin_database import build_database, check_range, save_database, START_CODEPOINT, END_CODEPOINT
from pinyin_resolver import PinyinResolver
from utils import load_yaml


DEFAULT_CONFIG = {
    'start': START_CODEPOINT,
    'end': END_CODEPOINT,
    'output_path': 'pinyin_database.json',
    'indent': 4,
    'progress_every': 1000,
}


def codepoint(value):
    return int(value, 0)


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument('--config', type=str, default='./config/database.yaml')
    parser.add_argument('--start', type=codepoint, default=None)
    parser.add_argument('--end', type=codepoint, default=None)
    parser.add_argument('--output_path', type=str, default=None)
    parser.add_argument('--indent', type=int, default=None)
    parser.add_argument('--progress_every', type=int, default=None)
    return parser, parser.parse_args(argv)


def load_config(args):
    config = dict(DEFAULT_CONFIG)
    if os.path.exists(args.config):
        loaded = load_yaml(args.config)
        if loaded is not None and not isinstance(loaded, dict):
            raise ValueError(f"config {args.config} must be a mapping, got {type(loaded).__name__}")
        config.update(loaded or {})
    for key in DEFAULT_CONFIG:
        value = getattr(args, key)
        if value is not None:
            config[key] = value
    # yaml gives plain ints for 0x4E00, but a quoted "0x4E00" stays a string
    for key in ('start', 'end'):
        if isinstance(config[key], str):
            config[key] = codepoint(config[key])
    return config


def main(argv=None):
    parser, args = parse_arguments(argv)
    try:
        config = load_config(args)
        start, end = config['start'], config['end']
        check_range(start, end)
    except ValueError as e:
        parser.error(str(e))
    if config['progress_every'] < 1:
        parser.error(f"progress_every must be positive, got {config['progress_every']}")
    output_path = os.path.abspath(config['output_path'])

    print(f"building pinyin database: U+{start:04X} - U+{end:04X}")
    print(f"output: {output_path}")

    p_bar = tqdm(total=end - start + 1, desc='building pinyin database')

    def report_progress(scanned, stats):
        p_bar.update(scanned - p_bar.n)
        p_bar.set_postfix(success=stats.success)

    def report_failure(failure):
        tqdm.write(f"failed to resolve {failure.char} (U+{ord(failure.char):04X}): {failure.error}", file=sys.stderr)

    with p_bar:
        database, stats = build_database(PinyinResolver(), start, end,
                                         progress=report_progress,
                                         progress_every=config['progress_every'],
                                         on_failure=report_failure)

    try:
        save_database(database, output_path, indent=config['indent'])
    except OSError as e:
        print(f"failed to write {output_path}: {e}", file=sys.stderr)
        return 1

    print(f"scanned: {stats.total}")
    print(f"records: {stats.success}")
    print(f"failures: {len(stats.failures)}")
    print(f"file size: {os.path.getsize(output_path) // 1024} KB")
    print(f"path: {output_path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
