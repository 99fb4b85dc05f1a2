import json
import os
import tempfile

import yaml


def load_yaml(path):
    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f)


def load_json(path):
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def dump_json_atomic(obj, path, indent=4):
    """
    写入JSON文件, 先写到同目录的临时文件再替换, 写入失败时不会留下半个文件
    :param obj: 可序列化对象, 中文和声调字符原样写出, 不转义
    :param path: 目标路径
    :param indent: 缩进, None表示紧凑格式
    """
    directory = os.path.dirname(os.path.abspath(path))
    # mkstemp creates 0600, the published file gets the mode open() would give it
    umask = os.umask(0)
    os.umask(umask)
    fd, tmp_path = tempfile.mkstemp(prefix='.', suffix='.tmp', dir=directory)
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            json.dump(obj, f, ensure_ascii=False, indent=indent)
            f.write('\n')
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_path, 0o666 & ~umask)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
