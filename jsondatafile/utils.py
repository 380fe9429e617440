# jsondatafile
# (C) Dalton Serey - UFCG

import json
import math
import yaml


def to_unicode(obj, encoding='utf-8-sig'):
    if isinstance(obj, str):
        return obj

    for encoding in [encoding, 'latin1']:
        try:
            obj = str(obj, encoding)
            return obj
        except UnicodeDecodeError:
            pass

    assert False, "jsondatafile: non-recognized encoding"


def date_handler(obj):
    if hasattr(obj, 'isoformat'):
        return obj.isoformat()
    elif hasattr(obj, 'email'):
        return obj.email()

    raise TypeError("%s is not JSON serializable" % type(obj).__name__)


def to_json_tree(value):
    """
    Return a copy of value made only of dicts, lists, strings, numbers,
    booleans and None. Tuples become lists, dates become ISO strings.
    """
    if value is None or isinstance(value, bool):
        return value

    if isinstance(value, int):
        return int(value)

    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError("%r is not a valid JSON number" % value)
        return float(value)

    if isinstance(value, str):
        return str(value)

    if isinstance(value, dict):
        tree = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError("keys must be str, not %s" % type(key).__name__)
            tree[str(key)] = to_json_tree(item)
        return tree

    if isinstance(value, (list, tuple)):
        return [to_json_tree(item) for item in value]

    return date_handler(value)


def json_equal(a, b):
    # true and 1, or 1 and 1.0, are different JSON values
    if type(a) is not type(b):
        return False

    if type(a) is list:
        return len(a) == len(b) and all(json_equal(x, y) for x, y in zip(a, b))

    if type(a) is dict:
        return a.keys() == b.keys() and all(json_equal(a[k], b[k]) for k in a)

    return a == b


def data2json(data, indent=2):
    return json.dumps(
        data,
        indent=indent,
        separators=(',', ': '),
        ensure_ascii=False,
        allow_nan=False) + '\n'


def data2yaml(data):
    return yaml.safe_dump(
        data,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False)
