# jsondatafile
# (C) Dalton Serey - UFCG

import io
import os
import json
import logging

import yaml

from .datalist import JsonDataList
from .utils import to_unicode, to_json_tree, data2json, data2yaml

DEFAULT_INDENT = 2
YAML_EXTENSIONS = ('.yaml', '.yml')

log = logging.getLogger(__name__)


class CorruptedJsonFile(Exception):

    def __init__(self, filename, msg=None):
        self.filename = filename
        super().__init__(msg or "%s is corrupted" % filename)


class JsonDataFile(object):
    """
    A JSON object stored in a file. The file is read once at instantiation
    and rewritten entirely after each change.
    """

    def __init__(self, filename, strict=False, array2map=None, indent=DEFAULT_INDENT):
        self.__filename = os.path.expanduser(os.fspath(filename))
        self.strict = strict
        self.array2map = array2map
        self.indent = indent
        self.isyaml = self.__filename.endswith(YAML_EXTENSIONS)
        self.data = {}

        if os.path.exists(self.__filename):
            self.load()

        else:
            dirname = os.path.dirname(self.__filename)
            if dirname:
                os.makedirs(dirname, exist_ok=True)

            log.debug("creating %s", self.__filename)
            self.save()


    @property
    def filename(self):
        return self.__filename


    def __repr__(self):
        return "JsonDataFile(%r)" % self.__filename


    def __getitem__(self, key):
        return self.data[key]


    def __setitem__(self, key, value):
        self.add_or_replace(key, value)


    def __delitem__(self, key):
        if not self.remove(key):
            raise KeyError(key)


    def __contains__(self, key):
        return key in self.data


    def __iter__(self):
        return iter(list(self.data))


    def __len__(self):
        return len(self.data)


    def load(self):
        if not os.path.exists(self.__filename):
            self.data = {}
            return

        # actually read data from file system
        with io.open(self.__filename, mode='rb') as f:
            text = to_unicode(f.read())

        try:
            if self.isyaml:
                data = yaml.safe_load(text)
            else:
                data = json.loads(text) if text.strip() else None

            # yaml may yield dates and non-string keys, json may yield NaN
            data = to_json_tree(data)

        except (ValueError, TypeError, yaml.YAMLError) as e:
            self._discard("%s: %s" % (e.__class__.__name__, e))
            return

        if data is None:
            data = {}

        elif self.array2map and type(data) is list:
            data = {self.array2map: data}

        if type(data) is not dict:
            self._discard("root is %s, not an object" % type(data).__name__)
            return

        self.data = data
        log.debug("loaded %s (%d keys)", self.__filename, len(data))


    reload = load


    def _discard(self, reason):
        if self.strict:
            raise CorruptedJsonFile(self.__filename, "%s is corrupted (%s)" % (self.__filename, reason))

        log.warning("%s is corrupted, using empty object (%s)", self.__filename, reason)
        self.data = {}


    def save(self):
        if self.isyaml:
            text = data2yaml(self.data)
        else:
            text = data2json(self.data, indent=self.indent)

        with io.open(self.__filename, mode='w', encoding='utf-8') as f:
            f.write(text)

        log.debug("saved %s", self.__filename)


    def add_or_replace(self, key, value):
        if not isinstance(key, str):
            raise TypeError("key must be str, not %s" % type(key).__name__)

        self.data[key] = to_json_tree(value)
        self.save()


    def get(self, key, default=None):
        return self.data.get(key, default)


    def remove(self, key):
        if key not in self.data:
            return False

        del self.data[key]
        self.save()
        return True


    def list_keys(self):
        return set(self.data)


    def add_list(self, key):
        self.add_or_replace(key, [])
        return JsonDataList(self, key, [])


    def get_list(self, key):
        value = self.data.get(key)
        if type(value) is not list:
            return None

        return JsonDataList(self, key, value)


    def update_list(self, key, array):
        if not isinstance(array, (list, tuple)):
            raise TypeError("array must be a list, not %s" % type(array).__name__)

        self.add_or_replace(key, array)
