# jsondatafile
# (C) Dalton Serey - UFCG

from .utils import to_json_tree, json_equal


class JsonDataList(object):
    """
    View on the array stored under one key of a JsonDataFile. Every change
    is written back through the owning file, which saves it immediately.
    Handles are obtained with JsonDataFile.add_list and get_list.
    """

    def __init__(self, datafile, name, items):
        self.datafile = datafile
        self.name = name
        self.items = list(items)


    def __repr__(self):
        return "JsonDataList(%r, %r)" % (self.datafile.filename, self.name)


    def __len__(self):
        return len(self.items)


    def __iter__(self):
        return iter(list(self.items))


    def __getitem__(self, index):
        return self.items[index]


    def __contains__(self, value):
        try:
            return self._index(value) is not None

        except (TypeError, ValueError):
            return False


    def _index(self, value):
        value = to_json_tree(value)
        for i, item in enumerate(self.items):
            if json_equal(item, value):
                return i

        return None


    def _update(self):
        self.datafile.update_list(self.name, self.items)


    def list(self):
        return list(self.items)


    def get(self, index):
        return self.items[index]


    def append(self, value):
        self.items.append(to_json_tree(value))
        self._update()


    def remove_at(self, index):
        value = self.items.pop(index)
        self._update()
        return value


    def remove_value(self, value):
        index = self._index(value)
        if index is None:
            return False

        self.items.pop(index)
        self._update()
        return True
