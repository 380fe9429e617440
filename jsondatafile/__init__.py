# jsondatafile
# (C) Dalton Serey - UFCG

"""
# usage

A JSON object kept in a file. The file is created (with its directories)
if it doesn't exist, read once at instantiation and rewritten, pretty
printed, after every change. Arrays stored under a key can be handled
through list handles. See the example below.

```
from jsondatafile import JsonDataFile

f = JsonDataFile('~/data/somefile.json')
f.add_or_replace('score', 42)
f.get('score') # 42
items = f.add_list('items')
items.append('a')
JsonDataFile('~/data/somefile.json').get_list('items').list() # ['a']
```
"""

from .datafile import JsonDataFile, CorruptedJsonFile, DEFAULT_INDENT
from .datalist import JsonDataList
