import re
import gzip
import sys

from . import log
from .exception import FileParseError

_comment_pattern = r'^\s*([;#].*)?$'

def _open(filename):
    if filename.endswith(".gz"):
        return gzip.open(filename, 'rt', encoding="utf-8")
    return open(filename, 'r', encoding="utf-8")

def open_value_file(filename):
    if filename == '-':
        return ValueFile(sys.stdin, '<stdin>', close=False)
    return ValueFile(_open(filename), filename)

class ValueFile(object):
    """A text file holding one value per line.

    Blank lines and lines starting with ';' or '#' are skipped.
    """

    def __init__(self, f, filename, close=True):
        self.f = f
        self.filename = filename
        self._close = close

    def close(self):
        if self.f is not None:
            if self._close:
                self.f.close()
            self.f = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def reader(self, parse=str):
        log.info("reading values from ", self.filename)
        p_ignore = re.compile(_comment_pattern)
        n = 0
        i = 0
        try:
            for i, line in enumerate(self.f, start=1):
                if p_ignore.match(line):
                    continue
                text = line.strip()
                try:
                    value = parse(text)
                except ValueError as e:
                    raise FileParseError(self.filename, i,
                            "could not parse value `" + text + "': " + str(e))
                log.debug3("line ", i, ": ", repr(value))
                n += 1
                yield value
        except UnicodeDecodeError as e:
            # decoding happens ahead of the line split, i + 1 is approximate
            raise FileParseError(self.filename, i + 1,
                    "invalid encoding: " + str(e))
        log.debug1("read ", n, " values from ", self.filename)


def values_from_file(filename, parse=str):
    """Read all values from a file"""
    with open_value_file(filename) as vf:
        return list(vf.reader(parse))
