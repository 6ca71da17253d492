import re
from inspect import currentframe


class Expect:

    def __init__(self, expected, regex=False):
        """Match stdout against `expected`
        :param expected: Expected output
        :param regex: Match string as regex. Default is verbatim.
        """
        self._lineno = currentframe().f_back.f_lineno
        self._expected = expected
        self._regex = regex

    def __repr__(self):
        return f"line {self._lineno}: {self.__class__.__name__}({self._expected!r})"

    def __getattr__(self, item):
        raise AttributeError(f"{self!r}: unknown method '{item}'")

    def expect(self, actual):
        if self._regex:
            assert re.fullmatch(self._expected, actual) is not None, \
                f"{repr(self)}, actual={actual!r}"
            return ''
        assert actual[:len(self._expected)] == self._expected, \
            f"{repr(self)}, actual={actual!r}"
        return actual[len(self._expected):]


class ExpectCopy:

    def __init__(self, expected: str, regex=False):
        """Match clipboard (copy command) against `expected`"""
        self._lineno = currentframe().f_back.f_lineno
        self._expected = expected
        self._regex = regex

    def __repr__(self):
        return f"line {self._lineno}: {self.__class__.__name__}({self._expected!r})"

    def __getattr__(self, item):
        raise AttributeError(f"{self!r}: unknown method '{item}'")

    def expect_copy(self, clipboard):
        if self._regex:
            assert re.fullmatch(self._expected, clipboard) is not None, repr(self)
        else:
            assert clipboard == self._expected, repr(self)


class Send:

    def __init__(self, text):
        self._text = text

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self._text)

    def __getattr__(self, item):
        raise AttributeError(f"{self!r}: unknown method '{item}'")

    def send(self):
        return self._text
