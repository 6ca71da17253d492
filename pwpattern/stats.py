# Statistics
# (composition of generated passwords)
#

from collections import Counter

from .alphabet import LOWER, UPPER, DIGITS, SYMBOLS

BUCKETS = (
    ('lowercase', LOWER),
    ('uppercase', UPPER),
    ('numeric', DIGITS),
    ('symbol', SYMBOLS),
)


def classify(ch: str):
    """Return name of the bucket for `ch`, or None."""
    for name, chars in BUCKETS:
        if ch in chars:
            return name
    return None


class Statistics:

    """Count characters by class.

    Characters outside of the tracked classes are counted
    only in `total`.

    """

    def __init__(self, text=''):
        self._counter = Counter()
        self._total = 0
        self.update(text)

    def __getitem__(self, bucket):
        return self._counter[bucket]

    def __repr__(self):
        a = ('{}={}'.format(name, self[name]) for name, _ in BUCKETS)
        return "{}({})".format(self.__class__.__name__, ', '.join(a))

    @property
    def total(self) -> int:
        return self._total

    def add(self, ch: str):
        self._total += 1
        bucket = classify(ch)
        if bucket:
            self._counter[bucket] += 1

    def update(self, text: str):
        for ch in text:
            self.add(ch)

    def percentages(self) -> dict:
        if not self._total:
            return {name: 0.0 for name, _ in BUCKETS}
        return {name: 100.0 * self[name] / self._total for name, _ in BUCKETS}


def format_report(stats: Statistics, term=None) -> list:
    """Format `stats` as report lines, highlighted by `term` (blessed)."""
    lines = []
    for name, percent in stats.percentages().items():
        label = name.capitalize().ljust(10)
        value = f"{percent:5.1f} %  ({stats[name]}/{stats.total})"
        if term is not None:
            label = term.bold(label)
            value = term.green(value) if stats[name] else term.yellow(value)
        lines.append(label + value)
    return lines
