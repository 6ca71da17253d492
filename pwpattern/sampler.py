# Sampler
# (case transformation and distribution of characters over pools)
#

from random import SystemRandom

from .alphabet import approve, admissible

random = SystemRandom()

EQUAL = 'equal'
TOTAL = 'total'
MODES = (EQUAL, TOTAL)

AS_DRAWN = 'as_drawn'
FORCE_LOWER = 'lower'
FORCE_UPPER = 'upper'
RANDOM_CASE = 'random'


class GenerationError(RuntimeError):

    def __init__(self, msg):
        RuntimeError.__init__(self, msg)


class EmptyPoolError(GenerationError):

    def __init__(self, chars):
        GenerationError.__init__(
            self, f"No character from {chars!r} passes the active filters.")
        self.chars = chars


def random_case(ch: str) -> str:
    """Lowercase or uppercase `ch`, with equal probability."""
    if random.randrange(2):
        return ch.upper()
    return ch.lower()


def apply_case(ch: str, case_mode=AS_DRAWN) -> str:
    if case_mode == FORCE_LOWER:
        return ch.lower()
    if case_mode == FORCE_UPPER:
        return ch.upper()
    if case_mode == RANDOM_CASE:
        return random_case(ch)
    return ch


def case_variants(ch: str, case_mode=AS_DRAWN) -> tuple:
    """All characters `apply_case` can produce from `ch`."""
    if case_mode == RANDOM_CASE:
        return ch.lower(), ch.upper()
    return apply_case(ch, case_mode),


def check_pool(chars: str, avoid_similar=False, avoid_programming=False,
               case_mode=AS_DRAWN):
    """Raise EmptyPoolError if no draw from `chars` can pass the filters.

    Without this check, rejection sampling would never terminate.

    """
    variants = ''.join(v for ch in chars for v in case_variants(ch, case_mode))
    if not admissible(variants, avoid_similar, avoid_programming):
        raise EmptyPoolError(chars)


def draw(chars: str, avoid_similar=False, avoid_programming=False,
         case_mode=AS_DRAWN) -> str:
    """Draw one character uniformly from `chars`, redraw until admitted."""
    check_pool(chars, avoid_similar, avoid_programming, case_mode)
    return _draw(chars, avoid_similar, avoid_programming, case_mode)


def _draw(chars, avoid_similar, avoid_programming, case_mode=AS_DRAWN):
    while True:
        ch = apply_case(chars[random.randrange(len(chars))], case_mode)
        if approve(ch, avoid_similar, avoid_programming):
            return ch


class Sampler:

    """Draw characters from one or more alphabets.

    In `TOTAL` mode, alphabets are concatenated into a single pool.
    Duplicate characters are kept, so a character present in two alphabets
    is twice as likely as one present in a single alphabet.

    In `EQUAL` mode, an alphabet is chosen first (each with the same
    probability, regardless of its size), then a character from it.
    Rejected characters are redrawn from the same alphabet.

    """

    def __init__(self, alphabets, mode=EQUAL,
                 avoid_similar=False, avoid_programming=False):
        if mode not in MODES:
            raise ValueError(f"Unknown mode: {mode!r}")
        alphabets = tuple(alphabets)
        if not alphabets:
            raise ValueError("No alphabet selected.")
        self._mode = mode
        self._filters = (avoid_similar, avoid_programming)
        if mode == TOTAL:
            self._alphabets = (''.join(alphabets),)
        else:
            self._alphabets = alphabets
        for chars in self._alphabets:
            check_pool(chars, *self._filters)

    @property
    def mode(self):
        return self._mode

    @property
    def alphabets(self) -> tuple:
        return self._alphabets

    def draw(self) -> str:
        """Draw one admitted character."""
        if len(self._alphabets) == 1:
            chars = self._alphabets[0]
        else:
            chars = self._alphabets[random.randrange(len(self._alphabets))]
        return _draw(chars, *self._filters)

    def sample(self, length: int):
        """Generate `length` admitted characters."""
        for _ in range(length):
            yield self.draw()
