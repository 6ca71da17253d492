# pwgen
# (random password generator)
#

from typing import NamedTuple

from .alphabet import STANDARD_ALPHABETS
from .sampler import Sampler, GenerationError, EQUAL, TOTAL, MODES
from .template import interpret
from .stats import Statistics
from .phonetic import to_phonetic

DEFAULT_LENGTH = 16
DEFAULT_COUNT = 10
DEFAULT_ALPHABETS = ('lower', 'upper', 'digit')

# Letters selecting standard alphabets (CLI, config, shell)
ALPHABET_LETTERS = dict(zip('luds', STANDARD_ALPHABETS))


class ConfigurationError(GenerationError):
    pass


class GenerationRequest(NamedTuple):

    """Parameters of a single generation.

    When `template` is given, it takes precedence, `length`, `mode`
    and `alphabets` are not used. Otherwise non-empty `custom_pool`
    overrides `alphabets` and `mode` (always sampled as total).

    """

    length: int = DEFAULT_LENGTH
    mode: str = EQUAL
    alphabets: tuple = DEFAULT_ALPHABETS
    custom_pool: str = ''
    template: str = None
    avoid_similar: bool = False
    avoid_programming: bool = False
    phonetic: bool = False


class GenerationResult(NamedTuple):
    password: str
    text: str
    stats: Statistics

    def __str__(self):
        return self.text


def parse_alphabets(letters: str) -> tuple:
    """Convert letters like 'luds' to standard alphabet names."""
    try:
        return tuple(ALPHABET_LETTERS[c] for c in letters)
    except KeyError as e:
        raise ConfigurationError(
            f"Unknown alphabet letter {e.args[0]!r} "
            f"(use some of {''.join(ALPHABET_LETTERS)!r})")


def unique_chars(chars) -> str:
    """Remove repeated characters, keep order of first occurrence."""
    return ''.join(dict.fromkeys(chars))


def _check_length(length):
    if length < 0:
        raise ConfigurationError(f"Invalid length: {length}")


def _finish(chars, phonetic) -> GenerationResult:
    stats = Statistics()
    password = []
    for ch in chars:
        stats.add(ch)
        password.append(ch)
    password = ''.join(password)
    text = to_phonetic(password) if phonetic else password
    return GenerationResult(password, text, stats)


def generate_standard(length: int = DEFAULT_LENGTH, mode: str = EQUAL,
                      lower=True, upper=True, digit=True, symbol=False,
                      avoid_similar=False, avoid_programming=False,
                      phonetic=False) -> GenerationResult:
    """Generate password from selected standard alphabets.

    :param length: Number of characters
    :param mode: EQUAL (each alphabet equally likely) or TOTAL
                 (each character equally likely)
    :param lower: Use lowercase letters
    :param upper: Use uppercase letters
    :param digit: Use digits
    :param symbol: Use symbols
    :param avoid_similar: Skip characters which look similar (1, l, I, O, 0...)
    :param avoid_programming: Skip characters with special meaning in code
    :param phonetic: Also spell the password with NATO phonetic alphabet
    :returns: GenerationResult

    """
    flags = {'lower': lower, 'upper': upper, 'digit': digit, 'symbol': symbol}
    alphabets = tuple(name for name in STANDARD_ALPHABETS if flags[name])
    return generate(GenerationRequest(
        length=length, mode=mode, alphabets=alphabets,
        avoid_similar=avoid_similar, avoid_programming=avoid_programming,
        phonetic=phonetic))


def generate_custom(custom_pool: str, length: int = DEFAULT_LENGTH,
                    avoid_similar=False, avoid_programming=False,
                    phonetic=False) -> GenerationResult:
    """Generate password from characters in `custom_pool`.

    Each distinct character has the same probability,
    repeating a character in `custom_pool` has no effect.

    """
    if not custom_pool:
        raise ConfigurationError("Invalid combination of parameters: "
                                 "empty custom pool.")
    return generate(GenerationRequest(
        length=length, mode=TOTAL, custom_pool=custom_pool,
        avoid_similar=avoid_similar, avoid_programming=avoid_programming,
        phonetic=phonetic))


def generate_template(template: str, avoid_similar=False,
                      avoid_programming=False, phonetic=False) -> GenerationResult:
    """Generate password according to `template`. See `template` module."""
    return generate(GenerationRequest(
        template=template,
        avoid_similar=avoid_similar, avoid_programming=avoid_programming,
        phonetic=phonetic))


def make_sampler(request: GenerationRequest) -> Sampler:
    """Prepare Sampler for a standard or custom pool request."""
    if request.custom_pool:
        return Sampler([unique_chars(request.custom_pool)], TOTAL,
                       request.avoid_similar, request.avoid_programming)
    if request.mode not in MODES:
        raise ConfigurationError(f"Unknown mode: {request.mode!r}")
    unknown = set(request.alphabets) - set(STANDARD_ALPHABETS)
    if unknown:
        raise ConfigurationError(f"Unknown alphabet: {', '.join(sorted(unknown))}")
    if not request.alphabets:
        raise ConfigurationError("Invalid combination of parameters: "
                                 "no alphabet selected.")
    alphabets = [STANDARD_ALPHABETS[name] for name in dict.fromkeys(request.alphabets)]
    return Sampler(alphabets, request.mode,
                   request.avoid_similar, request.avoid_programming)


def generate(request: GenerationRequest) -> GenerationResult:
    """Generate one password as described by `request`."""
    if request.template is not None:
        chars = interpret(request.template,
                          request.avoid_similar, request.avoid_programming)
    else:
        _check_length(request.length)
        chars = make_sampler(request).sample(request.length)
    return _finish(chars, request.phonetic)


def generate_many(request: GenerationRequest, count: int = DEFAULT_COUNT) -> list:
    if count < 0:
        raise ConfigurationError(f"Invalid count: {count}")
    return [generate(request) for _ in range(count)]
