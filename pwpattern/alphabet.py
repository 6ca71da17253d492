# Alphabet registry
# (named character pools and filter sets)
#

import string

LOWER = string.ascii_lowercase
UPPER = string.ascii_uppercase
DIGITS = string.digits
HEX = string.digits + 'ABCDEF'
OCTAL = string.octdigits
BINARY = '01'
VOWELS = 'aeiouy'
CONSONANTS = ''.join(c for c in LOWER if c not in VOWELS)
SYMBOLS = '§|!"@#£¤$%€&/{([)]=}\\`´¨^~\'*<>,;.:-_'

# Derived unions
ALNUM = LOWER + DIGITS
ANY = LOWER + DIGITS + SYMBOLS

# Characters easily confused with each other when read
SIMILAR = frozenset('1|Il!O0`´\';:')
# Characters with special meaning in code, shells and config files
PROGRAMMING = frozenset('$\'"&,?@#<>(){}[]/\\')

# Template class tags
CLASS_TAGS = {
    'l': LOWER,
    'v': VOWELS,
    'c': CONSONANTS,
    'd': DIGITS,
    'h': HEX,
    'o': OCTAL,
    'b': BINARY,
    'a': ALNUM,
    '*': ANY,
    '!': SYMBOLS,
}

# Standard mode alphabets, in order of selection flags
STANDARD_ALPHABETS = {
    'lower': LOWER,
    'upper': UPPER,
    'digit': DIGITS,
    'symbol': SYMBOLS,
}


def pool(tag: str) -> str:
    """Return character pool for a class `tag`.

    Unknown single character tag is a pool of just that character.

    """
    try:
        return CLASS_TAGS[tag]
    except KeyError:
        if len(tag) == 1:
            return tag
        raise


def approve(ch: str, avoid_similar=False, avoid_programming=False) -> bool:
    """Check if `ch` is admitted by active filters."""
    if avoid_similar and ch in SIMILAR:
        return False
    if avoid_programming and ch in PROGRAMMING:
        return False
    return True


def admissible(chars: str, avoid_similar=False, avoid_programming=False) -> str:
    """Characters from `chars` which pass the filters, in original order."""
    return ''.join(c for c in chars
                   if approve(c, avoid_similar, avoid_programming))
