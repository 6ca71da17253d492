# Phonetic
# (spell out a password using the NATO phonetic alphabet)
#

import string

NATO_ALPHABET = (
    'alfa', 'bravo', 'charlie', 'delta', 'echo', 'foxtrot', 'golf',
    'hotel', 'india', 'juliett', 'kilo', 'lima', 'mike', 'november',
    'oscar', 'papa', 'quebec', 'romeo', 'sierra', 'tango', 'uniform',
    'victor', 'whiskey', 'xray', 'yankee', 'zulu',
)

PHONETIC_WORDS = dict(zip(string.ascii_lowercase, NATO_ALPHABET))


def spell(ch: str) -> str:
    """Phonetic word for letter `ch`, in the same case.

    Other characters are returned unchanged.

    """
    word = PHONETIC_WORDS.get(ch.lower())
    if word is None:
        return ch
    return word.upper() if ch.isupper() else word


def to_phonetic(text: str) -> str:
    return ' '.join(spell(ch) for ch in text)
