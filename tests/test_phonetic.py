from pwpattern.phonetic import to_phonetic, spell, NATO_ALPHABET


def test_alphabet():
    assert len(NATO_ALPHABET) == 26
    assert [w[0] for w in NATO_ALPHABET] == list('abcdefghijklmnopqrstuvwxyz')


def test_spell():
    assert spell('A') == 'ALFA'
    assert spell('b') == 'bravo'
    assert spell('3') == '3'
    assert spell('#') == '#'
    assert spell('é') == 'é'


def test_to_phonetic():
    assert to_phonetic('') == ''
    assert to_phonetic('A') == 'ALFA'
    assert to_phonetic('aB3') == 'alfa BRAVO 3'
    assert to_phonetic('Zx!') == 'ZULU xray !'
