from collections import Counter
import re

import pytest

from pwpattern import pwgen, alphabet
from pwpattern.pwgen import (generate, generate_standard, generate_custom,
                             generate_template, generate_many, unique_chars,
                             parse_alphabets,
                             GenerationRequest, ConfigurationError)
from pwpattern.sampler import EmptyPoolError, EQUAL, TOTAL
from pwpattern.template import TemplateSyntaxError
from pwpattern.phonetic import to_phonetic

# chi-squared critical value for 1 degree of freedom, p = 0.0001
CHI2_CRITICAL_1DF = 15.14


class TestStandard:

    def test_default(self, seeded_random):
        result = generate_standard()
        assert len(result.password) == pwgen.DEFAULT_LENGTH
        assert result.text == result.password
        assert str(result) == result.password
        assert all(c in alphabet.LOWER + alphabet.UPPER + alphabet.DIGITS
                   for c in result.password)

    @pytest.mark.parametrize('length', [0, 1, 16, 100])
    def test_length(self, seeded_random, length):
        for mode in (EQUAL, TOTAL):
            pw = generate_standard(length, mode, symbol=True).password
            assert len(pw) == length

    def test_single_alphabet(self, seeded_random):
        result = generate_standard(40, lower=False, upper=False, digit=False,
                                   symbol=True)
        assert all(c in alphabet.SYMBOLS for c in result.password)
        assert result.stats['symbol'] == 40
        assert result.stats.total == 40

    def test_filters(self, seeded_random):
        pw = generate_standard(500, TOTAL, symbol=True, avoid_similar=True,
                               avoid_programming=True).password
        assert len(pw) == 500
        assert all(alphabet.approve(c, True, True) for c in pw)

    def test_no_alphabet(self):
        with pytest.raises(ConfigurationError) as exc_info:
            generate_standard(lower=False, upper=False, digit=False, symbol=False)
        assert 'Invalid combination of parameters' in str(exc_info.value)

    def test_invalid(self):
        with pytest.raises(ConfigurationError):
            generate_standard(-1)
        with pytest.raises(ConfigurationError):
            generate(GenerationRequest(mode='bogus'))
        with pytest.raises(ConfigurationError):
            generate(GenerationRequest(alphabets=('lower', 'greek')))

    def test_equal_mode(self, seeded_random):
        n = 20_000
        pw = generate_standard(n, EQUAL, lower=True, upper=False, digit=True).password
        digits = sum(c in alphabet.DIGITS for c in pw)
        chi2 = 2 * (digits - n / 2) ** 2 / (n / 2)
        assert chi2 < CHI2_CRITICAL_1DF

    def test_stats(self, seeded_random):
        result = generate_standard(30, TOTAL)
        stats = result.stats
        assert stats['lowercase'] + stats['uppercase'] + stats['numeric'] == 30
        assert stats['symbol'] == 0
        assert stats['lowercase'] == sum(c.islower() for c in result.password)

    def test_phonetic(self, seeded_random):
        result = generate_standard(12, phonetic=True)
        assert len(result.password) == 12
        assert result.text == to_phonetic(result.password)
        assert len(result.text.split(' ')) == 12


def test_parse_alphabets():
    assert parse_alphabets('luds') == ('lower', 'upper', 'digit', 'symbol')
    assert parse_alphabets('d') == ('digit',)
    assert parse_alphabets('') == ()
    with pytest.raises(ConfigurationError):
        parse_alphabets('lx')


class TestCustom:

    def test_unique_chars(self):
        assert unique_chars('aab') == 'ab'
        assert unique_chars('abcabc') == 'abc'
        assert unique_chars('') == ''

    def test_custom_pool(self, seeded_random):
        pw = generate_custom('xyz', 50).password
        assert len(pw) == 50
        assert set(pw) <= set('xyz')

    def test_deduplicated(self, seeded_random):
        n = 30_000
        counter = Counter(generate_custom('aab', n).password)
        assert set(counter) == {'a', 'b'}
        chi2 = 2 * (counter['a'] - n / 2) ** 2 / (n / 2)
        assert chi2 < CHI2_CRITICAL_1DF

    def test_overrides_mode(self, seeded_random):
        request = GenerationRequest(length=10, mode='bogus', alphabets=(),
                                    custom_pool='ab')
        assert set(generate(request).password) <= {'a', 'b'}

    def test_filters(self, seeded_random):
        pw = generate_custom('01ab', 100, avoid_similar=True).password
        assert set(pw) <= {'a', 'b'}
        with pytest.raises(EmptyPoolError):
            generate_custom('10lI', 5, avoid_similar=True)

    def test_empty(self):
        with pytest.raises(ConfigurationError):
            generate_custom('', 10)


class TestTemplate:

    def test_template(self, seeded_random):
        result = generate_template(':c.v.c.v.cdd')
        assert re.fullmatch(r'[A-Z][a-z]{4}\d\d', result.password)
        assert result.stats['uppercase'] == 1
        assert result.stats['lowercase'] == 4
        assert result.stats['numeric'] == 2

    def test_escape(self):
        assert generate_template('-a-b').password == 'ab'

    def test_syntax_error(self):
        with pytest.raises(TemplateSyntaxError):
            generate_template('abc-')

    def test_phonetic(self):
        assert generate_template('-A-b3', phonetic=True).text == 'ALFA bravo 3'

    def test_precedence(self, seeded_random):
        request = GenerationRequest(length=50, custom_pool='xyz',
                                    template='-a:d')
        pw = generate(request).password
        assert len(pw) == 2
        assert pw[0] == 'a'
        assert pw[1] in alphabet.DIGITS


def test_generate_many(seeded_random):
    results = generate_many(GenerationRequest(length=8), 5)
    assert len(results) == 5
    assert all(len(r.password) == 8 for r in results)
    assert generate_many(GenerationRequest(), 0) == []
    with pytest.raises(ConfigurationError):
        generate_many(GenerationRequest(), -1)
