# word literal and formatting tests
import pytest

import rad50
from rad50_fields import Invalid_Literal, bytes_to_words, fmt_charset, fmt_word, \
    fmt_words, parse_word, words_to_bytes

PDP11_WORDS = [ 32329, 30409, 30401, 805, 31200]
PDP11_BYTES = bytes( [ 0x7e, 0x49, 0x76, 0xc9, 0x76, 0xc1, 0x03, 0x25, 0x79, 0xe0])


@pytest.mark.parametrize( 'literal', [ '123', '0x7b', '0o173', '0b1111011', '0x7B'])
def test_parse_word_bases( literal):
    assert parse_word( literal) == 123


@pytest.mark.parametrize( 'literal', [
    '', '0x', 'abc', '12a', '0o8', '0b2', '-1', '+1', '1_000', ' 1', '65536', '0x10000', '١',
    '0x0x10', '0o0o17', '0b0b1', '0xg', '0b12'])
def test_parse_word_rejects( literal):
    with pytest.raises( Invalid_Literal) as e:
        parse_word( literal)
    assert str( e.value) == "Couldn't parse as integer: {}".format( literal)


def test_parse_word_limits():
    assert parse_word( '0') == 0
    assert parse_word( '65535') == 65535
    assert parse_word( '0xffff') == 65535


def test_fmt_word():
    assert fmt_word( 805) == '805'
    assert fmt_word( 805, 'hex') == '325'
    assert fmt_word( 805, 'oct') == '1445'
    assert fmt_word( 805, 'bin') == '1100100101'
    with pytest.raises( ValueError):
        fmt_word( 805, 'raw')


def test_fmt_words():
    assert fmt_words( PDP11_WORDS) == '32329 30409 30401 805 31200'
    assert fmt_words( PDP11_WORDS, 'hex') == '7e49 76c9 76c1 325 79e0'
    assert fmt_words( PDP11_WORDS, 'oct') == '77111 73311 73301 1445 74740'
    assert fmt_words( []) == ''


def test_raw_stream_is_high_byte_first():
    assert words_to_bytes( PDP11_WORDS) == PDP11_BYTES
    assert bytes_to_words( PDP11_BYTES) == PDP11_WORDS


def test_raw_stream_odd_byte_dropped():
    assert bytes_to_words( PDP11_BYTES + b'\x01') == PDP11_WORDS
    assert bytes_to_words( b'\x01') == []


def test_fmt_charset():
    lines = fmt_charset( rad50.PDP11)
    assert lines[ 0] == 'Char  Dec  Hex  Oct Binary'
    assert lines[ 1] == '-' * len( lines[ 0])
    assert len( lines) == 42
    assert lines[ 2] == 'space   0 0x00 0o00 000000'
    assert lines[ 3] == 'A       1 0x01 0o01 000001'
    assert lines[ 41] == '9      39 0x27 0o47 100111'


def test_fmt_charset_pdp10():
    lines = fmt_charset( rad50.PDP10)
    assert lines[ 3] == '0       1 0x01 0o01 000001'
    assert lines[ 41] == '%      39 0x27 0o47 100111'
