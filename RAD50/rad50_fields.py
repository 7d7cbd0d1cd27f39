#!/usr/bin/python3
# -*- encoding: utf-8 -*-

"""Reading and formatting RADIX-50 words for humans"""

import rad50

# Word literal prefixes and their bases
Literal_Bases = (
                ( '0x', 16),
                ( '0o', 8),
                ( '0b', 2),
                )
Digits = '0123456789abcdef'

# Output formats for encoded words
Formats = {
           'dec': '{:d}',
           'hex': '{:x}',
           'oct': '{:o}',
           'bin': '{:b}',
           }
FMT_RAW = 'raw'

WORD_MAX = 0xFFFF

class Invalid_Literal( ValueError):
    pass

def parse_word( literal):
    "convert a decimal, 0x hex, 0o octal or 0b binary literal to a 16 bit word"
    digits, base = literal, 10
    for prefix, b in Literal_Bases:
        if literal.startswith( prefix):
            digits, base = literal[ len( prefix):], b
            break
    # int() would also accept signs, blanks, underscores and a second prefix
    valid = Digits[ :base]
    if not digits or any( c not in valid for c in digits.lower()):
        raise Invalid_Literal( "Couldn't parse as integer: {}".format( literal))
    wd = int( digits, base)
    if wd > WORD_MAX:
        raise Invalid_Literal( "Couldn't parse as integer: {}".format( literal))
    return wd

def fmt_word( wd, fmt='dec'):
    "format a word in the given number base, without prefix"
    try:
        return Formats[ fmt].format( wd)
    except KeyError:
        raise ValueError( "Unknown word format: {!r}".format( fmt)) from None

def fmt_words( words, fmt='dec'):
    "format a sequence of words, separated by blanks"
    return ' '.join( fmt_word( wd, fmt) for wd in words)

def words_to_bytes( words):
    "raw byte stream of words, high byte first"
    buf = bytearray()
    for wd in words:
        buf.append( wd >> 8 & 0xFF)
        buf.append( wd & 0xFF)
    return bytes( buf)

def bytes_to_words( data):
    "extract words of 2 bytes, high byte first; an odd trailing byte is dropped"
    return [ ( data[ i] << 8) + data[ i + 1] for i in range( 0, len( data) - 1, 2)]

def fmt_charset( variant):
    "format the RADIX-50 alphabet as a table of codes in several bases"
    header = '{:5} {:3} {:>4} {:>4} {:>6}'.format( 'Char', 'Dec', 'Hex', 'Oct', 'Binary')
    result = [ header, '-' * len( header)]
    for i, c in enumerate( rad50.charset( variant)):
        if c == rad50.blank:
            c = 'space'
        result.append( '{:5} {:3} {:#04x} {:#04o} {:06b}'.format( c, i, i, i, i))
    return result
