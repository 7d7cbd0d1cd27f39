#!/usr/bin/python3
# -*- encoding: utf-8 -*-

"""Conversions between RADIX-50 words and ASCII.
   Three characters from a 40 character alphabet are packed into one 16 bit
   word as the digits of a base 40 number.  On 18/36 bit systems (PDP-10)
   DEC used a different ordering of the characters in the alphabet than on
   the PDP-11, so every conversion takes the variant to use."""

import io

PDP10 = 'pdp10'
PDP11 = 'pdp11'

_alphabets = {
    PDP10: " 0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ.$%",
    PDP11: " ABCDEFGHIJKLMNOPQRSTUVWXYZ$.%0123456789",
    }
# character -> index, per variant
_indexes = {
    variant: { c: i for i, c in enumerate( chars)}
    for variant, chars in _alphabets.items()}

radix = 40
char_per_wd = 3
blank = ' '

class Invalid_Character( ValueError):
    "A character that has no RADIX-50 code in the selected variant"
    def __init__( self, char, pos):
        if len( char) == 1:
            msg = "Illegal character '{}' ({}) at position {}".format( char, ord( char), pos)
        else:
            msg = "Illegal character {!r} at position {}".format( char, pos)
        super().__init__( msg)
        self.char = char
        self.pos = pos

def alphabet( variant):
    "The 40 character alphabet of a variant, in code order"
    try:
        return _alphabets[ variant]
    except KeyError:
        raise ValueError( "Unknown RADIX-50 variant: {!r}".format( variant)) from None

def charset( variant):
    "List of the 40 symbols of a variant, indexed by their code"
    return list( alphabet( variant))

def index_of( char, variant, pos=1):
    "Code of a single character; pos is only used to report an illegal one"
    alphabet( variant)
    try:
        return _indexes[ variant][ char]
    except KeyError:
        raise Invalid_Character( char, pos) from None

def symbol_at( index, variant):
    "Character for a code in the range 0..39"
    return alphabet( variant)[ index]

def decode_wd( buf, wd, variant=PDP11):
    "Convert 16 bit word to 3 ASCII characters, appended to the supplied buffer"
    chars = alphabet( variant)
    divisor = radix * radix
    for i in range( char_per_wd):
        buf.write( chars[ wd // divisor % radix])
        divisor //= radix

def decode_word( wd, variant=PDP11):
    "Convert a single word into its 3 characters"
    buf = io.StringIO()
    decode_wd( buf, wd, variant)
    result = buf.getvalue()
    buf.close()
    return result

def decode( iterable, variant):
    "Convert sequence of words into a string"
    buf = io.StringIO()
    for wd in iterable:
        decode_wd( buf, wd, variant)
    result = buf.getvalue()
    buf.close()
    return result

def encode_wd( chars, variant=PDP11, offset=0):
    "Convert up to 3 chars into a RADIX-50 word, blank filling on the right"
    if len( chars) > char_per_wd:
        raise ValueError( "At most {} characters fit in a word: {!r}".format(
            char_per_wd, chars))
    result = 0
    for i in range( char_per_wd):
        result *= radix
        # missing characters are padding, not input
        c = chars[ i] if i < len( chars) else blank
        result += index_of( c, variant, offset + i + 1)
    return result

def encode( strng, variant):
    "Encode ASCII string into list of RADIX-50 words"
    result = []
    for offset in range( 0, len( strng), char_per_wd):
        result.append( encode_wd( strng[ offset: offset + char_per_wd],
                                  variant, offset))
    return result
