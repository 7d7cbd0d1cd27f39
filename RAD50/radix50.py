#!/usr/bin/python3
# -*- encoding: utf-8 -*-
"""Encode text to RADIX-50 words, decode words to text, or dump the charset.

<word> is a 16 bit word in decimal, hex, octal or binary (123, 0x7b, 0o173
and 0b1111011 are the same).  If <string> or <word> is omitted, stdin is read
as input.  One trailing LF or CR LF is removed from text read from stdin.
When decoding from stdin, stdin is read as a binary stream of words, high
byte first."""

import argparse, sys
import rad50
from rad50_fields import FMT_RAW, Formats, Invalid_Literal, bytes_to_words, \
    fmt_charset, fmt_words, parse_word, words_to_bytes

verbose = False

def trace( *args):
    "Print a diagnostic line to stderr when running verbose"
    if verbose:
        print( *args, file=sys.stderr)

def variant_of( args):
    return rad50.PDP10 if args.pdp10 else rad50.PDP11

def do_encode( args):
    "Encode the string argument or stdin, print the words"
    if args.string is not None:
        text = args.string
    else:
        text = sys.stdin.read()
        for eol in ( '\r\n', '\n'):
            if text.endswith( eol):
                text = text[ :-len( eol)]
                break
    if args.upcase:
        text = text.upper()
    words = rad50.encode( text, variant_of( args))
    trace( "Encoded {} chars into {} words ({})".format(
        len( text), len( words), variant_of( args)))
    if args.format == FMT_RAW:
        sys.stdout.buffer.write( words_to_bytes( words))
        sys.stdout.buffer.flush()
    else:
        print( fmt_words( words, args.format))

def do_decode( args):
    "Decode the word arguments or the binary stream on stdin, print the text"
    if args.word:
        words = [ parse_word( w) for w in args.word]
    else:
        data = sys.stdin.buffer.read()
        if len( data) & 1:
            trace( "Ignoring odd trailing byte {:#04x}".format( data[ -1]))
        words = bytes_to_words( data)
    trace( "Decoding {} words ({})".format( len( words), variant_of( args)))
    print( rad50.decode( words, variant_of( args)))

def do_charset( args):
    "Dump the RADIX-50 charset table"
    for line in fmt_charset( variant_of( args)):
        print( line)

def parse_args( argv):
    common = argparse.ArgumentParser( add_help=False)
    common.add_argument( '--pdp10', action='store_true',
        help="Use the PDP-10 RADIX-50 encoding instead of the default PDP-11 encoding.")
    common.add_argument( '-v', '--verbose', action='store_true',
        help="Print diagnostics to stderr.")

    parser = argparse.ArgumentParser( prog='radix50', description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter)
    commands = parser.add_subparsers( dest='command', required=True)

    p = commands.add_parser( 'decode', parents=[ common], help="Decode words to text.")
    p.add_argument( 'word', nargs='*', help="Word to decode.")
    p.set_defaults( func=do_decode)

    p = commands.add_parser( 'encode', parents=[ common], help="Encode text to words.")
    p.add_argument( '-f', '--format', default='dec', choices=list( Formats) + [ FMT_RAW],
        help='Output in a specific format (default: %(default)s). '
             '"raw" is a raw binary byte stream.')
    p.add_argument( '-u', '--upcase', action='store_true',
        help="Convert the text to upper case before encoding.")
    p.add_argument( 'string', nargs='?', help="Text to encode.")
    p.set_defaults( func=do_encode)

    p = commands.add_parser( 'charset', parents=[ common], help="Dump the charset table.")
    p.set_defaults( func=do_charset)

    return parser.parse_args( argv)

def main( argv=None):
    "Run one radix50 command, return an error message on failure"
    global verbose
    args = parse_args( argv)
    verbose = args.verbose
    try:
        args.func( args)
    except ( rad50.Invalid_Character, Invalid_Literal) as e:
        return str( e)
    except UnicodeDecodeError as e:
        return "Couldn't read input as text: {}".format( e)

def run():
    try:
        rc = main()
    except BrokenPipeError:
        rc = 0
    sys.exit( rc)

if __name__ == "__main__":
    # execute only if run as a script
    run()
