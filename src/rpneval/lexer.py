from functools import reduce
import operator

import regex

from .util import RPNError
from .operations import Operand


class Lexer:
    '''
    Lexer for program tokens.

    A program is a sequence of tokens, each either an operator symbol or a
    number. For consistency, needs to be instantiated, despite holding no
    internal state.
    '''
    # Integral part of a number
    INTEGRAL = r'''
                # DO NOT REPEAT ME! I REPEAT MYSELF INTERNALLY!
                (?:
                    # 1, 12, or the 1 in 1_200.
                    \d{1,3}
                    (?:
                        # The 4, 45, etc. in 1234, 12345, etc.
                        \d
                        |
                        # Thousands separators
                        (?:
                            _\d{3}
                        )
                    )*
                )
                '''
    # Fractional part of a number
    FRACTIONAL = r'''
                  # DO NOT REPEAT ME! I REPEAT MYSELF INTERNALLY!
                  (?:
                      \d+
                      |
                      (?:
                          \d{3}
                          (?:
                              _\d{3}
                          )*
                          (?:
                              _\d{1,2}
                          )?
                      )
                  )
                  '''
    # 1e-05, 1E300
    EXPONENT = r'''
                (?:
                    [eE]
                    [+-]?
                    \d+
                )
                '''
    # What repr() gives for the non-finite doubles.
    SPECIAL = r'''
               (?i:
                   inf(?:inity)?
                   |
                   nan
               )
               '''
    # Number, of any kind supported by grammar.
    # String formatting and regex is a tricky business, because of the braces.
    # It works here. Be careful in general!
    NUMBER = r'''
              # ASCII sign only; U+2212 is the subtraction operator.
              [+-]?
              (?:
                  (?:
                      # 1, 12, 1_200, 1_200. (notice trailing dot), 1.3
                      {INTEGRAL}
                      (?:
                          \.
                          {FRACTIONAL}?
                      )?
                  )|(?:
                      # .2, 0.2, 0.200_200 but not 0.2_200
                      {INTEGRAL}?
                      \.
                      {FRACTIONAL}
                  )
              )
              {EXPONENT}?
              |
              [+-]?
              {SPECIAL}
              '''.format(INTEGRAL=INTEGRAL, FRACTIONAL=FRACTIONAL,
                         EXPONENT=EXPONENT, SPECIAL=SPECIAL)
    # Tokens are whitespace separated, nothing fancier.
    TOKEN = r'\S+'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and yield all tokens in it.
        '''
        for match in regex.finditer(type(self).TOKEN, line):
            yield match.group(0)

    def isnumber(self, token):
        '''
        Return True if token is a number literal.
        '''
        return regex.fullmatch(type(self).NUMBER, token,
                               flags=type(self).FLAGS) is not None

    def number(self, token):
        '''
        Convert number literal to float.
        '''
        if not self.isnumber(token):
            raise RPNError("Not a number {0}".format(repr(token)))
        # Handle the underscores in here, float() is pickier about them.
        return float(token.replace('_', ''))

    def classify(self, token, known):
        '''
        Return the operation token stands for, or None.

        Known operator symbols win over numbers, so a registered symbol that
        looks like a number is still an operator.
        '''
        if token in known:
            return known[token]
        elif self.isnumber(token):
            return Operand(self.number(token))
        return None
