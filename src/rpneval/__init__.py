'''
RPN expression evaluator.

Keeps the program typed so far as a stack of operands and operators, and
evaluates it recursively from the top down whenever something is pushed. The
program can be saved as a list of tokens and loaded back.

Supports the four arithmetic operators, powers, square roots, sine and
cosine. Not intended to be Turing-complete! A display, buttons, text fields
and the like are someone else's job; there's a small CLI for trying it out.
'''

from .cli import CLI
from .evaluator import Evaluator, log_evaluation
from .lexer import Lexer
from .operations import Operand, UnaryOperator, BinaryOperator, BUILTINS
from .util import RPNError, ProgramError


__all__ = ('Evaluator', 'log_evaluation', 'Lexer', 'CLI',
           'Operand', 'UnaryOperator', 'BinaryOperator', 'BUILTINS',
           'RPNError', 'ProgramError')
