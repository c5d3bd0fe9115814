from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging
import sys

from prompt_toolkit import PromptSession

from .util import RPNError
from .evaluator import Evaluator
from .lexer import Lexer


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the evaluator.

    Only splits lines into tokens and prints results; all the work is the
    evaluator's.
    '''

    DEFAULT_PROMPT = '> '
    # Like the C key on a pocket calculator.
    RESET = 'C'
    NO_RESULT = '-'

    def feed(self, evaluator, line):
        '''
        Feed all tokens on line to evaluator, returning the last result.
        '''
        result = evaluator.evaluate()
        for token in self.lexer.lex(line):
            if token == self.RESET:
                result = evaluator.reset()
            elif token in evaluator.known_operations:
                result = evaluator.perform_operation(token)
            elif self.lexer.isnumber(token):
                result = evaluator.push_operand(self.lexer.number(token))
            else:
                if evaluator.strict:
                    raise RPNError('Unknown token {}'.format(repr(token)))
                result = evaluator.perform_operation(token)
        return result

    def executor(self):
        '''
        Run evaluator, printing the result after each line.
        '''
        evaluator = Evaluator(strict=self.args.strict)
        for line in self.args.expressions:
            try:
                result = self.feed(evaluator, line)
            # Abort entire rest of line, makes sense anyway
            except RPNError as e:
                print(e.args[0], file=sys.stderr)
                continue
            print(self.NO_RESULT if result is None else result, flush=True)
        return evaluator

    def dumper(self):
        '''
        Run evaluator, then dump the program, one token per line.
        '''
        evaluator = self.executor()
        print(*evaluator.program, sep='\n')

    def raw_grammar(self):
        '''
        Print internally defined number grammar.
        '''
        print(self.lexer.NUMBER)

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           sys.stdin.isatty() and sys.stdout.isatty():
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.lexer = Lexer()
        self.argument_parser = ArgumentParser(description='RPN evaluator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='log every evaluation')
        self.argument_parser.add_argument('-s', '--strict',
                                          action='store_true',
                                          help='reject unknown tokens')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=sys.stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.verbose:
            logging.basicConfig(level=logging.DEBUG, stream=sys.stderr,
                                format='%(name)s: %(message)s')
        if self.args.expressions is sys.stdin:
            self.args.expressions = self._prompting_input()
        elif isinstance(self.args.expressions, list):
            # -e 8 2 − is one line, not three.
            self.args.expressions = [' '.join(self.args.expressions)]
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)
