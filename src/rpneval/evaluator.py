from types import MappingProxyType
import logging

from .util import ProgramError
from .lexer import Lexer
from .operations import Operand, UnaryOperator, BinaryOperator, BUILTINS


logger = logging.getLogger(__name__)


def _render(ops):
    return '[' + ', '.join(map(str, ops)) + ']'


def log_evaluation(stack, result, remainder):
    '''
    Default trace hook: log every top-level evaluation at DEBUG.
    '''
    logger.debug('%s = %s with %s remaining',
                 _render(stack), result, _render(remainder))


class Evaluator:
    '''
    RPN expression evaluator.

    Holds the program typed so far as a stack of operations, and evaluates it
    on demand, from the top of the stack down. Evaluating never changes the
    stack; only pushing, performing an operation, loading a program and
    resetting do.

    Not thread-safe. Use one per session, or guard it with a lock.
    '''

    RESET_VALUE = 0.0
    DEFAULT_STRICT = False
    ARITY = {
        UnaryOperator: 1,
        BinaryOperator: 2,
    }

    def __init__(self, operations=None, trace=log_evaluation, strict=None):
        '''
        Create evaluator with an empty stack.

        :param operations: Extra operations to register after the builtins.
            Last registration of a symbol wins.
        :param trace: Called as trace(stack, result, remainder) after every
            evaluation. None to disable.
        :param strict: Reject unrecognised tokens when loading programs,
            rather than silently dropping them.
        '''
        known = dict()
        for operation in (*BUILTINS, *(operations or ())):
            known[operation.symbol] = operation
        self._known = MappingProxyType(known)
        self._stack = []
        self._lexer = Lexer()
        self.trace = trace
        self.strict = type(self).DEFAULT_STRICT if strict is None else strict

    @property
    def known_operations(self):
        '''
        Read-only mapping of symbol to operation.
        '''
        return self._known

    @property
    def stack(self):
        '''
        Snapshot of the stack, bottom first.
        '''
        return tuple(self._stack)

    def __len__(self):
        return len(self._stack)

    def __repr__(self):
        return '{}({})'.format(type(self).__name__, _render(self._stack))

    def push_operand(self, value):
        '''
        Push operand, and return evaluation of the whole stack.
        '''
        self._stack.append(Operand(value))
        return self.evaluate()

    def perform_operation(self, symbol):
        '''
        Push known operation, and return evaluation of the whole stack.

        Unknown symbols leave the stack as is, and just re-evaluate it.
        '''
        operation = self._known.get(symbol)
        if operation is not None:
            self._stack.append(operation)
        else:
            logger.debug('Ignoring unknown operation %r', symbol)
        return self.evaluate()

    def _evaluate(self, ops):
        '''
        Evaluate the operation on top of ops, and the operands it needs.

        Return (result, remaining ops). On failure, the result is None and
        the ops are handed back untouched.

        Walks down from the top with a stack of operators still waiting for
        operands, rather than recursing, so long programs don't hit the
        recursion limit.
        '''
        # Operators awaiting operands, innermost last, with those found so
        # far, nearest first.
        pending = []
        top = len(ops)
        while top:
            top -= 1
            op = ops[top]
            if isinstance(op, Operand):
                value = op.value
            elif type(op) in type(self).ARITY:
                pending.append((op, []))
                continue
            else:
                raise TypeError('Not an operation: {}'.format(repr(op)))
            # Hand the value up until some operator needs more.
            while pending:
                operation, operands = pending[-1]
                operands.append(value)
                if len(operands) < type(self).ARITY[type(operation)]:
                    break
                pending.pop()
                value = operation.apply(*operands)
            else:
                return value, ops[:top]
        return None, ops

    def evaluate(self):
        '''
        Return evaluation of the whole stack, or None if not possible.

        Operands left over beneath a complete expression are ignored.
        '''
        stack = tuple(self._stack)
        result, remainder = self._evaluate(stack)
        if self.trace is not None:
            self.trace(stack, result, remainder)
        return result

    @property
    def program(self):
        '''
        The stack as a list of symbols, bottom first.
        '''
        return [op.symbol for op in self._stack]

    @program.setter
    def program(self, tokens):
        self.load_program(tokens)

    def load_program(self, tokens, strict=None):
        '''
        Replace the stack with the program given as a sequence of symbols.

        Unrecognised tokens are dropped, unless strict, in which case nothing
        is replaced and a ProgramError lists all of them.
        '''
        if isinstance(tokens, str):
            raise TypeError('Program must be a sequence of tokens, not a str')
        if strict is None:
            strict = self.strict
        stack = []
        errors = []
        for index, token in enumerate(tokens):
            operation = None
            if isinstance(token, str):
                operation = self._lexer.classify(token, self._known)
            if operation is not None:
                stack.append(operation)
            elif strict:
                errors.append((index, token))
            else:
                logger.debug('Dropping unrecognised token %r', token)
        if errors:
            raise ProgramError(errors)
        self._stack = stack

    def reset(self):
        '''
        Clear the stack. Return what a display should now show.
        '''
        self._stack.clear()
        return type(self).RESET_VALUE
