from pytest import fixture

from rpneval.evaluator import Evaluator


@fixture
def evaluator() -> Evaluator:
    '''
    Fresh evaluator that doesn't trace.
    '''
    return Evaluator(trace=None)


@fixture
def traces() -> list:
    '''
    Every (stack, result, remainder) traced, in order.
    '''
    return []


@fixture
def traced(traces) -> Evaluator:
    '''
    Fresh evaluator recording its traces into the traces fixture.
    '''
    return Evaluator(trace=lambda *args: traces.append(args))
