from functools import wraps


class RPNError(Exception):
    pass


class ProgramError(RPNError):
    '''
    Raised by strict program loading, listing every token that was rejected.

    :attr errors: list of (index, token) pairs, in program order.
    '''
    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__('Unrecognised program token(s): {}'.format(
            ', '.join('{} at {}'.format(repr(token), index)
                      for index, token
                      in self.errors)))


def wrap_user_errors(fmt):
    '''
    Decorator that converts exceptions from user-supplied functions to
    RPNErrors.

    Passes through RPNErrors. The message is formatted with the wrapped
    function's arguments.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            except Exception as e:
                raise RPNError(fmt.format(*args, **kwargs), e) from e
        return wrapper
    return decorator
