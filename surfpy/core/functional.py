from functools import reduce

__all__ = ['compose']


def _identity(value):
    return value


class _Pipeline:
    """Callable which feeds its argument through a fixed sequence of functions, first to last"""
    __slots__ = ('_functions',)

    def __init__(self, functions: tuple):
        self._functions = functions

    def __call__(self, value):
        return reduce(lambda result, func: func(result), self._functions, value)

    def __repr__(self):
        return 'compose(' + ', '.join(repr(f) for f in self._functions) + ')'


def compose(*functions):
    """ Chain unary functions left to right

    Parameters
    ----------
    functions: callable
        Any number of functions of one argument, the result of each is passed to the next

    Returns
    -------
    callable
        A function equivalent to functions[-1](...functions[1](functions[0](x))...)

    Notes
    -----
    With no functions the identity is returned, with one function that function is returned unchanged. This is not
    specific to surfaces, any single argument callables can be chained, for example surface transforms:

    Examples
    --------
    >>> import functools
    >>> import surfpy.surface as s
    >>> tilt = compose(s.flip, functools.partial(s.rotate, deg=30))
    >>> my_surface = tilt(s.stripes(2))
    """
    if not functions:
        return _identity
    if len(functions) == 1:
        return functions[0]
    return _Pipeline(tuple(functions))
