# -*- coding: utf-8 -*-
"""
Funciones utilitarias para diffviewer.
"""
import copy
from functools import wraps


def memoize_one(func):
    """
    Cache only the last call of ``func``.

    The cached result is reused while the arguments compare equal to a
    snapshot of the previous ones, so mutating an argument in place between
    calls also recomputes.
    """
    last = []

    @wraps(func)
    def wrapper(*args, **kwargs):
        key = copy.deepcopy((args, sorted(kwargs.items())))
        if last and last[0] == key:
            return last[1]
        result = func(*args, **kwargs)
        last[:] = [key, result]
        return result

    def cache_clear():
        del last[:]

    wrapper.cache_clear = cache_clear
    return wrapper


def cx(*names):
    """Une nombres de clase CSS, ignorando los vacíos."""
    return u' '.join(name for name in names if name)
