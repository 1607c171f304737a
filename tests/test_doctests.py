import doctest

import diffviewer
from diffviewer import hunks, lines


def test_doctests_diffviewer_module():
    res = doctest.testmod(diffviewer, verbose=False)
    assert res.failed == 0


def test_doctests_helper_modules():
    for module in (hunks, lines):
        res = doctest.testmod(module, verbose=False)
        assert res.failed == 0, module.__name__
