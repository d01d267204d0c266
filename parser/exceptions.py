# parser/exceptions.py
# This file is part of Veritas - A Propositional Truth Table Generator
#
# Custom exceptions for formula parsing


class ParseError(RuntimeError):
    """Exception raised when formula text cannot be turned into a tree.

    Covers empty input, illegal characters and grammar violations.
    """

    pass
