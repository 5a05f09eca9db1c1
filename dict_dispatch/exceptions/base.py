"""Base exception classes for dict_dispatch."""


class DictDispatchException(Exception):
    """Base exception for all dict_dispatch errors.

    All custom exceptions in the dict_dispatch package should inherit
    from this base class so the CLI can report them uniformly.
    """

    pass
