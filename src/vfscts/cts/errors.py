"""Errors raised by conformance checks."""


class CheckFailedError(Exception):
    """A filesystem violated a contract asserted by a check.

    Backend exceptions that abort a check propagate unchanged; this error is
    only used when the backend *succeeded* where it should not have, or
    returned wrong data.
    """
