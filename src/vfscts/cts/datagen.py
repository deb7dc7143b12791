"""Deterministic test payloads."""

_PATTERN = bytes(range(256))


def generate_test_bytes(length: int) -> bytes:
    """Return ``length`` bytes where ``b[i] == i % 256``.

    Raises:
        ValueError: If ``length`` is negative.
    """
    if length < 0:
        raise ValueError("length must be >= 0")
    repeats, remainder = divmod(length, len(_PATTERN))
    return _PATTERN * repeats + _PATTERN[:remainder]
