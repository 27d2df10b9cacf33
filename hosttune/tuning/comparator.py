"""
Comparator - decides whether a parameter has to be raised.
"""


def needs_change(current: int, reference: int) -> bool:
    """
    True only when ``current`` is below ``reference``.

    Values at or above the reference are left alone; tuners only ever
    raise limits.
    """
    return current < reference
