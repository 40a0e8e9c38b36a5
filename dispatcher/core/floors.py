"""
Floor Validator

Defines the set of legal floor levels served by the lift bank.
"""

# Enumerated floor levels. There is no floor 0: the building goes from
# basement level -1 directly to the ground floor 1.
ALL_LEVELS = (
    -2, -1, 1, 2, 3, 4, 5,
    6, 7, 8, 9, 10, 11, 12,
    13, 14, 15, 16, 17, 18,
)


def is_valid_level(x) -> bool:
    """
    Check whether a value is a legal floor level.

    Args:
        x: Candidate value (usually taken straight from a JSON payload)

    Returns:
        True if x is a number equal to one of ALL_LEVELS, False otherwise.
        Integral floats such as 7.0 count; callers store int(x).
    """
    # bool is an int subclass; JSON true/false must not pass as floors 1/0
    if isinstance(x, bool) or not isinstance(x, (int, float)):
        return False
    return x in ALL_LEVELS
