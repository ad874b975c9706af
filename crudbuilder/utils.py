# no-break spaces and NEL are part of a name, not blank
NON_BLANK_SPACES = '\xa0\u2007\u202f\x85'


def has_text(value):
    """Return True if value is a string with at least one non-whitespace character."""
    if not isinstance(value, str):
        return False
    return any(not char.isspace() or char in NON_BLANK_SPACES for char in value)


def has_value(value):
    # only strings are checked for blankness, so 0 and False still count as values
    if value is None:
        return False
    if isinstance(value, str):
        return has_text(value)
    return True
