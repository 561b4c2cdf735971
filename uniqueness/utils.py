def ensure_budget(value: object, name: str, integer: bool = False) -> float:
    """Validate a budget ceiling, returning it unchanged if usable."""
    allowed = int if integer else (int, float)
    if isinstance(value, bool) or not isinstance(value, allowed):
        kind = "an integer" if integer else "a number"
        raise TypeError(f"{name} must be {kind}, got {type(value).__name__}")
    if value != value or value < 0:
        raise ValueError(f"{name} must be a non-negative number, got {value!r}")
    return value
