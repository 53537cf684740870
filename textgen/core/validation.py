def is_valid_window_length(n: int) -> bool:
    return isinstance(n, int) and not isinstance(n, bool) and n >= 1

def is_valid_length(n: int) -> bool:
    return isinstance(n, int) and not isinstance(n, bool) and n >= 0
