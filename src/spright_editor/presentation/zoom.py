ZOOM_LEVELS: tuple[float, ...] = (0.25, 0.5, 1, 2, 3, 4, 5, 6, 8, 10, 12, 16)
DEFAULT_ZOOM: float = 2
_FALLBACK_INDEX = ZOOM_LEVELS.index(1)


def step_zoom(zoom: float, direction: int) -> float:
    """Move one level up (``direction > 0``) or down, clamped at both ends.

    A value outside the level set is treated as 1 before stepping.
    """
    try:
        n = ZOOM_LEVELS.index(zoom)
    except ValueError:
        n = _FALLBACK_INDEX
    if direction < 0 and n > 0:
        n -= 1
    elif direction > 0 and n < len(ZOOM_LEVELS) - 1:
        n += 1
    return ZOOM_LEVELS[n]


def zoom_in(zoom: float) -> float:
    return step_zoom(zoom, 1)


def zoom_out(zoom: float) -> float:
    return step_zoom(zoom, -1)
