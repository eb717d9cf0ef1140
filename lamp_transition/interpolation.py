def linear_interpolate(start: int, end: int, position: float) -> int:
    # int() truncates toward zero, which biases the result toward start.
    offset = int((end - start) * position)
    return start + offset


def hue_interpolate(p1: int, p2: int, position: float) -> int:
    """Interpolates between two hues along the shorter arc of the wheel.

    A difference of exactly 180 degrees in either direction is left as is, so
    both (0, 180) and (180, 0) travel through 90. The result is in [0, 359].
    """
    difference = p2 - p1
    if difference > 180:
        difference -= 360
    elif difference < -180:
        difference += 360

    if difference > 0:
        start, end, pos = p1, p2, position
    else:
        start, end, pos = p2, p1, 1 - position

    while end < start:
        end += 360

    result = linear_interpolate(start, end, pos)
    # Python's % is non-negative for a positive modulus.
    return (result + 360) % 360
