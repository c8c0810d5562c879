"""Utility helpers for objdist."""

import numpy as np


# Decimal exponents outside [MIN_PLAIN_EXP, MAX_PLAIN_EXP) switch to e-notation
MIN_PLAIN_EXP = -4
MAX_PLAIN_EXP = 6


def format_number(value) -> str:
    """
    Format a number the way the distance file has always spelled numbers.

    Integers print as plain digits. Floats print the shortest digits that
    round-trip at their own width (a float32 distance uses float32 digits),
    without a trailing '.0':

        5.0        -> '5'
        sqrt(2)    -> '1.4142135'   (float32)
        123456.0   -> '123456'
        1e6        -> '1e+06'
        0.00001    -> '1e-05'
        nan / inf  -> 'NaN' / '+Inf' / '-Inf'
    """
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"Cannot format boolean value: {value!r}")

    if isinstance(value, (int, np.integer)):
        return str(int(value))

    if not isinstance(value, np.floating):
        value = np.float64(value)

    if np.isnan(value):
        return "NaN"
    if np.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    scientific = np.format_float_scientific(value, unique=True, trim='-', exp_digits=2)
    exponent = int(scientific.rsplit('e', 1)[1])

    if MIN_PLAIN_EXP <= exponent < MAX_PLAIN_EXP:
        return np.format_float_positional(value, unique=True, trim='-')
    return scientific
