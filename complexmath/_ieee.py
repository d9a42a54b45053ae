"""
Float-domain primitives that never raise.

Plain Python floats raise ZeroDivisionError on x / 0.0 and math.exp raises
OverflowError past ~709, while IEEE-754 says these produce inf / NaN.
Everything here goes through numpy float64 with warnings silenced and hands
back a builtin float.
"""
import numpy as np


def div(a: float, b: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.divide(np.float64(a), np.float64(b)))


def exp(x: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.exp(np.float64(x)))


def sin(x: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.sin(np.float64(x)))


def cos(x: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.cos(np.float64(x)))


def sinh(x: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.sinh(np.float64(x)))


def cosh(x: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.cosh(np.float64(x)))


def hypot(x: float, y: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.hypot(np.float64(x), np.float64(y)))
