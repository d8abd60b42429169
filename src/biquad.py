"""
Biquad Filter

Second-order IIR section in direct form I. The coefficients of the peaking equalizer follow
the Audio EQ Cookbook (R. Bristow-Johnson) and are normalized so that a0 = 1.

The per-buffer recurrence is compiled with numba; the filter state lives in a small float64
array so it carries over from one buffer to the next without any allocation.
"""
import math
from typing import NamedTuple

from numba import njit, void, float64
import numpy as np


class BiquadCoefficients(NamedTuple):
    b0: float
    b1: float
    b2: float
    a1: float
    a2: float


def peaking_eq(fs: float, f0: float, q: float, db_gain: float) -> BiquadCoefficients:
    """
    Derive the coefficients of a peaking EQ section
    :param fs: The sample rate in Hz
    :param f0: The center frequency in Hz
    :param q: The quality factor
    :param db_gain: The gain at the center frequency in dB
    :return: The normalized coefficients (b0, b1, b2, a1, a2)
    """
    if fs <= 0:
        raise ValueError("The sample rate must be greater than 0.")
    if f0 <= 0:
        raise ValueError("The center frequency must be greater than 0.")
    if q <= 0:
        raise ValueError("The quality factor must be greater than 0.")

    A = 10.0 ** (db_gain / 40.0)
    omega = 2.0 * math.pi * f0 / fs
    alpha = math.sin(omega) / (2.0 * q)

    a0 = 1.0 + alpha / A
    b0 = (1.0 + alpha * A) / a0
    b1 = (-2.0 * math.cos(omega)) / a0
    b2 = (1.0 - alpha * A) / a0
    # The peaking shape has the same z^-1 term in numerator and denominator
    a1 = (-2.0 * math.cos(omega)) / a0
    a2 = (1.0 - alpha / A) / a0

    return BiquadCoefficients(b0, b1, b2, a1, a2)


# Compiled recurrence
# ================================================================
@njit(void(float64[::1], float64[::1], float64[::1]))
def biquad_process(buf: np.ndarray, coeffs: np.ndarray, state: np.ndarray) -> None:
    b0, b1, b2, a1, a2 = coeffs[0], coeffs[1], coeffs[2], coeffs[3], coeffs[4]
    # state = [x1, x2, y1, y2]
    x1, x2, y1, y2 = state[0], state[1], state[2], state[3]
    for i in range(buf.shape[0]):
        x = buf[i]
        y = b0 * x + b1 * x1 + b2 * x2 - a1 * y1 - a2 * y2
        x2 = x1
        x1 = x
        y2 = y1
        y1 = y
        buf[i] = y
    state[0] = x1
    state[1] = x2
    state[2] = y1
    state[3] = y2
# ================================================================


class Biquad:
    """
    Stateful biquad section
    """
    def __init__(self, coefficients: BiquadCoefficients):
        """
        :param coefficients: The normalized coefficients, see `peaking_eq`
        """
        self.coefficients = BiquadCoefficients(*coefficients)
        self.coeffs = np.array(self.coefficients, dtype=np.float64)
        self.state = np.zeros(4, dtype=np.float64)

    @classmethod
    def peaking(cls, fs: float, f0: float, q: float, db_gain: float) -> 'Biquad':
        return cls(peaking_eq(fs, f0, q, db_gain))

    def reset(self) -> None:
        self.state[:] = 0.0

    def process_sample(self, x: float) -> float:
        """
        Filter a single sample
        :param x: The input sample
        :return: The output sample
        """
        b0, b1, b2, a1, a2 = self.coefficients
        x1, x2, y1, y2 = self.state
        y = b0 * x + b1 * x1 + b2 * x2 - a1 * y1 - a2 * y2
        self.state[:] = (x, x1, y, y1)
        return float(y)

    def process(self, buf: np.ndarray) -> np.ndarray:
        """
        Filter a buffer in place
        :param buf: The buffer (1D float64, C-contiguous)
        :return: The same buffer, now holding the filter output
        """
        biquad_process(buf, self.coeffs, self.state)
        return buf
