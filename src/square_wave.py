"""
Square Wave Generator

Stateful square-wave source used as the benchmark input signal. The wave toggles between
-0.5 and +0.5 every `switch_samples` samples and stays phase-continuous across buffers,
only a call to `reset` brings it back to the start of the low half period.
"""
import math

from numba import njit, void, float64, int64
import numpy as np


# Compiled fill loop
# ================================================================
@njit(void(float64[::1], int64, int64[::1]))
def fill_square(buf: np.ndarray, switch_samples: int, state: np.ndarray) -> None:
    # state = [status, progress]
    status = state[0]
    progress = state[1]
    for i in range(buf.shape[0]):
        if progress == switch_samples:
            progress = 0
            status = 1 - status
        buf[i] = 0.5 if status else -0.5
        progress += 1
    state[0] = status
    state[1] = progress
# ================================================================


class SquareWave:
    """
    Square wave generator with amplitude 0.5 and a period of 2 * switch_samples samples
    """
    def __init__(self, frequency: float, sample_rate: float):
        """
        :param frequency: The frequency of the square wave in Hz
        :param sample_rate: The sample rate in Hz
        """
        if frequency <= 0:
            raise ValueError("The frequency must be greater than 0.")
        if sample_rate <= 0:
            raise ValueError("The sample rate must be greater than 0.")

        self.frequency = frequency
        self.sample_rate = sample_rate
        # Round half away from zero
        self.switch_samples = int(math.floor(sample_rate / frequency / 2.0 + 0.5))
        if self.switch_samples < 1:
            raise ValueError("The frequency is too high for the sample rate (half period rounds to 0).")

        self._state = np.zeros(2, dtype=np.int64)

    @property
    def status(self) -> bool:
        return bool(self._state[0])

    @property
    def progress(self) -> int:
        return int(self._state[1])

    @property
    def period(self) -> int:
        return 2 * self.switch_samples

    def reset(self) -> None:
        self._state[:] = 0

    def fill(self, buf: np.ndarray) -> np.ndarray:
        """
        Overwrite the buffer with the next samples of the square wave
        :param buf: The buffer to fill (1D float64, C-contiguous)
        :return: The same buffer
        """
        fill_square(buf, self.switch_samples, self._state)
        return buf
