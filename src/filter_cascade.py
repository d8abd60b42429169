"""
Filter Cascade

Ordered chain of biquad sections applied in series to a shared buffer. Each section is a
separate stateful object that is invoked once per buffer, so the per-call overhead grows
with the number of buffers, which is the quantity the benchmark measures.
"""
import numpy as np

from biquad import Biquad, peaking_eq


class FilterCascade:
    """
    Series connection of biquad sections, the output of section k feeds section k + 1
    """
    def __init__(self, biquads: list):
        """
        :param biquads: The biquad sections in processing order
        """
        if len(biquads) < 1:
            raise ValueError("The cascade must contain at least one filter.")
        self.biquads = list(biquads)

    @classmethod
    def peaking_bank(cls, filter_count: int, fs: float, f0: float, q: float,
                     db_gain: float) -> 'FilterCascade':
        """
        Build an EQ bank of peaking sections with alternating boost and cut
        :param filter_count: The number of sections
        :param fs: The sample rate in Hz
        :param f0: The center frequency in Hz
        :param q: The quality factor
        :param db_gain: The magnitude of the gain in dB, the first section boosts
        :return: The cascade
        """
        if filter_count < 1:
            raise ValueError("The filter count must be at least 1.")
        boost = peaking_eq(fs, f0, q, db_gain)
        cut = peaking_eq(fs, f0, q, -db_gain)
        return cls([Biquad(boost if i % 2 == 0 else cut) for i in range(filter_count)])

    def __len__(self) -> int:
        return len(self.biquads)

    def __iter__(self):
        return iter(self.biquads)

    def __getitem__(self, index: int) -> Biquad:
        return self.biquads[index]

    def reset_all(self) -> None:
        for biquad in self.biquads:
            biquad.reset()

    def apply(self, buf: np.ndarray) -> np.ndarray:
        """
        Run the buffer through every section in order, in place
        :param buf: The buffer (1D float64, C-contiguous)
        :return: The same buffer
        """
        for biquad in self.biquads:
            biquad.process(buf)
        return buf

    def process_sample(self, x: float) -> float:
        """ Run one sample through the full cascade """
        for biquad in self.biquads:
            x = biquad.process_sample(x)
        return x
