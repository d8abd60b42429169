"""
This file contains the configuration for the IIR buffer-size benchmark.
"""
from dataclasses import dataclass

import numpy as np

# Default parameters
FS = 48_000.0
SAMPLE_COUNT = 524_288  # 2 ** 19 samples per trial
FILTER_COUNT = 100
MIN_BUFFER_EXP = 3  # 8 samples
MAX_BUFFER_EXP = 12  # exclusive, last trial is 2048 samples
SQUARE_FREQUENCY = 50.0
EQ_CENTER_FREQUENCY = 50.0
EQ_Q = 0.3
EQ_GAIN_DB = 2.0
WARMUP_IT = 10
OUTPUT_PREFIX = '/tmp/vec_overhead_py_'


@dataclass(frozen=True)
class BenchConfig:
    """
    Immutable set of parameters for one benchmark run
    """
    sample_rate: float = FS
    total_samples: int = SAMPLE_COUNT
    filter_count: int = FILTER_COUNT
    min_buffer_exp: int = MIN_BUFFER_EXP
    max_buffer_exp: int = MAX_BUFFER_EXP
    square_frequency: float = SQUARE_FREQUENCY
    eq_center_frequency: float = EQ_CENTER_FREQUENCY
    eq_q: float = EQ_Q
    eq_gain_db: float = EQ_GAIN_DB
    warmup_it: int = WARMUP_IT
    write_buffers: bool = False
    output_prefix: str = OUTPUT_PREFIX

    def __post_init__(self):
        if self.sample_rate <= 0:
            raise ValueError("The sample rate must be greater than 0.")
        if self.total_samples < 1:
            raise ValueError("The total sample count must be at least 1.")
        if self.filter_count < 1:
            raise ValueError("The filter count must be at least 1.")
        if self.min_buffer_exp < 0 or self.max_buffer_exp <= self.min_buffer_exp:
            raise ValueError("The buffer exponent range must satisfy 0 <= min < max.")
        if not 0 < self.square_frequency < self.sample_rate / 2:
            raise ValueError("The square wave frequency must lie between 0 and the Nyquist frequency.")
        if self.eq_center_frequency <= 0 or self.eq_q <= 0:
            raise ValueError("The EQ center frequency and Q must be greater than 0.")
        if self.warmup_it < 0:
            raise ValueError("The number of warm-up iterations cannot be negative.")

    @property
    def buffer_lengths(self) -> np.ndarray:
        """ Buffer lengths of the sweep: 2 ** e for min_buffer_exp <= e < max_buffer_exp """
        return 2 ** np.arange(self.min_buffer_exp, self.max_buffer_exp)

    def output_path(self, buffer_length: int) -> str:
        """ Path of the raw PCM dump for one trial """
        return f"{self.output_prefix}{buffer_length}"
