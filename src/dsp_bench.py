"""
DSP Bench

Times a square-wave generator followed by a cascade of peaking-EQ biquads for a sweep of
buffer lengths. Every trial processes the same total number of samples, only the buffer
granularity changes, so differences in the normalized cost reflect the per-buffer overhead.
"""
import logging
import math
import time
from typing import Callable, Iterator, NamedTuple, Optional

import numpy as np

from bench_config import BenchConfig
from filter_cascade import FilterCascade
from pcm_writer import PcmFileWriter
from square_wave import SquareWave

logger = logging.getLogger(__name__)


class TrialResult(NamedTuple):
    buffer_length: int
    ns_per_sample_per_filter: float
    realtime_factor: float
    buffer_count: int
    elapsed_ns: int


def compute_metrics(elapsed_ns: int, filter_count: int, total_samples: int,
                    sample_rate: float) -> tuple:
    """
    Normalize an elapsed time to the cost of one filter on one sample
    :param elapsed_ns: The elapsed wall-clock time in nanoseconds
    :param filter_count: The number of filters in the cascade
    :param total_samples: The sample budget of the trial
    :param sample_rate: The sample rate in Hz
    :return: (ns per sample per filter, real-time factor)
    """
    duration = elapsed_ns / filter_count / total_samples
    if duration == 0:
        return 0.0, math.inf
    realtime = 1e9 / duration / sample_rate
    return duration, realtime


def format_trial(result: TrialResult) -> str:
    """ Report lines for one trial """
    return (f"Buffer size: {result.buffer_length} samples\n"
            f"\tvector\t{result.ns_per_sample_per_filter:g} ns"
            f"\t{result.realtime_factor:g}x for generator + IIR filter")


class DspBench:
    """
    Benchmark harness owning the generator, the filter cascade and the trial buffers
    """
    def __init__(self, config: BenchConfig = BenchConfig(),
                 sink_factory: Optional[Callable[[int], PcmFileWriter]] = None):
        """
        :param config: The benchmark configuration
        :param sink_factory: Optional callable returning a sink for a given buffer length,
            defaults to a PcmFileWriter when config.write_buffers is set
        """
        self.config = config
        if sink_factory is None and config.write_buffers:
            sink_factory = lambda buffer_length: PcmFileWriter(config.output_path(buffer_length))
        self.sink_factory = sink_factory

        self.generator = SquareWave(config.square_frequency, config.sample_rate)
        self.cascade = FilterCascade.peaking_bank(
            config.filter_count, config.sample_rate, config.eq_center_frequency,
            config.eq_q, config.eq_gain_db)

        self.__warmup__()

    def __warmup__(self) -> None:
        buf = np.zeros(2 ** self.config.min_buffer_exp)
        for _ in range(self.config.warmup_it):
            self.generator.fill(buf)
            self.cascade.apply(buf)
        self.reset()

    def reset(self) -> None:
        self.generator.reset()
        self.cascade.reset_all()

    def run_trial(self, buffer_length: int, sink=None) -> TrialResult:
        """
        Time the pipeline for one buffer length
        :param buffer_length: The number of samples per buffer
        :param sink: Optional consumer with a write_buffer(buf) method, called after every buffer
        :return: The trial result
        """
        buffer_length = int(buffer_length)
        if buffer_length < 1:
            raise ValueError("The buffer length must be at least 1.")

        config = self.config
        buffer_count = config.total_samples // buffer_length
        buf = np.zeros(buffer_length, dtype=np.float64)
        generator = self.generator
        cascade = self.cascade

        self.reset()
        logger.info('Trial started for Buffer Length: %d, Buffer Count: %d',
                    buffer_length, buffer_count)

        start = time.perf_counter_ns()
        if sink is None:
            for _ in range(buffer_count):
                generator.fill(buf)
                cascade.apply(buf)
        else:
            for _ in range(buffer_count):
                generator.fill(buf)
                cascade.apply(buf)
                sink.write_buffer(buf)
        elapsed_ns = time.perf_counter_ns() - start

        duration, realtime = compute_metrics(elapsed_ns, config.filter_count,
                                             config.total_samples, config.sample_rate)
        logger.info('Trial finished for Buffer Length: %d, ns/sample/filter: %f, realtime: %fx',
                    buffer_length, duration, realtime)
        return TrialResult(buffer_length, duration, realtime, buffer_count, elapsed_ns)

    def sweep(self) -> Iterator[TrialResult]:
        """ Run one trial per configured buffer length """
        for buffer_length in self.config.buffer_lengths:
            buffer_length = int(buffer_length)
            if self.sink_factory is None:
                yield self.run_trial(buffer_length)
                continue
            sink = self.sink_factory(buffer_length)
            try:
                result = self.run_trial(buffer_length, sink)
            finally:
                sink.close()
            yield result

    def run(self) -> list:
        return list(self.sweep())


def main() -> int:
    print("DSP Bench Python")
    bench = DspBench(BenchConfig())
    for result in bench.sweep():
        print(format_trial(result))
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
