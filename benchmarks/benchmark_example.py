# benchmark_example.py
import pyperf

from bench_config import BenchConfig
from dsp_bench import DspBench

BUFFER_LENGTH = 256


def bencher(loops, bench: DspBench, buffer_length: int) -> float:
    elapsed_ns = 0
    for _ in range(loops):
        elapsed_ns += bench.run_trial(buffer_length).elapsed_ns
    return elapsed_ns / 1e9


def main():
    runner = pyperf.Runner(min_time=0.01)

    # Smaller budget than the full sweep, pyperf takes care of the repetitions
    config = BenchConfig(total_samples=2 ** 16)
    bench = DspBench(config)

    runner.bench_time_func(f'square + {config.filter_count} biquads - {BUFFER_LENGTH} samples',
                           bencher, bench, BUFFER_LENGTH)


if __name__ == "__main__":
    main()
