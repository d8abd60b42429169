"""
This script benchmarks the square wave + biquad cascade pipeline for different buffer
lengths. The full sweep is repeated NUM_REPEATS times and the results are saved to a .npz file.
"""
import os
import time
import logging

import numpy as np

from bench_config import BenchConfig
from dsp_bench import DspBench, format_trial

NUM_REPEATS = 5


def bench_buffer_size(config: BenchConfig, num_repeats: int = NUM_REPEATS) -> dict:
    """
    Benchmark the pipeline for every buffer length of the configuration
    :param config: The benchmark configuration
    :param num_repeats: How many times the whole sweep is run
    :return: The buffer lengths and the (num_repeats, num_lengths) metric arrays
    """
    bench = DspBench(config)
    ns_per_sample = []
    realtime_factors = []
    for repeat in range(num_repeats):
        logging.info('Sweep %d/%d started', repeat + 1, num_repeats)
        ns_log = []
        rt_log = []
        for result in bench.sweep():
            print(format_trial(result))
            ns_log.append(result.ns_per_sample_per_filter)
            rt_log.append(result.realtime_factor)
            time.sleep(0.5)
        ns_per_sample.append(ns_log)
        realtime_factors.append(rt_log)

    return {
        'buffer_lengths': config.buffer_lengths,
        'ns_per_sample': np.array(ns_per_sample),
        'realtime_factors': np.array(realtime_factors),
    }


# Configure logging
logging.basicConfig(filename='benchmark_buffer_size.log', level=logging.INFO,
                    format='%(asctime)s - %(message)s')


if __name__ == '__main__':
    logging.info('Starting benchmark...')
    workspace_dir = os.path.dirname(os.path.abspath(__file__))
    results = bench_buffer_size(BenchConfig())

    # Save the results to a file
    np.savez(os.path.join(workspace_dir, './data/benchmark_buffer_size.npz'), **results)
    logging.info('Benchmark finished!')
