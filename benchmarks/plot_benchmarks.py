"""
This script plots the per-sample cost and the real-time factor of the biquad cascade
benchmark against the buffer length.
"""
import os
import numpy as np
import matplotlib.pyplot as plt

import scienceplots

from bench_config import FS

plt.style.use(['science', 'grid', 'no-latex', 'std-colors'])

TEXT_WIDTH = 234.0 / 72.27  # inches
TEXT_HEIGHT = TEXT_WIDTH * (8/10)


def plot_metric(buffer_lengths: np.ndarray, logs: np.ndarray, y_label: str = "", label: str = ""):
    """
    Plot the mean of a metric over the repeats with its min/max band
    :param buffer_lengths: The buffer lengths (x-axis)
    :param logs: The metric, shape (num_repeats, num_lengths)
    :param y_label: The y-axis label
    :param label: The legend label
    """
    fig, ax = plt.subplots(1, 1, layout='tight', dpi=300)
    ax.plot(buffer_lengths, np.mean(logs, axis=0), label=label, marker='o', markersize=2)
    ax.fill_between(buffer_lengths, np.min(logs, axis=0), np.max(logs, axis=0), alpha=0.2)
    ax.set_xscale('log', base=2)
    ax.set_xlabel('Buffer length (samples)')
    ax.set_ylabel(y_label)
    ax.legend(fontsize=7, loc='upper right')
    fig.set_size_inches(TEXT_WIDTH, TEXT_HEIGHT)
    return fig


def main():
    """ Main function """
    workspace_dir = os.path.dirname(os.path.abspath(__file__))
    os.makedirs(os.path.join(workspace_dir, './figures'), exist_ok=True)
    data = np.load(os.path.join(workspace_dir, './data/benchmark_buffer_size.npz'))
    buffer_lengths = data['buffer_lengths']

    fig = plot_metric(buffer_lengths, data['ns_per_sample'],
                      y_label='Time per sample per filter (ns)', label='Biquad cascade')
    fig.axes[0].set_yscale('log')
    fig.savefig(os.path.join(workspace_dir, './figures/benchmark_ns_per_sample.pdf'))

    fig = plot_metric(buffer_lengths, data['realtime_factors'],
                      y_label='Real-time factor', label='Biquad cascade')
    # Buffer duration in ms on a secondary axis
    secax = fig.axes[0].secondary_xaxis('top', functions=(lambda n: n / FS * 1e3, lambda ms: ms * FS / 1e3))
    secax.set_xlabel('Buffer duration (ms)')
    fig.savefig(os.path.join(workspace_dir, './figures/benchmark_realtime_factor.pdf'))


if __name__ == "__main__":
    main()
