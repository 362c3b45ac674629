import os
import re
from collections import defaultdict

import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from constants.string_constants import RESULTS_BASE_PATH

# --- Configuration ---
RESULTS_DIR = RESULTS_BASE_PATH
OUTPUT_DIR = 'visualizations_and_stats'
SUMMARY_STATS_FILE = os.path.join(OUTPUT_DIR, 'summary_statistics_excl_warmup.csv')
PERF_COL = 'MElementsPerSec'
# Plotting Aesthetics
FIG_WIDTH = 6
FIG_DPI = 150
COMP_FIG_HEIGHT = 6
RUN_FIG_HEIGHT = 6
COMP_BAR_WIDTH = 0.5
LABEL_FONT_SIZE = 13
TITLE_FONT_SIZE = 15
TICK_FONT_SIZE = 11
LEGEND_FONT_SIZE = 12
ANNOTATION_FONT_SIZE = 12
BAR_LABEL_Y_FACTOR = 1.15
# --- End Configuration ---


# --- Helper Functions ---
def sanitize_filename(name):
    """Removes potentially problematic characters for filenames."""
    name = re.sub(r'[\\/*?:"<>|]+', '_', name)
    name = re.sub(r'\s+', '_', name)
    name = re.sub(r'[^a-zA-Z0-9_.-]', '', name)
    return name


def get_implementation_sort_key(impl_name):
    """Baselines (NumPy) first, then the library implementations, alphabetically within each group."""
    if 'numpy' in impl_name.lower():
        return (0, impl_name)
    return (1, impl_name)


def load_data_file(file_path):
    """Loads one benchmark CSV, dropping failed (inf) runs."""
    try:
        df = pd.read_csv(file_path, comment='#', skipinitialspace=True)
        if 'Run' not in df.columns or 'Time(s)' not in df.columns:
            print(f"Warning: Required columns ('Run', 'Time(s)') not found in {file_path}. Skipping.")
            return None
        df['Time(s)'] = pd.to_numeric(df['Time(s)'], errors='coerce')
        df = df[df['Time(s)'] != float('inf')].dropna(subset=['Time(s)'])
        if PERF_COL in df.columns:
            df[PERF_COL] = pd.to_numeric(df[PERF_COL], errors='coerce')
            df = df[df[PERF_COL] > 0]
        if df.empty:
            return None
        return df
    except pd.errors.EmptyDataError:
        print(f"Warning: Skipping empty file {file_path}")
        return None


def calculate_stats_excluding_warmup(series):
    """Calculates stats for a series already excluding the warm-up run."""
    data = series.dropna()
    if data.empty:
        return {'mean': float('nan'), 'median': float('nan'), 'stdev': float('nan'), 'count': 0}
    stdev = data.std() if len(data) >= 2 else 0.0
    return {'mean': data.mean(), 'median': data.median(), 'stdev': stdev, 'count': len(data)}


def plot_individual_run(df, config_label, implementation, output_dir):
    """Execution time per run, excluding Run 1."""
    df_plot = df[df['Run'] > 1]
    if df_plot.empty:
        return

    plt.figure(figsize=(FIG_WIDTH, RUN_FIG_HEIGHT))
    time_median = df_plot['Time(s)'].median()
    plt.plot(df_plot['Run'], df_plot['Time(s)'], marker='o', linestyle='-', label='Time (s)')
    plt.axhline(time_median, color='r', linestyle='--', linewidth=1.5, label=f'Median: {time_median:.4f}')
    plt.xlabel('Run Number (Warm-up Excluded)', fontsize=LABEL_FONT_SIZE)
    plt.ylabel('Time (s)', fontsize=LABEL_FONT_SIZE)
    plt.title(f'Execution Time per Run\n{config_label}\nImpl: {implementation}', fontsize=TITLE_FONT_SIZE)
    plt.xticks(fontsize=TICK_FONT_SIZE)
    plt.yticks(fontsize=TICK_FONT_SIZE)
    plt.grid(True, which='both', linestyle='--', linewidth=0.5)
    plt.legend(fontsize=LEGEND_FONT_SIZE)
    plt.tight_layout()
    plot_path = os.path.join(output_dir, f"{sanitize_filename(implementation)}_time_vs_run_excl_warmup.png")
    plt.savefig(plot_path, dpi=FIG_DPI)
    plt.close()


def plot_comparison(stats_dict, metric_name, unit, config_label, output_dir, use_median=False):
    """Bar chart of one statistic across implementations, log Y axis."""
    sorted_impl_keys = sorted(stats_dict.keys(), key=get_implementation_sort_key)
    stat_key = 'median' if use_median else 'mean'
    plot_title_stat = 'Median' if use_median else 'Average'

    rows = [(k, stats_dict[k][metric_name][stat_key], stats_dict[k][metric_name]['stdev'])
            for k in sorted_impl_keys if metric_name in stats_dict[k]]
    rows = [(k, v, e if pd.notna(e) else 0) for k, v, e in rows if pd.notna(v) and v > 0]
    if not rows:
        return

    labels, values, errors = zip(*rows)
    plt.figure(figsize=(FIG_WIDTH, COMP_FIG_HEIGHT))
    ax = plt.gca()
    x_positions = range(len(values))
    bars = ax.bar(x_positions, values, yerr=errors, capsize=5, color='skyblue', edgecolor='black',
                  log=True, width=COMP_BAR_WIDTH)

    ax.set_ylabel(f'{plot_title_stat} {metric_name} ({unit})', fontsize=LABEL_FONT_SIZE)
    ax.set_title(f'Comparison of {plot_title_stat} {metric_name}\n{config_label}', fontsize=TITLE_FONT_SIZE)
    ax.set_xticks(list(x_positions))
    ax.set_xticklabels(labels, rotation=30, ha='right', fontsize=TICK_FONT_SIZE)
    ax.grid(True, which='major', axis='y', linestyle='-', linewidth=0.7)

    for bar in bars:
        yval = bar.get_height()
        fmt = '{:,.2f}' if abs(yval) >= 1 else '{:.4f}'
        ax.text(x=bar.get_x() + bar.get_width() / 2.0, y=yval * BAR_LABEL_Y_FACTOR,
                s=fmt.format(yval), va='bottom', ha='center', fontsize=ANNOTATION_FONT_SIZE)

    plt.tight_layout()
    comp_plot_path = os.path.join(
        output_dir, f"comparison_{plot_title_stat.lower()}_{sanitize_filename(metric_name)}_excl_warmup_log.png")
    plt.savefig(comp_plot_path, dpi=FIG_DPI)
    plt.close()


def collect_results(results_dir=RESULTS_DIR):
    """results/<algorithm>/<dtype>/<size>/<impl>.txt -> {(algorithm, dtype, size): {impl: DataFrame}}"""
    all_data = defaultdict(dict)
    for root, _, files in os.walk(results_dir):
        for file_name in files:
            if not file_name.endswith('.txt'):
                continue
            file_path = os.path.join(root, file_name)
            parts = os.path.relpath(file_path, results_dir).split(os.sep)
            if len(parts) != 4:
                continue
            algorithm, dtype_name, size_str, impl_file = parts
            df = load_data_file(file_path)
            if df is not None:
                all_data[(algorithm, dtype_name, size_str)][impl_file[:-len('.txt')]] = df
    return all_data


def generate_all_plots(results_dir=RESULTS_DIR, output_dir=OUTPUT_DIR):
    """Loads every result file, writes per-run plots, comparison plots and a summary CSV."""
    os.makedirs(output_dir, exist_ok=True)
    print(f"Input directory: {os.path.abspath(results_dir)}")
    print(f"Output directory: {os.path.abspath(output_dir)}")
    print("NOTE: All statistics and plots will exclude the first run (warm-up).")

    all_data = collect_results(results_dir)
    summary_rows = []

    for (algorithm, dtype_name, size_str), implementations in sorted(all_data.items()):
        config_label = f'Alg: {algorithm}\nConfig: {dtype_name}, {size_str}'
        config_output_dir = os.path.join(output_dir, sanitize_filename(algorithm),
                                         sanitize_filename(dtype_name), sanitize_filename(size_str))
        os.makedirs(config_output_dir, exist_ok=True)

        current_run_stats = {}
        for implementation_name, df in implementations.items():
            plot_individual_run(df, config_label, implementation_name, config_output_dir)
            df_stats = df[df['Run'] > 1]
            current_run_stats[implementation_name] = {}
            for metric in ('Time(s)', PERF_COL):
                if metric not in df_stats.columns:
                    continue
                stats = calculate_stats_excluding_warmup(df_stats[metric])
                current_run_stats[implementation_name][metric] = stats
                summary_rows.append({'Algorithm': algorithm, 'DType': dtype_name, 'Size': size_str,
                                     'Implementation': implementation_name, 'Metric': metric,
                                     'Mean': stats['mean'], 'Median': stats['median'],
                                     'StdDev': stats['stdev'], 'Count': stats['count']})

        plot_comparison(current_run_stats, 'Time(s)', 's', config_label, config_output_dir)
        plot_comparison(current_run_stats, 'Time(s)', 's', config_label, config_output_dir, use_median=True)
        plot_comparison(current_run_stats, PERF_COL, 'M elements/s', config_label, config_output_dir)

    if summary_rows:
        pd.DataFrame(summary_rows).to_csv(os.path.join(output_dir, os.path.basename(SUMMARY_STATS_FILE)),
                                          index=False, float_format='%.6f')
        print(f"Summary statistics written to {os.path.join(output_dir, os.path.basename(SUMMARY_STATS_FILE))}")
    else:
        print("No benchmark results found.")


if __name__ == "__main__":
    generate_all_plots()
