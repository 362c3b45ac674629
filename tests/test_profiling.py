import os

import numpy as np
import pandas as pd

from performance_profiling.counting_sort.profile_counting_sort_all import IMPL_CONFIG
from performance_profiling.rotation.profile_rotation_all import build_impl_config, numpy_roll
from performance_profiling.runner import profile_and_save_stats
from performance_profiling.utils import generate_benchmark_array
from plotter import collect_results, load_data_file


def test_benchmark_arrays_respect_dtype_bounds():
    arr = generate_benchmark_array(500, "int8", seed=1)
    assert arr.dtype == np.int8
    arr = generate_benchmark_array(500, "int64", seed=1)
    assert arr.min() >= -(2 ** 15) and arr.max() < 2 ** 15
    assert generate_benchmark_array(10, "bool", seed=1).dtype == np.bool_


def test_numpy_roll_writes_back_in_place():
    arr = np.arange(5)
    numpy_roll(arr, 2)
    np.testing.assert_array_equal(arr, [3, 4, 0, 1, 2])


def test_counting_sort_profile_writes_result_files(tmp_path):
    output_dir = os.path.join(tmp_path, "counting_sort", "int16", "200")
    profile_and_save_stats(
        label="Counting Sort",
        output_dir=output_dir,
        impl_config=IMPL_CONFIG,
        array_size=200,
        total_runs=3,
        dtype_name="int16",
        expected_fn=np.sort
    )

    for config_item in IMPL_CONFIG.values():
        df = load_data_file(os.path.join(output_dir, config_item["file_suffix"]))
        assert list(df["Run"]) == [1, 2, 3]
        assert (df["Size"] == 200).all()

    collected = collect_results(str(tmp_path))
    assert set(collected) == {("counting_sort", "int16", "200")}
    assert len(collected[("counting_sort", "int16", "200")]) == len(IMPL_CONFIG)


def test_rotation_profile_writes_result_files(tmp_path):
    impl_config = build_impl_config(7)
    profile_and_save_stats(
        label="Rotation",
        output_dir=str(tmp_path),
        impl_config=impl_config,
        array_size=50,
        total_runs=2,
        dtype_name="int32",
        expected_fn=lambda arr: np.roll(arr, 7),
        run_warmup=False
    )
    df = pd.read_csv(os.path.join(tmp_path, "cpu_numba_stats.txt"), comment="#")
    assert len(df) == 2
    assert (df["Time(s)"] < float("inf")).all()
