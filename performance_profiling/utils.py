import time
from functools import lru_cache

import numpy as np
import cpuinfo
import psutil

from arrays_support.support.generation import generate_array, generate_bool_array
from constants.params import VALUE_HIGH, VALUE_LOW


@lru_cache(maxsize=None)
def get_cpu_info():
    """Returns CPU info using py-cpuinfo."""
    try:
        cpu_info = cpuinfo.get_cpu_info()
        return cpu_info['brand_raw']
    except Exception as e:
        return f"Error: {e}"


def get_cpu_cores():
    return f"{psutil.cpu_count(logical=False)} physical, {psutil.cpu_count(logical=True)} logical"


def get_ram_info():
    """Returns RAM info using psutil."""
    ram = psutil.virtual_memory()
    return f"Total: {ram.total / (1024 ** 3):.2f} GB, Available: {ram.available / (1024 ** 3):.2f} GB"


def write_result_header(file):
    file.write(f"# CPU Info: {get_cpu_info()}\n")
    file.write(f"# RAM Info: {get_ram_info()}\n")


def generate_benchmark_array(size, dtype_name, seed):
    """Fresh array for one run; integer values are clipped to the benchmark value span."""
    if dtype_name == "bool":
        return generate_bool_array(size, seed=seed)
    dtype = np.dtype(dtype_name)
    info = np.iinfo(dtype)
    low = max(info.min, VALUE_LOW)
    high = min(info.max + 1, VALUE_HIGH)
    return generate_array(size, dtype=dtype, low=low, high=high, seed=seed)


def get_formatted_elapsed_time(start_time):
    elapsed_time = time.time() - start_time
    formatted_time = time.strftime("%H:%M:%S", time.gmtime(elapsed_time))
    return formatted_time
