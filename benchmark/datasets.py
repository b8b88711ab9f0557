"""
Functionality to create the workloads used in the benchmark.
"""
import h5py
import os
import time
import numpy as np


def get_dataset_fn(dataset_name: str) -> str:
    """
    Returns the full file path for a given workload name in the data directory.

    Args:
        dataset_name (str): The name of the workload.

    Returns:
        str: The full file path of the workload.
    """
    if not os.path.exists("data"):
        os.mkdir("data")
    return os.path.join("data", f"{dataset_name}.hdf5")


def get_dataset(dataset_name: str) -> np.ndarray:
    """
    Loads a workload, creating it locally first if it is not present yet.

    Args:
        dataset_name (str): The name of the workload, a key of WORKLOADS.

    Returns:
        np.ndarray: The float64 values of the workload.
    """
    hdf5_filename = get_dataset_fn(dataset_name)
    if not os.path.exists(hdf5_filename):
        if dataset_name not in WORKLOADS:
            raise KeyError(f"Unknown workload {dataset_name}")
        print("Creating workload locally")
        WORKLOADS[dataset_name]['prepare']()

    with h5py.File(hdf5_filename, "r") as f:
        return np.array(f["data"], dtype=np.float64)

def write_output(X: np.ndarray, name: str):
    t0 = time.time()
    with h5py.File(get_dataset_fn(name), "w") as f:
        f.create_dataset("data", data=X.astype(np.float64))
    print(f"Writing {name} took {(time.time() - t0):.2f}s.")

def uniform(n, seed=42):
    name = f"uniform-{n // 1000}k"
    if os.path.exists(get_dataset_fn(name)):
        return
    rng = np.random.default_rng(seed)
    write_output(rng.random(n), name)

def gaussian(n, seed=42):
    name = f"gaussian-{n // 1000}k"
    if os.path.exists(get_dataset_fn(name)):
        return
    rng = np.random.default_rng(seed)
    write_output(rng.standard_normal(n), name)

def ascending(n):
    name = f"ascending-{n // 1000}k"
    if os.path.exists(get_dataset_fn(name)):
        return
    write_output(np.arange(n, dtype=np.float64), name)

def descending(n):
    name = f"descending-{n // 1000}k"
    if os.path.exists(get_dataset_fn(name)):
        return
    write_output(np.arange(n, 0, -1, dtype=np.float64), name)

def duplicates(n, distinct=8, seed=42):
    # few distinct values, lots of ties
    name = f"duplicates-{n // 1000}k"
    if os.path.exists(get_dataset_fn(name)):
        return
    rng = np.random.default_rng(seed)
    write_output(rng.integers(0, distinct, n).astype(np.float64), name)

WORKLOADS = {
    'uniform-1k': {
        'prepare': lambda: uniform(1_000),
    },
    'uniform-10k': {
        'prepare': lambda: uniform(10_000),
    },
    'uniform-100k': {
        'prepare': lambda: uniform(100_000),
    },
    'gaussian-10k': {
        'prepare': lambda: gaussian(10_000),
    },
    'ascending-10k': {
        'prepare': lambda: ascending(10_000),
    },
    'descending-10k': {
        'prepare': lambda: descending(10_000),
    },
    'duplicates-10k': {
        'prepare': lambda: duplicates(10_000),
    },
}
