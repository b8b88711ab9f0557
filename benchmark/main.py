import argparse
import numpy as np
import time
import json

from tqdm.auto import tqdm
from typing import Callable, Dict, List, Tuple

import numheap
from numheap import Heap
from benchmark.datasets import WORKLOADS, get_dataset


def _repeat(op):
    def run(heap, X, k):
        for v in X[:k]:
            heap = op(heap, v)
        return heap
    return run

OPERATIONS: Dict[str, Callable[[Heap, np.ndarray, int], Heap]] = {
    'build': lambda heap, X, k: numheap.build(X, heap.order),
    'push': lambda heap, X, k: numheap.push(heap, X[:k]),
    'bounded-insert': _repeat(numheap.bounded_insert),
    'pop': lambda heap, X, k: numheap.pop(heap, k)[1],
    'pushpop': _repeat(lambda heap, v: numheap.pushpop(heap, v)[1]),
    'poppush': _repeat(lambda heap, v: numheap.poppush(heap, v)[1]),
    'batch-pushpop': lambda heap, X, k: numheap.batch_pushpop(heap, X[:k]),
    'batch-poppush': lambda heap, X, k: numheap.batch_poppush(heap, X[:k]),
}

def list_operations():
    for name in OPERATIONS:
        print(name)

def run_experiment(X: np.ndarray, operation: str, order: str, k: int) -> Tuple[float, Heap]:
    heap = numheap.build(X, order)
    start = time.time()
    result = OPERATIONS[operation](heap, X, k)
    end = time.time()
    if not result.is_valid():
        raise RuntimeError(f"{operation} produced an invalid {order} heap")
    return end - start, result

def run_operations(X: np.ndarray, workload: str, operations: List[str], order: str, k: int, repeats: int) -> List[dict]:
    """
    Times every operation on one workload and prints one JSON line per operation.

    Args:
        X (np.ndarray): The workload values.
        workload (str): Name of the workload, used in the report.
        operations (List[str]): Keys of OPERATIONS to run.
        order (str): 'min' or 'max'.
        k (int): Count argument, or number of values fed to per-value operations.
        repeats (int): Number of timed runs per operation.

    Returns:
        List[dict]: The reported records.
    """
    records = []
    for operation in operations:
        times = [run_experiment(X, operation, order, k)[0]
                 for _ in tqdm(range(repeats), desc=f"Timing {operation} ({workload}, {order})")]
        attrs = {
            "workload": workload,
            "operation": operation,
            "order": order,
            "n": len(X),
            "k": k,
            "mean": float(np.mean(times)),
            "min": float(np.min(times)),
        }
        print(json.dumps(attrs))
        records.append(attrs)
    return records

def main(argv=None):
    parser = argparse.ArgumentParser(
        formatter_class=argparse.ArgumentDefaultsHelpFormatter)

    parser.add_argument(
        '--workload',
        metavar='NAME',
        help='the workload to run the operations on',
        default='uniform-10k',
        choices=WORKLOADS.keys()
    )

    parser.add_argument(
        '--operation',
        help='only run this operation',
        choices=OPERATIONS.keys()
    )

    parser.add_argument(
        '--order',
        default=numheap.MIN,
        choices=[numheap.MIN, numheap.MAX]
    )

    parser.add_argument(
        '--k',
        type=int,
        default=100,
        help='count for pop, number of values for the other mutators'
    )

    parser.add_argument(
        '--repeats',
        type=int,
        default=5,
        help='timed runs per operation'
    )

    parser.add_argument(
        '--list-operations',
        action='store_true',
        help="list available operations"
    )

    parser.add_argument(
        '--prepare',
        action='store_true',
        help='only prepare the workload'
    )

    args = parser.parse_args(argv)

    if args.list_operations:
        list_operations()
        return

    operations = list(OPERATIONS)
    if args.operation:
        operations = [args.operation]

    print(f"preparing {args.workload}")
    WORKLOADS[args.workload]['prepare']()

    if args.prepare:
        return

    X = get_dataset(args.workload)
    run_operations(X, args.workload, operations, args.order, args.k, args.repeats)

if __name__ == "__main__":
    main()
