import json

import numpy as np
import pytest

import numheap
from benchmark import datasets
from benchmark.main import OPERATIONS, main, run_experiment, run_operations


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path

def test_prepare_writes_hdf5(workdir):
    datasets.WORKLOADS['uniform-1k']['prepare']()
    assert (workdir / "data" / "uniform-1k.hdf5").exists()
    X = datasets.get_dataset('uniform-1k')
    assert X.dtype == np.float64
    assert X.shape == (1000,)
    assert np.all((X >= 0) & (X < 1))

def test_get_dataset_creates_missing_workload():
    X = datasets.get_dataset('descending-10k')
    assert X[0] == 10_000
    assert np.all(np.diff(X) == -1)

def test_get_dataset_unknown():
    with pytest.raises(KeyError):
        datasets.get_dataset('nope')

@pytest.mark.parametrize("operation", list(OPERATIONS))
@pytest.mark.parametrize("order", [numheap.MIN, numheap.MAX])
def test_every_operation_keeps_heap_valid(operation, order):
    X = np.random.default_rng(1).standard_normal(300)
    elapsed, heap = run_experiment(X, operation, order, 50)
    assert elapsed >= 0
    assert heap.order == order
    assert heap.is_valid()

def test_run_operations_reports_json(capsys):
    X = np.arange(64, dtype=np.float64)
    records = run_operations(X, "ramp", ["pop", "push"], numheap.MAX, 8, 2)
    assert [r["operation"] for r in records] == ["pop", "push"]
    lines = [json.loads(l) for l in capsys.readouterr().out.splitlines() if l.startswith("{")]
    assert lines == records
    assert records[0]["n"] == 64

def test_main_list_operations(capsys):
    main(["--list-operations"])
    assert capsys.readouterr().out.split() == list(OPERATIONS)

def test_main_runs_single_operation(capsys, workdir):
    main(["--workload", "uniform-1k", "--operation", "batch-pushpop", "--repeats", "1", "--k", "10"])
    out = capsys.readouterr().out
    assert "preparing uniform-1k" in out
    record = json.loads([l for l in out.splitlines() if l.startswith("{")][-1])
    assert record["operation"] == "batch-pushpop"
    assert record["n"] == 1000

def test_main_prepare_only(capsys, workdir):
    main(["--workload", "duplicates-10k", "--prepare"])
    assert (workdir / "data" / "duplicates-10k.hdf5").exists()
    assert "{" not in capsys.readouterr().out
