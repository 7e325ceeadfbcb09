"""
MiniDS Benchmark CLI Tests
==========================
Runs the benchmark entry point on small workloads.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import bench


class TestBenchCLI:

    def test_all_structures(self, capsys):
        rc = bench.main(["--size", "200", "--repeat", "1"])
        out = capsys.readouterr().out
        assert rc == 0
        assert "BinarySearchTree" in out
        assert "Heap" in out
        assert "Values: 200" in out

    def test_single_structure(self, capsys):
        rc = bench.main(["--structure", "heap", "--size", "50", "--repeat", "2"])
        out = capsys.readouterr().out
        assert rc == 0
        assert "drain" in out
        assert "BinarySearchTree" not in out

    def test_bst_workload_times_every_operation(self):
        first = bench.bench_bst(list(range(20)), repeat=1)
        assert first["issues"] == []
        assert set(first["timings"]) == {"insert", "search", "floor", "iterate", "delete"}

    @pytest.mark.parametrize("argv", [
        ["--size", "0"],
        ["--repeat", "0"],
        ["--structure", "trie"],
    ])
    def test_bad_arguments_exit_2(self, argv):
        with pytest.raises(SystemExit) as exc:
            bench.main(argv)
        assert exc.value.code == 2


class TestBestOf:

    def test_returns_last_result(self):
        calls = []

        def fn():
            calls.append(1)
            return len(calls)

        seconds, result = bench.best_of(3, fn)
        assert result == 3
        assert seconds >= 0.0


class TestPackaging:

    def test_module_logger_named_after_module(self):
        assert bench.logger.name == bench.__name__

    def test_readme_declared_and_present(self):
        root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        with open(os.path.join(root, "pyproject.toml"), encoding="utf-8") as f:
            assert 'readme = "README.md"' in f.read()
        assert os.path.isfile(os.path.join(root, "README.md"))


class TestSortedWorkload:

    def test_bst_on_ascending_values(self):
        result = bench.bench_bst(list(range(3000)), repeat=1)
        assert result["issues"] == []
