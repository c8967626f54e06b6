"""Tests for the light-bench command line."""

import io

import numpy as np
import pytest

from light_bench.benchmark import DEFAULT_REPORT_TEMPLATE
from light_bench.cli import KERNELS, BenchmarkCLI, UFuncJob, main, options_from_args

FAST_ARGS = ["-t", "0.01", "-s", "16", "-w", "0", "-p", "1"]


class TestBenchmarkCLI:
    """Argument parsing."""

    def test_defaults(self):
        args = BenchmarkCLI("x").add_size_arg().add_kernel_arg(KERNELS).parse([])
        assert args.size == 1000
        assert args.time_threshold == 0.5
        assert args.warmup == 5
        assert args.probe_batch == 10
        assert args.template == DEFAULT_REPORT_TEMPLATE
        assert args.kernel is None
        assert args.verbose is False

    def test_repeated_kernel(self):
        args = BenchmarkCLI("x").add_kernel_arg(KERNELS).parse(["-k", "sqrt", "-k", "exp"])
        assert args.kernel == ["sqrt", "exp"]

    def test_unknown_kernel_rejected(self):
        with pytest.raises(SystemExit):
            BenchmarkCLI("x").add_kernel_arg(KERNELS).parse(["-k", "tan"])

    def test_options_from_args(self):
        args = BenchmarkCLI("x").parse(["-t", "0.2", "-w", "1", "-p", "3"])
        options = options_from_args(args)
        assert options.time_threshold == 0.2
        assert options.warming_runs == 1
        assert options.probe_batch_size == 3


class TestUFuncJob:
    def test_computes_into_destination(self):
        src = np.array([1.0, 4.0, 9.0])
        dst = np.empty_like(src)
        job = UFuncJob("sqrt", np.sqrt, src, dst)
        job()
        assert job.size == 3
        assert job.name == "sqrt"
        np.testing.assert_allclose(dst, [1.0, 2.0, 3.0])


class TestMain:
    """End-to-end runs with a tiny time budget."""

    def test_single_kernel_report(self):
        out = io.StringIO()
        assert main(FAST_ARGS + ["-k", "sqrt"], out=out) == 0
        lines = out.getvalue().splitlines()
        assert lines[0] == "benchmark results:"
        assert len(lines) == 2
        assert lines[1].startswith("sqrt")
        assert lines[1].endswith("MPS")

    def test_all_kernels_by_default(self):
        out = io.StringIO()
        main(FAST_ARGS, out=out)
        names = [line.split(":")[0].strip() for line in out.getvalue().splitlines()[1:]]
        assert names == list(KERNELS)

    def test_custom_template(self):
        out = io.StringIO()
        main(FAST_ARGS + ["-k", "exp", "--template", "{{jobname}} done\n"], out=out)
        assert out.getvalue() == "benchmark results:\nexp done\n"

    def test_verbose_logs_to_stderr(self, capsys):
        main(FAST_ARGS + ["-k", "log", "-v"], out=io.StringIO())
        err = capsys.readouterr().err
        assert "log: 0 warm-up runs done" in err
        assert "batch size set to" in err

    def test_escaped_newline_in_template(self):
        out = io.StringIO()
        main(FAST_ARGS + ["-k", "sin", "--template", "{{jobname}}\\n"], out=out)
        assert out.getvalue() == "benchmark results:\nsin\n"
