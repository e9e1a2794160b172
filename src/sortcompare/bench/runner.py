"""
Benchmark command line: quick comparisons and full YAML-driven sweeps.

Usage (from repo root):
    sortcompare-bench compare --size 10000 --kind random
    sortcompare-bench scaling --sizes 100 1000 10000 50000
    sortcompare-bench kinds --size 5000
    sortcompare-bench run experiments/configs/01_random_scaling.yaml

`run` outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used
    - meta.json               # environment info (python, numpy, cpu/ram, git commit)
    - results.jsonl           # one JSON line per successful timing sample
    - summary.csv             # median + IQR per (algo, n)

Design notes:
- For each size n, we generate ONE dataset and give the same input to every algorithm.
- On timeout/error for an algorithm at size n, we skip larger sizes for that algo.
- O(n^2) algorithms are skipped above `quadratic_threshold` (default 1000).
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import logging
import os
import platform
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from sortcompare.algorithms import AlgorithmInfo, get_algorithm
from sortcompare.bench.compare import QUADRATIC_THRESHOLD, compare_all, scaling, summarize
from sortcompare.bench.measure import BenchmarkResult, time_sort_call
from sortcompare.config import load_settings
from sortcompare.datasets import SUPPORTED_DISTS, generate, make_dataset
from sortcompare.log import configure_logging

logger = logging.getLogger(__name__)
_console = Console()

REQUIRED_KEYS = (
    "experiment_name",
    "output_dir",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "dataset",
    "sizes",
    "algorithms",
)
SUMMARY_COLUMNS = ["algo", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns"]


# ------------------------- data structures ------------------------- #

@dataclass(frozen=True)
class AlgoSpec:
    name: str
    info: AlgorithmInfo


# ------------------------- helpers: IO & meta ------------------------- #

def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Experiment config {path} must be a YAML mapping")
    return data


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _timestamp() -> str:
    return _dt.datetime.now().strftime("%Y%m%d_%H%M%S")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    run_dir = base_dir / f"{_timestamp()}_{experiment_name}"
    # Two runs within the same second get a numeric suffix
    suffix = 1
    while run_dir.exists():
        run_dir = base_dir / f"{_timestamp()}_{experiment_name}_{suffix}"
        suffix += 1
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _gather_meta() -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


def _resolve_algorithms(cfg_algos: List[Any]) -> List[AlgoSpec]:
    """Accept entries as plain ids ("heapsort") or mappings ({"id": "heapsort"})."""
    specs: List[AlgoSpec] = []
    seen = set()
    for entry in cfg_algos:
        algo_id = entry.get("id") if isinstance(entry, dict) else entry
        if not algo_id or not isinstance(algo_id, str):
            raise ValueError(f"Each algorithm must be an id string or have a string 'id' field; got {entry!r}")
        info = get_algorithm(algo_id)
        if info.id in seen:
            raise ValueError(f"Duplicate algorithm in config: {info.id}")
        seen.add(info.id)
        specs.append(AlgoSpec(name=info.id, info=info))
    return specs


def _iqr_ns(group: pd.Series) -> int:
    return int(group.quantile(0.75) - group.quantile(0.25))


def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    if not jsonl_path.exists():
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    # Status lines (timeout/error) carry no time_ns
    if "time_ns" not in df.columns:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    out = (
        df.groupby(["algo", "n"], as_index=False)
        .agg(
            samples_ok=("time_ns", "count"),
            median_ns=("time_ns", "median"),
            iqr_ns=("time_ns", _iqr_ns),
            min_ns=("time_ns", "min"),
            max_ns=("time_ns", "max"),
        )
    )
    out[["median_ns", "iqr_ns", "min_ns", "max_ns"]] = out[["median_ns", "iqr_ns", "min_ns", "max_ns"]].astype("int64")
    return out[SUMMARY_COLUMNS].sort_values(["algo", "n"], ignore_index=True)


# ------------------------- console reports ------------------------- #

def _print_sweep_summary(summary: pd.DataFrame, sizes: List[int]) -> None:
    table = Table(title="Benchmark Summary (median ± IQR in ms)")
    table.add_column("Algorithm", style="bold")
    picks = sorted({sizes[0], sizes[len(sizes) // 2], sizes[-1]})
    for n in picks:
        table.add_column(f"n={n}", justify="right")

    for algo in summary["algo"].unique():
        row = [str(algo)]
        for n in picks:
            s = summary[(summary["algo"] == algo) & (summary["n"] == n)]
            if s.empty:
                row.append("—")
            else:
                med = int(s["median_ns"].values[0]) / 1e6
                iqr = int(s["iqr_ns"].values[0]) / 1e6
                row.append(f"{med:.2f} ± {iqr:.2f}")
        table.add_row(*row)
    _console.print()
    _console.print(table)
    _console.print()


def print_comparison(results: Sequence[BenchmarkResult], title: str) -> None:
    """Ranked table of compare_all() results, with fastest/slowest/speedup footer."""
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Algorithm", style="bold")
    table.add_column("Time (ms)", justify="right")
    table.add_column("Status")
    for rank, r in enumerate(results, start=1):
        status = "[green]✓ Sorted[/]" if r.is_sorted else "[red]✗ Failed[/]"
        table.add_row(str(rank), r.algorithm, f"{r.elapsed_ms:.4f}", status)
    _console.print(table)

    stats = summarize(results)
    _console.print(f"Fastest: [bold]{stats.fastest.algorithm}[/] ({stats.fastest.elapsed_ms:.4f} ms)")
    _console.print(f"Slowest: [bold]{stats.slowest.algorithm}[/] ({stats.slowest.elapsed_ms:.4f} ms)")
    if stats.speedup is not None:
        _console.print(f"Speedup: {stats.speedup:.2f}x\n")


def print_scaling(table_data: Dict[int, Dict[str, float]], title: str) -> None:
    table = Table(title=title)
    table.add_column("Size", justify="right")
    algo_ids = list(next(iter(table_data.values())).keys()) if table_data else []
    for algo_id in algo_ids:
        table.add_column(get_algorithm(algo_id).name, justify="right")
    for n, row in table_data.items():
        table.add_row(str(n), *(f"{row[a]:.4f}" for a in algo_ids))
    _console.print(table)


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path) -> Path:
    cfg = _load_yaml(config_path)

    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    experiment_name = str(cfg["experiment_name"])
    output_dir = Path(cfg["output_dir"])
    sizes: List[int] = [int(n) for n in cfg["sizes"]]
    repeats = int(cfg["repeats"])
    warmup = bool(cfg["warmup"])
    disable_gc = bool(cfg["disable_gc"])
    timeout_seconds = float(cfg["timeout_seconds"])
    quadratic_threshold = int(cfg.get("quadratic_threshold", QUADRATIC_THRESHOLD))
    dataset_spec: Dict[str, Any] = dict(cfg["dataset"])
    algos = _resolve_algorithms(list(cfg["algorithms"]))

    if not sizes or any(n <= 0 for n in sizes):
        raise ValueError("Config 'sizes' must be a non-empty list of positive integers")

    run_dir = _ensure_run_dir(output_dir, experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    _write_yaml(cfg, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    rng = np.random.default_rng(int(cfg["seed"]))
    per_algo_skip = {a.name: False for a in algos}

    logger.info("Run directory: %s", run_dir)
    logger.info("Algorithms: %s", ", ".join(a.name for a in algos))

    for n in tqdm(sizes, desc="Sizes", unit="n"):
        base_a = make_dataset(n, dataset_spec, rng)

        for a_spec in algos:
            if per_algo_skip[a_spec.name]:
                continue
            if a_spec.info.quadratic and n > quadratic_threshold:
                logger.debug("skipping %s at n=%d (quadratic)", a_spec.name, n)
                continue

            res = time_sort_call(
                algo_name=a_spec.name,
                algo_fn=a_spec.info.func,
                a=base_a,
                repeats=repeats,
                warmup=warmup,
                disable_gc=disable_gc,
                timeout_seconds=timeout_seconds,
            )

            for trial_idx, t_ns in enumerate(res["samples_ns"]):
                _append_jsonl(
                    {
                        "algo": a_spec.name,
                        "n": n,
                        "dataset": dataset_spec,
                        "trial": trial_idx,
                        "time_ns": int(t_ns),
                        "sorted_ok": res["sorted_ok"],
                    },
                    results_path,
                )

            status = res["status"]
            if status != "ok":
                per_algo_skip[a_spec.name] = True
                logger.warning("%s stopped at n=%d: %s", a_spec.name, n, res["error"] or status)
                _append_jsonl(
                    {
                        "algo": a_spec.name,
                        "n": n,
                        "status": status,
                        "error": res["error"],
                        "timed_out_on_repeat": res["timed_out_on_repeat"],
                    },
                    results_path,
                )
            elif res["sorted_ok"] is False:
                logger.error("%s produced unsorted output at n=%d", a_spec.name, n)

    summary_df = _aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)
    _print_sweep_summary(summary_df, sizes)

    logger.info("Wrote %s, %s, %s, %s", results_path, summary_path, meta_path, cfg_resolved_path)
    return run_dir


# ------------------------- CLI ------------------------- #

def _cmd_compare(args: argparse.Namespace) -> None:
    data = generate(args.kind, args.size, seed=args.seed)
    results = compare_all(data, quadratic_threshold=args.quadratic_limit)
    print_comparison(results, f"{args.kind} array of size {args.size}")


def _cmd_scaling(args: argparse.Namespace) -> None:
    table_data = scaling(args.sizes, kind=args.kind, seed=args.seed)
    print_scaling(table_data, "Execution time (ms) by array size")


def _cmd_kinds(args: argparse.Namespace) -> None:
    for kind in SUPPORTED_DISTS:
        data = generate(kind, args.size, seed=args.seed)
        results = compare_all(data, quadratic_threshold=args.quadratic_limit)
        print_comparison(results, f"{kind} array of size {args.size}")


def _cmd_run(args: argparse.Namespace) -> None:
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    run_experiment(config_path)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    settings = load_settings()
    p = argparse.ArgumentParser(description="Benchmark and compare sorting algorithms.")
    p.add_argument("--log-level", default=settings.log_level, help="Logging level (default from LOG_LEVEL)")
    sub = p.add_subparsers(dest="command", required=True)

    def _add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("--seed", type=int, default=None, help="RNG seed for generated data")
        sp.add_argument(
            "--quadratic-limit",
            type=int,
            default=settings.quadratic_threshold,
            help="Skip O(n^2) algorithms above this size",
        )

    sp = sub.add_parser("compare", help="Rank every algorithm on one generated array")
    sp.add_argument("--size", type=int, default=10_000)
    sp.add_argument("--kind", choices=SUPPORTED_DISTS, default="random")
    _add_common(sp)
    sp.set_defaults(func=_cmd_compare)

    sp = sub.add_parser("scaling", help="QuickSort vs MergeSort vs HeapSort vs native across sizes")
    sp.add_argument("--sizes", type=int, nargs="+", default=[100, 500, 1000, 5000, 10000, 50000])
    sp.add_argument("--kind", choices=SUPPORTED_DISTS, default="random")
    sp.add_argument("--seed", type=int, default=None)
    sp.set_defaults(func=_cmd_scaling)

    sp = sub.add_parser("kinds", help="Rank every algorithm on each dataset kind")
    sp.add_argument("--size", type=int, default=5000)
    _add_common(sp)
    sp.set_defaults(func=_cmd_kinds)

    sp = sub.add_parser("run", help="Run a benchmark experiment from a YAML config")
    sp.add_argument("config", type=str, help="Path to YAML experiment config")
    sp.set_defaults(func=_cmd_run)

    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    configure_logging(args.log_level)
    try:
        args.func(args)
    except Exception as e:
        _console.print(f"[bold red]Benchmark failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()
