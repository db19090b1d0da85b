"""Distinct counting of a long integer stream with HyperLogLog.

Inserts the integers 0..N-1 as unsigned 32-bit values into a single
HyperLogLog and compares the estimate with the true count N. Memory stays at
2^precision bytes no matter how large N gets.

## How It Works

```
    value (u32) --> 4 bytes --> hash128 --> 128-bit hash
                                               |
                    +--------------------------+----------+
                    |   remaining (128-p bits) | index (p)|
                    +--------------------------+----------+
                               |                    |
                            rho()                   v
                               +-----------> registers[index] = max(.., rank)
```

An optional sweep records the estimate at increasing cardinalities and plots
the relative error against the theoretical 1.04/sqrt(m) band.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path

from distinctcount import HyperLogLog, encode_u32
from distinctcount.analysis import accuracy_frame, measure_accuracy


# =============================================================================
# Counting
# =============================================================================


@dataclass(frozen=True)
class CountResult:
    """Outcome of one counting run."""

    precision: int
    actual: int
    estimate: float
    relative_error: float
    standard_error: float
    elapsed_s: float


def run_count(*, num_values: int = 1_000_000, precision: int = 10) -> CountResult:
    """Insert 0..num_values-1 as u32 values and estimate their count."""
    hll = HyperLogLog(precision=precision)

    started = time.perf_counter()
    for i in range(num_values):
        hll.insert(encode_u32(i))
    estimate = hll.estimate()
    elapsed = time.perf_counter() - started

    return CountResult(
        precision=precision,
        actual=num_values,
        estimate=estimate,
        relative_error=abs(estimate - num_values) / num_values if num_values else 0.0,
        standard_error=hll.standard_error(),
        elapsed_s=elapsed,
    )


# =============================================================================
# Summary
# =============================================================================


def print_summary(result: CountResult) -> None:
    print("\n" + "=" * 60)
    print("HYPERLOGLOG DISTINCT COUNT")
    print("=" * 60)
    print(f"  Precision:          {result.precision} ({1 << result.precision:,} registers)")
    print(f"  Estimated distinct: {result.estimate:,.1f}")
    print(f"  Actual distinct:    {result.actual:,}")
    print(f"  Relative error:     {result.relative_error:.2%}")
    print(f"  Standard error:     {result.standard_error:.2%}")
    print(f"  Elapsed:            {result.elapsed_s:.2f}s")
    print("=" * 60)


# =============================================================================
# Visualization
# =============================================================================


def visualize_sweep(precision: int, max_count: int, output_dir: Path) -> None:
    """Plot relative error across cardinalities up to max_count."""
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    output_dir.mkdir(parents=True, exist_ok=True)

    cardinalities = sorted({max(1, int(max_count * f)) for f in (
        0.0001, 0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 0.75, 1.0
    )})
    df = accuracy_frame(measure_accuracy(cardinalities, precision=precision))
    df.to_csv(output_dir / "accuracy.csv", index=False)

    sigma = df["standard_error"].iloc[0]
    fig, ax = plt.subplots(figsize=(8, 5))
    colors = ["#e67e22" if lc else "#3498db" for lc in df["linear_counting"]]
    ax.scatter(df["true_count"], df["relative_error"] * 100, c=colors, zorder=3)
    ax.plot(df["true_count"], df["relative_error"] * 100, color="#3498db", alpha=0.5)
    ax.axhline(y=sigma * 100, color="green", linestyle="--", label="1 sigma")
    ax.axhline(y=3 * sigma * 100, color="red", linestyle="--", label="3 sigma")
    ax.set_xscale("log")
    ax.set_xlabel("True Cardinality")
    ax.set_ylabel("Relative Error (%)")
    ax.set_title(f"HyperLogLog Accuracy (precision={precision}, orange = linear counting)")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(output_dir / "hll_accuracy.png", dpi=150)
    plt.close(fig)
    print(f"Saved: {output_dir / 'hll_accuracy.png'}")


# =============================================================================
# Entry Point
# =============================================================================


if __name__ == "__main__":
    import argparse

    import distinctcount

    parser = argparse.ArgumentParser(description="HyperLogLog distinct count demo")
    parser.add_argument("--count", type=int, default=1_000_000, help="Number of distinct u32 values")
    parser.add_argument("--precision", type=int, default=10, help="HyperLogLog precision (4-16)")
    parser.add_argument("--output", type=str, default="output/distinct_count", help="Output directory")
    parser.add_argument("--no-viz", action="store_true", help="Skip the accuracy sweep plot")
    args = parser.parse_args()

    distinctcount.configure_from_env()

    print(f"Inserting {args.count:,} values at precision {args.precision}...")
    result = run_count(num_values=args.count, precision=args.precision)
    print_summary(result)

    if not args.no_viz:
        visualize_sweep(args.precision, args.count, Path(args.output))
