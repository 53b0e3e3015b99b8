#!/usr/bin/env python3
"""Measure modular multiplication against modular exponentiation.

Usage:
    python -m modbench.harness.run_benchmark

Takes no arguments; all parameters live in ``modbench.config``.  Prints
the average cost of each operation in ns/op and their ratio.
"""

from __future__ import annotations

import sys
from typing import Optional

from modbench.crypto.group import GroupParameterError
from modbench.harness.timing import BenchmarkConfig, Harness, format_report


def main(config: Optional[BenchmarkConfig] = None) -> int:
    try:
        harness = Harness(config)
    except GroupParameterError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    result = harness.run()
    for line in format_report(result):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
