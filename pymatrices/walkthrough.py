"""
Walkthrough: what a 2x2 matrix does to a vector.

Prints a short series of worked examples:

    1. A scaling map f(x, y) = (2x, y) written as the matrix [[2, 0], [0, 1]].
    2. Linearity: A*(s*x + u) == s*(A*x) + A*u.
    3. M*v is a linear combination of the columns of M, and equals the
       explicit row-by-row expansion.
    4. Row vectors: x*A differs from A*x, but equals A^T*x, i.e.
       A*x (as a column) has the same components as x*A^T (as a row).

Usage:
    $ python -m pymatrices --seed 7
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import TextIO

import numpy as np

from pymatrices import config
from pymatrices.logging_config import setup_logging
from pymatrices.matrices import Matrix2D, transpose
from pymatrices.vectors import Vector2D

logger = logging.getLogger(__name__)


def rand_int_f(rng: np.random.Generator, low: int, high: int) -> float:
    """Integer drawn uniformly from [low, high], returned as a float."""
    return float(rng.integers(low, high, endpoint=True))


def rand_float(rng: np.random.Generator, low: float, high: float) -> float:
    """Float drawn uniformly from [low, high)."""
    return float(rng.uniform(low, high))


def _random_vector(rng: np.random.Generator) -> Vector2D:
    low, high = config.RANDOM_INT_RANGE
    return Vector2D(rand_int_f(rng, low, high), rand_int_f(rng, low, high))


def _random_matrix(rng: np.random.Generator) -> Matrix2D:
    low, high = config.RANDOM_INT_RANGE
    return Matrix2D(*(rand_int_f(rng, low, high) for _ in range(4)))


@dataclass(frozen=True)
class WalkthroughReport:
    """
    Inputs sampled and results computed by run().

    Attributes:
        m: The scaling matrix [[2, 0], [0, 1]]
        x: Random integer-valued vector
        m_x: m * x
        a: Random integer-valued matrix
        u: Random integer-valued vector
        s: Random float scalar
        a_of_combination: A*(s*x + u)
        combination_of_images: s*(A*x) + A*u
        formulations_equivalent: Row expansion == column combination
        a_x: A * x (column vector)
        x_a: x * A (row vector)
        x_a_transpose: x * transpose(A)
    """
    m: Matrix2D
    x: Vector2D
    m_x: Vector2D
    a: Matrix2D
    u: Vector2D
    s: float
    a_of_combination: Vector2D
    combination_of_images: Vector2D
    formulations_equivalent: bool
    a_x: Vector2D
    x_a: Vector2D
    x_a_transpose: Vector2D


def run(rng: np.random.Generator, out: TextIO) -> WalkthroughReport:
    """
    Run the walkthrough, writing narration to ``out``.

    Args:
        rng: Source of the random example values
        out: Text stream receiving the narration

    Returns:
        WalkthroughReport with every sampled value and result
    """
    logger.debug("Section 1: scaling map")
    m = Matrix2D(2, 0, 0, 1)
    x = _random_vector(rng)
    m_x = m * x
    out.write(f"x = {x}\nm =\n{m}m * x = {m_x}\n")

    logger.debug("Section 2: linearity")
    a = _random_matrix(rng)
    u = _random_vector(rng)
    s = rand_float(rng, *config.RANDOM_FLOAT_RANGE)
    a_of_combination = a * (s * x + u)
    combination_of_images = s * (a * x) + a * u
    out.write(f"A =\n{a}")
    out.write(f"u = {u}, s = {s:g}\n")
    out.write(f"A*(sx + u) = {a_of_combination}\n")
    out.write(f"s*(A*x) + A*u = {combination_of_images}\n")

    logger.debug("Section 3: linear combination of columns")
    row_expansion = Vector2D(
        a(0, 0) * x.x + a(0, 1) * x.y,
        a(1, 0) * x.x + a(1, 1) * x.y,
    )
    formulations_equivalent = row_expansion == x.x * a[0] + x.y * a[1]
    if formulations_equivalent:
        out.write("The formulations are equivalent!\n")

    logger.debug("Section 4: row vectors")
    a_x = a * x
    x_a = x * a
    x_a_transpose = x * transpose(a)
    out.write(f"A*x = {a_x}\n")
    out.write(f"x*A = {x_a}\n")
    out.write(f"A*x (as a column vector) = x*A^T (as a row vector) = {x_a_transpose}\n")

    return WalkthroughReport(
        m=m,
        x=x,
        m_x=m_x,
        a=a,
        u=u,
        s=s,
        a_of_combination=a_of_combination,
        combination_of_images=combination_of_images,
        formulations_equivalent=formulations_equivalent,
        a_x=a_x,
        x_a=x_a,
        x_a_transpose=x_a_transpose,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pymatrices",
        description="Worked examples of 2x2 linear transformations.",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for the random example values (default: fresh entropy)",
    )
    parser.add_argument(
        "--log-level", default=config.LOG_LEVEL,
        choices=config.LOG_LEVELS,
        type=str.upper,
        help="Logging level for the pymatrices logger",
    )
    return parser


def main(argv: list[str] | None = None, out: TextIO | None = None) -> int:
    """Command-line entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    seed = args.seed
    if seed is None:
        seed = int(np.random.SeedSequence().entropy % (2**32))
    logger.info("Walkthrough seed: %d", seed)

    run(np.random.default_rng(seed), out if out is not None else sys.stdout)
    return 0
