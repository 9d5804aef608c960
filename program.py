import argparse
import logging
import sys
import time

import numpy as np

from geometry import Point, print_points
from maxima_divide_conquer import MaximaFinder
from maxima_naive import NaiveMaximaFinder


logger = logging.getLogger(__name__)

EXAMPLE_POINTS = [(1, 8), (2, 5), (3, 9), (4, 7), (5, 3), (6, 6), (7, 2), (8, 4)]

DISTRIBUTIONS = ("uniform", "uniform_int", "gaussian", "circle", "clusters")


def generate_random_points(n: int, distribution: str, seed: int = 42) -> list[Point]:
    rng = np.random.default_rng(seed)

    if distribution == "uniform":
        xs = rng.uniform(0, 1000, n)
        ys = rng.uniform(0, 1000, n)
    elif distribution == "uniform_int":
        # narrow range so that equal coordinates are common
        xs = rng.integers(-100, 100, n)
        ys = rng.integers(-100, 100, n)
    elif distribution == "gaussian":
        xs = rng.normal(500, 150, n)
        ys = rng.normal(500, 150, n)
    elif distribution == "circle":
        angles = rng.uniform(0, 2 * np.pi, n)
        radii = rng.uniform(0, 500, n) ** 0.5
        xs = 500 + radii * np.cos(angles)
        ys = 500 + radii * np.sin(angles)
    elif distribution == "clusters":
        n_clusters = 5
        centers = rng.uniform(100, 900, size=(n_clusters, 2))
        labels = rng.integers(0, n_clusters, n)
        xs = rng.normal(centers[labels, 0], 50)
        ys = rng.normal(centers[labels, 1], 50)
    else:
        raise ValueError(f"Unknown distribution: {distribution!r}, expected one of {DISTRIBUTIONS}")

    return [Point(x.item(), y.item()) for x, y in zip(xs, ys)]


def compare_algorithms(points: list[Point], algorithms: dict) -> dict:
    results = {}
    for name, algo in algorithms.items():
        start = time.perf_counter()
        maxima = algo.find_maxima(points)
        exec_time = time.perf_counter() - start

        results[name] = {
            'time': exec_time,
            'maxima': maxima,
        }
        logger.debug("%s: %d maxima in %.6f s", name, len(maxima), exec_time)
    return results


def generate_report(points: list[Point], results: dict) -> str:
    report = f"""
{'=' * 60}
MAXIMAL POINTS
{'=' * 60}
Number of points: {len(points)}

"""
    for name, res in results.items():
        speed = len(points) / res['time'] if res['time'] > 0 else 0
        report += (
            f"{name:<20} maxima: {len(res['maxima']):>6}   "
            f"time: {res['time']:>10.6f} s   speed: {speed:>12.0f} points/s\n"
        )
    return report


def algorithms_agree(results: dict) -> bool:
    reference = None
    for res in results.values():
        maxima = sorted(res['maxima'], key=lambda p: (p.x, p.y))
        if reference is None:
            reference = maxima
        elif maxima != reference:
            return False
    return True


def run_example() -> int:
    points = [Point(x, y) for x, y in EXAMPLE_POINTS]

    print("Original points:")
    print_points(points)

    maxima = MaximaFinder().find_maxima(points)

    print("\nMaximal points found:")
    print_points(maxima)
    return 0


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare 2-D maxima finding algorithms on random points")
    parser.add_argument("--n", type=int, default=10_000, help="number of points to generate")
    parser.add_argument("--distribution", choices=DISTRIBUTIONS, default="uniform")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--parallel-depth", type=int, default=0,
                        help="recursion levels evaluated on worker threads")
    parser.add_argument("--example", action="store_true", help="run the built-in 8 point example")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if args.example:
        return run_example()

    points = generate_random_points(args.n, args.distribution, args.seed)
    logger.info("Generated %d points (%s, seed %d)", len(points), args.distribution, args.seed)

    algorithms = {
        "Brute force": NaiveMaximaFinder(),
        "Divide and conquer": MaximaFinder(parallel_depth=args.parallel_depth),
    }
    results = compare_algorithms(points, algorithms)
    print(generate_report(points, results))

    if not algorithms_agree(results):
        logger.error("Algorithms returned different maxima")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
