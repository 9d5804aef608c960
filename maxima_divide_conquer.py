import logging
import math
import threading

from concurrent.futures import Executor, ThreadPoolExecutor
from geometry import Point, as_points, sort_by_x


logger = logging.getLogger(__name__)


class MaximaFinder:
    def __init__(self, parallel_depth: int = 0):
        assert parallel_depth >= 0, f'parallel_depth must be non-negative, got {parallel_depth}'
        self.parallel_depth: int = parallel_depth
        self.recursion_depth: int = 0
        self.comparisons: int = 0
        self._stats_lock = threading.Lock()

    @staticmethod
    def sort_by_x(points: list[Point]) -> list[Point]:
        return sort_by_x(points)

    def find_maxima(self, points: list[Point]) -> list[Point]:
        """
        Find all points not dominated by any other point of the set.
        Accepts points or (x, y) pairs in any order; the input is not modified.

        Maxima are returned in working order: ascending x, descending y for equal x.
        Time complexity: O(n log n).
        """
        self.recursion_depth = 0
        self.comparisons = 0

        points = as_points(points)
        if not points:
            return []

        sorted_points = self.sort_by_x(points)
        if self.parallel_depth == 0:
            maxima = self._find_maxima(sorted_points, 0, len(sorted_points) - 1)
        else:
            with ThreadPoolExecutor(max_workers=2 ** self.parallel_depth) as executor:
                maxima = self._find_maxima(sorted_points, 0, len(sorted_points) - 1, executor=executor)

        logger.debug(
            'Found %d maxima among %d points (depth %d, %d comparisons)',
            len(maxima), len(sorted_points), self.recursion_depth, self.comparisons,
        )
        return maxima

    def _find_maxima(
        self,
        points: list[Point],
        start: int,
        end: int,
        level: int = 0,
        executor: Executor | None = None,
    ) -> list[Point]:
        """
        Find maxima of points[start..end] (inclusive) recursively using divide and conquer strategy.
        Assuming points are already sorted by x, and by descending y within equal x.
        The list is only read, so both halves may be evaluated concurrently.
        """
        assert 0 <= start <= end < len(points), f'Invalid range [{start}, {end}] for {len(points)} points'
        self._update_depth(level)

        if start == end:
            return [points[start]]

        mid = start + (end - start) // 2

        if executor is not None and level < self.parallel_depth:
            left_future = executor.submit(self._find_maxima, points, start, mid, level + 1, executor)
            maxima_right = self._find_maxima(points, mid + 1, end, level + 1, executor)
            maxima_left = left_future.result()
        else:
            maxima_left = self._find_maxima(points, start, mid, level + 1)
            maxima_right = self._find_maxima(points, mid + 1, end, level + 1)

        return self.combine(points, start, mid, end, maxima_left, maxima_right)

    def combine(
        self,
        points: list[Point],
        start: int,
        mid: int,
        end: int,
        maxima_left: list[Point],
        maxima_right: list[Point],
    ) -> list[Point]:
        """
        Merge maxima of points[start..mid] and points[mid+1..end].

        No left point has a greater x than a right point, so every right maximum stays.
        A left maximum stays unless some right point with a strictly greater x is strictly higher,
        hence only the highest y in the right half is needed.

        Right points sharing the boundary x are skipped: they are never higher than
        points[mid], so any left point they would dominate is dominated by points[mid] already.
        """
        boundary_x = points[mid].x
        max_y_right = max(
            (points[i].y for i in range(mid + 1, end + 1) if points[i].x > boundary_x),
            default=-math.inf,
        )

        survivors = [p for p in maxima_left if p.y >= max_y_right]
        with self._stats_lock:
            self.comparisons += len(maxima_left)

        return survivors + maxima_right

    def _update_depth(self, level: int):
        if level > self.recursion_depth:
            with self._stats_lock:
                self.recursion_depth = max(self.recursion_depth, level)
