"""Zero-dimensional persistent homology: connected components over distance."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import combinations

from teil.distance import sqr_euclidean_distance


def get_start_idx(n_points: int, point_no: int) -> int:
    """Return the offset of ``point_no``'s pairs in the flattened pair list.

    Raises ValueError for a point that starts no pairs.
    """
    if point_no < 0:
        raise ValueError(f"point number must not be negative: {point_no}")
    if point_no == 0:
        return 0
    if point_no >= n_points - 1:
        raise ValueError(
            f"point {point_no} starts no pairs among {n_points} points"
        )
    return (point_no * n_points) - (point_no - 1) - (point_no * (point_no - 1)) // 2


@dataclass
class ZeroHomology:
    """Connectivity analysis of a point cloud by squared Euclidean distance.

    Two points are connected at a distance ``d`` when their squared Euclidean
    distance is at most ``d``.
    """

    samples: Sequence[Sequence[float]]
    distance_values: tuple[float, ...] = field(init=False)
    sorted_distances: tuple[float, ...] = field(init=False)

    def __post_init__(self) -> None:
        self.samples = tuple(tuple(row) for row in self.samples)
        if not self.samples:
            raise ValueError("at least one point is required")
        width = len(self.samples[0])
        if any(len(row) != width for row in self.samples):
            raise ValueError("all points must have the same number of features")
        n = len(self.samples)
        self._matrix = [[0.0] * n for _ in range(n)]
        values = []
        for i, j in combinations(range(n), 2):
            d = sqr_euclidean_distance(self.samples[i], self.samples[j])
            self._matrix[i][j] = self._matrix[j][i] = d
            values.append(d)
        self.distance_values = tuple(values)
        self.sorted_distances = tuple(sorted(values))

    @property
    def n_points(self) -> int:
        return len(self.samples)

    @property
    def n_features(self) -> int:
        return len(self.samples[0])

    def _check_point(self, point: int) -> None:
        if not 0 <= point < self.n_points:
            raise ValueError(f"point {point} is outside 0..{self.n_points - 1}")

    def connections_at(self, point: int, distance: float) -> frozenset[int]:
        """Return the other points within ``distance`` of ``point``."""
        self._check_point(point)
        row = self._matrix[point]
        return frozenset(
            j for j, d in enumerate(row) if j != point and d <= distance
        )

    def cluster(self, start_point: int, distance: float) -> frozenset[int]:
        """Return the connected component holding ``start_point`` at ``distance``.

        An isolated point gives an empty set.
        """
        neighbours = self.connections_at(start_point, distance)
        if not neighbours:
            return frozenset()
        members = {start_point}
        queue = deque([start_point])
        while queue:
            point = queue.popleft()
            for other in self.connections_at(point, distance):
                if other not in members:
                    members.add(other)
                    queue.append(other)
        return frozenset(members)

    def _all_connected(self, distance: float) -> bool:
        return len(self.cluster(0, distance)) == self.n_points

    def max_distance(self) -> float:
        """Search the sorted pair distances from the middle for where all points join.

        If the middle distance already connects every point, the search moves
        down and returns the smallest sorted distance that still connects them
        all. Otherwise it moves up and returns the last sorted distance before
        the one at which every point becomes connected.
        """
        n = self.n_points
        if n < 2:
            raise ValueError("at least two points are required")
        sd = self.sorted_distances
        i = (n * n - n) // 4
        if self._all_connected(sd[i]):
            while i > 0 and self._all_connected(sd[i - 1]):
                i -= 1
            return sd[i]
        while not self._all_connected(sd[i]):
            i += 1
        return sd[i - 1]

    def cluster_analysis(self, distance: float) -> int:
        """Return the number of connected components at ``distance``.

        Isolated points count as components of their own.
        """
        seen: set[int] = set()
        count = 0
        for point in range(self.n_points):
            if point in seen:
                continue
            count += 1
            seen.add(point)
            seen |= self.cluster(point, distance)
        return count