import logging
import numpy as np
from .geometry import to_point, point_distance, path_len


logger = logging.getLogger(__name__)

NO_MATCH_NAME = "no match"


class BoundingExtremes:
    """
    Minimum and maximum x and y of a stroke. Starts at the origin since the
    first point of every stroke is the initial contact at (0, 0).
    """

    def __init__(self, min_x=0.0, max_x=0.0, min_y=0.0, max_y=0.0):
        self.min_x = min_x
        self.max_x = max_x
        self.min_y = min_y
        self.max_y = max_y

    @classmethod
    def from_points(cls, points):
        np_points = np.asarray(points, dtype=float).reshape(-1, 2)
        if len(np_points) == 0:
            return cls()

        mins = np_points.min(axis=0)
        maxs = np_points.max(axis=0)
        return cls(min_x=float(mins[0]), max_x=float(maxs[0]),
                   min_y=float(mins[1]), max_y=float(maxs[1]))

    def update(self, point):
        x, y = float(point[0]), float(point[1])

        if x > self.max_x:
            self.max_x = x
        if x < self.min_x:
            self.min_x = x
        if y > self.max_y:
            self.max_y = y
        if y < self.min_y:
            self.min_y = y

    @property
    def x_range(self):
        return self.max_x - self.min_x

    @property
    def y_range(self):
        return self.max_y - self.min_y

    def copy(self):
        return BoundingExtremes(self.min_x, self.max_x, self.min_y, self.max_y)

    def __eq__(self, other):
        if not isinstance(other, BoundingExtremes):
            return NotImplemented
        return (self.min_x, self.max_x, self.min_y, self.max_y) == \
               (other.min_x, other.max_x, other.min_y, other.max_y)

    def __repr__(self):
        return (f"BoundingExtremes(min_x={self.min_x}, max_x={self.max_x}, "
                f"min_y={self.min_y}, max_y={self.max_y})")


class Stroke:
    """
    Raw points of a single drag, in recording order and relative to the
    initial contact, which is always the first point.
    """

    def __init__(self):
        self.points = [np.zeros(2)]
        self.extremes = BoundingExtremes()

    @classmethod
    def from_points(cls, points):
        if len(points) == 0:
            raise ValueError("A stroke needs at least one point")

        stroke = cls()
        stroke.points = [to_point(point) for point in points]
        stroke.extremes = BoundingExtremes.from_points(stroke.points)
        return stroke

    def add_point(self, point):
        point = to_point(point)
        self.points.append(point)
        self.extremes.update(point)

    def path_len(self):
        return path_len(self.points)

    def rescale(self, standard_ratio):
        """
        Uniformly scale the points so the larger side of the bounding box
        equals standard_ratio. Extremes are left as recorded. Returns the
        scale factor used; 1 for a stroke with no extent.
        """
        largest_range = max(self.extremes.x_range, self.extremes.y_range)

        # Single point or all points identical
        if largest_range == 0:
            return 1.0

        scale = standard_ratio / largest_range

        if scale != 1:
            self.points = [point * scale for point in self.points]

        return scale

    def resample_points(self, n):
        """
        Map the stroke onto n points spaced evenly along its path.

        interval: distance along path between consecutive output points
        covered: distance walked since the last output point
        d: remaining distance from the reference point to the segment end
        t: factor for calculating the interpolated point
        cnt: count of output points
        """
        resampled_points = np.zeros((n, 2))
        resampled_points[0] = self.points[0]
        cnt = 1

        if n > 1:
            total = self.path_len()
            interval = total / (n - 1)
            logger.debug("Resampling path of length %.3f to %d points", total, n)

            covered = 0
            for i in range(len(self.points) - 1):
                if cnt >= n:
                    break

                prev_point = self.points[i]
                curr_point = self.points[i + 1]
                d = point_distance(prev_point, curr_point)

                # Duplicate consecutive points
                if d == 0:
                    continue

                if covered + d < interval:
                    covered += d
                    continue

                reference = prev_point
                while covered + d >= interval and cnt < n:
                    t = min(max((interval - covered) / d, 0), 1)

                    interp_point = (1 - t) * reference + t * curr_point
                    resampled_points[cnt] = interp_point
                    reference = interp_point
                    cnt += 1

                    d = (covered + d) - interval
                    covered = 0

                covered = d

        # Path used up before n points, pad with the end of the stroke
        if cnt < n:
            logger.debug("Padding %d resampled points with the stroke end",
                         n - cnt)
            resampled_points[cnt:] = self.points[-1]

        return resampled_points

    def to_record(self, n, name=""):
        return GestureRecord(name, self.resample_points(n), self.extremes.copy())


class GestureRecord:
    """
    Fixed size representation of a stroke, used both for the gesture being
    recognized and for stored templates. Points are read only; the name can
    be set once a recording is saved.
    """

    def __init__(self, name, points, extremes=None):
        np_points = np.array(points, dtype=float).reshape(-1, 2)
        np_points.setflags(write=False)

        self.name = name
        self._points = np_points
        if extremes is None:
            extremes = BoundingExtremes.from_points(np_points)
        self.extremes = extremes

    @classmethod
    def no_match(cls, n):
        return cls(NO_MATCH_NAME, np.zeros((n, 2)))

    @property
    def points(self):
        return self._points

    @property
    def num_points(self):
        return len(self._points)

    def is_no_match(self):
        return self.name == NO_MATCH_NAME

    def __repr__(self):
        return f"GestureRecord(name={self.name!r}, num_points={self.num_points})"


class GestureLibrary:
    """Templates in load/record order, which breaks ties when matching."""

    def __init__(self, templates=None):
        self.templates = list(templates) if templates is not None else []

    def append(self, record):
        self.templates.append(record)

    def names(self):
        return [template.name for template in self.templates]

    def __iter__(self):
        return iter(self.templates)

    def __len__(self):
        return len(self.templates)

    def __getitem__(self, idx):
        return self.templates[idx]
