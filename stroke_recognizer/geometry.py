import numpy as np


def to_point(point):
    return np.array(point, dtype=float).reshape(2)


def point_distance(a, b):
    return float(np.linalg.norm(np.asarray(a, dtype=float) -
                                np.asarray(b, dtype=float)))


def path_len(points):
    """Total distance covered when traversing points in order."""
    length = 0

    for i in range(1, len(points)):
        length += point_distance(points[i], points[i - 1])

    return length
