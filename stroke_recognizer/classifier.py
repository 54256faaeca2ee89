import logging
import numpy as np
from .exceptions import PointCountMismatchError
from .gestures import GestureLibrary, GestureRecord


logger = logging.getLogger(__name__)


def point_distances(player_gesture, template):
    """Per-index distances between the points of two gestures."""
    player_count = player_gesture.num_points
    template_count = template.num_points

    if player_count != template_count:
        raise PointCountMismatchError(player_count, template_count)

    return np.linalg.norm(player_gesture.points - template.points, axis=1)


def average_difference(player_gesture, template):
    """Average distance between the points of two gestures."""
    return float(np.mean(point_distances(player_gesture, template)))


def average_difference_with_anomalies(player_gesture, template, dev_tightness,
                                      anomalies_factor, true_deviation=False):
    """
    Average distance between the points of two gestures, multiplying by
    anomalies_factor every distance that deviates from the average by more
    than dev_tightness times the spread.

    The spread is the mean of the distances themselves unless true_deviation
    is set, in which case the standard deviation of the distances is used.
    """
    sample_differences = point_distances(player_gesture, template)
    num_points = len(sample_differences)

    average = np.mean(sample_differences)
    sample_deviations = np.abs(sample_differences - average)

    if true_deviation:
        spread = np.std(sample_differences)
    else:
        spread = np.mean(sample_differences)

    anomalies = sample_deviations > dev_tightness * spread
    total_difference = np.sum(sample_differences[~anomalies]) + \
                       anomalies_factor * np.sum(sample_differences[anomalies])

    return float(total_difference / num_points)


class Classifier:
    def __init__(self, config, library=None):
        self.config = config
        self.library = library if library is not None else GestureLibrary()

    def score(self, player_gesture, template):
        if self.config.anomalies_enabled:
            return average_difference_with_anomalies(
                player_gesture, template, self.config.dev_tightness,
                self.config.anomalies_factor, self.config.true_deviation)

        return average_difference(player_gesture, template)

    def find_match(self, player_gesture):
        """
        Returns the template with the minimum difference to player_gesture
        and its score. The first template reaching the minimum wins. With no
        comparable template, returns the no match record and an infinite
        score.
        """
        min_avg_difference = np.inf
        match = GestureRecord.no_match(player_gesture.num_points)

        for template in self.library:
            try:
                d = self.score(player_gesture, template)
            except PointCountMismatchError as e:
                logger.warning("Skipping template %s: %s", template.name, e)
                continue

            logger.debug("template: %s; score: %s", template.name, d)

            if d < min_avg_difference:
                min_avg_difference = d
                match = template

        return match, min_avg_difference
