import os
from .exceptions import ConfigError


TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")

POINTS_PER_GESTURE = 30 # Size of every resampled gesture
STANDARD_RATIO = 100.0 # Side of the square strokes are scaled to
DEV_TIGHTNESS = 1.0
ANOMALIES_FACTOR = 5.0
SAMPLING_RATE = 0.01 # Seconds between samples while capturing
MAX_POINTS_ALLOWED = 100


class RecognizerConfig:
    """
    Options shared by capture, rescaling, resampling and comparison.

    recording:          save the next gesture as a template instead of
                        trying to recognize it
    anomalies_enabled:  weight sudden differences between gestures more
                        heavily than constant ones
    points_per_gesture: number of points every gesture is resampled to
    standard_ratio:     side of the square the stroke is scaled to
    dev_tightness:      number of deviations from the average point
                        distance allowed before a distance is weighted
    anomalies_factor:   how much extra to weight those distances
    true_deviation:     use the standard deviation of the point distances
                        as the spread instead of their mean
    sampling_rate:      time between samples while capturing
    limit_samples:      end the capture once max_points_allowed is reached
    """

    def __init__(self, points_per_gesture=POINTS_PER_GESTURE,
                 standard_ratio=STANDARD_RATIO, anomalies_enabled=False,
                 dev_tightness=DEV_TIGHTNESS, anomalies_factor=ANOMALIES_FACTOR,
                 true_deviation=False, recording=False, template_save_name="",
                 sampling_rate=SAMPLING_RATE, limit_samples=False,
                 max_points_allowed=MAX_POINTS_ALLOWED,
                 templates_dir=TEMPLATES_DIR):
        self.points_per_gesture = points_per_gesture
        self.standard_ratio = standard_ratio
        self.anomalies_enabled = anomalies_enabled
        self.dev_tightness = dev_tightness
        self.anomalies_factor = anomalies_factor
        self.true_deviation = true_deviation
        self.recording = recording
        self.template_save_name = template_save_name
        self.sampling_rate = sampling_rate
        self.limit_samples = limit_samples
        self.max_points_allowed = max_points_allowed
        self.templates_dir = templates_dir

        self.validate()

    def validate(self):
        if isinstance(self.points_per_gesture, bool) or \
           not isinstance(self.points_per_gesture, int):
            raise ConfigError(f"points_per_gesture must be an int, got "
                              f"{self.points_per_gesture!r}")
        if self.points_per_gesture < 1:
            raise ConfigError(f"points_per_gesture must be at least 1, got "
                              f"{self.points_per_gesture}")
        if not self.standard_ratio > 0:
            raise ConfigError(f"standard_ratio must be positive, got "
                              f"{self.standard_ratio}")
        if self.dev_tightness < 0:
            raise ConfigError(f"dev_tightness cannot be negative, got "
                              f"{self.dev_tightness}")
        if self.anomalies_factor < 0:
            raise ConfigError(f"anomalies_factor cannot be negative, got "
                              f"{self.anomalies_factor}")
        if self.sampling_rate < 0:
            raise ConfigError(f"sampling_rate cannot be negative, got "
                              f"{self.sampling_rate}")
        if self.max_points_allowed < 2:
            raise ConfigError(f"max_points_allowed must be at least 2, got "
                              f"{self.max_points_allowed}")
        if self.recording and not self.template_save_name:
            raise ConfigError("template_save_name is required when recording")

    def __repr__(self):
        return (f"RecognizerConfig(points_per_gesture={self.points_per_gesture}, "
                f"standard_ratio={self.standard_ratio}, "
                f"anomalies_enabled={self.anomalies_enabled}, "
                f"recording={self.recording})")
