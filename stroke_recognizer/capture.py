import enum
import logging
import numpy as np
from .exceptions import CaptureStateError
from .geometry import to_point
from .gestures import Stroke


logger = logging.getLogger(__name__)


class CaptureState(enum.Enum):
    IDLE = 0
    CAPTURING = 1
    COMPLETED = 2


class CaptureSession:
    """
    Collects the samples of one drag into a Stroke, relative to where the
    drag started. Driven by start/sample/end events from the input loop.
    """

    def __init__(self, config):
        self.config = config
        self.state = CaptureState.IDLE
        self.start_point = np.zeros(2)
        self.stroke = None

    def start(self, position):
        if self.state == CaptureState.CAPTURING:
            raise CaptureStateError("A gesture is already being captured")

        self.start_point = to_point(position)
        self.stroke = Stroke()
        self.state = CaptureState.CAPTURING
        logger.debug("gesture started at %s", self.start_point)

    def add_sample(self, position):
        """
        Record a new point relative to the start. Returns True once the
        sample limit completes the gesture.
        """
        if self.state != CaptureState.CAPTURING:
            raise CaptureStateError(f"Cannot add a sample while {self.state.name}")

        self.stroke.add_point(to_point(position) - self.start_point)

        if self.config.limit_samples and \
           len(self.stroke.points) >= self.config.max_points_allowed:
            self.state = CaptureState.COMPLETED
            logger.info("Gesture complete after %d points", len(self.stroke.points))
            return True

        return False

    def end(self):
        if self.state == CaptureState.IDLE:
            raise CaptureStateError("No gesture has been started")

        stroke = self.stroke
        self.reset()
        return stroke

    def reset(self):
        self.state = CaptureState.IDLE
        self.start_point = np.zeros(2)
        self.stroke = None

    @property
    def is_capturing(self):
        return self.state == CaptureState.CAPTURING

    @property
    def is_completed(self):
        return self.state == CaptureState.COMPLETED
