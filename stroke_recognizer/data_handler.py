import logging
from .capture import CaptureSession
from .classifier import Classifier
from .gestures import GestureLibrary


logger = logging.getLogger(__name__)


class DataHandler:
    """
    Turns captured strokes into gesture records and either records them as
    templates or matches them against the library, depending on
    config.recording.
    """

    def __init__(self, config, library=None):
        self.config = config
        self.library = library if library is not None else GestureLibrary()
        self.session = CaptureSession(config)
        self.classifier = Classifier(config, self.library)
        # Templates recorded since startup, in recording order
        self.recorded = []

    def start_gesture(self, position):
        self.session.start(position)

    def continue_gesture(self, position):
        return self.session.add_sample(position)

    def end_gesture(self):
        """
        Finish the current capture. In recording mode, returns the new
        template and None; otherwise the best match and its score.
        """
        stroke = self.session.end()
        return self.process_stroke(stroke)

    def process_stroke(self, stroke):
        record = self.to_record(stroke)

        if self.config.recording:
            self.record(record, self.config.template_save_name)
            return record, None

        return self.recognize(record)

    def to_record(self, stroke):
        stroke.rescale(self.config.standard_ratio)
        return stroke.to_record(self.config.points_per_gesture)

    def record(self, record, name):
        record.name = name
        self.library.append(record)
        self.recorded.append(record)
        logger.info("Recorded template: %s (%d in library)", name,
                    len(self.library))

    def recognize(self, record):
        match, score = self.classifier.find_match(record)
        logger.info("Best match: %s; score: %s", match.name, score)
        return match, score
