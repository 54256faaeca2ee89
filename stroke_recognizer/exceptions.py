class RecognizerError(Exception):
    """Base class for every error raised by the stroke recognizer."""


class ConfigError(RecognizerError, ValueError):
    """Invalid recognizer configuration, raised at construction time."""


class PointCountMismatchError(RecognizerError, ValueError):
    """
    Two gesture records with different point counts were compared. Carries
    both counts so callers can report which side is off.
    """

    def __init__(self, player_count, template_count):
        self.player_count = player_count
        self.template_count = template_count
        super().__init__(f"Number of points differs from template: "
                         f"{player_count} != {template_count}")


class CaptureStateError(RecognizerError, RuntimeError):
    """A capture session event arrived in a state that cannot accept it."""


class TemplateStoreError(RecognizerError, OSError):
    """A template file could not be parsed."""
