import csv
import logging
import os
import re
from .exceptions import TemplateStoreError
from .gestures import GestureLibrary, GestureRecord


log = logging.getLogger(__name__)

TEMPLATE_FILE_PATTERN = re.compile(r"^t(\d+)\.csv$")


class Logger:
    """
    For logging new templates and getting all recorded templates back.
    Each template is stored as templates_dir/<name>/t<k>.csv with one x,y
    row per point.
    """

    def __init__(self, templates_dir):
        self.templates_dir = templates_dir

    def log(self, record):
        """Write record to the next free template file for its name."""
        gesture_dir = os.path.join(self.templates_dir, record.name)
        os.makedirs(gesture_dir, exist_ok=True)

        template_files = self.template_files(gesture_dir)
        template_num = template_files[-1][0] + 1 if template_files else 0

        template_path = os.path.join(gesture_dir, f"t{template_num}.csv")
        self.write_template(template_path, record)
        log.info("Logged template %d for gesture: %s", template_num, record.name)

        return template_path

    def save_library(self, library):
        """Rewrite the template files of every name in library."""
        by_name = {}
        for record in library:
            by_name.setdefault(record.name, []).append(record)

        for name, records in by_name.items():
            gesture_dir = os.path.join(self.templates_dir, name)
            os.makedirs(gesture_dir, exist_ok=True)

            for _, file_name in self.template_files(gesture_dir):
                os.remove(os.path.join(gesture_dir, file_name))

            for template_num, record in enumerate(records):
                template_path = os.path.join(gesture_dir, f"t{template_num}.csv")
                self.write_template(template_path, record)

            log.info("Saved %d template(s) for gesture: %s", len(records), name)

    def get_all_templates(self):
        """
        Load every template, ordered by gesture name and then template
        number. Empty template files are skipped.
        """
        library = GestureLibrary()

        if not os.path.isdir(self.templates_dir):
            log.warning("No templates directory at %s", self.templates_dir)
            return library

        for name in sorted(os.listdir(self.templates_dir)):
            gesture_dir = os.path.join(self.templates_dir, name)
            if not os.path.isdir(gesture_dir):
                continue

            for template_num, file_name in self.template_files(gesture_dir):
                template_path = os.path.join(gesture_dir, file_name)
                points = self.read_template(template_path)

                if len(points) == 0:
                    log.warning("Empty template file %d for gesture %s",
                                template_num, name)
                    continue

                library.append(GestureRecord(name, points))

        log.info("Loaded %d template(s) from %s", len(library), self.templates_dir)
        return library

    @staticmethod
    def template_files(gesture_dir):
        template_files = []

        for file_name in os.listdir(gesture_dir):
            match = TEMPLATE_FILE_PATTERN.match(file_name)
            if match:
                template_files.append((int(match.group(1)), file_name))

        return sorted(template_files)

    @staticmethod
    def write_template(template_path, record):
        with open(template_path, "w", newline='') as template_file:
            writer = csv.writer(template_file)

            for point in record.points:
                writer.writerow([repr(float(point[0])), repr(float(point[1]))])

    @staticmethod
    def read_template(template_path):
        points = []

        with open(template_path, "r", newline='') as template_file:
            for line_num, line in enumerate(csv.reader(template_file), start=1):
                if not line: # Skip blank lines
                    continue

                try:
                    x, y = (float(val) for val in line)
                except ValueError as e:
                    raise TemplateStoreError(
                        f"Bad point on line {line_num} of {template_path}: "
                        f"{line}") from e

                points.append([x, y])

        return points
