import os

import pytest
from numpy.testing import assert_allclose

from stroke_recognizer.exceptions import TemplateStoreError
from stroke_recognizer.gestures import GestureLibrary, GestureRecord
from stroke_recognizer.logger import Logger

WAVE = [(0.0, 0.0), (10.125, 5.5), (20.0, -0.1), (1 / 3, 2 / 3)]


class TestLog:

    def test_writes_one_row_per_point(self, tmp_path):
        path = Logger(str(tmp_path)).log(GestureRecord("wave", WAVE))

        assert path == os.path.join(str(tmp_path), "wave", "t0.csv")
        with open(path) as f:
            rows = [line for line in f.read().splitlines() if line]
        assert len(rows) == len(WAVE)

    def test_uses_next_free_slot(self, tmp_path):
        template_logger = Logger(str(tmp_path))
        template_logger.log(GestureRecord("wave", WAVE))
        path = template_logger.log(GestureRecord("wave", WAVE))
        assert os.path.basename(path) == "t1.csv"


class TestGetAllTemplates:

    def test_round_trip(self, tmp_path):
        template_logger = Logger(str(tmp_path))
        template_logger.log(GestureRecord("wave", WAVE))

        library = template_logger.get_all_templates()

        assert library.names() == ["wave"]
        assert_allclose(library[0].points, WAVE, rtol=0, atol=0)
        assert library[0].extremes.max_x == 20.0

    def test_ordered_by_name_then_slot(self, tmp_path):
        template_logger = Logger(str(tmp_path))
        template_logger.log(GestureRecord("zigzag", [(0, 0), (1, 1)]))
        template_logger.log(GestureRecord("arrow", [(0, 0), (2, 2)]))
        template_logger.log(GestureRecord("arrow", [(0, 0), (3, 3)]))

        library = template_logger.get_all_templates()

        assert library.names() == ["arrow", "arrow", "zigzag"]
        assert library[1].points[1][0] == 3.0

    def test_slots_sort_numerically(self, tmp_path):
        template_logger = Logger(str(tmp_path))
        for i in range(11):
            template_logger.log(GestureRecord("dot", [(0, 0), (i, 0)]))

        library = template_logger.get_all_templates()

        assert [record.points[1][0] for record in library] == list(range(11))

    def test_missing_directory_is_empty_library(self, tmp_path):
        library = Logger(str(tmp_path / "nowhere")).get_all_templates()
        assert len(library) == 0

    def test_empty_file_is_skipped(self, tmp_path):
        gesture_dir = tmp_path / "blank"
        gesture_dir.mkdir()
        (gesture_dir / "t0.csv").write_text("")

        assert len(Logger(str(tmp_path)).get_all_templates()) == 0

    def test_other_files_are_ignored(self, tmp_path):
        template_logger = Logger(str(tmp_path))
        template_logger.log(GestureRecord("wave", WAVE))
        (tmp_path / "wave" / "notes.txt").write_text("not a template")
        (tmp_path / "README").write_text("top level file")

        assert template_logger.get_all_templates().names() == ["wave"]

    def test_malformed_row_raises(self, tmp_path):
        gesture_dir = tmp_path / "broken"
        gesture_dir.mkdir()
        (gesture_dir / "t0.csv").write_text("0,0\n1,oops\n")

        with pytest.raises(TemplateStoreError):
            Logger(str(tmp_path)).get_all_templates()


class TestSaveLibrary:

    def test_rewrites_name_directories(self, tmp_path):
        template_logger = Logger(str(tmp_path))
        for _ in range(3):
            template_logger.log(GestureRecord("wave", WAVE))

        library = GestureLibrary([GestureRecord("wave", [(0, 0), (5, 5)]),
                                  GestureRecord("line", [(0, 0), (9, 0)])])
        template_logger.save_library(library)

        assert sorted(os.listdir(tmp_path / "wave")) == ["t0.csv"]
        loaded = template_logger.get_all_templates()
        assert loaded.names() == ["line", "wave"]
        assert_allclose(loaded[1].points, [(0, 0), (5, 5)])

    def test_keeps_order_within_name(self, tmp_path):
        template_logger = Logger(str(tmp_path))
        library = GestureLibrary([GestureRecord("c", [(0, 0), (1, 0)]),
                                  GestureRecord("c", [(0, 0), (2, 0)])])
        template_logger.save_library(library)

        loaded = template_logger.get_all_templates()
        assert [record.points[1][0] for record in loaded] == [1.0, 2.0]
