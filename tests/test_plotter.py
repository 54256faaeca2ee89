import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from plotter import TemplatePlotter  # noqa: E402
from stroke_recognizer.gestures import GestureLibrary, GestureRecord  # noqa: E402


class TestTemplatePlotter:

    def teardown_method(self):
        plt.close("all")

    def test_one_axis_per_template(self):
        library = GestureLibrary([GestureRecord(f"g{i}", [(0, 0), (i, 1), (2 * i, 0)])
                                  for i in range(5)])
        fig = TemplatePlotter(library, cols=2).plot_all()

        assert len(fig.axes) == 5
        assert fig.axes[3].get_title().startswith("g3")

    def test_grid_has_at_least_one_row(self):
        plotter = TemplatePlotter(GestureLibrary())
        assert plotter.rows == 1
