import argparse
import logging
import matplotlib.pyplot as plt
import matplotlib.gridspec as gs
import numpy as np
from stroke_recognizer import config as cfg
from stroke_recognizer.logger import Logger


class TemplatePlotter:
    """Grid of every stored template, start point marked in red."""

    def __init__(self, library, cols=4):
        self.library = library
        self.cols = cols
        self.rows = max(1, int(np.ceil(len(library) / cols)))

        self.fig = plt.figure(figsize=(3 * self.cols, 3 * self.rows))
        self.gs = gs.GridSpec(self.rows, self.cols)

    def plot_all(self):
        for i, template in enumerate(self.library):
            ax = self.fig.add_subplot(self.gs[i // self.cols, i % self.cols])
            self.plot_template(ax, template)

        self.fig.tight_layout()
        return self.fig

    def plot_template(self, ax, template):
        points = template.points

        ax.set_title(f"{template.name} ({template.num_points} pts)", size=10)
        ax.plot(points[:, 0], points[:, 1], marker='o', markersize=3,
                linewidth=1.25)
        ax.plot(points[0, 0], points[0, 1], marker='o', color='red')
        ax.set_aspect('equal', adjustable='datalim')
        ax.set_xticks([])
        ax.set_yticks([])

        return ax


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Plot recorded templates")
    parser.add_argument("--templates-dir", default=cfg.TEMPLATES_DIR)
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO)

    library = Logger(args.templates_dir).get_all_templates()
    if len(library) == 0:
        print("No templates have been recorded")
    else:
        TemplatePlotter(library).plot_all()
        plt.show()
