import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from core.exceptions import EmptyDatasetError
from records import PowerConsumption

logger = logging.getLogger(__name__)

PLOT_REGISTRY = {}

def register_plot(name: str):
    def decorator(cls):
        PLOT_REGISTRY[name] = cls
        return cls
    return decorator


class BasePlot(ABC):
    """A chart written to a fixed-size PNG file.

    Config keys: ``output`` (file name), ``width``/``height`` in pixels and
    ``dpi``. The figure size in inches is derived from them so the PNG comes
    out at exactly ``width`` x ``height`` pixels.
    """

    default_output = "plot.png"

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.output = Path(self.config.get('output', self.default_output))
        self.width = self.config.get('width', 480)
        self.height = self.config.get('height', 480)
        self.dpi = self.config.get('dpi', 100)

    @abstractmethod
    def draw(self, fig: Figure, data: PowerConsumption) -> List[Axes]:
        """Draw the panels onto ``fig`` and return their axes in drawing order."""
        pass

    def render(self, data: PowerConsumption, output: Optional[Path] = None) -> Path:
        if len(data) == 0:
            raise EmptyDatasetError(f"No rows to plot for dates {', '.join(data.dates)}")

        output = Path(output) if output is not None else self.output
        output.parent.mkdir(parents=True, exist_ok=True)

        fig = plt.figure(figsize=(self.width / self.dpi, self.height / self.dpi), dpi=self.dpi)
        try:
            self.draw(fig, data)
            fig.savefig(output, dpi=self.dpi, facecolor="white")
        finally:
            plt.close(fig)

        logger.info("Saved %s", output)
        return output
