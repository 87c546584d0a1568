from plots.base_plot import BasePlot, register_plot
from plots.panels import (
    active_power_panel,
    reactive_power_panel,
    sub_metering_panel,
    voltage_panel,
)


@register_plot("overview")
class OverviewPlot(BasePlot):
    """
    Four panels on a 2x2 grid, filled column by column:

        +----------------------+----------------+
        | active power         | voltage        |
        +----------------------+----------------+
        | sub metering 1, 2, 3 | reactive power |
        +----------------------+----------------+
    """

    default_output = "plot4.png"
    panels = (active_power_panel, sub_metering_panel, voltage_panel, reactive_power_panel)

    def draw(self, fig, data):
        frame = data.chronological()
        grid = fig.subplots(2, 2)
        # Fortran order walks down each column before moving right
        axes = list(grid.flatten(order="F"))
        for ax, panel in zip(axes, self.panels):
            panel(ax, frame)
        fig.tight_layout()
        return axes
