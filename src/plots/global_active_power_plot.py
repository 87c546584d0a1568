from plots.base_plot import BasePlot, register_plot
from plots.panels import active_power_panel


@register_plot("global_active_power")
class GlobalActivePowerPlot(BasePlot):
    """Global active power over the two days, one panel."""

    default_output = "plot2.png"

    def draw(self, fig, data):
        ax = fig.add_subplot(1, 1, 1)
        active_power_panel(ax, data.chronological())
        return [ax]
