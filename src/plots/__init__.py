from plots.base_plot import PLOT_REGISTRY, BasePlot, register_plot
from plots import global_active_power_plot, overview_plot  # noqa: F401  registers plots
