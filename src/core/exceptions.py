class PowerPlotsError(Exception):
    """Base class for errors raised by the plotting jobs."""


class AcquisitionError(PowerPlotsError, OSError):
    """The dataset could not be made available locally."""


class DownloadError(AcquisitionError):
    pass


class ExtractionError(AcquisitionError):
    pass


class EmptyDatasetError(PowerPlotsError, ValueError):
    """Raised instead of rendering a chart with no data in it."""


class ConfigError(PowerPlotsError, KeyError):
    pass
