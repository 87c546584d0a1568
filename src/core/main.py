import logging
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from acquisition import Fetcher
from core.exceptions import ConfigError
from core.pipeline import load_power_consumption
from plots import PLOT_REGISTRY, BasePlot
from records import PowerConsumption

logger = logging.getLogger(__name__)

# installed as package data of core (see setup.py)
DEFAULT_CONFIG_DIR = Path(str(resources.files("core") / "conf"))


class PlotRunner:
    def __init__(self, config_dir: Path = DEFAULT_CONFIG_DIR, fetcher: Optional[Fetcher] = None):
        self.config_dir = Path(config_dir)
        self.fetcher = fetcher
        self._datasets: Dict[str, PowerConsumption] = {}

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        with open(path, 'r') as f:
            return yaml.safe_load(f)

    def get_component_by_name(self, name: str, component_type: str) -> Dict[str, Any]:
        """Load specific component config by name"""
        config_path = self.config_dir / component_type / f"{name}.yaml"
        if not config_path.is_file():
            raise ConfigError(f"No {component_type} config named '{name}' in {self.config_dir}")
        return self.load_yaml(config_path)

    def load_dataset(self, name: str) -> PowerConsumption:
        # plot2 and plot4 read the same two days; parse them once per run
        if name not in self._datasets:
            data_cfg = self.get_component_by_name(name, 'data')
            self._datasets[name] = load_power_consumption(data_cfg, fetcher=self.fetcher)
        return self._datasets[name]

    def load_plot(self, name: str) -> BasePlot:
        plot_cfg = self.get_component_by_name(name, 'plots')
        plot_name = plot_cfg.get('name', name)
        if plot_name not in PLOT_REGISTRY:
            raise ConfigError(f"Unknown plot: {plot_name}")
        return PLOT_REGISTRY[plot_name](plot_cfg)

    def run_job(self, job: Dict[str, Any]) -> Path:
        logger.info("Job: %s", job['name'])
        try:
            data = self.load_dataset(job['data'])
            plot = self.load_plot(job['plot'])
            return plot.render(data)
        except Exception:
            logger.error("Job %s failed", job['name'])
            raise

    def run_jobs(self, names: Optional[List[str]] = None) -> List[Path]:
        jobs = self.load_yaml(self.config_dir / "jobs.yaml")['jobs']
        if names is not None:
            unknown = set(names) - {job['name'] for job in jobs}
            if unknown:
                raise ConfigError(f"Unknown jobs: {sorted(unknown)}")
            jobs = [job for job in jobs if job['name'] in names]
        return [self.run_job(job) for job in jobs]


def _run(names: Optional[List[str]] = None) -> List[Path]:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Working dir: %s", Path.cwd())
    return PlotRunner().run_jobs(names)


def main():
    _run()


def plot2():
    _run(["plot2"])


def plot4():
    _run(["plot4"])


if __name__ == "__main__":
    main()
