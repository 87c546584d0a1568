from loaders.base_loader import LOADER_REGISTRY, BaseDataLoader, register_loader
from loaders import energy_power_dataset_loader  # noqa: F401  registers "energy_power"
