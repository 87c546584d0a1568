from abc import ABC, abstractmethod
from typing import Any, Dict

import pandas as pd

LOADER_REGISTRY = {}

def register_loader(source_name: str):
    def decorator(cls):
        LOADER_REGISTRY[source_name] = cls
        return cls
    return decorator

class BaseDataLoader(ABC):

    def __init__(self, config: Dict[str, Any]):
        self.config = config

    @abstractmethod
    def load(self) -> pd.DataFrame:
        pass
