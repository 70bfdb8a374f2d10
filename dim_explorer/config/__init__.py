from .loader import load_data, load_data_file, load_global_config
from .model import GlobalConfig, LoadedData, PlotConfig

__all__ = ["load_data", "load_data_file", "load_global_config", "GlobalConfig", "LoadedData", "PlotConfig"]
