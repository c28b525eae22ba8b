from statdist.config.fit_config import FitConfig, load_fit_config

__all__ = ["FitConfig", "load_fit_config"]
