"""bibrender configuration package."""

from bibrender.config.loader import get_config, load_config
from bibrender.config.models import BackendSettings, RenderConfig

__all__ = ["BackendSettings", "RenderConfig", "get_config", "load_config"]
