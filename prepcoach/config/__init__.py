from prepcoach.config.settings import ProviderMode, Settings, get_settings

__all__ = ["ProviderMode", "Settings", "get_settings"]
