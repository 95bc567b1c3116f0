from .model import AppSettings
from .loader import load_app_settings

__all__ = ["AppSettings", "load_app_settings"]
