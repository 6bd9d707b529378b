from .defaults_service import apply_config_defaults

__all__ = ["apply_config_defaults"]
