from skillkit.config.settings import LintSettings, get_settings, reload_settings, settings_for

__all__ = ["LintSettings", "get_settings", "reload_settings", "settings_for"]
