import os

from PyQt6.QtCore import QSettings

THEMES = ("light", "dark", "auto")

class SettingsManager:
    def __init__(self, organization_name: str = "scrolldialog", application_name: str = "scrolldialog"):
        self.settings = QSettings(organization_name, application_name)

    def load_theme(self) -> str:
        """
        Loads the theme name. APP_THEME in the environment wins over the saved value.
        """
        theme_from_env = os.environ.get("APP_THEME", "").lower()
        if theme_from_env in THEMES:
            return theme_from_env

        theme = self.settings.value("theme", "auto", type=str)
        return theme if theme in THEMES else "auto"

    def save_theme(self, theme: str):
        if theme not in THEMES:
            raise ValueError(f"Unknown theme '{theme}', expected one of {THEMES}")
        self.settings.setValue("theme", theme)
        self.settings.sync()

    def load_debug_mode(self) -> bool:
        """Loads permanent debug mode setting."""
        return self.settings.value("debug/enabled", False, type=bool)

    def save_debug_mode(self, enabled: bool):
        """Saves permanent debug mode setting."""
        self.settings.setValue("debug/enabled", enabled)
        self.settings.sync()
