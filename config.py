"""
config.py — Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks KALKULATOR_.
Zbiór operacji i cyfr NIE jest konfigurowalny (patrz contracts.py).
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"

    # Wyświetlacz (en-US: "1,234.5")
    grouping_separator: str = ","

    # Sesje w pamięci (najstarsze usuwane po przekroczeniu limitu)
    max_sessions: int = 1000

    # App
    app_title: str = "Kalkulator"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="KALKULATOR_", env_file=".env", extra="ignore")
