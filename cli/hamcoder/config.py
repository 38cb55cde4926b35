"""Конфигурация кодера через pydantic settings."""

from __future__ import annotations

from pydantic import validator
from pydantic_settings import BaseSettings

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Параметры чтения и записи файлов."""

    encoding: str = "utf-8"
    line_terminator: str = "\n"
    log_level: str = "WARNING"

    @validator("line_terminator")
    def known_terminator(cls, v: str) -> str:
        if v not in ("\n", "\r\n"):
            raise ValueError("Разделитель строк должен быть \\n или \\r\\n")
        return v

    @validator("log_level")
    def known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Неизвестный уровень логирования: {v}")
        return level

    class Config:
        env_prefix = "HAMCODER_"


settings = Settings()
