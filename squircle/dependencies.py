"""FastAPI dependency injection."""

from __future__ import annotations

from squircle.config import Settings, settings
from squircle.engine.config import GeneratorConfig
from squircle.engine.generator import get_default_config


def get_settings() -> Settings:
    return settings


def get_generator_config() -> GeneratorConfig:
    return get_default_config()
