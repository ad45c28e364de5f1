#!/usr/bin/env python3
"""Modular configuration system for the ONCC platform

Configuration hierarchy:
- infra_config: PostgreSQL and NATS endpoints
- storage_config: MinIO object storage
- email_config: notification e-mail delivery
- logging_config: logging configuration
- platform_config: environment plus all of the above

There is no global settings instance: entry points call ``load_settings()``
once and pass the result down.
"""
import os
from typing import Optional

from dotenv import load_dotenv

from .email_config import EmailConfig
from .infra_config import InfraConfig
from .logging_config import LoggingConfig
from .platform_config import PlatformConfig
from .storage_config import MinIOConfig

ENV_FILES = {
    "development": "deployment/environments/dev.env",
    "dev": "deployment/environments/dev.env",
    "testing": "deployment/environments/test.env",
    "test": "deployment/environments/test.env",
    "staging": "deployment/environments/staging.env",
    "production": "deployment/environments/production.env",
}


def load_settings(env_file: Optional[str] = None) -> PlatformConfig:
    """Load the environment file for ENV (without overriding real env) and build the config"""
    if env_file is None:
        env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
        env_file = ENV_FILES.get(env, ENV_FILES["development"])
    load_dotenv(env_file, override=False)
    return PlatformConfig.from_env()


__all__ = [
    'PlatformConfig',
    'load_settings',
    'LoggingConfig',
    'InfraConfig',
    'MinIOConfig',
    'EmailConfig',
]
