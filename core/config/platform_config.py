#!/usr/bin/env python3
"""Main platform configuration"""
import os
from dataclasses import dataclass, field

from .email_config import EmailConfig
from .infra_config import InfraConfig
from .logging_config import LoggingConfig
from .storage_config import MinIOConfig


def _bool(val: str) -> bool:
    return val.lower() == "true"


@dataclass(frozen=True)
class PlatformConfig:
    """Platform configuration with all sub-configs.

    Built once at process start by ``load_settings()`` and handed to the
    factories that need it.
    """

    # Environment
    environment: str = "development"
    debug: bool = False

    # Bind address for the HTTP services (each service owns its port)
    default_host: str = "0.0.0.0"

    # Sub-configurations
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    infrastructure: InfraConfig = field(default_factory=InfraConfig)
    storage: MinIOConfig = field(default_factory=MinIOConfig)
    email: EmailConfig = field(default_factory=EmailConfig)

    @property
    def is_testing(self) -> bool:
        return self.environment in ("test", "testing")

    @classmethod
    def from_env(cls) -> 'PlatformConfig':
        """Load complete configuration from environment"""
        env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
        return cls(
            environment=env,
            debug=_bool(os.getenv("DEBUG", "true" if env == "development" else "false")),
            default_host=os.getenv("HOST", "0.0.0.0"),
            logging=LoggingConfig.from_env(),
            infrastructure=InfraConfig.from_env(),
            storage=MinIOConfig.from_env(),
            email=EmailConfig.from_env(),
        )
