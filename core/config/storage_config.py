#!/usr/bin/env python3
"""Object storage (MinIO) configuration

Connection parameters for the document store. Every variable has a default and
an unset or unparsable value falls back to it silently.
"""
import os
from dataclasses import dataclass
from typing import Any, Dict


def _bool(val: str) -> bool:
    return val.lower() == "true"


def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default


@dataclass(frozen=True)
class MinIOConfig:
    """MinIO connection parameters"""
    endpoint: str = "localhost"
    port: int = 9000
    use_ssl: bool = False
    access_key: str = "minioadmin"
    secret_key: str = "minioadmin"
    bucket: str = "oncc-documents"
    region: str = "us-east-1"

    @classmethod
    def from_env(cls) -> 'MinIOConfig':
        """Load MinIO config from environment variables"""
        return cls(
            endpoint=os.getenv("MINIO_ENDPOINT") or "localhost",
            port=_int(os.getenv("MINIO_PORT", "9000"), 9000),
            use_ssl=_bool(os.getenv("MINIO_USE_SSL", "false")),
            access_key=os.getenv("MINIO_ACCESS_KEY") or "minioadmin",
            secret_key=os.getenv("MINIO_SECRET_KEY") or "minioadmin",
            bucket=os.getenv("MINIO_BUCKET") or "oncc-documents",
            region=os.getenv("MINIO_REGION") or "us-east-1",
        )

    def to_dict(self) -> Dict[str, Any]:
        """Connection parameters under the names the object-store client expects"""
        return {
            "endPoint": self.endpoint,
            "port": self.port,
            "useSSL": self.use_ssl,
            "accessKey": self.access_key,
            "secretKey": self.secret_key,
            "bucket": self.bucket,
            "region": self.region,
        }

    def client_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``minio.Minio(...)``"""
        return {
            "endpoint": f"{self.endpoint}:{self.port}",
            "access_key": self.access_key,
            "secret_key": self.secret_key,
            "secure": self.use_ssl,
            "region": self.region,
        }
