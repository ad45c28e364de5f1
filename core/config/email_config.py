#!/usr/bin/env python3
"""E-mail delivery configuration (Resend API)"""
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class EmailConfig:
    """Sender identity and links rendered into notification e-mails"""
    resend_api_key: Optional[str] = None
    resend_base_url: str = "https://api.resend.com"
    from_email: str = "noreply@oncc.local"
    from_name: str = "ONCC"
    app_name: str = "ONCC"
    frontend_url: str = "http://localhost:3000"
    support_email: str = "support@oncc.local"
    support_phone: str = ""

    @property
    def enabled(self) -> bool:
        return bool(self.resend_api_key)

    @property
    def sender(self) -> str:
        return f"{self.from_name} <{self.from_email}>"

    @property
    def year(self) -> int:
        return datetime.now().year

    @classmethod
    def from_env(cls) -> 'EmailConfig':
        """Load e-mail config from environment variables"""
        return cls(
            resend_api_key=os.getenv("RESEND_API_KEY"),
            resend_base_url=os.getenv("RESEND_BASE_URL", "https://api.resend.com"),
            from_email=os.getenv("MAIL_FROM_ADDRESS", "noreply@oncc.local"),
            from_name=os.getenv("MAIL_FROM_NAME", "ONCC"),
            app_name=os.getenv("APP_NAME", "ONCC"),
            frontend_url=os.getenv("FRONTEND_URL", "http://localhost:3000"),
            support_email=os.getenv("SUPPORT_EMAIL", "support@oncc.local"),
            support_phone=os.getenv("SUPPORT_PHONE", ""),
        )
