"""Runtime configuration read from the environment.

A ``.env`` file in the working directory is loaded first, so local
settings can live there instead of in the shell.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


def _split(raw: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 3000
    environment: str = "development"
    email_user: str | None = None
    email_pass: str | None = None
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_timeout: float = 10.0
    contact_email: str | None = None
    admin_token: str | None = None
    cors_origins: tuple[str, ...] = field(default_factory=lambda: ("*",))
    log_level: str = "INFO"
    log_file: str | None = None

    @property
    def mail_sender(self) -> str:
        return self.email_user or "no-reply@localhost"

    @property
    def shop_address(self) -> str:
        return self.contact_email or self.mail_sender

    @property
    def smtp_enabled(self) -> bool:
        return bool(self.email_user and self.email_pass)

    @staticmethod
    def from_env(dotenv: bool = True) -> Settings:
        if dotenv:
            load_dotenv()
        env = os.environ
        return Settings(
            host=env.get("HOST", "127.0.0.1"),
            port=int(env.get("PORT", "3000")),
            environment=env.get("ENVIRONMENT", "development"),
            email_user=env.get("EMAIL_USER") or None,
            email_pass=env.get("EMAIL_PASS") or None,
            smtp_host=env.get("SMTP_HOST", "smtp.gmail.com"),
            smtp_port=int(env.get("SMTP_PORT", "587")),
            smtp_timeout=float(env.get("SMTP_TIMEOUT", "10")),
            contact_email=env.get("CONTACT_EMAIL") or None,
            admin_token=env.get("ADMIN_TOKEN") or None,
            cors_origins=_split(env.get("CORS_ORIGINS", "*")),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            log_file=env.get("LOG_FILE") or None,
        )
