"""Configuration management."""

import os
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError

try:
    from dotenv import load_dotenv
    load_dotenv()
except ImportError:
    pass  # python-dotenv is optional

DISPLAY_METHODS = ("log", "sms", "email")


@dataclass
class SolidConfig:
    """Pod access configuration."""
    profile: str                # WebID, e.g. "https://alice.pod/profile/card#me"
    access_token: Optional[str]  # sent as a bearer token when set
    request_timeout: float
    accept: str


@dataclass
class TwilioConfig:
    """Twilio SMS configuration."""
    account_sid: str
    auth_token: str
    from_number: str
    to_number: str


@dataclass
class SMTPConfig:
    """SMTP configuration for e-mail delivery."""
    host: str
    port: int
    username: str
    password: str
    use_tls: bool
    to_email: str
    from_email: Optional[str] = None


@dataclass
class SchedulerConfig:
    """Scheduler configuration."""
    min_gap_minutes: float
    max_gap_minutes: float


@dataclass
class AppConfig:
    """Complete application configuration."""
    db_path: str
    solid: SolidConfig
    method: str
    scheduler: SchedulerConfig
    twilio: Optional[TwilioConfig] = None
    smtp: Optional[SMTPConfig] = None


def _require(names, missing):
    values = {}
    for name in names:
        value = os.getenv(name)
        if not value:
            missing.append(name)
        values[name] = value
    return values


def load_config(profile: Optional[str] = None, method: Optional[str] = None) -> AppConfig:
    """
    Load configuration from environment variables.

    Args:
        profile: WebID overriding SOLID_PROFILE.
        method: Display method overriding NOTIFICATION_METHOD.

    Raises:
        ConfigurationError: If required configuration values are missing.
    """
    missing = []

    profile = profile or os.getenv("SOLID_PROFILE")
    if not profile:
        missing.append("SOLID_PROFILE")

    method = (method or os.getenv("NOTIFICATION_METHOD", "log")).lower()
    if method not in DISPLAY_METHODS:
        raise ConfigurationError(
            f"Unknown NOTIFICATION_METHOD '{method}', expected one of {', '.join(DISPLAY_METHODS)}"
        )

    solid = SolidConfig(
        profile=profile,
        access_token=os.getenv("SOLID_ACCESS_TOKEN") or None,
        request_timeout=float(os.getenv("SOLID_REQUEST_TIMEOUT", "30")),
        accept=os.getenv("SOLID_ACCEPT", "text/turtle"),
    )

    scheduler = SchedulerConfig(
        min_gap_minutes=float(os.getenv("MIN_GAP_MINUTES", "1")),
        max_gap_minutes=float(os.getenv("MAX_GAP_MINUTES", "5")),
    )
    if scheduler.max_gap_minutes < scheduler.min_gap_minutes:
        raise ConfigurationError("MAX_GAP_MINUTES must not be smaller than MIN_GAP_MINUTES")

    twilio = None
    if method == "sms":
        values = _require(
            ("TWILIO_ACCOUNT_SID", "TWILIO_AUTH_TOKEN", "TWILIO_FROM_NUMBER", "TWILIO_TO_NUMBER"),
            missing,
        )
        twilio = TwilioConfig(
            account_sid=values["TWILIO_ACCOUNT_SID"],
            auth_token=values["TWILIO_AUTH_TOKEN"],
            from_number=values["TWILIO_FROM_NUMBER"],
            to_number=values["TWILIO_TO_NUMBER"],
        )

    smtp = None
    if method == "email":
        values = _require(("SMTP_HOST", "NOTIFICATION_EMAIL"), missing)
        smtp = SMTPConfig(
            host=values["SMTP_HOST"],
            port=int(os.getenv("SMTP_PORT", "587")),
            username=os.getenv("SMTP_USERNAME", ""),
            password=os.getenv("SMTP_PASSWORD", ""),
            use_tls=os.getenv("SMTP_USE_TLS", "true").lower() == "true",
            to_email=values["NOTIFICATION_EMAIL"],
            from_email=os.getenv("SEND_FROM_EMAIL") or None,
        )

    if missing:
        raise ConfigurationError(
            f"Missing required environment variables: {', '.join(missing)}"
        )

    return AppConfig(
        db_path=os.getenv("DB_PATH", "agent_state.db"),
        solid=solid,
        method=method,
        scheduler=scheduler,
        twilio=twilio,
        smtp=smtp,
    )
