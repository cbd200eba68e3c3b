"""
Configuration objects and helpers for the Openpay client.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .environment import build_environment
from .errors import OpenpayError

__all__ = [
    "ClientConfig",
    "ClientParameters",
    "ConfigError",
    "PRODUCTION_URL",
    "SANDBOX_URL",
    "load_client_config",
]

SANDBOX_URL = "https://sandbox-api.openpay.mx"
PRODUCTION_URL = "https://api.openpay.mx"
DEFAULT_TIMEOUT_SECONDS = 60.0
DEFAULT_USER_AGENT = "openpay-client-python"

_PARAMETER_TO_ENV_KEY = {
    "merchant_id": "OPENPAY_MERCHANT_ID",
    "private_key": "OPENPAY_PRIVATE_KEY",
    "base_url": "OPENPAY_BASE_URL",
    "production": "OPENPAY_PRODUCTION",
    "timeout_seconds": "OPENPAY_TIMEOUT_SECONDS",
    "user_agent": "OPENPAY_USER_AGENT",
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class ConfigError(OpenpayError):
    """Raised when the supplied configuration is invalid."""


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _parse_bool(raw: str, field_name: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{field_name} must be a boolean, got '{raw}'")


def valid_timeout(value: float) -> bool:
    return math.isfinite(value) and value > 0


def _require(values: Mapping[str, str], key: str) -> str:
    raw = values.get(key)
    if raw is None or not raw.strip():
        raise ConfigError(f"{key} must be provided")
    return raw.strip()


@dataclass(frozen=True)
class ClientParameters:
    """
    Explicit parameter bundle for constructing :class:`ClientConfig`.

    Callers can either instantiate this helper or pass the individual keyword
    arguments directly to :func:`load_client_config`.
    """

    merchant_id: Optional[str] = None
    private_key: Optional[str] = None
    base_url: Optional[str] = None
    production: Optional[bool] = None
    timeout_seconds: Optional[float | int | str] = None
    user_agent: Optional[str] = None

    def as_overrides(self) -> Dict[str, str]:
        overrides: Dict[str, str] = {}
        for field_name, env_key in _PARAMETER_TO_ENV_KEY.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            overrides[env_key] = _stringify(value)
        return overrides


def _collect_parameter_overrides(
    parameters: Optional[ClientParameters],
    explicit: Mapping[str, Any],
) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    if parameters is not None:
        overrides.update(parameters.as_overrides())

    for key, value in explicit.items():
        if value is None:
            continue
        try:
            env_key = _PARAMETER_TO_ENV_KEY[key]
        except KeyError as exc:
            raise TypeError(f"Unknown client parameter '{key}'") from exc
        overrides[env_key] = _stringify(value)
    return overrides


@dataclass(frozen=True)
class ClientConfig:
    """Everything a transport client needs; passed explicitly, never global."""

    merchant_id: str
    private_key: str
    base_url: str = SANDBOX_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        if not self.merchant_id:
            raise ConfigError("merchant_id must not be empty")
        if not self.private_key:
            raise ConfigError("private_key must not be empty")
        if not valid_timeout(self.timeout_seconds):
            raise ConfigError("timeout_seconds must be a finite number greater than zero")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @property
    def auth(self) -> tuple:
        return (self.private_key, "")

    def __repr__(self) -> str:
        return (
            f"ClientConfig(merchant_id={self.merchant_id!r}, base_url={self.base_url!r}, "
            f"timeout_seconds={self.timeout_seconds!r}, private_key='***')"
        )

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "ClientConfig":
        merchant_id = _require(values, "OPENPAY_MERCHANT_ID")
        private_key = _require(values, "OPENPAY_PRIVATE_KEY")

        production = _parse_bool(values.get("OPENPAY_PRODUCTION", "false"), "OPENPAY_PRODUCTION")
        default_url = PRODUCTION_URL if production else SANDBOX_URL
        base_url = values.get("OPENPAY_BASE_URL") or default_url
        if not base_url.startswith(("http://", "https://")):
            raise ConfigError(f"OPENPAY_BASE_URL must be an http(s) URL, got '{base_url}'")

        timeout_raw = values.get("OPENPAY_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
        try:
            timeout_seconds = float(timeout_raw)
        except ValueError as exc:
            raise ConfigError(
                f"OPENPAY_TIMEOUT_SECONDS must be a number, got '{timeout_raw}'"
            ) from exc

        user_agent = values.get("OPENPAY_USER_AGENT") or DEFAULT_USER_AGENT

        return cls(
            merchant_id=merchant_id,
            private_key=private_key,
            base_url=base_url,
            timeout_seconds=timeout_seconds,
            user_agent=user_agent,
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        parameters: Optional[ClientParameters] = None,
        merchant_id: Optional[str] = None,
        private_key: Optional[str] = None,
        base_url: Optional[str] = None,
        production: Optional[bool] = None,
        timeout_seconds: Optional[float | int | str] = None,
        user_agent: Optional[str] = None,
    ) -> "ClientConfig":
        parameter_overrides = _collect_parameter_overrides(
            parameters,
            {
                "merchant_id": merchant_id,
                "private_key": private_key,
                "base_url": base_url,
                "production": production,
                "timeout_seconds": timeout_seconds,
                "user_agent": user_agent,
            },
        )
        merged_overrides = dict(overrides or {})
        merged_overrides.update(parameter_overrides)

        environment = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(environment)


def load_client_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ClientParameters] = None,
    merchant_id: Optional[str] = None,
    private_key: Optional[str] = None,
    base_url: Optional[str] = None,
    production: Optional[bool] = None,
    timeout_seconds: Optional[float | int | str] = None,
    user_agent: Optional[str] = None,
) -> ClientConfig:
    """
    Convenience wrapper that mirrors :meth:`ClientConfig.from_env`.

    The configuration can be provided through environment variables, a
    ``.env`` file, direct keyword arguments, or any combination of the three.
    """
    return ClientConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        merchant_id=merchant_id,
        private_key=private_key,
        base_url=base_url,
        production=production,
        timeout_seconds=timeout_seconds,
        user_agent=user_agent,
    )
