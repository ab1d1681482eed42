"""
Application Configuration
=========================
Configuration management for the link2clash client.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from link2clash.errors import ConfigError


DEFAULT_PORT = 7625
DEFAULT_ENDPOINT = f"http://127.0.0.1:{DEFAULT_PORT}/api/convert"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class AppConfig:
    """
    Application configuration.
    
    Attributes:
        endpoint: Full URL of the conversion endpoint
        request_timeout: Seconds before a conversion request is abandoned
            (None waits indefinitely)
        status_seconds: How long a status message stays visible
        group_name: Name of the proxy group in the composed document
        discard_stale_responses: Drop responses that arrive after a newer
            submit or a clear
        log_level: Logging level name
    """
    
    endpoint: str = DEFAULT_ENDPOINT
    request_timeout: Optional[float] = None
    status_seconds: float = 2.2
    group_name: str = "PROXY"
    discard_stale_responses: bool = True
    log_level: str = "info"
    
    @classmethod
    def from_dict(cls, config_dict: dict) -> "AppConfig":
        """
        Create config from dictionary.
        
        Unknown keys are ignored.
        """
        known = set(cls.__dataclass_fields__)
        return cls(**{key: value for key, value in config_dict.items() if key in known})
    
    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """
        Create config from environment variables.
        
        Args:
            environ: Mapping to read instead of ``os.environ``
            
        Returns:
            AppConfig instance
            
        Raises:
            ConfigError: If a numeric or boolean variable cannot be parsed
        """
        env = os.environ if environ is None else environ
        values: dict = {}
        
        endpoint = env.get("LINK2CLASH_ENDPOINT", "").strip()
        port = env.get("PORT", "").strip()
        if endpoint:
            values["endpoint"] = endpoint
        elif port:
            if not port.isdigit():
                raise ConfigError("PORT", port)
            values["endpoint"] = f"http://127.0.0.1:{port}/api/convert"
        
        timeout = env.get("LINK2CLASH_TIMEOUT", "").strip()
        if timeout:
            values["request_timeout"] = _parse_float("LINK2CLASH_TIMEOUT", timeout)
        
        status = env.get("LINK2CLASH_STATUS_SECONDS", "").strip()
        if status:
            values["status_seconds"] = _parse_float("LINK2CLASH_STATUS_SECONDS", status)
        
        group_name = env.get("LINK2CLASH_GROUP_NAME", "").strip()
        if group_name:
            values["group_name"] = group_name
        
        discard = env.get("LINK2CLASH_DISCARD_STALE", "").strip().lower()
        if discard:
            if discard in _TRUE_VALUES:
                values["discard_stale_responses"] = True
            elif discard in _FALSE_VALUES:
                values["discard_stale_responses"] = False
            else:
                raise ConfigError("LINK2CLASH_DISCARD_STALE", discard)
        
        log_level = env.get("LINK2CLASH_LOG_LEVEL", "").strip()
        if log_level:
            values["log_level"] = log_level.lower()
        
        return cls(**values)
    
    def to_dict(self) -> dict:
        """
        Convert config to dictionary.
        
        Returns:
            Configuration dictionary
        """
        return {
            "endpoint": self.endpoint,
            "request_timeout": self.request_timeout,
            "status_seconds": self.status_seconds,
            "group_name": self.group_name,
            "discard_stale_responses": self.discard_stale_responses,
            "log_level": self.log_level,
        }


def _parse_float(key: str, raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(key, raw) from None
    if value < 0:
        raise ConfigError(key, raw)
    return value
