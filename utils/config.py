# utils/config.py
"""
Centralized Configuration Management

Version: 1.0.0
Features:
- Support both local (.env) and Streamlit Cloud (secrets.toml)
- Singleton pattern for efficiency
- Type-safe getters with defaults
- Every setting optional: the dashboard starts with zero configuration
"""

import os
import logging
from pathlib import Path
from dotenv import load_dotenv
from typing import Dict, Any, Optional
from dataclasses import dataclass, asdict

# Initialize logger
logger = logging.getLogger(__name__)

DEFAULT_ANNUAL_GOAL = 2_180_000.0


def is_running_on_streamlit_cloud() -> bool:
    """Detect if running on Streamlit Cloud"""
    try:
        import streamlit as st
        return hasattr(st, 'secrets') and len(st.secrets) > 0
    except Exception:
        return False


def _as_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')


def _as_float(value: Any, default: float, name: str) -> float:
    if value is None or str(value).strip() == "":
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning(f"Invalid {name} value {value!r}, using {default}")
        return default


@dataclass
class StorageConfig:
    """Blob storage configuration container"""
    backend: str = "local"
    data_dir: str = ".data"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class AWSConfig:
    """AWS configuration container (used by the s3 storage backend)"""
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    region: str = "sa-east-1"
    bucket_name: str = "sales-bi-dashboard"
    app_prefix: str = "sales-bi"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def is_configured(self) -> bool:
        return bool(self.access_key_id and self.secret_access_key)


@dataclass
class AdvisoryConfig:
    """Narrative advisory (OpenAI) configuration container"""
    api_key: Optional[str] = None
    model: str = "gpt-4o"
    temperature: float = 0.4
    max_tokens: int = 1200
    language: str = "Portuguese (Brazil)"

    def is_configured(self) -> bool:
        return bool(self.api_key)


class Config:
    """
    Centralized configuration management

    Usage:
        from utils.config import config

        storage_config = config.get_storage_config()
        advisory_config = config.get_advisory_config()
        goal = config.get_app_setting("ANNUAL_GOAL")

        if config.is_feature_enabled("ADVISORY"):
            ...
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self.is_cloud = is_running_on_streamlit_cloud()
        self._load_config()
        self._initialized = True

    def _load_config(self):
        """Load configuration based on environment"""
        if self.is_cloud:
            self._load_cloud_config()
        else:
            self._load_local_config()

        self._log_config_status()

    def _load_cloud_config(self):
        """Load configuration from Streamlit Cloud secrets"""
        import streamlit as st

        storage_secrets = st.secrets.get("STORAGE", {})
        self._storage_config = StorageConfig(
            backend=storage_secrets.get("BACKEND", "s3"),
            data_dir=storage_secrets.get("DATA_DIR", ".data"),
        )

        aws_secrets = st.secrets.get("AWS", {})
        self._aws_config = AWSConfig(
            access_key_id=aws_secrets.get("ACCESS_KEY_ID"),
            secret_access_key=aws_secrets.get("SECRET_ACCESS_KEY"),
            region=aws_secrets.get("REGION", "sa-east-1"),
            bucket_name=aws_secrets.get("BUCKET_NAME", "sales-bi-dashboard"),
            app_prefix=aws_secrets.get("APP_PREFIX", "sales-bi"),
        )

        api_secrets = st.secrets.get("API", {})
        self._advisory_config = AdvisoryConfig(
            api_key=api_secrets.get("OPENAI_API_KEY"),
            model=api_secrets.get("ADVISORY_MODEL", "gpt-4o"),
            temperature=_as_float(api_secrets.get("ADVISORY_TEMPERATURE"), 0.4, "ADVISORY_TEMPERATURE"),
            max_tokens=int(_as_float(api_secrets.get("ADVISORY_MAX_TOKENS"), 1200, "ADVISORY_MAX_TOKENS")),
            language=api_secrets.get("ADVISORY_LANGUAGE", "Portuguese (Brazil)"),
        )

        self._app_config = self._build_app_config(dict(st.secrets.get("APP", {})))

        logger.info("☁️ Running in STREAMLIT CLOUD")

    def _load_local_config(self):
        """Load configuration from local .env file"""
        env_paths = [
            Path.cwd() / ".env",
            Path(__file__).parent.parent / ".env",
        ]

        for env_path in env_paths:
            if env_path.exists():
                load_dotenv(env_path)
                logger.info(f"Loaded .env from: {env_path}")
                break

        self._storage_config = StorageConfig(
            backend=os.getenv("STORAGE_BACKEND", "local").lower(),
            data_dir=os.getenv("DATA_DIR", ".data"),
        )

        self._aws_config = AWSConfig(
            access_key_id=os.getenv("AWS_ACCESS_KEY_ID"),
            secret_access_key=os.getenv("AWS_SECRET_ACCESS_KEY"),
            region=os.getenv("AWS_REGION", "sa-east-1"),
            bucket_name=os.getenv("S3_BUCKET_NAME", "sales-bi-dashboard"),
            app_prefix=os.getenv("S3_APP_PREFIX", "sales-bi"),
        )

        self._advisory_config = AdvisoryConfig(
            api_key=os.getenv("OPENAI_API_KEY"),
            model=os.getenv("ADVISORY_MODEL", "gpt-4o"),
            temperature=_as_float(os.getenv("ADVISORY_TEMPERATURE"), 0.4, "ADVISORY_TEMPERATURE"),
            max_tokens=int(_as_float(os.getenv("ADVISORY_MAX_TOKENS"), 1200, "ADVISORY_MAX_TOKENS")),
            language=os.getenv("ADVISORY_LANGUAGE", "Portuguese (Brazil)"),
        )

        self._app_config = self._build_app_config(os.environ)

        logger.info("💻 Running in LOCAL environment")

    @staticmethod
    def _build_app_config(source) -> Dict[str, Any]:
        """Application-specific settings from a mapping (env or secrets section)"""
        return {
            "LOG_LEVEL": str(source.get("LOG_LEVEL", "INFO")).upper(),
            "COMPANY_NAME": source.get("COMPANY_NAME", "SK-G Automação"),
            "ANNUAL_GOAL": _as_float(source.get("ANNUAL_GOAL"), DEFAULT_ANNUAL_GOAL, "ANNUAL_GOAL"),

            # Feature flags
            "ENABLE_ADVISORY": _as_bool(source.get("ENABLE_ADVISORY"), True),
            "ENABLE_EXPORT": _as_bool(source.get("ENABLE_EXPORT"), True),
        }

    def _log_config_status(self):
        """Log configuration status"""
        logger.info(f"✅ Storage: {self._storage_config.backend}")
        logger.info(f"✅ AWS S3: {'Configured' if self._aws_config.is_configured() else 'Not configured'}")
        logger.info(f"✅ Advisory: {'Configured' if self._advisory_config.is_configured() else 'Missing API key'}")

    # ==================== PUBLIC GETTERS ====================

    def get_storage_config(self) -> StorageConfig:
        return self._storage_config

    def get_aws_config(self) -> Dict[str, Any]:
        """Get AWS configuration as dictionary"""
        return self._aws_config.to_dict()

    def get_advisory_config(self) -> AdvisoryConfig:
        return self._advisory_config

    def get_app_setting(self, key: str, default: Any = None) -> Any:
        """Get application setting with default"""
        return self._app_config.get(key, default)

    def is_feature_enabled(self, feature: str) -> bool:
        """Check if feature is enabled"""
        key = f"ENABLE_{feature.upper()}"
        return self._app_config.get(key, True)

    @property
    def app_config(self) -> Dict[str, Any]:
        return self._app_config.copy()


# ==================== SINGLETON INSTANCE ====================

config = Config()

IS_RUNNING_ON_CLOUD = config.is_cloud
APP_CONFIG = config.app_config

__all__ = [
    'config',
    'Config',
    'StorageConfig',
    'AWSConfig',
    'AdvisoryConfig',
    'IS_RUNNING_ON_CLOUD',
    'APP_CONFIG',
]
