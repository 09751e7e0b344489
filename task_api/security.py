"""
Task API - Security Validation

Startup checks for security-relevant configuration.
"""

import warnings

from task_api.config import Settings, settings

DEFAULT_JWT_SECRET = "dev-secret-key-change-in-production"
MIN_PRODUCTION_SECRET_LENGTH = 32


def validate_security_config(config: Settings = settings) -> None:
    """
    Validate security configuration on startup.

    Issues warnings for insecure configurations but does not crash the application
    (to allow tests and development to run).
    """
    # JWT secret validation
    if config.JWT_SECRET == DEFAULT_JWT_SECRET and config.is_production:
        warnings.warn(
            "SECURITY WARNING: Using default JWT_SECRET in production. "
            "Set JWT_SECRET environment variable to a strong secret.",
            UserWarning,
        )

    # CORS validation
    if "*" in config.CORS_ORIGINS:
        warnings.warn(
            "SECURITY WARNING: CORS wildcard (*) detected. "
            "Set specific origins via CORS_ORIGINS.",
            UserWarning,
        )

    # JWT secret strength (basic check)
    if len(config.JWT_SECRET) < MIN_PRODUCTION_SECRET_LENGTH and config.is_production:
        warnings.warn(
            "SECURITY WARNING: JWT_SECRET is too short for production. "
            f"Use at least {MIN_PRODUCTION_SECRET_LENGTH} characters.",
            UserWarning,
        )
