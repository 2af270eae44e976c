"""
Utility modules for jobmatch.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Application-wide constants
"""

from jobmatch.utils.config import (
    AppSettings,
    LoggingSettings,
    MatchingSettings,
    get_settings,
    reload_settings,
    settings,
    ROOT_DIR,
)
from jobmatch.utils.constants import (
    APP_NAME,
    APP_DISPLAY_NAME,
    VERSION,
    SKILL_KEYWORDS,
    AuditAction,
    MatchScoreLevel,
    SkillsAssessment,
)
from jobmatch.utils.logger import (
    setup_logging,
    get_logger,
    audit_log,
    LoggerMixin,
    log,
)

__all__ = [
    # Config
    "AppSettings",
    "LoggingSettings",
    "MatchingSettings",
    "get_settings",
    "reload_settings",
    "settings",
    "ROOT_DIR",
    # Constants
    "APP_NAME",
    "APP_DISPLAY_NAME",
    "VERSION",
    "SKILL_KEYWORDS",
    "AuditAction",
    "MatchScoreLevel",
    "SkillsAssessment",
    # Logger
    "setup_logging",
    "get_logger",
    "audit_log",
    "LoggerMixin",
    "log",
]
