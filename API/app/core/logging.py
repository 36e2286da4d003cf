"""
Log setup for the tutoring API.

Every record carries a ``domain`` (practice, usage, diagnostic, homework,
rewards, auth, system) so one service area can be grepped out of the stream,
and every message passes through secret redaction before it is written.
"""
import logging
import re
import sys

DOMAIN_PRACTICE = "practice"
DOMAIN_USAGE = "usage"
DOMAIN_DIAGNOSTIC = "diagnostic"
DOMAIN_HOMEWORK = "homework"
DOMAIN_REWARDS = "rewards"
DOMAIN_AUTH = "auth"
DOMAIN_SYSTEM = "system"

LOG_FORMAT = "%(asctime)s | %(levelname)s | [%(domain)s] | %(name)s | %(message)s"

# Third-party loggers that are too chatty at INFO.
QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "passlib")

_SECRET_PATTERNS = [
    re.compile(r"(?i)(authorization\s*[=:]\s*bearer\s+)([^\s,;]+)"),
    re.compile(r"(?i)(bearer\s+)([A-Za-z0-9_\-]+\.[A-Za-z0-9_\-]+\.[A-Za-z0-9_\-]+)"),
    re.compile(r"(?i)(token\s*[=:]\s*)([^\s,;]+)"),
    re.compile(r"(?i)(password\s*[=:]\s*)([^\s,;]+)"),
    re.compile(r"(?i)(jwt[_-]?secret\s*[=:]\s*)([^\s,;]+)"),
]


def get_domain_logger(name: str, domain: str) -> logging.LoggerAdapter[logging.Logger]:
    return logging.LoggerAdapter(logging.getLogger(name), {"domain": domain})


def redact_secrets(message: str) -> str:
    text = str(message or "")
    for pattern in _SECRET_PATTERNS:
        text = pattern.sub(r"\1[REDACTED]", text)
    return text


class TutorLogFilter(logging.Filter):
    """Default the domain to ``system`` and redact the rendered message."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "domain"):
            record.domain = DOMAIN_SYSTEM  # type: ignore[attr-defined]
        record.msg = redact_secrets(record.getMessage())
        record.args = ()
        return True


def configure_logging(level: str = "INFO") -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(TutorLogFilter())
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[handler],
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
