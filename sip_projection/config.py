"""Flask configuration objects.

Values can be overridden with ``SIP_PROJECTION_``-prefixed environment
variables, e.g. ``SIP_PROJECTION_LOG_LEVEL=DEBUG``. Values that parse as JSON
are decoded, so ``SIP_PROJECTION_CORS_ORIGINS='["https://example.com"]'``
yields a list.
"""


class Config:
    CORS_ORIGINS = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]
    LOG_LEVEL = "INFO"
    DEFAULT_EXPORT_VIEW = "monthly"
    TESTING = False


class TestingConfig(Config):
    TESTING = True
    LOG_LEVEL = "DEBUG"
