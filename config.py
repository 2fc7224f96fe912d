import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


def _coerce(name, value, default):
    if isinstance(default, list):
        return [item.strip() for item in value.split(",") if item.strip()]
    if isinstance(default, bool):
        if value.strip().lower() in _TRUE_VALUES:
            return True
        if value.strip().lower() in _FALSE_VALUES:
            return False
        raise ValueError(f"Setting {name} expects a boolean, got {value!r}")
    try:
        if isinstance(default, int):
            return int(value)
        if isinstance(default, float):
            return float(value)
    except ValueError:
        raise ValueError(
            f"Setting {name} expects {type(default).__name__}, got {value!r}"
        ) from None
    return value


def _setting(name, default=None):
    # env.yaml wins over the process environment; secrets are usually injected as env vars
    if name in data:
        return data[name]
    if name in os.environ:
        return _coerce(name, os.environ[name], default)
    return default


class ApplicationConfig:
    DB_URI = _setting("DB_URI", "sqlite+aiosqlite:///./test.db")
    API_PREFIX = _setting("API_PREFIX", "")
    API_PORT = _setting("API_PORT", 8000)
    API_HOST = _setting("API_HOST", "0.0.0.0")
    API_RELOAD = _setting("API_RELOAD", False)
    CORS_ORIGINS = _setting("CORS_ORIGINS", ["*"])
    CORS_ALLOW_CREDENTIALS = _setting("CORS_ALLOW_CREDENTIALS", False)
    LOG_LEVEL = _setting("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(_setting("ENABLE_LOGGING_MIDDLEWARE", True))

    # Tenant deployment
    TENANT_ID = _setting("TENANT_ID", "")
    SITE_URL = _setting("SITE_URL", "https://example.com")
    SITE_CONFIG_DIR = _setting("SITE_CONFIG_DIR", os.path.join(ROOT_PATH, "site_config"))

    # Identity provider (Supabase auth)
    SUPABASE_URL = _setting("SUPABASE_URL", "")
    SUPABASE_ANON_KEY = _setting("SUPABASE_ANON_KEY", "")
    SUPABASE_JWT_SECRET = _setting("SUPABASE_JWT_SECRET", "dev-secret-key-change-in-production")
    SUPABASE_JWT_AUDIENCE = _setting("SUPABASE_JWT_AUDIENCE", "authenticated")

    # Admin login
    EDGE_FUNCTIONS_URL = _setting("EDGE_FUNCTIONS_URL", "")
    SYSTEM_OWNER_PHONE = _setting("SYSTEM_OWNER_PHONE", "")
    DEV_LOGIN_ENABLED = _setting("DEV_LOGIN_ENABLED", False)
    DEV_TEST_PHONE = _setting("DEV_TEST_PHONE", "+15550000000")
    DEV_ADMIN_EMAIL = _setting("DEV_ADMIN_EMAIL", "admin@localhost.dev")
    DEV_ADMIN_PASSWORD = _setting("DEV_ADMIN_PASSWORD", "admin123456")

    # Payments
    STRIPE_SECRET_KEY = _setting("STRIPE_SECRET_KEY", "")
    STRIPE_API_VERSION = _setting("STRIPE_API_VERSION", "2023-10-16")

    # SMS
    TWILIO_ACCOUNT_SID = _setting("TWILIO_ACCOUNT_SID", "")
    TWILIO_AUTH_TOKEN = _setting("TWILIO_AUTH_TOKEN", "")
    TWILIO_PHONE_NUMBER = _setting("TWILIO_PHONE_NUMBER", "")
    TWILIO_API_URL = _setting("TWILIO_API_URL", "https://api.twilio.com/2010-04-01")
    SMS_SIGNATURE = _setting("SMS_SIGNATURE", "The Roofing Friend Team")

    # AI gateway
    AI_GATEWAY_URL = _setting("AI_GATEWAY_URL", "https://ai.gateway.lovable.dev/v1/chat/completions")
    AI_GATEWAY_API_KEY = _setting("AI_GATEWAY_API_KEY", "")
    ESTIMATE_PARSER_MODEL = _setting("ESTIMATE_PARSER_MODEL", "google/gemini-3-flash-preview")
    PURCHASE_ORDER_PARSER_MODEL = _setting("PURCHASE_ORDER_PARSER_MODEL", "google/gemini-2.5-flash")

    HTTP_TIMEOUT_SECONDS = _setting("HTTP_TIMEOUT_SECONDS", 30.0)
