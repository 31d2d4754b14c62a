import os
import json
import logging

logger = logging.getLogger(__name__)

CONFIG_KEYS = [
    "LEDGER_API_URL",
    "LEDGER_API_TIMEOUT",
    "LEDGER_API_VERIFY_SSL",
    "PRODUCER_ID",
    "DEFAULT_PRODUCT_STATUS",
    "PUBLIC_BASE_URL",
    "SESSION_SECRET",
    "LOG_DIR",
]


def config_paths():
    """Candidate locations of the portal's JSON config file, in lookup order"""
    return [
        r"C:\tmp\product_portal\config.json",  # Windows path
        "/tmp/product_portal/config.json",     # Linux path
        os.path.join(os.path.expanduser("~"), "tmp", "product_portal", "config.json")
    ]


def load_config(paths=None):
    """
    Load portal settings from a JSON file, falling back to environment variables.

    Checks the locations returned by config_paths() and uses the first file
    that parses. Values found are exported into os.environ so the rest of the
    application can keep reading plain environment variables.

    Returns:
        dict: Dictionary of settings
    """
    config = {}

    json_loaded = False
    for json_path in (paths if paths is not None else config_paths()):
        if os.path.exists(json_path):
            try:
                with open(json_path, 'r', encoding='utf-8') as f:
                    config = json.load(f)
                logger.info(f"✅ Settings loaded from JSON file: {json_path}")
                json_loaded = True
                break
            except (OSError, ValueError) as e:
                logger.warning(f"⚠️ Failed to load settings from {json_path}: {e}")

    if not json_loaded:
        logger.info("No config.json found, using environment variables")
        config = {key: os.environ.get(key, "") for key in CONFIG_KEYS}

    for key, value in config.items():
        if value is not None and value != "":
            os.environ[key] = str(value)

    return config


def get_setting(key, default=None):
    """
    Get a single setting value.

    Args:
        key (str): Setting name
        default: Value returned when the setting is unset or empty

    Returns:
        str: Setting value
    """
    value = os.environ.get(key)
    if value:
        return value
    return default


def get_bool_setting(key, default=False):
    value = get_setting(key)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def get_float_setting(key, default=None):
    value = get_setting(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning(f"⚠️ Ignoring non-numeric value for {key}: {value!r}")
        return default
