import os
import logging
from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix

from config_loader import load_config, get_setting, get_bool_setting, get_float_setting
from ledger_client import DEFAULT_LEDGER_API_URL

# Load settings from JSON file or environment variables
try:
    load_config()
    logging.info("✅ Settings loaded from JSON file or environment variables")
except OSError as e:
    logging.warning(f"⚠️ Could not load settings: {e}")
    logging.info("Using system environment variables as fallback")

# Configure basic logging (will be enhanced later)
logging.basicConfig(level=logging.DEBUG)

# Create Flask app
app = Flask(__name__)

app.config['LOG_DIR'] = get_setting('LOG_DIR')

# Rotating log files under LOG_DIR
try:
    from logging_config import setup_logging
    log_directory = setup_logging(app)
    logging.info(f"✅ Logging configured. Logs directory: {log_directory}")
except OSError as e:
    logging.warning(f"⚠️ Could not setup file logging: {e}. Using basic logging only.")

# Flash messages need a real secret
session_secret = get_setting("SESSION_SECRET")
if not session_secret:
    raise RuntimeError("SESSION_SECRET environment variable must be set for secure session management")
app.secret_key = session_secret

app.wsgi_app = ProxyFix(app.wsgi_app, x_proto=1, x_host=1)

# Ledger API configuration
app.config['LEDGER_API_URL'] = get_setting('LEDGER_API_URL', DEFAULT_LEDGER_API_URL)
app.config['LEDGER_API_TIMEOUT'] = get_float_setting('LEDGER_API_TIMEOUT')
app.config['LEDGER_API_VERIFY_SSL'] = get_bool_setting('LEDGER_API_VERIFY_SSL', True)

# Producer identity and draft defaults
app.config['PRODUCER_ID'] = get_setting('PRODUCER_ID', 'PROD-001')
app.config['DEFAULT_PRODUCT_STATUS'] = get_setting('DEFAULT_PRODUCT_STATUS', 'Manufactured')

# Origin used in QR verification links; falls back to the request host
app.config['PUBLIC_BASE_URL'] = get_setting('PUBLIC_BASE_URL')

logging.info(f"✅ Using ledger API at {app.config['LEDGER_API_URL']} (producer {app.config['PRODUCER_ID']})")

# Last successful product list for the transactions view
from modules.transactions.feed import TransactionFeed
app.extensions['transaction_feed'] = TransactionFeed()

# Import and register blueprints
from modules.main_controller import register_modules
register_modules(app)

logging.info("✅ All module blueprints registered")

# Import routes to register them
import routes

# Import JSON API endpoints
import api_rest

logging.info("✅ REST API endpoints loaded")
