import os
import logging
from logging.handlers import RotatingFileHandler

DEFAULT_LOG_DIR = r'C:\tmp\product_portal_logs' if os.name == 'nt' else '/tmp/product_portal_logs'


def setup_logging(app, log_dir=None):
    """
    Configure logging for the product tracking portal
    Logs go to LOG_DIR, or C:\\tmp\\product_portal_logs on Windows and
    /tmp/product_portal_logs elsewhere
    """
    log_dir = log_dir or app.config.get('LOG_DIR') or DEFAULT_LOG_DIR

    try:
        os.makedirs(log_dir, exist_ok=True)
    except OSError as e:
        print(f"Warning: Could not create log directory {log_dir}: {e}")
        log_dir = os.path.join(os.getcwd(), 'logs')
        os.makedirs(log_dir, exist_ok=True)

    main_log_file = os.path.join(log_dir, 'portal_application.log')
    error_log_file = os.path.join(log_dir, 'portal_errors.log')
    ledger_log_file = os.path.join(log_dir, 'ledger_api.log')

    detailed_formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s in %(module)s (%(funcName)s:%(lineno)d): %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Main application log handler (INFO and above, max 10MB, keep 5 backups)
    main_handler = RotatingFileHandler(
        main_log_file,
        maxBytes=10*1024*1024,
        backupCount=5,
        encoding='utf-8'
    )
    main_handler.setLevel(logging.INFO)
    main_handler.setFormatter(detailed_formatter)

    # Error log handler (ERROR and above, keep 10 backups)
    error_handler = RotatingFileHandler(
        error_log_file,
        maxBytes=10*1024*1024,
        backupCount=10,
        encoding='utf-8'
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(detailed_formatter)

    # Ledger API calls, including request lines and status codes
    ledger_handler = RotatingFileHandler(
        ledger_log_file,
        maxBytes=10*1024*1024,
        backupCount=5,
        encoding='utf-8'
    )
    ledger_handler.setLevel(logging.DEBUG)
    ledger_handler.setFormatter(detailed_formatter)

    app.logger.setLevel(logging.DEBUG)
    app.logger.addHandler(main_handler)
    app.logger.addHandler(error_handler)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(main_handler)
    root_logger.addHandler(error_handler)

    ledger_logger = logging.getLogger('ledger_api')
    ledger_logger.setLevel(logging.DEBUG)
    ledger_logger.addHandler(ledger_handler)

    # urllib3 logs every connection at DEBUG
    logging.getLogger('urllib3').setLevel(logging.WARNING)

    werkzeug_logger = logging.getLogger('werkzeug')
    werkzeug_logger.setLevel(logging.INFO)
    werkzeug_logger.addHandler(main_handler)

    app.logger.info("="*80)
    app.logger.info(f"Product Portal Started - Log Directory: {log_dir}")
    app.logger.info(f"Main Log: {main_log_file}")
    app.logger.info(f"Error Log: {error_log_file}")
    app.logger.info(f"Ledger API Log: {ledger_log_file}")
    app.logger.info("="*80)

    return log_dir
