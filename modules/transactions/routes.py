"""
Transactions Routes
List every product recorded on the ledger
"""
from flask import Blueprint, render_template, current_app, flash
import logging
from pathlib import Path

from ledger_client import ProductAPI, LedgerAPIError

LIST_UNAVAILABLE_MESSAGE = 'Could not refresh the product list. Showing the last known data.'

transactions_bp = Blueprint('transactions', __name__, url_prefix='/transactions',
                            template_folder=str(Path(__file__).resolve().parent / 'templates'))


def render_feed():
    """Refresh the feed and render it; on failure render the previous snapshot"""
    feed = current_app.extensions['transaction_feed']
    refresh_failed = False
    try:
        with ProductAPI.from_config(current_app.config) as api:
            feed.refresh(api)
    except LedgerAPIError as e:
        logging.error(f"Failed to fetch products: {e}")
        flash(LIST_UNAVAILABLE_MESSAGE, 'warning')
        refresh_failed = True

    return render_template('transactions/index.html',
                           products=feed.products,
                           fetched_at=feed.fetched_at,
                           refresh_failed=refresh_failed)


@transactions_bp.route('/', methods=['GET'])
def index():
    """Transaction list, fetched on every display"""
    return render_feed()


@transactions_bp.route('/refresh', methods=['POST'])
def refresh():
    """Manual refresh button"""
    return render_feed()
