"""
Consumer Routes
Look up a product by id and show its ledger record
"""
from flask import Blueprint, render_template, request, current_app
import logging
from pathlib import Path

from ledger_client import ProductAPI, LedgerAPIError

NOT_FOUND_MESSAGE = 'Product not found or verification failed.'
LOAD_FAILED_MESSAGE = 'Failed to load product details.'

consumer_bp = Blueprint('consumer', __name__,
                        template_folder=str(Path(__file__).resolve().parent / 'templates'))


@consumer_bp.route('/consumer', methods=['GET'])
def index():
    """Consumer lookup form"""
    return render_template('consumer/index.html', search_id='', product=None, error=None)


@consumer_bp.route('/consumer', methods=['POST'])
def lookup():
    """Check a product id against the ledger.

    Every failure, whatever the cause, is reported as not found.
    """
    search_id = request.form.get('product_id', '').strip()
    if not search_id:
        return render_template('consumer/index.html', search_id='', product=None, error=None)

    try:
        with ProductAPI.from_config(current_app.config) as api:
            product = api.get_product(search_id)
    except LedgerAPIError as e:
        logging.warning(f"Lookup of product {search_id} failed: {e}")
        return render_template('consumer/index.html', search_id=search_id,
                               product=None, error=NOT_FOUND_MESSAGE)

    return render_template('consumer/index.html', search_id=search_id, product=product, error=None)


@consumer_bp.route('/verify/<path:product_id>')
def verify(product_id):
    """Verification page, the target of product QR codes"""
    try:
        with ProductAPI.from_config(current_app.config) as api:
            product = api.get_product(product_id)
    except LedgerAPIError as e:
        logging.error(f"Error loading product {product_id}: {e}")
        status = 404 if e.is_not_found else 502
        return render_template('consumer/verify.html', product_id=product_id, product=None,
                               error=e.user_message(LOAD_FAILED_MESSAGE)), status

    return render_template('consumer/verify.html', product_id=product_id, product=product, error=None)
