"""
Producer Routes
Register new products on the ledger and hand out their verification QR code
"""
from flask import Blueprint, render_template, request, current_app
import logging
from pathlib import Path

from integrity import derive_draft_hash
from ledger_client import ProductAPI, LedgerAPIError
from models import ProductDraft
from qr_generator import generate_qr_data_uri, verification_url

CREATE_FAILED_MESSAGE = 'Failed to create product.'

producer_bp = Blueprint('producer', __name__, url_prefix='/producer',
                        template_folder=str(Path(__file__).resolve().parent / 'templates'))


def new_draft():
    """Empty draft carrying the configured producer identity"""
    return ProductDraft(
        producer_id=current_app.config['PRODUCER_ID'],
        status=current_app.config['DEFAULT_PRODUCT_STATUS'],
    )


def public_base_url():
    return current_app.config.get('PUBLIC_BASE_URL') or request.host_url


@producer_bp.route('/', methods=['GET'])
def index():
    """Producer registration form"""
    return render_template('producer/index.html', draft=new_draft(), result=None)


@producer_bp.route('/', methods=['POST'])
def submit():
    """Submit the draft to the ledger"""
    draft = ProductDraft.from_form(request.form,
                                   producer_id=current_app.config['PRODUCER_ID'],
                                   default_status=current_app.config['DEFAULT_PRODUCT_STATUS'])
    draft.integrity_hash = derive_draft_hash(draft)

    if not draft.id:
        result = {'success': False, 'message': 'Product ID is required.'}
        return render_template('producer/index.html', draft=draft, result=result), 400

    try:
        with ProductAPI.from_config(current_app.config) as api:
            api.create_product(draft)
    except LedgerAPIError as e:
        logging.error(f"Error creating product {draft.id}: {e}")
        result = {'success': False, 'message': e.user_message(CREATE_FAILED_MESSAGE)}
        return render_template('producer/index.html', draft=draft, result=result)

    logging.info(f"✅ Product {draft.id} submitted to ledger")
    link = verification_url(public_base_url(), draft.id)
    result = {
        'success': True,
        'message': f"Product {draft.id} created successfully on Blockchain!",
        'product_id': draft.id,
        'verification_url': link,
        'qr_code': generate_qr_data_uri(link),
    }
    return render_template('producer/index.html', draft=draft.reset(), result=result)
