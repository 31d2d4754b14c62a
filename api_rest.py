"""
JSON endpoints used by the portal's page scripts

POST /api/integrity-hash      live integrity hash preview for the producer form
GET  /api/products/<id>/qr    verification QR code as a PNG image
"""
from flask import jsonify, request, send_file
import io
import logging

from app import app
from integrity import IntegrityHashTracker
from qr_generator import generate_qr_png, verification_url


def get_request_data():
    """Get JSON data from request"""
    return request.get_json(silent=True) or {}


@app.route('/api/integrity-hash', methods=['POST'])
def api_integrity_hash():
    """Recompute the draft hash.

    The page sends the hash it currently shows as 'current'; 'changed' tells it
    whether the display needs updating. 'seq' is echoed back so the page can
    drop answers to requests older than its latest one.
    """
    data = get_request_data()
    fields = {key: data.get(key, '') for key in ('id', 'name', 'manufactureDate', 'current')}
    if not all(isinstance(value, str) for value in fields.values()):
        return jsonify({'success': False, 'error': 'All fields must be strings'}), 400

    seq = data.get('seq')
    if seq is not None and (isinstance(seq, bool) or not isinstance(seq, int)):
        return jsonify({'success': False, 'error': 'seq must be an integer'}), 400

    tracker = IntegrityHashTracker(current=fields['current'])
    changed = tracker.refresh(fields['id'], fields['name'],
                              app.config['PRODUCER_ID'], fields['manufactureDate'])
    return jsonify({
        'success': True,
        'integrityHash': tracker.current,
        'changed': changed,
        'seq': seq,
    })


@app.route('/api/products/<path:product_id>/qr', methods=['GET'])
def api_product_qr(product_id):
    """Verification QR code for a product, as PNG"""
    base_url = app.config.get('PUBLIC_BASE_URL') or request.host_url
    link = verification_url(base_url, product_id)
    box_size = min(max(request.args.get('box_size', 10, type=int), 1), 40)
    try:
        png = generate_qr_png(link, box_size=box_size)
    except ValueError as e:
        logging.error(f"QR generation failed for {product_id}: {e}")
        return jsonify({'success': False, 'error': str(e)}), 400

    download = request.args.get('download') in ('1', 'true')
    return send_file(io.BytesIO(png), mimetype='image/png',
                     as_attachment=download,
                     download_name=f"{product_id}-qr.png")
