from flask import render_template, request, jsonify
import logging

from app import app
from modules.main_controller import get_module_info


@app.route('/')
def index():
    """Landing page with links to the producer, consumer and transaction views"""
    return render_template('home.html', modules=get_module_info())


@app.route('/health')
def health():
    return jsonify({
        'status': 'ok',
        'ledger_api_url': app.config['LEDGER_API_URL'],
        'producer_id': app.config['PRODUCER_ID'],
    })


@app.errorhandler(404)
def not_found(e):
    if request.path.startswith('/api/'):
        return jsonify({'success': False, 'error': 'Not found'}), 404
    return render_template('errors.html', code=404, message='Page not found.'), 404


@app.errorhandler(500)
def internal_error(e):
    logging.error(f"Unhandled error on {request.path}: {e}")
    if request.path.startswith('/api/'):
        return jsonify({'success': False, 'error': 'Internal server error'}), 500
    return render_template('errors.html', code=500, message='Something went wrong. Please try again.'), 500
