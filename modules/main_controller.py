"""
Main Controller to integrate all modules
Provides a unified interface to register all module blueprints
"""
import logging

from flask import Flask
from modules.producer.routes import producer_bp
from modules.consumer.routes import consumer_bp
from modules.transactions.routes import transactions_bp


def register_modules(app: Flask):
    """Register all module blueprints with the Flask app"""

    # Producer registration: /producer
    app.register_blueprint(producer_bp)

    # Consumer lookup and verification: /consumer, /verify/<id>
    app.register_blueprint(consumer_bp)

    # Transaction list: /transactions
    app.register_blueprint(transactions_bp)

    logging.info("📁 Modules: producer (/producer), consumer (/consumer, /verify), transactions (/transactions)")


def get_module_info():
    """Get information about available modules"""
    return {
        'producer': {
            'name': 'Producer Portal',
            'prefix': '/producer',
            'description': 'Register new products on the ledger',
            'routes': ['index', 'submit'],
        },
        'consumer': {
            'name': 'Consumer Verification',
            'prefix': '/consumer',
            'description': 'Look up a product by id and check its ledger record',
            'routes': ['index', 'verify'],
        },
        'transactions': {
            'name': 'Transactions',
            'prefix': '/transactions',
            'description': 'All products recorded on the ledger',
            'routes': ['index', 'refresh'],
        },
    }
