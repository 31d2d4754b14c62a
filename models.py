from dataclasses import dataclass, field
from datetime import date
from typing import Optional

# Statuses the portal colour-codes; anything else from the ledger is shown as-is
STATUS_TONES = {
    'VERIFIED': 'success',
    'FAILED': 'danger',
    'PENDING': 'warning',
}

# Wire key -> fallback spelling used by some ledger deployments
_ALTERNATE_KEYS = {
    'producerId': 'producer_id',
    'manufactureDate': 'manufacture_date',
    'integrityHash': 'integrity_hash',
    'blockchainTxId': 'blockchain_tx_id',
}


def _read(data, key, default=None):
    value = data.get(key)
    if value is None and key in _ALTERNATE_KEYS:
        value = data.get(_ALTERNATE_KEYS[key])
    return default if value is None else value


def status_tone(status):
    """Map a ledger status label to a badge tone name"""
    return STATUS_TONES.get((status or '').upper(), 'secondary')


@dataclass
class Product:
    """A product as recorded on the ledger.

    Attribute names are snake_case; the ledger API speaks camelCase, see
    from_dict() and ProductDraft.to_payload().
    """

    id: str
    name: str = ''
    producer_id: str = ''
    manufacture_date: str = ''
    status: str = ''
    integrity_hash: Optional[str] = None
    blockchain_tx_id: Optional[str] = None
    owner: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        """Build a Product from a ledger JSON object, ignoring unknown keys"""
        return cls(
            id=str(_read(data, 'id', '')),
            name=_read(data, 'name', ''),
            producer_id=_read(data, 'producerId', ''),
            manufacture_date=_read(data, 'manufactureDate', ''),
            status=_read(data, 'status', ''),
            integrity_hash=_read(data, 'integrityHash') or None,
            blockchain_tx_id=_read(data, 'blockchainTxId') or None,
            owner=_read(data, 'owner') or None,
        )

    @property
    def status_tone(self):
        return status_tone(self.status)


@dataclass
class ProductDraft:
    """Form state of a product that has not been submitted yet"""

    id: str = ''
    name: str = ''
    producer_id: str = ''
    manufacture_date: str = field(default_factory=lambda: date.today().isoformat())
    status: str = 'Manufactured'
    integrity_hash: str = ''

    @classmethod
    def from_form(cls, form, producer_id, default_status='Manufactured'):
        """Read a draft from submitted form fields.

        producer_id always comes from configuration, never from the form.
        """
        return cls(
            id=form.get('id', '').strip(),
            name=form.get('name', '').strip(),
            producer_id=producer_id,
            manufacture_date=form.get('manufactureDate', '').strip() or date.today().isoformat(),
            status=form.get('status', '').strip() or default_status,
        )

    def reset(self):
        """Clear the per-product fields after a successful registration.

        producer_id, manufacture_date and status carry over to the next draft.
        """
        return ProductDraft(
            id='',
            name='',
            producer_id=self.producer_id,
            manufacture_date=self.manufacture_date,
            status=self.status,
            integrity_hash='',
        )

    def to_payload(self):
        """Request body for the ledger's create endpoint"""
        payload = {
            'id': self.id,
            'name': self.name,
            'producerId': self.producer_id,
            'manufactureDate': self.manufacture_date,
            'status': self.status,
        }
        if self.integrity_hash:
            payload['integrityHash'] = self.integrity_hash
        return payload
