"""
Integrity hash for product drafts
SHA-256 over id + name + producerId + manufactureDate, shown to the producer
before submission. Display-only: the ledger may store or ignore it.
"""
import hashlib


def compute_integrity_hash(product_id, name, producer_id, manufacture_date):
    """Return the lowercase hex SHA-256 of the four fields concatenated without
    separator, or an empty string while id or name is still empty."""
    if not product_id or not name:
        return ''
    source = f"{product_id}{name}{producer_id or ''}{manufacture_date or ''}"
    return hashlib.sha256(source.encode('utf-8')).hexdigest()


def derive_draft_hash(draft):
    """Compute the integrity hash of a ProductDraft, Product or plain dict"""
    if isinstance(draft, dict):
        return compute_integrity_hash(
            draft.get('id', ''),
            draft.get('name', ''),
            draft.get('producerId', draft.get('producer_id', '')),
            draft.get('manufactureDate', draft.get('manufacture_date', '')),
        )
    return compute_integrity_hash(draft.id, draft.name, draft.producer_id, draft.manufacture_date)


class IntegrityHashTracker:
    """Holds the currently displayed hash and recomputes it on input changes.

    refresh() returns True only when the displayed value actually changed, so
    callers can skip redundant updates.
    """

    def __init__(self, current=''):
        self.current = current

    def refresh(self, product_id, name, producer_id, manufacture_date):
        new_hash = compute_integrity_hash(product_id, name, producer_id, manufacture_date)
        if new_hash == self.current:
            return False
        self.current = new_hash
        return True

    def refresh_draft(self, draft):
        return self.refresh(draft.id, draft.name, draft.producer_id, draft.manufacture_date)
