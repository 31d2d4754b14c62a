"""
QR codes for product verification links
"""
import base64
import io
import logging
import urllib.parse

import qrcode

MAX_QR_DATA_LENGTH = 500


def verification_url(base_url, product_id):
    """Absolute URL of the verification page for a product"""
    quoted = urllib.parse.quote(str(product_id), safe='/')
    return f"{(base_url or '').rstrip('/')}/verify/{quoted}"


def generate_qr_png(data, box_size=10, border=4):
    """Render data as a QR code and return PNG bytes.

    Uses high error correction so printed labels survive some damage.
    """
    data_str = str(data).strip()
    if len(data_str) > MAX_QR_DATA_LENGTH:
        raise ValueError(f"QR data too long ({len(data_str)} chars, max {MAX_QR_DATA_LENGTH})")

    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_H,
        box_size=box_size,
        border=border,
    )
    qr.add_data(data_str)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buffer = io.BytesIO()
    img.save(buffer, format='PNG')
    return buffer.getvalue()


def generate_qr_data_uri(data, box_size=10, border=4):
    """QR code as a data:image/png;base64 URI for embedding in templates.

    Returns None when the code cannot be generated; the page renders without it.
    """
    try:
        png = generate_qr_png(data, box_size=box_size, border=border)
    except ValueError as e:
        logging.error(f"❌ Error generating QR code for '{str(data)[:50]}': {e}")
        return None
    return "data:image/png;base64," + base64.b64encode(png).decode()
