"""
QR label rendering
"""

import io

import qrcode

from assetkeeper.core.config import settings


def public_asset_url(qr_code: str) -> str:
    """URL printed into an asset's QR label"""
    base = settings.PUBLIC_BASE_URL.rstrip("/")
    return f"{base}/api/v1/public/assets/{qr_code}"


def render_qr_png(data: str) -> bytes:
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=10,
        border=4,
    )
    qr.add_data(data)
    qr.make(fit=True)
    img = qr.make_image(fill_color="black", back_color="white")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
