from __future__ import annotations

from io import BytesIO

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from storefront.config import settings
from storefront.services.checkout import Receipt


def _pdf_text(s: str) -> str:
    # base-14 fonts only cover cp1252
    s = s.replace("\u2011", "-").replace("\u2010", "-")
    return s.encode("cp1252", "replace").decode("cp1252")


def generate_receipt_pdf(receipt: Receipt, site_name: str | None = None) -> bytes:
    buf = BytesIO()

    c = canvas.Canvas(buf, pagesize=A4)
    c.setTitle(f"Receipt {receipt.number}")
    w, h = A4

    y = h - 50
    c.setFont("Helvetica-Bold", 14)
    c.drawString(40, y, _pdf_text(f"{site_name or settings.site_name} RECEIPT #{receipt.number}"))
    y -= 20

    c.setFont("Helvetica", 11)
    c.drawString(40, y, f"Date: {receipt.created_at:%Y-%m-%d %H:%M:%S}")
    y -= 16
    c.drawString(40, y, f"Currency: {receipt.currency}")
    y -= 24

    # header
    c.setFont("Helvetica-Bold", 10)
    c.drawString(40, y, "Item")
    c.drawString(310, y, "Qty")
    c.drawString(360, y, "Price")
    c.drawString(440, y, "Total")
    y -= 10
    c.line(40, y, 550, y)
    y -= 16

    c.setFont("Helvetica", 10)
    for it in receipt.lines:
        c.drawString(40, y, _pdf_text(it.title)[:45])
        c.drawRightString(340, y, str(it.quantity))
        c.drawRightString(420, y, f"{it.unit_price:.2f}")
        c.drawRightString(550, y, f"{it.line_subtotal:.2f}")
        y -= 14
        if y < 80:
            c.showPage()
            y = h - 50
            c.setFont("Helvetica", 10)

    y -= 10
    c.line(40, y, 550, y)
    y -= 18
    c.setFont("Helvetica-Bold", 12)
    c.drawRightString(550, y, f"TOTAL: {receipt.total:.2f} {receipt.currency}")

    c.save()
    return buf.getvalue()
