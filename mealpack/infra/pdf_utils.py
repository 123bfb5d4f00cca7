import io
from datetime import date
from typing import Iterable

from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from mealpack.domain.OrderLine import OrderLine
from mealpack.utilities.constants import PACK_SIZE_A, PACK_SIZE_B
from mealpack.utilities.numbers import round_half_up


def _cell(value) -> str:
    return "" if value is None else str(value)


def generate_orders_pdf(rows: Iterable[OrderLine]):
    """Generate a landscape PDF table: order / date / customer / product / quantity / packs / status."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"Orders Report - {date.today().isoformat()}", styles["Title"]),
        Spacer(1, 16),
    ]

    data = [["Order", "Date", "Customer", "Product", "Quantity",
             f"Packs {PACK_SIZE_A}", f"Packs {PACK_SIZE_B}", "Status"]]
    for row in rows:
        derived = row.derived
        data.append([
            _cell(row.order_number),
            _cell(row.order_date),
            _cell(row.customer_name),
            _cell(row.product_description),
            round_half_up(row.quantity_value()),
            derived.packs_a if derived else 0,
            derived.packs_b if derived else 0,
            derived.status.value if derived else "",
        ])

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#428BCA")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (-1,-1), "RIGHT"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,-1), 8),
        ("BOTTOMPADDING", (0,0), (-1,0), 8),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
