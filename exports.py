import io
from datetime import datetime

from markupsafe import escape
from openpyxl import Workbook
from openpyxl.styles import Font
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Table, TableStyle

from formatting import format_price
from models import CATEGORIES


XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _date(value):
    return value.strftime("%Y-%m-%d %H:%M") if value else "-"


# ---------- excel ----------

def products_workbook(products, t):
    wb = Workbook()
    ws = wb.active
    ws.title = t("admin.dashboard.sheet")

    ws.append([
        t("admin.products.name"),
        t("admin.products.category"),
        t("admin.products.price"),
        t("admin.dashboard.createdAt"),
        t("admin.dashboard.updatedAt"),
        t("admin.products.image"),
    ])

    # Bold header row
    for cell in ws[1]:
        cell.font = Font(bold=True)

    for p in products:
        ws.append([
            p.name,
            t(f"products.category.{p.category}"),
            p.price,
            _date(p.created_at),
            _date(p.updated_at),
            p.image_url,
        ])

    buffer = io.BytesIO()
    wb.save(buffer)
    buffer.seek(0)
    return buffer


# ---------- pdf ----------

def _header_footer(shop_name, t):

    def draw(canvas, doc):
        canvas.saveState()
        width, height = A4

        canvas.setFont("Helvetica-Bold", 10)
        canvas.drawString(2 * cm, height - 2 * cm, f"{shop_name} - {t('admin.dashboard.priceList')}")

        canvas.setFont("Helvetica", 8)
        now = datetime.now().strftime("%Y-%m-%d %H:%M")
        canvas.drawString(2 * cm, 1.5 * cm, f"{t('admin.dashboard.generatedOn')}: {now}")
        canvas.drawRightString(width - 2 * cm, 1.5 * cm, f"Page {doc.page}")

        canvas.restoreState()

    return draw


def products_pdf(products, t, shop_name):
    buffer = io.BytesIO()
    pdf = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        rightMargin=30,
        leftMargin=30,
        topMargin=90,
        bottomMargin=60
    )

    styles = getSampleStyleSheet()
    wrap_style = styles["Normal"]
    wrap_style.fontSize = 8

    currency = t("products.currency")
    header = [
        t("admin.products.name"),
        t("admin.products.description"),
        t("admin.products.price"),
    ]

    # fixed categories first, then anything else found in the data
    order = CATEGORIES + sorted({p.category for p in products} - set(CATEGORIES))

    elements = []
    for category in order:
        rows = [p for p in products if p.category == category]
        if not rows:
            continue

        elements.append(Paragraph(t(f"products.category.{category}"), styles["Heading2"]))

        table_data = [header]
        for p in rows:
            table_data.append([
                Paragraph(str(escape(p.name)), wrap_style),
                Paragraph(str(escape(p.description or "-")), wrap_style),
                f"{format_price(p.price, t.language)} {currency}",
            ])

        table = Table(table_data, colWidths=[140, 280, 90], repeatRows=1)
        table.setStyle(TableStyle([
            ("GRID", (0, 0), (-1, -1), 1, colors.black),
            ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
            ("FONT", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("FONTSIZE", (0, 1), (-1, -1), 9),
        ]))
        elements.append(table)
        elements.append(Paragraph("<br/>", styles["Normal"]))

    if not elements:
        elements.append(Paragraph(t("common.noProducts"), styles["Normal"]))

    draw = _header_footer(shop_name, t)
    pdf.build(elements, onFirstPage=draw, onLaterPages=draw)

    buffer.seek(0)
    return buffer
