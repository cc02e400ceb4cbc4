import io
from typing import List

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.cidfonts import UnicodeCIDFont
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer

from mealcart.domain.ShoppingList import ShoppingItem
from mealcart.logic.shopping.list_builder import group_by_category

# Built-in CID font so Chinese ingredient names render without shipping a TTF
CJK_FONT = "STSong-Light"
pdfmetrics.registerFont(UnicodeCIDFont(CJK_FONT))


def generate_pdf_for_shopping_list(items: List[ShoppingItem], title: str = "采买清单") -> bytes:
    """Generate a PDF with one table per category: checkbox / ingredient / amount."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    title_style = styles["Title"].clone("CJKTitle", fontName=CJK_FONT)
    heading_style = styles["Heading2"].clone("CJKHeading", fontName=CJK_FONT)
    elements = [Paragraph(title, title_style), Spacer(1, 16)]

    groups = group_by_category(items)
    if not groups:
        elements.append(Paragraph("暂无需要采买的新鲜食材", heading_style))

    for _category, label, rows in groups:
        # emoji glyphs are missing from the CID font
        elements.append(Paragraph(label.split(" ", 1)[-1], heading_style))
        data = [["", "食材", "数量"]]
        for item in rows:
            data.append(["√" if item.checked else "", item.name, item.details])
        table = Table(data, colWidths=[30, 180, 320], repeatRows=1)
        table.setStyle(TableStyle([
            ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#F4A261")),
            ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
            ("FONTNAME", (0,0), (-1,-1), CJK_FONT),
            ("FONTSIZE", (0,0), (-1,0), 12),
            ("ALIGN", (0,0), (0,-1), "CENTER"),
            ("BOTTOMPADDING", (0,0), (-1,0), 8),
            ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
        ]))
        elements.append(table)
        elements.append(Spacer(1, 12))

    doc.build(elements)
    return buf.getvalue()
