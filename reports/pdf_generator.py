"""PDF chakra reports"""
from datetime import date
from typing import Optional
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle, Image
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY
from io import BytesIO
from xml.sax.saxutils import escape

from chakra_engine import ChakraAnalysis, ChakraCalculator, get_chakra
from chakra_engine.calculator import ValuesInput
from .generator import ReportGenerator, format_report_date


class PDFGenerator:
    """Builds PDF chakra reports"""

    def __init__(self, calculator: Optional[ChakraCalculator] = None):
        self.calculator = calculator or ChakraCalculator()
        self.report_generator = ReportGenerator(self.calculator)
        self.styles = getSampleStyleSheet()
        self._setup_styles()

    def _setup_styles(self):
        """Paragraph styles"""
        # Title
        self.styles.add(ParagraphStyle(
            name='CustomTitle',
            parent=self.styles['Heading1'],
            fontSize=24,
            textColor=colors.HexColor('#483D8B'),
            spaceAfter=30,
            alignment=TA_CENTER
        ))

        # Section heading
        self.styles.add(ParagraphStyle(
            name='CustomHeading',
            parent=self.styles['Heading2'],
            fontSize=16,
            textColor=colors.HexColor('#34495E'),
            spaceAfter=12,
            spaceBefore=12
        ))

        # Body text
        self.styles.add(ParagraphStyle(
            name='CustomBody',
            parent=self.styles['Normal'],
            fontSize=11,
            textColor=colors.HexColor('#2C3E50'),
            alignment=TA_JUSTIFY,
            spaceAfter=6
        ))

    def generate_pdf(self, values: ValuesInput, name: Optional[str] = None,
                     generated_on: Optional[date] = None,
                     analysis: Optional[ChakraAnalysis] = None) -> bytes:
        """Renders the full report as PDF"""
        generated_on = generated_on or date.today()
        analysis = analysis or self.calculator.analyze(values)
        data = analysis.values
        balance = analysis.overall_balance
        recommendations = analysis.recommendations

        buffer = BytesIO()
        doc = SimpleDocTemplate(buffer, pagesize=A4)
        story = []

        story.append(Paragraph("Your Chakra Assessment Report", self.styles['CustomTitle']))
        story.append(Paragraph(
            f"<b>Generated for:</b> {escape(name or 'User')}<br/>"
            f"<b>Date:</b> {format_report_date(generated_on)}",
            self.styles['CustomBody']
        ))
        story.append(Spacer(1, 8*mm))

        # Overview
        story.append(Paragraph("OVERALL CHAKRA BALANCE", self.styles['CustomHeading']))
        story.append(Paragraph(
            f"<b>{balance.status}</b> ({balance.score}/10)",
            self.styles['CustomBody']
        ))
        story.append(Paragraph(balance.description, self.styles['CustomBody']))
        story.append(Spacer(1, 6*mm))

        if data:
            chart = BytesIO(self.report_generator.generate_visual_chart(data))
            story.append(Image(chart, width=160*mm, height=105*mm))
            story.append(Spacer(1, 6*mm))

            story.append(Paragraph("INDIVIDUAL CHAKRA ANALYSIS", self.styles['CustomHeading']))
            story.append(self._status_table(data))
            story.append(Spacer(1, 8*mm))

        # Recommendations
        story.append(Paragraph("FOCUS AREAS", self.styles['CustomHeading']))
        if recommendations.focus_areas:
            for area in recommendations.focus_areas:
                story.append(Paragraph(f"• {escape(area)}", self.styles['CustomBody']))
        else:
            story.append(Paragraph("No chakra needs special attention right now.", self.styles['CustomBody']))

        story.append(Paragraph("RECOMMENDED PRACTICES", self.styles['CustomHeading']))
        for practice in recommendations.practices:
            story.append(Paragraph(f"• {escape(practice)}", self.styles['CustomBody']))

        story.append(Paragraph("INSIGHTS", self.styles['CustomHeading']))
        story.append(Paragraph(escape(recommendations.insights), self.styles['CustomBody']))

        # Footer
        story.append(Spacer(1, 15*mm))
        story.append(Paragraph(
            f"<i>Generated by SoulSync's chakra assessment system<br/>"
            f"© SoulSync {generated_on.year}</i>",
            self.styles['Normal']
        ))

        doc.build(story)
        buffer.seek(0)
        return buffer.getvalue()

    def _status_table(self, data) -> Table:
        """Value and status per chakra"""
        rows = [['Chakra', 'Sanskrit', 'Value', 'Status']]
        row_colors = []
        for index, (key, value) in enumerate(data.items(), start=1):
            chakra = get_chakra(key)
            status = self.calculator.classify(value)
            rows.append([chakra.name, chakra.sanskrit_name, f"{value}/10", status.label])
            row_colors.append(('TEXTCOLOR', (0, index), (0, index), colors.HexColor(chakra.color)))

        table = Table(rows, colWidths=[55*mm, 45*mm, 30*mm, 40*mm])
        table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#483D8B')),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
            ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 0), (-1, 0), 12),
            ('BOTTOMPADDING', (0, 0), (-1, 0), 10),
            ('GRID', (0, 0), (-1, -1), 1, colors.black),
            ('ROWBACKGROUNDS', (0, 1), (-1, -1), [colors.white, colors.HexColor('#ECF0F1')])
        ] + row_colors))
        return table


def generate_pdf_report(values: ValuesInput, name: Optional[str] = None) -> bytes:
    """Convenience wrapper around PDFGenerator"""
    generator = PDFGenerator()
    return generator.generate_pdf(values, name)
