"""Text and image reports for a chakra profile"""
from datetime import date
from typing import List, Optional
from PIL import Image, ImageDraw, ImageFont
import io
import os
import logging

from chakra_engine import ChakraAnalysis, ChakraCalculator, CHAKRAS
from chakra_engine.calculator import ValuesInput
from config import settings

logger = logging.getLogger(__name__)

FONT_PATHS = [
    "/System/Library/Fonts/Helvetica.ttc",  # macOS
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",  # Linux
    "C:/Windows/Fonts/arial.ttf",  # Windows
]


def load_font(size: int):
    """First available TrueType font, or PIL's built-in one"""
    candidates = [settings.report_font_path] if settings.report_font_path else []
    candidates += FONT_PATHS

    for path in candidates:
        if not os.path.exists(path):
            continue
        try:
            return ImageFont.truetype(path, size)
        except OSError as e:
            logger.warning(f"Could not load font {path}: {e}")

    logger.info("No TrueType font found, using the default bitmap font")
    return ImageFont.load_default()


def format_report_date(value: date) -> str:
    return f"{value:%B} {value.day}, {value.year}"


class ReportGenerator:
    """Builds text and visual chakra reports"""

    def __init__(self, calculator: Optional[ChakraCalculator] = None):
        self.calculator = calculator or ChakraCalculator()

    def generate_text_report(self, values: ValuesInput, name: Optional[str] = None,
                             generated_on: Optional[date] = None,
                             analysis: Optional[ChakraAnalysis] = None) -> str:
        """Plain-text (markdown-flavoured) assessment report.

        A precomputed ``analysis`` is used as is, so the report names the same
        practices as the analysis it is returned with.
        """
        generated_on = generated_on or date.today()
        analysis = analysis or self.calculator.analyze(values)
        data = analysis.values
        balance = analysis.overall_balance
        recommendations = analysis.recommendations

        report = f"""# SOULSYNC CHAKRA ASSESSMENT REPORT
Generated for: {name or 'User'}
Date: {format_report_date(generated_on)}

## OVERALL CHAKRA BALANCE
Current Balance Level: {balance.status}
Balance Score: {balance.score}/10

{balance.description}

## INDIVIDUAL CHAKRA ANALYSIS
{self._format_readings(data)}
## FOCUS AREAS
{self._format_list(recommendations.focus_areas, "No chakra needs special attention right now.")}

## RECOMMENDED PRACTICES
{self._format_list(recommendations.practices, "Complete your assessment to unlock practices.")}

## INSIGHTS
{recommendations.insights}
"""

        report += "\nThis report was generated by SoulSync's chakra assessment system.\n"
        report += f"© SoulSync {generated_on.year}\n"
        return report

    def _format_readings(self, data) -> str:
        """One section per assessed chakra"""
        if not data:
            return "\nNo chakra values recorded yet.\n"

        text = ""
        for chakra in CHAKRAS:
            if chakra.key not in data:
                continue
            status = self.calculator.classify(data[chakra.key])
            text += f"\n### {chakra.name.upper()} ({chakra.sanskrit_name})\n"
            text += f"Current Level: {data[chakra.key]}/10 - {status.label}\n\n"
            text += f"{status.description}\n"
        return text

    def _format_list(self, items: List[str], empty_text: str) -> str:
        if not items:
            return empty_text
        return "\n".join(f"- {item}" for item in items)

    def generate_visual_chart(self, values: ValuesInput) -> bytes:
        """PNG bar chart of the seven chakra values"""
        data = self.calculator.normalize_values(values)

        # Layout
        width, height = 700, 460
        margin_left, margin_bottom, margin_top = 50, 60, 30
        plot_height = height - margin_bottom - margin_top
        slot = (width - margin_left - 20) // len(CHAKRAS)
        bar_width = slot - 24

        img = Image.new('RGB', (width, height), color='white')
        draw = ImageDraw.Draw(img)
        value_font = load_font(20)
        label_font = load_font(14)

        def y_for(value: float) -> int:
            return margin_top + int(plot_height * (1 - value / 10))

        # Balanced window (6-7)
        draw.rectangle(
            [margin_left, y_for(7), width - 20, y_for(6)],
            fill=(225, 245, 230)
        )

        # Axis and grid
        for tick in range(0, 11, 2):
            y = y_for(tick)
            draw.line([margin_left, y, width - 20, y], fill=(220, 220, 220), width=1)
            draw.text((margin_left - 30, y - 8), str(tick), fill=(90, 90, 90), font=label_font)
        draw.line([margin_left, margin_top, margin_left, y_for(0)], fill=(0, 0, 0), width=2)

        for index, chakra in enumerate(CHAKRAS):
            x = margin_left + index * slot + (slot - bar_width) // 2
            label = chakra.name.replace(" Chakra", "")

            value = data.get(chakra.key)
            if value is not None:
                top = y_for(max(0, min(value, 10)))
                draw.rectangle([x, top, x + bar_width, y_for(0)], fill=chakra.color, outline=(0, 0, 0))

                number = str(value)
                bbox = draw.textbbox((0, 0), number, font=value_font)
                draw.text(
                    (x + (bar_width - (bbox[2] - bbox[0])) // 2, top - 26),
                    number,
                    fill=(0, 0, 0),
                    font=value_font
                )

            bbox = draw.textbbox((0, 0), label, font=label_font)
            draw.text(
                (x + (bar_width - (bbox[2] - bbox[0])) // 2, y_for(0) + 10),
                label,
                fill=(0, 0, 0),
                font=label_font
            )

        # Caption
        caption = "Chakra balance"
        bbox = draw.textbbox((0, 0), caption, font=label_font)
        draw.text(((width - (bbox[2] - bbox[0])) // 2, height - 25), caption, fill=(0, 0, 0), font=label_font)

        img_bytes = io.BytesIO()
        img.save(img_bytes, format='PNG')
        img_bytes.seek(0)

        return img_bytes.getvalue()
