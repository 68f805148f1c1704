"""
Tests for text, image and PDF chakra reports
"""

from datetime import date

import pytest

from chakra_engine import CHAKRA_KEYS, ChakraCalculator
from reports import PDFGenerator, ReportGenerator, generate_pdf_report


class FirstChoice:
    def choice(self, seq):
        return seq[0]


class LastChoice:
    def choice(self, seq):
        return seq[-1]


@pytest.fixture
def generator():
    return ReportGenerator(ChakraCalculator(FirstChoice()))


@pytest.fixture
def values():
    values = {key: 6 for key in CHAKRA_KEYS}
    values.update(root=1, crown=9)
    return values


class TestTextReport:

    def test_sections(self, generator, values):
        report = generator.generate_text_report(values, name="Ada", generated_on=date(2026, 10, 18))
        assert report.startswith("# SOULSYNC CHAKRA ASSESSMENT REPORT")
        assert "Generated for: Ada" in report
        assert "Date: October 18, 2026" in report
        assert "## OVERALL CHAKRA BALANCE" in report
        assert "### ROOT CHAKRA (Muladhara)" in report
        assert "Current Level: 1/10 - Blocked" in report
        assert "Current Level: 9/10 - Overactive" in report
        assert "- Root Chakra (Blocked)" in report
        assert "- Crown Chakra (Overactive)" in report
        assert "- Grounding exercises to activate your Root Chakra" in report
        assert "© SoulSync 2026" in report

    def test_default_name(self, generator, values):
        assert "Generated for: User" in generator.generate_text_report(values)

    def test_balanced_profile(self, generator):
        report = generator.generate_text_report({key: 6 for key in CHAKRA_KEYS})
        assert "No chakra needs special attention right now." in report

    def test_empty_profile(self, generator):
        report = generator.generate_text_report({})
        assert "Current Balance Level: Not assessed" in report
        assert "No chakra values recorded yet." in report
        assert "Complete your assessment to unlock practices." in report


    def test_uses_precomputed_analysis(self, values):
        analysis = ChakraCalculator(FirstChoice()).analyze(values)
        generator = ReportGenerator(ChakraCalculator(LastChoice()))
        report = generator.generate_text_report(values, analysis=analysis)
        for practice in analysis.recommendations.practices:
            assert f"- {practice}" in report
        assert "- Eating root vegetables to activate your Root Chakra" not in report


class TestVisualChart:

    def test_png(self, generator, values):
        image = generator.generate_visual_chart(values)
        assert image.startswith(b"\x89PNG")

    def test_empty_profile_still_renders(self, generator):
        assert generator.generate_visual_chart({}).startswith(b"\x89PNG")


class TestPDFReport:

    def test_pdf(self, values):
        pdf = PDFGenerator(ChakraCalculator(FirstChoice())).generate_pdf(values, name="Ada <admin>")
        assert pdf.startswith(b"%PDF")

    def test_pdf_with_precomputed_analysis(self, values):
        calculator = ChakraCalculator(FirstChoice())
        pdf = PDFGenerator(calculator).generate_pdf(values, analysis=calculator.analyze(values))
        assert pdf.startswith(b"%PDF")

    def test_convenience_wrapper(self):
        assert generate_pdf_report({}).startswith(b"%PDF")
