from decimal import Decimal
import unittest

from formatting import (
    PENDING,
    format_currency,
    format_multiple,
    format_number,
    format_percent,
)


class FormatNumberTests(unittest.TestCase):
    def test_groups_thousands_and_rounds_half_up(self) -> None:
        self.assertEqual(format_number(Decimal("45000")), "45,000")
        self.assertEqual(format_number(Decimal("2.5")), "3")
        self.assertEqual(format_number(Decimal("1234.565"), 2), "1,234.57")
        self.assertEqual(format_number("1500000"), "1,500,000")

    def test_negative_zero_after_rounding(self) -> None:
        self.assertEqual(format_number(Decimal("-0.4")), "0")

    def test_missing_values_use_placeholder(self) -> None:
        self.assertEqual(format_number(None), "N/A")
        self.assertEqual(format_number("abc"), "N/A")
        self.assertEqual(format_number(None, placeholder=PENDING), "...")


class LargeValueFormatTests(unittest.TestCase):
    def test_values_beyond_default_precision_are_grouped(self) -> None:
        self.assertEqual(format_number(Decimal("1" + "0" * 29)), f"{10 ** 29:,}")
        self.assertEqual(format_currency(Decimal("1" + "0" * 27), "$", 2), f"${10 ** 27:,}.00")
        self.assertEqual(
            format_number(Decimal("12345678901234567890123456789.995"), 2),
            "12,345,678,901,234,567,890,123,456,790.00",
        )

    def test_huge_magnitudes_use_scientific_notation(self) -> None:
        self.assertEqual(format_number(Decimal("1E+999999")), "1.00E+999999")
        self.assertEqual(format_currency(Decimal("-2.5E+70"), "$"), "$-2.50E+70")
        self.assertEqual(format_percent(Decimal("4E+80")), "4.00E+80%")

    def test_tiny_magnitudes_round_to_zero(self) -> None:
        self.assertEqual(format_number(Decimal("1E-999999"), 2), "0.00")
        self.assertEqual(format_number(Decimal("-1E-999999")), "0")


class DisplayFormatTests(unittest.TestCase):
    def test_currency(self) -> None:
        self.assertEqual(format_currency(Decimal("3750"), "$", 2), "$3,750.00")
        self.assertEqual(format_currency(Decimal("-9000"), "$"), "$-9,000")
        self.assertEqual(format_currency(Decimal("1200"), "€"), "€1,200")
        self.assertEqual(format_currency(None, "$"), "N/A")

    def test_percent(self) -> None:
        self.assertEqual(format_percent(Decimal("25")), "25.0%")
        self.assertEqual(format_percent(Decimal("-100")), "-100.0%")
        self.assertEqual(format_percent(None), "N/A")

    def test_multiple(self) -> None:
        self.assertEqual(format_multiple(Decimal("1.25")), "~1.3x")
        self.assertEqual(format_multiple(None), "N/A")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
