import unittest

from calc import project_form
from models import default_form_state
from services.document import (
    build_email_summary,
    build_proposal_document,
    build_talking_points,
    proposal_filename,
)

EXPECTED_SUMMARY = (
    "Proposal for: Prospect Inc.\n"
    "\n"
    "Key Projections (12 months):\n"
    "- Extra Monthly Revenue: $3,750.00\n"
    "- Total Extra Revenue: $45,000\n"
    "- Total Service Cost: $36,000\n"
    "- Net Gain: $9,000\n"
    "- Estimated ROI: 25.0%\n"
    "\n"
    "This is based on an estimated 15 extra leads per month from our Ad Creative Growth Package."
)


class ProposalDocumentTests(unittest.TestCase):
    def setUp(self) -> None:
        self.form = default_form_state().model_copy(
            update={"your_email": "me@adgenius.com", "your_phone": " 555-0100 "}
        )

    def test_document_with_projection(self) -> None:
        document = build_proposal_document(self.form, project_form(self.form))

        self.assertEqual(document.title, "Ad Creative ROI Proposal for Prospect Inc.")
        self.assertEqual(document.subtitle, "eCommerce - Prepared by AdGenius Agency")
        self.assertEqual(
            [(card.label, card.value) for card in document.stat_cards],
            [
                ("Extra Leads / Month", "+15"),
                ("Extra Revenue / Month", "+$3,750"),
                ("ROI over 12 months", "25.0%"),
                ("Return vs Fee", "~1.3x"),
            ],
        )
        emphasised = [text for paragraph in document.paragraphs for text, bold in paragraph if bold]
        self.assertEqual(emphasised, ["15", "$3,750", "12 months", "$45,000", "$36,000", "25.0%", "~1.3x"])
        self.assertEqual(document.bullets, tuple(self.form.package_bullets))
        self.assertEqual(document.signature, "Your Name - AdGenius Agency")
        self.assertEqual(document.contact, "me@adgenius.com · 555-0100")

    def test_document_without_projection_shows_placeholders(self) -> None:
        document = build_proposal_document(self.form, None)

        self.assertEqual([card.value for card in document.stat_cards], ["N/A"] * 4)
        emphasised = [text for paragraph in document.paragraphs for text, bold in paragraph if bold]
        self.assertEqual(emphasised.count("N/A"), 6)

    def test_zero_fee_renders_not_applicable_ratios(self) -> None:
        form = self.form.model_copy(update={"service_fee_monthly": "0"})
        document = build_proposal_document(form, project_form(form))

        self.assertEqual(document.stat_cards[2].value, "N/A")
        self.assertEqual(document.stat_cards[3].value, "N/A")

    def test_contact_skips_empty_parts(self) -> None:
        form = self.form.model_copy(update={"your_phone": ""})
        self.assertEqual(build_proposal_document(form, None).contact, "me@adgenius.com")


class EmailSummaryTests(unittest.TestCase):
    def test_summary_text(self) -> None:
        form = default_form_state()
        self.assertEqual(build_email_summary(form, project_form(form)), EXPECTED_SUMMARY)

    def test_no_summary_before_calculation(self) -> None:
        self.assertIsNone(build_email_summary(default_form_state(), None))

    def test_summary_uses_currency_symbol(self) -> None:
        form = default_form_state().model_copy(update={"currency_symbol": "€"})
        summary = build_email_summary(form, project_form(form))

        self.assertIn("- Net Gain: €9,000", summary)


class TalkingPointsTests(unittest.TestCase):
    def test_points_with_projection(self) -> None:
        form = default_form_state()
        points = build_talking_points(form, project_form(form))

        self.assertEqual(len(points), 7)
        self.assertIn("Okay, Prospect Inc.,", points[0])
        self.assertIn("around 50 leads per month, with an average sale value of $2,500", points[1])
        self.assertIn("conservative 30%", points[2])
        self.assertIn("an extra 15 leads per month", points[3])
        self.assertIn("Over 12 months, that’s an extra $45,000 in revenue", points[4])
        self.assertIn("$36,000", points[5])
        self.assertIn("about a 1.3x return", points[5])
        self.assertIn("about 1.3 dollars back", points[6])

    def test_points_before_calculation(self) -> None:
        points = build_talking_points(default_form_state(), None)

        self.assertIn("an extra ... leads per month", points[3])
        self.assertIn("about a ...x return", points[5])


class LargeInputTests(unittest.TestCase):
    def test_many_digit_sale_value(self) -> None:
        form = default_form_state().model_copy(update={"average_sale_value": "1" + "0" * 29})
        document = build_proposal_document(form, project_form(form))

        self.assertEqual(document.stat_cards[1].value, f"+${15 * 10 ** 28:,}")
        self.assertIn(f"with an average sale value of ${10 ** 29:,}", build_talking_points(form, project_form(form))[1])

    def test_email_summary_with_many_digit_sale_value(self) -> None:
        form = default_form_state().model_copy(update={"average_sale_value": "1" + "0" * 27})
        summary = build_email_summary(form, project_form(form))

        self.assertIn(f"- Extra Monthly Revenue: ${15 * 10 ** 26:,}.00", summary)
        self.assertIn(f"- Total Extra Revenue: ${18 * 10 ** 27:,}", summary)

    def test_huge_exponent_inputs_render(self) -> None:
        form = default_form_state().model_copy(
            update={"current_monthly_leads": "1e999999", "average_sale_value": "1e999999"}
        )
        projection = project_form(form)
        document = build_proposal_document(form, projection)

        self.assertEqual(document.stat_cards[0].value, "+3.00E+999998")
        self.assertEqual(document.stat_cards[1].value, "+$0")
        self.assertIn("- Net Gain: $-36,000", build_email_summary(form, projection))
        self.assertIn("average sale value of $1.00E+999999", build_talking_points(form, projection)[1])


class FilenameTests(unittest.TestCase):
    def test_filename(self) -> None:
        self.assertEqual(proposal_filename("Acme"), "Proposal for Acme.pdf")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
