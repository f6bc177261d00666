import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_optimizer.normalize.line_classifier import (  # noqa: E402
    LineRole,
    classify_document,
    classify_line,
    is_job_title_heading,
    is_section_header,
)


class LineClassifierTests(unittest.TestCase):
    def test_name_only_near_top_of_document(self):
        self.assertEqual(classify_line("Jane Smith", 0), LineRole.NAME)
        self.assertEqual(classify_line("Jane Smith", 7), LineRole.PLAIN_TEXT)

    def test_contact_line(self):
        self.assertEqual(classify_line("jane@example.com | 555-123-4567", 1), LineRole.CONTACT_INFO)

    def test_headings(self):
        self.assertEqual(classify_line("GRAPHIC DESIGNER", 6), LineRole.JOB_TITLE_HEADING)
        self.assertEqual(classify_line("EDUCATION", 12), LineRole.SECTION_HEADER)

    def test_job_title_heading_wins_over_section_header(self):
        line = "TECHNICAL PROJECT MANAGER"
        self.assertTrue(is_job_title_heading(line))
        self.assertTrue(is_section_header(line))
        roles = {classify_line(line, 10) for _ in range(3)}
        self.assertEqual(roles, {LineRole.JOB_TITLE_HEADING})

    def test_company_and_position_lines(self):
        self.assertEqual(classify_line("ACME CORP – Toronto", 8), LineRole.COMPANY_LINE)
        self.assertEqual(classify_line("    Senior Designer (2019 - 2021)", 9), LineRole.POSITION_LINE)

    def test_bullets(self):
        self.assertEqual(classify_line("• Designed brochures", 10), LineRole.BULLET_POINT)
        self.assertEqual(classify_line("    Designed brochures for clients", 10), LineRole.BULLET_POINT)
        self.assertEqual(classify_line("Designed brochures for clients", 10), LineRole.PLAIN_TEXT)

    def test_dates_and_skills_inventory(self):
        self.assertEqual(classify_line("2019 - 2021", 11), LineRole.STANDALONE_DATE)
        self.assertEqual(classify_line("Photoshop, Illustrator, InDesign", 14), LineRole.SKILLS_INVENTORY)

    def test_blank_line_is_plain_text(self):
        self.assertEqual(classify_line("   ", 2), LineRole.PLAIN_TEXT)

    def test_document_positions_count_blank_lines(self):
        classified = classify_document("Jane Smith\n\nEDUCATION\n")
        self.assertEqual([line.index for line in classified], [0, 2])
        self.assertEqual([line.role for line in classified], [LineRole.NAME, LineRole.SECTION_HEADER])


if __name__ == "__main__":
    unittest.main()
