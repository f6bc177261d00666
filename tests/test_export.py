import sys
import unittest
from io import BytesIO
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from zipfile import ZipFile  # noqa: E402

from docx import Document  # noqa: E402
from docx.shared import Pt  # noqa: E402

from resume_optimizer.export.documents import (  # noqa: E402
    ROLE_STYLES,
    export_filename,
    layout_resume,
    render_docx,
    render_pdf,
)
from resume_optimizer.normalize.line_classifier import LineRole  # noqa: E402
from resume_optimizer.normalize.normalize_resume import create_resume_data  # noqa: E402
from resume_optimizer.parsing.parse import parse_document  # noqa: E402
from resume_optimizer.schemas.normalized import PersonalInfo, ResumeData, ResumeSections  # noqa: E402

RESUME_TEXT = (
    "Jane Smith\n"
    "jane@example.com | 555-123-4567\n"
    "\n"
    "EDUCATION\n"
    "• Designed brochures & <flyers>\n"
)


class LayoutTests(unittest.TestCase):
    def test_lines_are_styled_by_role(self):
        layout = layout_resume(create_resume_data("jane.txt", RESUME_TEXT))
        roles = [item.role if item else None for item in layout]
        self.assertEqual(
            roles,
            [
                LineRole.NAME,
                LineRole.CONTACT_INFO,
                None,
                LineRole.SECTION_HEADER,
                LineRole.BULLET_POINT,
                None,
            ],
        )
        self.assertEqual(layout[0].style.size, 18)
        self.assertTrue(layout[0].style.bold)
        self.assertGreater(layout[4].style.indent, 0)

    def test_role_style_table(self):
        self.assertEqual(ROLE_STYLES[LineRole.SECTION_HEADER].size, 13)
        self.assertEqual(ROLE_STYLES[LineRole.JOB_TITLE_HEADING].size, 14)
        self.assertEqual(ROLE_STYLES[LineRole.STANDALONE_DATE].size, 9)

    def test_blank_content_uses_structured_sections(self):
        resume = ResumeData(
            id="resume_x",
            file_name="jane.txt",
            content="   ",
            sections=ResumeSections(
                personal_info=PersonalInfo(name="Jane Smith", email="jane@example.com"),
                summary="Designer with agency background.",
                skills=["Figma", "Sketch"],
            ),
            uploaded_at="2025-01-01T00:00:00Z",
        )
        texts = [item.text for item in layout_resume(resume) if item]
        self.assertEqual(
            texts,
            [
                "Jane Smith",
                "jane@example.com",
                "PROFESSIONAL SUMMARY",
                "Designer with agency background.",
                "SKILLS",
                "Figma, Sketch",
            ],
        )


class RenderTests(unittest.TestCase):
    def setUp(self):
        self.resume = create_resume_data("jane.txt", RESUME_TEXT)

    def test_pdf_bytes(self):
        payload = render_pdf(self.resume)
        self.assertTrue(payload.startswith(b"%PDF"))
        parsed = parse_document("jane.pdf", payload)
        self.assertIn("Jane Smith", parsed.text)

    def test_docx_bytes(self):
        payload = render_docx(self.resume)
        self.assertTrue(payload.startswith(b"PK"))
        with ZipFile(BytesIO(payload)) as archive:
            self.assertIn("word/document.xml", archive.namelist())

        document = Document(BytesIO(payload))
        texts = [paragraph.text for paragraph in document.paragraphs]
        self.assertIn("• Designed brochures & <flyers>", texts)
        name_run = document.paragraphs[0].runs[0]
        self.assertTrue(name_run.bold)
        self.assertEqual(name_run.font.size, Pt(18))

    def test_empty_resume_still_renders(self):
        empty = create_resume_data("empty.txt", "")
        self.assertTrue(render_pdf(empty).startswith(b"%PDF"))
        self.assertTrue(render_docx(empty).startswith(b"PK"))

    def test_export_filename(self):
        self.assertEqual(export_filename(self.resume, "pdf"), "Jane Smith_optimized.pdf")
        self.assertEqual(export_filename(create_resume_data("x.txt", ""), "docx"), "resume_optimized.docx")


if __name__ == "__main__":
    unittest.main()
