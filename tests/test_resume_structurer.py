import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_optimizer.normalize.normalize_resume import (  # noqa: E402
    UPLOADED_AT,
    create_resume_data,
    extract_personal_info,
    extract_sections,
)


class PersonalInfoTests(unittest.TestCase):
    def test_contact_fields_are_extracted(self):
        info = extract_personal_info(
            "Jane Smith\n"
            "jane.smith@example.com\n"
            "(555) 123-4567\n"
            "linkedin.com/in/janesmith\n"
        )
        self.assertEqual(info.name, "Jane Smith")
        self.assertEqual(info.email, "jane.smith@example.com")
        self.assertEqual(info.phone, "(555) 123-4567")
        self.assertEqual(info.linkedin, "https://linkedin.com/in/janesmith")

    def test_name_search_stops_after_five_lines(self):
        text = "resume\ncurriculum vitae\nupdated\ndraft\nversion two\nJane Smith\n"
        self.assertEqual(extract_personal_info(text).name, "")

    def test_street_address_takes_priority(self):
        info = extract_personal_info("Jane Smith\n123 Maple Street M5V2T6 Toronto, ON, CANADA\n")
        self.assertEqual(info.location, "123 Maple Street M5V2T6 Toronto, ON, CANADA")

    def test_city_province_location(self):
        info = extract_personal_info("Toronto, ON M5V 2T6, CANADA\nJane Smith\n")
        self.assertEqual(info.location, "Toronto, ON M5V 2T6, CANADA")

    def test_postal_code_first_location(self):
        info = extract_personal_info("Jane Smith\nM5V 2T6 Toronto, ON\n")
        self.assertEqual(info.location, "M5V 2T6 Toronto, ON")

    def test_no_location(self):
        self.assertEqual(extract_personal_info("Jane Smith\njane@example.com\n").location, "")


class SectionExtractionTests(unittest.TestCase):
    def test_summary_under_header(self):
        sections = extract_sections(
            "PROFESSIONAL SUMMARY\n"
            "Creative designer with a decade of agency work.\n"
            "SKILLS\n"
            "Figma\n"
        )
        self.assertEqual(sections["summary"], "Creative designer with a decade of agency work.")

    def test_no_summary_without_header_or_long_line(self):
        sections = extract_sections("Jane Smith\nEXPERIENCE\nAcme Corp 2019 - 2021\n")
        self.assertNotIn("summary", sections)

    def test_long_descriptive_line_becomes_summary_without_header(self):
        line = (
            "Innovative visual designer who turns brand strategy into packaging, campaigns "
            "and retail displays for national clients."
        )
        sections = extract_sections(f"Jane Smith\n{line}\nEXPERIENCE\nAcme Corp 2019 - 2021\n")
        self.assertEqual(sections["summary"], line)

    def test_long_line_after_summary_section_is_not_collected(self):
        line = (
            "Innovative visual designer who turns brand strategy into packaging, campaigns "
            "and retail displays for national clients."
        )
        sections = extract_sections(
            f"SUMMARY\nCreative designer with a decade of agency work.\nEDUCATION\n{line}\n"
        )
        self.assertEqual(sections["summary"], "Creative designer with a decade of agency work.")

    def test_headers_match_as_line_prefixes(self):
        sections = extract_sections(
            "EXPERIENCE\n"
            "Acme Corp 2019 - 2021\n"
            "Built dashboards for the sales team\n"
            "EDUCATIONAL BACKGROUND\n"
            "State University of Somewhere\n"
        )
        self.assertEqual(sections["experience"][0].description, ["Built dashboards for the sales team"])
        self.assertIn("education", sections)
        self.assertEqual(sections["education"][0].institution, "State University of Somewhere")

    def test_summary_stops_at_line_starting_with_section_word(self):
        sections = extract_sections(
            "SUMMARY\n"
            "Creative designer with a decade of agency work.\n"
            "Experienced in retail packaging and print production.\n"
        )
        self.assertEqual(sections["summary"], "Creative designer with a decade of agency work.")

    def test_labelled_skill_lines_drop_the_label(self):
        sections = extract_sections(
            "SKILLS\n"
            "Front-End:- HTML | CSS | JavaScript\n"
            "Tools: Figma, Sketch, Figma\n"
            "EDUCATION\n"
            "Ontario College of Art and Design\n"
        )
        self.assertEqual(sections["skills"], ["HTML", "CSS", "JavaScript", "Figma", "Sketch"])

    def test_experience_entries_and_descriptions(self):
        sections = extract_sections(
            "EXPERIENCE\n"
            "Acme Corp 2019 - 2021\n"
            "Built dashboards for the sales team\n"
            "Bright Agency – Toronto\n"
            "Designed packaging for retail brands\n"
            "EDUCATION\n"
            "State University of Somewhere\n"
        )
        experience = sections["experience"]
        self.assertEqual([entry.company for entry in experience], ["Acme Corp 2019 - 2021", "Bright Agency – Toronto"])
        self.assertEqual(experience[0].description, ["Built dashboards for the sales team"])
        self.assertEqual(sections["education"][0].institution, "State University of Somewhere")
        self.assertEqual(sections["education"][0].degree, "")

    def test_certifications_section(self):
        sections = extract_sections(
            "CERTIFICATIONS\n"
            "• Google UX Design Certificate\n"
            "PMP\n"
            "EDUCATION\n"
            "State University of Somewhere\n"
        )
        self.assertEqual(sections["certifications"], ["Google UX Design Certificate"])


class CreateResumeDataTests(unittest.TestCase):
    def test_raw_content_is_kept_verbatim(self):
        content = "Jane Smith\r\n  PROFESSIONAL SUMMARY  \r\n\r\nCreative designer with branding focus.\r\n"
        resume = create_resume_data("jane.txt", content)
        self.assertEqual(resume.content, content)
        self.assertEqual(resume.file_name, "jane.txt")
        self.assertEqual(resume.uploaded_at, UPLOADED_AT)
        self.assertEqual(resume.changes_log, [])

    def test_empty_document_yields_empty_sections(self):
        resume = create_resume_data("empty.txt", "")
        self.assertEqual(resume.content, "")
        self.assertEqual(resume.sections.personal_info.name, "")
        self.assertIsNone(resume.sections.summary)
        self.assertIsNone(resume.sections.skills)
        self.assertIsNone(resume.sections.experience)
        self.assertIsNone(resume.sections.education)

    def test_same_input_gives_equal_records(self):
        content = "Jane Smith\nSKILLS\nPython, SQL\n"
        self.assertEqual(create_resume_data("a.txt", content), create_resume_data("a.txt", content))


if __name__ == "__main__":
    unittest.main()
