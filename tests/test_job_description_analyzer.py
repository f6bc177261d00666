import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pydantic import ValidationError  # noqa: E402

from resume_optimizer.normalize.normalize_jd import (  # noqa: E402
    analyze_job_description,
    extract_keywords,
    extract_skills,
    get_skill_importance,
)
from resume_optimizer.taxonomy import get_default_vocabulary  # noqa: E402


class SkillExtractionTests(unittest.TestCase):
    CONTENT = (
        "Senior Engineer\n"
        "Required skills: python, django and postgresql.\n"
        "Preferred: kubernetes experience.\n"
    )

    def test_required_window_stops_at_preferred_line(self):
        vocabulary = get_default_vocabulary()
        required = extract_skills(self.CONTENT, vocabulary.indicators("required"))
        self.assertTrue({"python", "django", "postgresql"} <= set(required))
        self.assertNotIn("kubernetes", required)

    def test_preferred_window(self):
        vocabulary = get_default_vocabulary()
        preferred = extract_skills(self.CONTENT, vocabulary.indicators("preferred"))
        self.assertIn("kubernetes", preferred)
        self.assertNotIn("python", preferred)

    def test_bullet_lines_contribute_skills(self):
        skills = extract_skills("About the role\n• Figma prototypes\n", ("required",))
        self.assertEqual(skills, ["figma"])

    def test_indicator_is_matched_literally(self):
        self.assertEqual(extract_skills("Team player. Docker daily.", ("c++",)), [])


class KeywordExtractionTests(unittest.TestCase):
    def test_frequent_words_ranked_by_count(self):
        keywords = extract_keywords("design design design brand brand marketing the the the")
        self.assertEqual(keywords[:2], ["design", "brand"])
        self.assertNotIn("marketing", keywords[:2])

    def test_stop_words_are_excluded(self):
        keywords = extract_keywords("team team team experience experience clients clients")
        self.assertNotIn("team", keywords)
        self.assertNotIn("experience", keywords)
        self.assertIn("clients", keywords)

    def test_equal_counts_keep_first_seen_order(self):
        self.assertEqual(extract_keywords("pixel pixel studio studio"), ["pixel", "studio"])
        self.assertEqual(extract_keywords("studio pixel studio pixel"), ["studio", "pixel"])

    def test_vocabulary_terms_are_added_after_frequent_words(self):
        keywords = extract_keywords("Figma figma prototypes. We value typography.")
        self.assertEqual(keywords, ["figma", "typography"])

    def test_non_ascii_letters_split_words(self):
        self.assertEqual(extract_keywords("Café café résumé résumé"), [])


class ImportanceTests(unittest.TestCase):
    def test_importance_tiers(self):
        self.assertEqual(get_skill_importance("python", "Python is required for this role"), "high")
        self.assertEqual(get_skill_importance("docker", "Docker is nice to have"), "medium")
        self.assertEqual(get_skill_importance("kubernetes", "Some exposure to Kubernetes."), "low")
        self.assertEqual(get_skill_importance("terraform", "We use Terraform daily"), "medium")

    def test_skill_with_regex_metacharacters(self):
        self.assertEqual(get_skill_importance("c++", "C++ is mandatory"), "high")

    def test_high_tier_wins_over_medium(self):
        content = "Python is preferred for scripting. Python is required for the data platform."
        self.assertEqual(get_skill_importance("python", content), "high")


class AnalyzeJobDescriptionTests(unittest.TestCase):
    def test_record_is_immutable(self):
        job = analyze_job_description("Designer", "Acme", "Required: figma and typography for layouts.")
        self.assertEqual(job.title, "Designer")
        self.assertEqual(job.company, "Acme")
        self.assertIn("figma", job.required_skills)
        with self.assertRaises(ValidationError):
            job.title = "Other"


if __name__ == "__main__":
    unittest.main()
