import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_optimizer.normalize.ids import generate_resume_id, generate_stable_id  # noqa: E402


class IdGenerationTests(unittest.TestCase):
    def test_rolling_hash_in_base36(self):
        self.assertEqual(generate_stable_id(""), "0")
        self.assertEqual(generate_stable_id("a"), "2p")
        self.assertEqual(generate_stable_id("ab"), "2e9")

    def test_resume_id_is_deterministic(self):
        first = generate_resume_id("resume.txt", "Jane Smith\nDesigner")
        self.assertTrue(first.startswith("resume_"))
        self.assertEqual(first, generate_resume_id("resume.txt", "Jane Smith\nDesigner"))

    def test_content_after_prefix_does_not_change_id(self):
        base = "A" * 150
        self.assertEqual(
            generate_resume_id("resume.txt", base + "first tail"),
            generate_resume_id("resume.txt", base + "second tail"),
        )

    def test_file_name_changes_id(self):
        self.assertNotEqual(
            generate_resume_id("resume.txt", "Jane Smith"),
            generate_resume_id("cv.txt", "Jane Smith"),
        )


if __name__ == "__main__":
    unittest.main()
