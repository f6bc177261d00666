import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_optimizer.taxonomy import get_default_vocabulary  # noqa: E402
from resume_optimizer.taxonomy.local_vocabulary import LocalVocabulary  # noqa: E402


class VocabularyTests(unittest.TestCase):
    def test_skill_vocabulary_is_lowercase_and_ordered(self):
        vocabulary = LocalVocabulary()
        self.assertEqual(vocabulary.skills[0], "javascript")
        self.assertIn("graphic design", vocabulary.skills)
        self.assertTrue(all(skill == skill.lower() for skill in vocabulary.skills))

    def test_stop_words_and_importance_tiers(self):
        vocabulary = LocalVocabulary()
        self.assertIn("experience", vocabulary.stop_words)
        tiers = [tier for tier, _ in vocabulary.importance_keywords()]
        self.assertEqual(tiers, ["high", "medium", "low"])

    def test_indicators_by_kind(self):
        vocabulary = LocalVocabulary()
        self.assertIn("must", vocabulary.indicators("required"))
        self.assertIn("nice to have", vocabulary.indicators("preferred"))
        with self.assertRaises(ValueError):
            vocabulary.indicators("optional")

    def test_default_vocabulary_is_shared(self):
        self.assertIs(get_default_vocabulary(), get_default_vocabulary())


if __name__ == "__main__":
    unittest.main()
