import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_analyzer.normalize.entities import build_parsed_resume  # noqa: E402
from resume_analyzer.scoring.subscores import (  # noqa: E402
    clamp_score,
    collect_skills,
    compute_sub_scores,
    count_quantifiers,
    count_year_tokens,
    find_action_verbs,
    find_tech_keywords,
    score_ats,
    score_content,
    score_format,
    score_keyword,
)

RESUME_TEXT = (
    "John Doe\n"
    "john@x.com\n"
    "555-123-4567\n"
    "Experience\n"
    "Managed a team of 5, increased revenue by 20%.\n"
    "Education\n"
    "BS Computer Science\n"
    "Skills\n"
    "Python, SQL, Docker"
)


class SignalTests(unittest.TestCase):
    def test_clamp(self):
        self.assertEqual(clamp_score(-4), 0)
        self.assertEqual(clamp_score(140), 100)
        self.assertEqual(clamp_score(57.9), 57)

    def test_year_tokens_are_distinct(self):
        self.assertEqual(count_year_tokens("2019 - 2021, 2021 - 2023, 1999"), 4)
        self.assertEqual(count_year_tokens("Call 555-123-4567, 20% growth"), 0)

    def test_quantifiers(self):
        self.assertEqual(count_quantifiers("Saved $1,200 and cut costs by 20%; 3x faster, 2 million users"), 4)
        self.assertEqual(count_quantifiers("Worked on many things"), 0)

    def test_action_verbs_and_tech_keywords(self):
        self.assertEqual(find_action_verbs(RESUME_TEXT), ["managed", "increased"])
        self.assertEqual(find_tech_keywords("REST API on a cloud database"), ["api", "database", "cloud"])


class SubScoreTests(unittest.TestCase):
    def setUp(self):
        self.parsed = build_parsed_resume(RESUME_TEXT)

    def test_ats_score(self):
        # base 60, three sections, email and phone
        self.assertEqual(score_ats(self.parsed), 94)

    def test_ats_timeline_bonus(self):
        parsed = build_parsed_resume("Experience\nAcme 2019 - 2022")
        self.assertEqual(score_ats(parsed), 73)

    def test_content_score(self):
        # base 50, one quantifier, two action verbs
        self.assertEqual(score_content(self.parsed), 57)

    def test_content_word_count_bands(self):
        self.assertEqual(score_content(build_parsed_resume("word " * 300)), 70)
        self.assertEqual(score_content(build_parsed_resume("word " * 250)), 60)
        self.assertEqual(score_content(build_parsed_resume("word " * 900)), 60)
        self.assertEqual(score_content(build_parsed_resume("word " * 20)), 50)

    def test_content_quantifier_bonus_is_capped(self):
        parsed = build_parsed_resume("Cut costs 10%, 20%, 30%, 40%, 50% and 60%.")
        self.assertEqual(score_content(parsed), 65)

    def test_format_score(self):
        self.assertEqual(score_format(self.parsed), 85)

    def test_format_section_tiers(self):
        text = "Summary\nx\nExperience\nx\nEducation\nx\nSkills\nx\nProjects\nx\nCertifications\nx"
        self.assertEqual(score_format(build_parsed_resume(text)), 90)

    def test_keyword_score(self):
        self.assertEqual(collect_skills(self.parsed), ["python", "sql", "docker"])
        self.assertEqual(score_keyword(self.parsed), 66)

    def test_keyword_tech_terms(self):
        parsed = build_parsed_resume("Designed API layers using agile practices, cloud hosting and devops tooling.")
        self.assertEqual(score_keyword(parsed), 70)

    def test_keyword_skill_bonus_is_capped(self):
        skills = "Python, Java, Rust, Kotlin, Swift, Scala, Django, Flask, Redis, Kafka, Docker, Terraform, Jenkins, Linux, GraphQL, Tableau"
        parsed = build_parsed_resume(f"Skills\n{skills}")
        self.assertEqual(len(collect_skills(parsed)), 16)
        self.assertEqual(score_keyword(parsed), 90)

    def test_compute_sub_scores_covers_every_kind(self):
        scores = compute_sub_scores(self.parsed)
        self.assertEqual([score.kind for score in scores], ["ats", "content", "format", "keyword"])
        self.assertEqual([score.value for score in scores], [94, 57, 85, 66])
        for score in scores:
            self.assertGreaterEqual(score.value, 0)
            self.assertLessEqual(score.value, 100)


if __name__ == "__main__":
    unittest.main()
