import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_analyzer.scoring.sections_analysis import (  # noqa: E402
    GENERIC_SECTION_TIP,
    assess_section_quality,
    build_sections_analysis,
    missing_section_text,
    section_ats_score,
    section_recommendations,
)


class SectionQualityTests(unittest.TestCase):
    def test_experience_thresholds(self):
        self.assertEqual(assess_section_quality("experience", "x" * 301), "excellent")
        self.assertEqual(assess_section_quality("experience", "x" * 200), "good")
        self.assertEqual(assess_section_quality("experience", "Intern"), "needs_improvement")

    def test_education_and_summary_thresholds(self):
        self.assertEqual(assess_section_quality("education", "x" * 101), "good")
        self.assertEqual(assess_section_quality("education", "BS Computer Science"), "basic")
        self.assertEqual(assess_section_quality("summary", "x" * 150), "good")
        self.assertEqual(assess_section_quality("summary", "x" * 350), "needs_improvement")

    def test_skills_quality_counts_items(self):
        many = ", ".join(f"skill{index}" for index in range(11))
        self.assertEqual(assess_section_quality("skills", many), "excellent")
        self.assertEqual(assess_section_quality("skills", "Python, SQL"), "good")

    def test_other_sections_and_missing(self):
        self.assertEqual(assess_section_quality("projects", "x" * 60), "good")
        self.assertEqual(assess_section_quality("projects", "CLI tool"), "basic")
        self.assertEqual(assess_section_quality("experience", "   "), "missing")


class SectionAtsScoreTests(unittest.TestCase):
    def test_empty_section_scores_zero(self):
        self.assertEqual(section_ats_score("experience", ""), 0)
        self.assertEqual(section_ats_score("projects", "  \n "), 0)

    def test_contact_signals(self):
        full = "jane@x.com 555-123-4567 linkedin.com/in/jane Austin, TX github.com/jane"
        self.assertEqual(section_ats_score("contact", full), 100)
        self.assertEqual(section_ats_score("contact", "jane@x.com"), 25)

    def test_summary_rewards_keywords_metrics_and_verbs(self):
        self.assertEqual(section_ats_score("summary", "Backend engineer who improved uptime by 30%"), 52)

    def test_experience_counts_metrics_verbs_and_keywords(self):
        text = "Led migration, improved latency by 40% and cut costs by $200"
        self.assertEqual(section_ats_score("experience", text), 42)

    def test_education_degree_gpa_and_honors(self):
        self.assertEqual(section_ats_score("education", "Bachelor of Science, GPA: 3.8, Dean's List"), 100)
        self.assertEqual(section_ats_score("education", "High school diploma"), 50)

    def test_skills_count_and_core_terms(self):
        self.assertEqual(section_ats_score("skills", "Python, SQL, Docker"), 35)
        eight = "Python, Java, Go, Rust, Scala, Kotlin, Swift, Ruby, Perl"
        self.assertEqual(section_ats_score("skills", eight), 60)

    def test_other_sections_use_generic_rules(self):
        self.assertEqual(section_ats_score("projects", "CLI tool"), 52)


class SectionAnalysisTests(unittest.TestCase):
    def test_missing_section_text_uses_article(self):
        self.assertEqual(missing_section_text("summary"), "Add a summary section to improve your resume.")
        self.assertEqual(missing_section_text("education"), "Add an education section to improve your resume.")

    def test_recommendations_for_present_sections(self):
        self.assertEqual(len(section_recommendations("experience", "Led a team")), 3)
        self.assertEqual(section_recommendations("projects", "CLI tool"), [GENERIC_SECTION_TIP])

    def test_canonical_sections_always_reported(self):
        analysis = build_sections_analysis({"header": "Jane", "experience": "Led a team", "projects": "CLI tool"})
        self.assertEqual(list(analysis), ["summary", "experience", "education", "skills", "projects"])
        self.assertFalse(analysis["summary"].present)
        self.assertEqual(analysis["summary"].quality, "missing")
        self.assertEqual(analysis["summary"].recommendations, ["Add a summary section to improve your resume."])
        self.assertTrue(analysis["experience"].present)
        self.assertEqual(analysis["projects"].quality, "basic")
        self.assertEqual(analysis["summary"].ats_score, 0)
        self.assertEqual(analysis["projects"].ats_score, 52)
        self.assertNotIn("header", analysis)


if __name__ == "__main__":
    unittest.main()
