import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_analyzer.normalize.entities import build_parsed_resume  # noqa: E402
from resume_analyzer.scoring.job_match import (  # noqa: E402
    education_level,
    match_job,
    required_years_of_experience,
    years_of_experience,
)


class JobMatchTests(unittest.TestCase):
    def test_partial_overlap(self):
        parsed = build_parsed_resume("Python developer using Docker daily")
        result = match_job(parsed, "python docker kubernetes")

        self.assertEqual(result.match_score, 67)
        self.assertEqual(result.missing_skills, ["kubernetes"])
        self.assertEqual(result.keyword_gaps, ["kubernetes"])
        self.assertEqual(result.matched_keywords, ["docker", "python"])
        self.assertEqual(len(result.recommendations), 2)

    def test_empty_job_description(self):
        parsed = build_parsed_resume("Python developer")
        for job_description in ("", "   ", None, "a an to"):
            with self.subTest(job_description=job_description):
                result = match_job(parsed, job_description)
                self.assertEqual(result.match_score, 0)
                self.assertEqual(result.missing_skills, [])
                self.assertIsNone(result.experience)

    def test_gaps_skip_stopwords(self):
        parsed = build_parsed_resume("Python developer")
        result = match_job(parsed, "Looking for strong experience with Python and Terraform")
        self.assertEqual(result.keyword_gaps, ["terraform"])
        self.assertEqual(result.missing_skills, ["terraform"])
        self.assertEqual(result.match_score, 17)

    def test_slash_joined_skills_match_each_skill(self):
        parsed = build_parsed_resume("Skills\nPython/Docker/Kubernetes")
        result = match_job(parsed, "python docker kubernetes")
        self.assertEqual(result.match_score, 100)
        self.assertEqual(result.missing_skills, [])
        self.assertEqual(result.matched_keywords, ["docker", "kubernetes", "python"])

    def test_full_match(self):
        parsed = build_parsed_resume("Python and Docker engineer")
        result = match_job(parsed, "Docker, Python")
        self.assertEqual(result.match_score, 100)
        self.assertEqual(result.recommendations, [])

    def test_experience_requirement(self):
        parsed = build_parsed_resume("Engineer at Acme 2020 - 2022, Python")
        result = match_job(parsed, "Python role, 4+ years of experience")
        self.assertEqual(result.experience.resume_years, 2)
        self.assertEqual(result.experience.required_years, 4)
        self.assertEqual(result.experience.score, 50)
        self.assertFalse(result.experience.meets_requirement)
        self.assertTrue(any("4+ years" in text for text in result.recommendations))

    def test_education_requirement(self):
        parsed = build_parsed_resume("BS Computer Science, Python")
        result = match_job(parsed, "Python role, Master's degree preferred")
        self.assertEqual(result.education.resume_level, "bachelor")
        self.assertEqual(result.education.required_level, "master")
        self.assertEqual(result.education.score, 75)
        self.assertFalse(result.education.meets_requirement)


class ExperienceAndEducationTests(unittest.TestCase):
    def test_years_of_experience(self):
        self.assertEqual(years_of_experience("5+ years of Python experience"), 5)
        self.assertEqual(years_of_experience("Acme 2015 - 2021"), 6)
        self.assertEqual(years_of_experience("Fresh graduate"), 0)
        self.assertEqual(required_years_of_experience("3+ years experience required"), 3)
        self.assertEqual(required_years_of_experience("Python role"), 0)

    def test_education_levels(self):
        self.assertEqual(education_level("BS Computer Science"), "bachelor")
        self.assertEqual(education_level("Master's degree in CS"), "master")
        self.assertEqual(education_level("PhD in Physics"), "phd")
        self.assertEqual(education_level("High School Diploma"), "high_school")
        self.assertEqual(education_level("Jobs managed well"), "none")


if __name__ == "__main__":
    unittest.main()
