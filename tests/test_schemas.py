import sys
import unittest
from pathlib import Path

from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_analyzer.schemas import (  # noqa: E402
    AnalysisResult,
    DraftAnalysis,
    JobMatch,
    ResumeEntities,
    SubScore,
    Suggestion,
)


def _sub_scores(*kinds):
    return [SubScore(kind=kind, value=50) for kind in kinds]


class SchemaTests(unittest.TestCase):
    def test_analysis_result_requires_each_sub_score_once(self):
        with self.assertRaises(ValidationError):
            AnalysisResult(overall=50, sub_scores=_sub_scores("ats", "content", "format"), grade="C-")
        with self.assertRaises(ValidationError):
            AnalysisResult(
                overall=50,
                sub_scores=_sub_scores("ats", "content", "format", "format"),
                grade="C-",
            )

    def test_analysis_result_normalizes_collections(self):
        result = AnalysisResult(
            overall=50,
            sub_scores=_sub_scores("ats", "content", "format", "keyword"),
            grade="C-",
            recommendations=["b", "a", "b"],
            keywords=["sql", "python", "sql"],
        )
        self.assertEqual(result.recommendations, ["b", "a"])
        self.assertEqual(result.keywords, ["python", "sql"])
        self.assertEqual(result.top_recommendations(1), ["b"])
        self.assertEqual(result.all_scores(), {"overall": 50, "ats": 50, "content": 50, "format": 50, "keyword": 50})
        self.assertNotIn("suggestions", result.to_flat_dict())
        self.assertIn("suggestions", result.to_flat_dict(include_details=True))

    def test_results_are_frozen(self):
        score = SubScore(kind="ats", value=10)
        with self.assertRaises(ValidationError):
            score.value = 20

    def test_bounds(self):
        with self.assertRaises(ValidationError):
            SubScore(kind="ats", value=101)
        with self.assertRaises(ValidationError):
            SubScore(kind="grammar", value=10)
        with self.assertRaises(ValidationError):
            Suggestion(type="content", priority="low", title="t", text="t", ats_impact=-1)

    def test_suggestion_defaults(self):
        suggestion = Suggestion(type="keyword", priority="critical", title="t", text="t")
        self.assertEqual(suggestion.status, "pending")
        self.assertEqual(suggestion.priority_rank, 0)

    def test_set_like_fields(self):
        entities = ResumeEntities(emails=["b@x.com", "a@x.com", "b@x.com"], skills=["sql", "python", "sql"])
        self.assertEqual(entities.emails, ["a@x.com", "b@x.com"])
        self.assertEqual(entities.skills, ["sql", "python"])
        job_match = JobMatch(match_score=10, missing_skills=["redis", "aws", "redis"])
        self.assertEqual(job_match.missing_skills, ["aws", "redis"])

    def test_draft_score_lookup(self):
        draft = DraftAnalysis(keyword_score=88)
        self.assertEqual(draft.score_for("keyword"), 88)
        self.assertIsNone(draft.score_for("ats"))


if __name__ == "__main__":
    unittest.main()
