import pytest

from data_designer_doc_rubric.core import NO_CONTENT_ISSUE, validate_document
from data_designer_doc_rubric.power_statement import (
    detect_action_verbs,
    detect_clarity,
    detect_impact,
    detect_specificity,
    detect_versions,
    score_action,
    score_clarity,
    score_impact,
    score_specificity,
    validate_power_statement,
    version_bonus,
)


STATEMENT = (
    "Led the development of a customer analytics platform at Acme Corp that transformed how the sales "
    "team engages with enterprise clients. By implementing real-time data insights and predictive scoring, "
    "we increased qualified leads by 45% and shortened the sales cycle by 2 weeks. The solution now serves "
    "500+ sales representatives across 3 regions."
)

DUAL_FORMAT = """
## Version A:
Led the development of a customer analytics platform that increased leads by 45%.

## Version B:
### The Challenge
Sales teams lacked real-time customer insights.
### The Solution
Built an analytics platform with predictive scoring.
### Results
Increased qualified leads by 45% in 3 months.
### Why It Works
Real-time data enables faster, smarter decisions.
"""


class TestDetectActionVerbs:
    def test_strong_verb_at_start(self):
        result = detect_action_verbs("Led a team of 10 engineers to deliver a new product.")
        assert result.starts_with_strong_verb
        assert result.strong_verb_count > 0

    def test_first_word_punctuation_ignored(self):
        assert detect_action_verbs("Launched, then scaled, a new product.").starts_with_strong_verb

    def test_weak_opening(self):
        result = detect_action_verbs("Was responsible for managing a team.")
        assert result.starts_with_weak_pattern
        assert not result.starts_with_strong_verb

    def test_multiple_strong_verbs(self):
        result = detect_action_verbs("Developed and launched a platform that transformed customer engagement.")
        assert result.strong_verb_count >= 2
        assert result.strong_verbs_found[:3] == ("developed", "launched", "transformed")

    def test_weak_verbs(self):
        result = detect_action_verbs("I helped the team and assisted with the project.")
        assert result.has_weak_verbs
        assert result.weak_verbs_found == ("helped", "assisted")


class TestDetectSpecificity:
    def test_percentages(self):
        result = detect_specificity("Increased conversion by 45% in 3 months.")
        assert result.has_percentages
        assert result.percentage_count == 1

    def test_dollar_amounts(self):
        assert detect_specificity("Generated $2.5 million in new revenue.").has_dollar_amounts

    def test_time_metrics(self):
        assert detect_specificity("Reduced delivery time by 5 days.").has_time_metrics

    def test_comparisons(self):
        assert detect_specificity("We increased by 30% and grew by 50% last year.").comparison_count == 2

    def test_team_context(self):
        result = detect_specificity("At Acme Corp, our team delivered results.")
        assert result.has_team_context
        assert result.has_context


class TestDetectImpact:
    def test_business_impact(self):
        assert detect_impact("Drove revenue growth and improved ROI.").has_business_impact

    def test_customer_impact(self):
        assert detect_impact("Improved customer satisfaction and retention rates.").has_customer_impact

    def test_scale(self):
        assert detect_impact("Implemented company-wide solutions across the enterprise.").has_scale


class TestDetectClarity:
    def test_filler_words(self):
        result = detect_clarity("This is basically a very important solution that really works.")
        assert result.filler_count == 3
        assert set(result.fillers_found) == {"basically", "very", "really"}

    def test_jargon(self):
        result = detect_clarity("We leverage synergy to move the needle and deep dive into solutions.")
        assert result.jargon_count == 4

    def test_concise_length(self):
        result = detect_clarity(STATEMENT)
        assert result.is_concise
        assert not result.is_too_short

    def test_passive_voice(self):
        assert detect_clarity("The project was completed by the team.").has_passive_voice

    def test_vague_improvement(self):
        result = detect_clarity("We improved performance and enhanced the system significantly.")
        assert result.vague_improvement_count == 3

    def test_bullets_need_more_than_two(self):
        assert not detect_clarity("- one\n- two").has_bullet_points
        assert detect_clarity("- one\n- two\n- three").has_bullet_points


class TestDetectVersions:
    def test_version_a_header(self):
        assert detect_versions("## Version A:\nConcise paragraph here.").has_version_a

    def test_version_b_header(self):
        assert detect_versions("## Version B:\nStructured content here.").has_version_b

    def test_structured_sections(self):
        result = detect_versions(DUAL_FORMAT)
        assert result.has_structured_content
        assert result.structured_section_count == 4
        assert result.has_both_versions


class TestVersionBonus:
    @pytest.mark.parametrize(
        "text, amount",
        [
            (DUAL_FORMAT, 5),
            ("## Version A:\nParagraph.\n## Version B:\nStructured content.", 3),
            ("## Version A:\nParagraph only.", 2),
            ("Just a paragraph.", 0),
        ],
    )
    def test_tiers(self, text, amount):
        assert version_bonus(text).amount == amount

    def test_partial_structure_reported(self):
        bonus = version_bonus("## Version A:\nParagraph.\n## Version B:\n### The Challenge\nHard.")
        assert bonus.issues == ("Version B needs structured sections (1/4 found)",)


class TestScorers:
    def test_clarity_clean_text(self):
        text = (
            "Led the development of an analytics platform at Acme Corp that transformed customer engagement. "
            "The team delivered real-time insights that increased qualified leads by 45% within 3 months. "
            "Sales representatives now close deals 2 weeks faster with actionable data."
        )
        result = score_clarity(text)
        assert result.score > 15
        assert result.max_score == 25

    def test_clarity_penalizes_fillers(self):
        result = score_clarity("This is basically a very important solution that really helps customers quite a lot.")
        assert any(i.startswith("Remove filler words") for i in result.issues)

    def test_clarity_vague_term_penalty_reported(self):
        result = score_clarity("We improved performance and enhanced the system significantly.")
        assert any(i.endswith("(-9 pts)") for i in result.issues)

    def test_impact_quantified(self):
        text = "Drove revenue growth of 25% and reduced customer churn by 15% within the enterprise team."
        assert score_impact(text).score > 15

    def test_impact_missing(self):
        assert score_impact("Worked on a project that was pretty good.").issues

    def test_action_strong(self):
        text = (
            "Spearheaded a cross-functional initiative that transformed customer engagement "
            "and delivered measurable results."
        )
        assert score_action(text).score == 25

    def test_action_weak_opening(self):
        result = score_action("Was responsible for managing a team that worked on projects.")
        assert any(i.startswith("Replace weak opening") for i in result.issues)

    def test_specificity_metrics(self):
        text = (
            "At Acme Corp, increased conversion by 35% and generated $1.5 million in 6 months "
            "for the enterprise team."
        )
        assert score_specificity(text).score == 25

    def test_specificity_missing(self):
        assert score_specificity("Did good work that made things better.").issues


class TestValidatePowerStatement:
    def test_complete_result(self):
        result = validate_power_statement(STATEMENT)
        assert result.total_score > 0
        assert result.rubric_id == "power-statement"
        for position, key in enumerate(("clarity", "impact", "action", "specificity"), start=1):
            assert result.dimension(position) is result[key]

    @pytest.mark.parametrize("text", ["", None])
    def test_no_content(self, text):
        result = validate_power_statement(text)
        assert result.total_score == 0
        assert NO_CONTENT_ISSUE in result["clarity"].issues
        assert result.bonus is None

    def test_dual_format_bonus(self):
        result = validate_power_statement(DUAL_FORMAT)
        assert result.bonus.amount == 5
        assert result.to_payload()["bonus"]["amount"] == 5

    def test_missing_format_is_an_issue(self):
        result = validate_power_statement(STATEMENT)
        assert result.bonus.amount == 0
        assert "Format as Version A (paragraph) and Version B (structured sections)" in result.issues

    def test_matches_registry_lookup(self):
        text = "Led development of analytics platform at Acme Corp."
        assert validate_power_statement(text).total_score == validate_document(text, "power-statement").total_score

    def test_total_within_bounds(self):
        assert 0 <= validate_power_statement(DUAL_FORMAT).total_score <= 100

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Shipped the release.", 0),
            ("Shipped the release, cutting churn 12%.", 7),
            ("Shipped the release, cutting churn 12% and saving $40K.", 10),
        ],
    )
    def test_specificity_grows_with_impact_metrics(self, text, expected):
        assert score_specificity(text).score == expected
