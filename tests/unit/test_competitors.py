"""Tests for the competitor pipeline orchestrator."""

import logging

import pytest

from idea_scout.pipeline.competitors import (
    CompetitorFinder,
    deduplicate_by_url,
    find_competitors,
    rank_competitors,
)
from idea_scout.tools.brave_search import BraveSearchClient
from idea_scout.types.competitor import Competitor
from idea_scout.types.search import RawResult


def _competitor(name: str, score: int) -> Competitor:
    return Competitor(
        name=name,
        description=f"{name} description",
        url=f"https://{name.lower()}.com",
        relevance_score=score,
    )


class TestRankCompetitors:
    """Sorting and truncation."""

    def test_higher_score_first_regardless_of_search_order(self):
        ranked = rank_competitors([_competitor("Sixty", 60), _competitor("Eighty", 80)])
        assert [c.name for c in ranked] == ["Eighty", "Sixty"]

    def test_ties_keep_search_order(self):
        ranked = rank_competitors(
            [_competitor("A", 70), _competitor("B", 70), _competitor("C", 90), _competitor("D", 70)]
        )
        assert [c.name for c in ranked] == ["C", "A", "B", "D"]

    def test_truncates_to_limit(self):
        ranked = rank_competitors([_competitor(f"C{i}", 50 + i) for i in range(8)])
        assert len(ranked) == 5
        assert [c.relevance_score for c in ranked] == [57, 56, 55, 54, 53]


class TestDeduplicateByUrl:
    """Test suite for deduplicate_by_url."""

    def test_first_occurrence_wins(self):
        results = [
            RawResult(title="First", url="https://acme.io"),
            RawResult(title="Other", url="https://other.io"),
            RawResult(title="Second", url="https://ACME.io"),
        ]
        assert [r.title for r in deduplicate_by_url(results)] == ["First", "Other"]

    def test_path_case_is_significant(self):
        results = [
            RawResult(title="Upper", url="https://x.com/A"),
            RawResult(title="Lower", url="https://x.com/a"),
            RawResult(title="Same page", url="HTTPS://X.com/A"),
        ]
        assert [r.title for r in deduplicate_by_url(results)] == ["Upper", "Lower"]


class TestFindCompetitors:
    """Test suite for find_competitors."""

    def test_short_description_skips_search(self, make_gateway):
        gateway = make_gateway([{"title": "Quizlet", "url": "https://quizlet.com"}])

        assert find_competitors("hi", search_client=gateway) == []
        assert gateway.call_count == 0

    def test_stop_word_description_skips_search(self, make_gateway):
        gateway = make_gateway([{"title": "Quizlet", "url": "https://quizlet.com"}])

        assert find_competitors("I want to build a", search_client=gateway) == []
        assert gateway.call_count == 0

    def test_search_called_once_with_keywords(self, make_gateway):
        gateway = make_gateway([])

        find_competitors("AI-powered study app for college students", search_client=gateway)

        assert gateway.calls == ["ai-powered study app college students"]

    @pytest.mark.parametrize("items", [None, []])
    def test_no_search_results(self, make_gateway, items):
        gateway = make_gateway(items)
        assert find_competitors("flashcard study tool", search_client=gateway) == []

    def test_everything_filtered_out(self, make_gateway):
        gateway = make_gateway(
            [
                {"title": "Flashcard - Wikipedia", "url": "https://en.wikipedia.org/wiki/Flashcard"},
                {"title": "Best flashcard apps", "url": "https://lists.example.com"},
            ]
        )
        assert find_competitors("flashcard study tool", search_client=gateway) == []

    def test_internal_error_returns_empty_and_logs(self, make_gateway, capture_logger):
        caplog = capture_logger("idea_scout.pipeline.competitors")
        gateway = make_gateway(error=RuntimeError("unexpected"))

        with caplog.at_level(logging.ERROR):
            result = find_competitors("flashcard study tool", search_client=gateway)

        assert result == []
        assert any(
            record.levelno == logging.ERROR and record.exc_info for record in caplog.records
        )

    def test_non_string_description_returns_empty(self, make_gateway):
        gateway = make_gateway([])
        assert find_competitors(None, search_client=gateway) == []  # type: ignore[arg-type]

    def test_unconfigured_client_returns_empty(self):
        assert find_competitors("flashcard study tool", BraveSearchClient(api_key="")) == []

    def test_builds_competitor_records(self, make_gateway):
        gateway = make_gateway(
            [
                {
                    "title": "Brainscape | Smart flashcards",
                    "description": "",
                    "url": "https://www.Brainscape.com/?ref=x",
                }
            ]
        )

        competitors = find_competitors("flashcard study tool", search_client=gateway)

        assert len(competitors) == 1
        competitor = competitors[0]
        assert competitor.name == "Brainscape"
        assert competitor.description == "No description available"
        assert competitor.url == "https://www.Brainscape.com/?ref=x"
        assert 0 <= competitor.relevance_score <= 100

    def test_sorted_truncated_and_unique(self, make_gateway):
        items = [
            {"title": f"Company{i}", "description": "", "url": f"https://company{i}.com"}
            for i in range(7)
        ]
        items.append(
            {"title": "Flashcard Study Co - Home", "description": "flashcard platform", "url": "https://fsc.com"}
        )
        items.append({"title": "Company0 again", "description": "", "url": "https://company0.com"})
        gateway = make_gateway(items)

        competitors = find_competitors("flashcard study tool", search_client=gateway)

        assert len(competitors) == 5
        assert competitors[0].name == "Flashcard Study Co"
        scores = [c.relevance_score for c in competitors]
        assert scores == sorted(scores, reverse=True)
        urls = [c.url for c in competitors]
        assert len(urls) == len(set(urls))
        # equal scores keep search order
        assert [c.name for c in competitors[1:]] == ["Company0", "Company1", "Company2", "Company3"]


class TestCompetitorFinder:
    """Test suite for CompetitorFinder."""

    def test_custom_limit(self, make_gateway):
        items = [{"title": f"C{i}", "url": f"https://c{i}.com"} for i in range(4)]
        finder = CompetitorFinder(make_gateway(items), limit=2)

        assert [c.name for c in finder.find("flashcard study tool")] == ["C0", "C1"]
