"""Tests for link registration and dedup policy."""

import pytest

from zettel_graph.graph_orchestrator import LinkOrchestrator


@pytest.fixture
def orchestrator():
    return LinkOrchestrator([1, 2, 3])


class TestLinkOrchestrator:
    def test_explicit_dominates_numeric(self, orchestrator):
        orchestrator.add_link(1, 2, "numeric")
        orchestrator.add_link(1, 3, "explicit", "[[C]]")
        orchestrator.add_link(1, 2, "explicit", "[[B]]")
        links = orchestrator.links()
        assert [(link.source, link.target, link.kind) for link in links] == [
            (1, 2, "explicit"),
            (1, 3, "explicit"),
        ]
        assert links[0].literals == ("[[B]]",)

    def test_numeric_after_explicit_keeps_explicit(self, orchestrator):
        orchestrator.add_link(1, 2, "explicit", "[[B]]")
        orchestrator.add_link(1, 2, "numeric")
        orchestrator.add_link(1, 2, "explicit", "[[B]]")
        (link,) = orchestrator.links()
        assert link.kind == "explicit"
        assert link.literals == ("[[B]]",)

    def test_reverse_pair_is_separate(self, orchestrator):
        orchestrator.add_link(1, 2, "numeric")
        orchestrator.add_link(2, 1, "numeric")
        assert len(orchestrator.links()) == 2

    def test_rejects_self_and_unknown(self, orchestrator):
        with pytest.raises(ValueError):
            orchestrator.add_link(1, 1, "explicit")
        with pytest.raises(ValueError):
            orchestrator.add_link(1, 9, "numeric")
        with pytest.raises(ValueError):
            orchestrator.add_link(1, 2, "wiki")

    def test_to_json(self, orchestrator):
        orchestrator.add_link(1, 2, "explicit", "[[B]]")
        orchestrator.add_unresolved(1, "Missing", "explicit", "no_candidate_match")
        orchestrator.set_hashtags(1, ["python"])
        payload = orchestrator.to_json()
        assert payload["links"] == [
            {"source": 1, "target": 2, "kind": "explicit", "literals": ("[[B]]",)}
        ]
        assert payload["unresolved"][0]["token"] == "Missing"
        assert payload["hashtags"] == {"1": ["python"]}
