import pytest

from zettel_graph import Document, Label


def _make_document(number, title="", body="", labels=(), comments=0, state="open"):
    return Document(
        number=number,
        title=title,
        body=body,
        created_at="2024-01-01T00:00:00Z",
        updated_at="2024-01-02T00:00:00Z",
        labels=tuple(Label(name) if isinstance(name, str) else name for name in labels),
        state=state,
        comments=comments,
    )


@pytest.fixture
def make_document():
    return _make_document


@pytest.fixture
def scenario_documents():
    """Three notes: 1 and 3 link to each other, 1 links one-way to 2."""
    return [
        _make_document(1, "Setup Guide", "See [[Install]] and #3"),
        _make_document(2, "Install", "no links"),
        _make_document(3, "FAQ", "refers back to [[Setup Guide]]"),
    ]


@pytest.fixture
def scenario_payloads():
    return [
        {"number": 1, "title": "Setup Guide", "body": "See [[Install]] and #3", "labels": []},
        {"number": 2, "title": "Install", "body": "no links", "labels": ["setup"]},
        {
            "number": 3,
            "title": "FAQ",
            "body": "refers back to [[Setup Guide]]",
            "labels": [{"name": "documentation", "color": "0075ca"}],
            "comments": 4,
        },
    ]
