import pytest

from intents_guide.routing import DocumentNotFound, GuideResolver, TopicNotRecognized, get_routing_table
from intents_guide.skills import load_skill_from_dir


def test_resolve_attaches_documents_in_order(resolver):
    reading = resolver.resolve("searchable-content")
    assert reading.matched
    assert reading.goal == "Make app content searchable and addressable"
    assert reading.document_names == ["entities-and-queries", "spotlight-indexing", "siri-integration"]
    for ref, doc in reading.items:
        assert doc is not None
        assert doc.name == ref.name


def test_resolve_propagates_unknown_topic(resolver):
    with pytest.raises(TopicNotRecognized):
        resolver.resolve("make-coffee")


def test_fallback_returns_every_document(resolver):
    reading = resolver.resolve_or_fallback("make-coffee")
    assert not reading.matched
    assert reading.goal is None
    assert reading.document_names == [doc.name for doc in get_routing_table().documents]


def test_builtin_corpus_is_complete(resolver):
    assert resolver.missing_documents() == []


def test_missing_files_do_not_change_routing(tmp_path, write_skill):
    skill = load_skill_from_dir(write_skill(tmp_path, "partial", references={"intent-fundamentals": "# IF\n"}))
    resolver = GuideResolver(get_routing_table(), skill)

    assert len(resolver.missing_documents()) == 10
    reading = resolver.resolve("first-intent")
    assert reading.document_names == ["intent-fundamentals", "shortcuts-provider"]
    assert reading.items[0][1].title == "IF"
    assert reading.items[1][1] is None


def test_read(resolver):
    assert resolver.read("testing-intents").title == "Testing intents"
    with pytest.raises(DocumentNotFound):
        resolver.read("no-such-doc")
