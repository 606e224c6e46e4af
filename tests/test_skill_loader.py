import re

from intents_guide.routing import get_routing_table
from intents_guide.skills import load_skill_from_dir, scan_skills_dir


def test_builtin_skill_has_every_routed_document(builtin_skill):
    assert builtin_skill.name == "app-intents"
    expected = {doc.name for doc in get_routing_table().documents}
    assert set(builtin_skill.reference_names) == expected


_HEADING = re.compile(r"^### (.+) \(`([a-z0-9-]+)`\)$")
_ITEM = re.compile(r"^\d+\. `([a-z0-9-]+)`$")


def parse_routing_section(body_md: str) -> dict[str, tuple[str, list[str]]]:
    """解析 SKILL.md 的 "### goal (`topic`)" 标题及其编号文档列表"""
    routes: dict[str, tuple[str, list[str]]] = {}
    current = None
    for line in body_md.splitlines():
        heading = _HEADING.match(line)
        if heading:
            current = heading.group(2)
            assert current not in routes, f"重复的 Topic: {current}"
            routes[current] = (heading.group(1), [])
            continue
        item = _ITEM.match(line)
        if item and current:
            routes[current][1].append(item.group(1))
        elif line.startswith("#"):
            current = None
    return routes


def test_skill_routing_section_matches_table(builtin_skill):
    table = get_routing_table()
    routes = parse_routing_section(builtin_skill.body_md)

    assert list(routes) == list(table.topics)
    for topic, (goal, documents) in routes.items():
        entry = table.entry(topic)
        assert goal == entry.goal
        assert documents == [doc.name for doc in table.lookup(topic)]


def test_routing_section_parser_detects_drift():
    body = "### Create your first App Intent (`first-intent`)\n1. `shortcuts-provider-x`\n2. `intent-fundamentals`\n"
    routes = parse_routing_section(body)
    assert routes == {"first-intent": ("Create your first App Intent", ["shortcuts-provider-x", "intent-fundamentals"])}
    assert routes["first-intent"][1] != [doc.name for doc in get_routing_table().lookup("first-intent")]


def test_reference_title_and_render(tmp_path, write_skill):
    skill_dir = write_skill(tmp_path, "demo", references={
        "alpha": "# Alpha guide\n\nSome text.\n",
        "beta": "no heading here\n",
        "_draft": "# hidden\n",
    })
    skill = load_skill_from_dir(skill_dir)

    assert skill.reference_names == ["alpha", "beta"]
    alpha = skill.references["alpha"]
    assert alpha.title == "Alpha guide"
    assert alpha.render().startswith("[参考文档 - alpha]")
    assert "Some text." in alpha.render()
    assert skill.references["beta"].title == "beta"


def test_reference_frontmatter_is_stripped(tmp_path, write_skill):
    skill_dir = write_skill(tmp_path, "demo", references={
        "alpha": "---\nowner: docs\n---\n# Alpha\n\nbody\n",
    })
    doc = load_skill_from_dir(skill_dir).references["alpha"]
    assert doc.body_md.startswith("# Alpha")
    assert "owner" not in doc.body_md


def test_missing_skill_md_returns_none(tmp_path):
    (tmp_path / "empty").mkdir()
    assert load_skill_from_dir(tmp_path / "empty") is None


def test_missing_frontmatter_returns_none(tmp_path):
    skill_dir = tmp_path / "bad"
    skill_dir.mkdir()
    (skill_dir / "SKILL.md").write_text("# no frontmatter\n", encoding="utf-8")
    assert load_skill_from_dir(skill_dir) is None


def test_invalid_yaml_returns_none(tmp_path):
    skill_dir = tmp_path / "bad"
    skill_dir.mkdir()
    (skill_dir / "SKILL.md").write_text("---\nname: [unclosed\n---\nbody\n", encoding="utf-8")
    assert load_skill_from_dir(skill_dir) is None


def test_missing_required_fields_returns_none(tmp_path):
    skill_dir = tmp_path / "bad"
    skill_dir.mkdir()
    (skill_dir / "SKILL.md").write_text("---\nname: bad\n---\nbody\n", encoding="utf-8")
    assert load_skill_from_dir(skill_dir) is None


def test_scan_skips_underscored_and_invalid_dirs(tmp_path, write_skill):
    write_skill(tmp_path, "one")
    write_skill(tmp_path, "two")
    write_skill(tmp_path, "_private")
    (tmp_path / "not-a-skill").mkdir()

    skills = scan_skills_dir(tmp_path)
    assert [s.name for s in skills] == ["one", "two"]


def test_scan_missing_root(tmp_path):
    assert scan_skills_dir(tmp_path / "nowhere") == []
