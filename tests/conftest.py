from pathlib import Path

import pytest

from intents_guide.routing import GuideResolver, get_routing_table
from intents_guide.skills import BUILTIN_SKILLS_DIR, load_skill_from_dir


@pytest.fixture
def write_skill():
    """工厂 fixture：在 root 下生成一个最小 Skill 目录，返回目录路径"""

    def _write(root: Path, name: str, description: str = "test skill", references: dict | None = None) -> Path:
        skill_dir = root / name
        (skill_dir / "references").mkdir(parents=True)
        (skill_dir / "SKILL.md").write_text(
            f"---\nname: {name}\ndescription: {description}\n---\n\n# {name}\n\nbody\n",
            encoding="utf-8",
        )
        for doc_name, body in (references or {}).items():
            (skill_dir / "references" / f"{doc_name}.md").write_text(body, encoding="utf-8")
        return skill_dir

    return _write


@pytest.fixture
def builtin_skill():
    skill = load_skill_from_dir(BUILTIN_SKILLS_DIR / "app-intents")
    assert skill is not None
    return skill


@pytest.fixture
def resolver(builtin_skill):
    return GuideResolver(get_routing_table(), builtin_skill)
