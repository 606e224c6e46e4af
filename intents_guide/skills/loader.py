"""
Markdown-Based Skill 加载器

MarkdownSkill 数据类：承载从 SKILL.md 解析出的所有信息
- Tier 1：frontmatter（name, description）→ Skill 目录（始终加载）
- Tier 2：body（Markdown 正文，含任务路由说明）→ 被调用时注入给 LLM
- Tier 3：references/ 下的 .md 文件 → 参考文档，按路由表按需读取

SKILL.md 格式：
    ---
    name: app-intents
    description: Apple App Intents 框架参考（Siri / Shortcuts / Spotlight / Apple Intelligence）
    ---

    # Skill 正文（Tier 2）
    ...
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import structlog
import yaml

log = structlog.get_logger()

SKILL_FILE = "SKILL.md"
REFERENCES_DIR = "references"


# ── ReferenceDoc：Tier 3 参考文档 ──

@dataclass(frozen=True)
class ReferenceDoc:
    """
    references/ 下单个 Markdown 文档。

    命名规则：文件名（不含 .md）即文档名，与路由表中的 DocumentRef.name 对应。
    例："intent-fundamentals.md" → name="intent-fundamentals"
    """
    name: str
    title: str  # 第一个 "# " 标题，缺失时退化为 name
    body_md: str
    path: Path

    def render(self) -> str:
        """生成注入给 LLM 的文档文本"""
        return (
            f"[参考文档 - {self.name}]\n\n"
            f"---\n\n"
            f"{self.body_md}"
        )


# ── MarkdownSkill 数据类 ──

@dataclass
class MarkdownSkill:
    """
    从 SKILL.md 解析出的 Skill 完整定义。

    Tier 1（metadata）：name, description
    Tier 2（body）：body_md → 路由说明，被调用时注入为 tool result
    Tier 3（references）：name → ReferenceDoc，启动时一次性读入内存
    """
    name: str
    description: str
    body_md: str
    skill_dir: Path
    references: dict[str, ReferenceDoc] = field(default_factory=dict)

    def render_tool_result(self) -> str:
        """Tier 2 注入：生成注入给 LLM 的 tool result 字符串"""
        return (
            f"[Skill 执行指令 - {self.name}]\n\n"
            f"---\n\n"
            f"{self.body_md}"
        )

    @property
    def reference_names(self) -> list[str]:
        return list(self.references.keys())


# ── 解析工具函数 ──

def split_frontmatter(raw: str) -> tuple[dict, str] | None:
    """
    分割 frontmatter 和 body：格式为 ---\\n{yaml}\\n---\\n{body}

    Returns:
        (frontmatter dict, body) 或 None（缺少 frontmatter / YAML 非法时）
    """
    if not raw.startswith("---"):
        return None

    parts = raw.split("---", 2)
    # parts[0]="" (---之前), parts[1]=frontmatter yaml, parts[2]=body
    if len(parts) < 3:
        return None

    try:
        fm = yaml.safe_load(parts[1]) or {}
    except yaml.YAMLError as e:
        log.error("frontmatter YAML 解析失败", error=str(e))
        return None

    if not isinstance(fm, dict):
        return None
    return fm, parts[2].strip()


def _extract_title(body_md: str, fallback: str) -> str:
    """取正文第一个一级标题"""
    for line in body_md.splitlines():
        if line.startswith("# "):
            return line[2:].strip()
    return fallback


def load_reference(path: Path) -> ReferenceDoc:
    """读取单个参考文档；参考文档允许带 frontmatter，但不强制"""
    raw = path.read_text(encoding="utf-8")
    parsed = split_frontmatter(raw)
    body_md = parsed[1] if parsed else raw.strip()
    return ReferenceDoc(
        name=path.stem,
        title=_extract_title(body_md, path.stem),
        body_md=body_md,
        path=path,
    )


def load_skill_from_dir(skill_dir: Path) -> MarkdownSkill | None:
    """
    从单个 Skill 目录加载 MarkdownSkill。

    目录结构：
        skill_dir/
        ├── SKILL.md         ← 必须存在（frontmatter: name + description，body: 路由说明）
        └── references/      ← 可选，每个 .md 文件是一篇参考文档

    Returns:
        MarkdownSkill 或 None（目录不合法时）
    """
    skill_md_path = skill_dir / SKILL_FILE
    if not skill_md_path.exists():
        log.debug("跳过非 Skill 目录（缺少 SKILL.md）", dir=str(skill_dir))
        return None

    raw = skill_md_path.read_text(encoding="utf-8")

    parsed = split_frontmatter(raw)
    if parsed is None:
        log.warning("SKILL.md 缺少或无法解析 YAML frontmatter", path=str(skill_md_path))
        return None
    fm, body_md = parsed

    # 必填字段校验
    name = fm.get("name")
    description = fm.get("description")
    if not name or not description:
        log.error(
            "SKILL.md 缺少必填字段 name/description",
            path=str(skill_md_path),
            found_fields=list(fm.keys()),
        )
        return None

    references: dict[str, ReferenceDoc] = {}
    refs_dir = skill_dir / REFERENCES_DIR
    if refs_dir.is_dir():
        for md_file in sorted(refs_dir.glob("*.md")):
            if md_file.name.startswith("_"):
                continue
            references[md_file.stem] = load_reference(md_file)
            log.debug("发现参考文档", skill=name, document=md_file.stem)

    skill = MarkdownSkill(
        name=str(name),
        description=str(description),
        body_md=body_md,
        skill_dir=skill_dir,
        references=references,
    )

    log.info(
        "Skill 已加载",
        name=skill.name,
        reference_count=len(references),
        body_lines=len(body_md.splitlines()),
    )
    return skill


def scan_skills_dir(skills_root: Path) -> list[MarkdownSkill]:
    """
    扫描 Skills 根目录，加载所有合法的 MarkdownSkill。

    每个包含 SKILL.md 的子目录都被视为一个 Skill。
    """
    if not skills_root.exists():
        log.warning("Skills 根目录不存在", path=str(skills_root))
        return []

    skills: list[MarkdownSkill] = []
    for entry in sorted(skills_root.iterdir()):
        if entry.is_dir() and not entry.name.startswith("_"):
            skill = load_skill_from_dir(entry)
            if skill:
                skills.append(skill)

    log.info("Skills 扫描完成", count=len(skills), root=str(skills_root))
    return skills
