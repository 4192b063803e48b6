"""Operation catalog

Static description of the three document operations: their arguments,
the enumeration each argument is drawn from, and the path template the
router fills in. Listing the catalog never touches the filesystem.
"""
from dataclasses import dataclass
from typing import Dict, Tuple, Type

from fit_docs_mcp.domain_models import Skill, CommonDoc, AppName, AppDoc, enum_values


@dataclass(frozen=True)
class OperationSpec:
    """One operation: name, purpose, enumerated arguments, path template.

    Template segments are str.format patterns over the argument names,
    joined beneath the document root.
    """
    name: str
    description: str
    arguments: Tuple[Tuple[str, Type], ...]
    template: Tuple[str, ...]

    @property
    def required(self) -> list:
        return [arg_name for arg_name, _ in self.arguments]

    def input_schema(self) -> Dict:
        """JSON schema declaring every argument as a string enumeration"""
        return {
            "type": "object",
            "properties": {
                arg_name: {"type": "string", "enum": enum_values(enum_cls)}
                for arg_name, enum_cls in self.arguments
            },
            "required": self.required,
        }

    def to_tool(self) -> Dict:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }


LOAD_SKILL = OperationSpec(
    name="load_skill",
    description="Load a skill. Start with 'project-orchestrator-doc' to route.",
    arguments=(("skill", Skill),),
    template=("skills", "{skill}", "SKILL.md"),
)

READ_COMMON = OperationSpec(
    name="read_common",
    description="Read shared docs (DOMAIN_SPEC, API_REGISTRY, PRD, SPRINT_PLAN)",
    arguments=(("file", CommonDoc),),
    template=("docs", "{file}.md"),
)

READ_APP_DOC = OperationSpec(
    name="read_app_doc",
    description="Read app-specific doc",
    arguments=(("app", AppName), ("file", AppDoc)),
    template=("{app}", "{file}.md"),
)

OPERATIONS = (LOAD_SKILL, READ_COMMON, READ_APP_DOC)

OPERATIONS_BY_NAME = {spec.name: spec for spec in OPERATIONS}
