"""Domain models for the document tree

Every path segment the server ever builds is a member of one of these
closed enumerations.
"""
from enum import Enum


class Skill(str, Enum):
    """Skills under skills/<name>/SKILL.md"""
    PROJECT_ORCHESTRATOR_DOC = "project-orchestrator-doc"
    FIT_API = "fit-api"
    FIT_MOBILE = "fit-mobile"


class CommonDoc(str, Enum):
    """Shared docs under docs/<name>.md"""
    DOMAIN_SPEC = "DOMAIN_SPEC"
    API_REGISTRY = "API_REGISTRY"
    PRD = "PRD"
    SPRINT_PLAN = "SPRINT_PLAN"


class AppName(str, Enum):
    """Application directories at the document root"""
    FIT_API = "fit-api"
    FIT_MOBILE = "fit-mobile"


class AppDoc(str, Enum):
    """Per-application docs under <app>/<name>.md"""
    ARCHITECTURE = "ARCHITECTURE"
    DATABASE = "DATABASE"
    SCREENS = "SCREENS"


def enum_values(enum_cls) -> list:
    """Legal string values of an enumeration, in declaration order"""
    return [member.value for member in enum_cls]
