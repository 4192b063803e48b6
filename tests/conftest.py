"""
Pytest configuration and shared fixtures

Common fixtures used across multiple test files are defined here.
"""
import pytest
import sys
from pathlib import Path

# Add project root to path so fit_docs_mcp imports without installing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


# =============================================================================
# Document Tree Fixtures
# =============================================================================

SAMPLE_DOCUMENTS = {
    "skills/project-orchestrator-doc/SKILL.md": "# Orchestrator\nRoute to fit-api or fit-mobile.\n",
    "skills/fit-api/SKILL.md": "# fit-api skill\n",
    "docs/PRD.md": "Hello",
    "docs/DOMAIN_SPEC.md": "# Domain\nWorkouts have sets.\n",
    "fit-api/ARCHITECTURE.md": "# API architecture\n",
    "fit-mobile/SCREENS.md": "# Screens\n- Home\n- Workout ✓\n",
}


@pytest.fixture
def docs_root(tmp_path):
    """Create a document tree with a few of the expected files.

    Use this for tests that read real documents through the router.
    """
    root = tmp_path / "docs_root"
    for relative, content in SAMPLE_DOCUMENTS.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def router(docs_root):
    """DocumentRouter over the sample document tree."""
    from fit_docs_mcp.operations.document_router import DocumentRouter
    return DocumentRouter(docs_root)


@pytest.fixture
def test_config(docs_root):
    """Config pointing at the sample document tree."""
    from fit_docs_mcp.config import Config, ServerConfig, PathConfig, TransportConfig, LoggingConfig
    return Config(
        server=ServerConfig(),
        paths=PathConfig(docs_root=docs_root),
        transport=TransportConfig(),
        logging=LoggingConfig(),
    )


@pytest.fixture
def mcp_handler(router):
    """McpHandler wired to the sample router."""
    from fit_docs_mcp.mcp_handler import McpHandler
    return McpHandler(router)


@pytest.fixture
def client(test_config):
    """FastAPI test client over the sample document tree."""
    from fastapi.testclient import TestClient
    from fit_docs_mcp.main import create_app
    return TestClient(create_app(test_config))
