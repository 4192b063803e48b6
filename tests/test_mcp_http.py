"""Tests for MCP HTTP endpoint (routes/mcp.py).

Tests JSON-RPC 2.0 over HTTP, the document tools, SSE streaming, and error handling.
"""
import json


class TestMCPInfoEndpoint:
    """Test GET /mcp endpoint (server info)."""

    def test_mcp_info_returns_server_capabilities(self, client):
        """GET /mcp should return server info and tool names."""
        response = client.get("/mcp")

        assert response.status_code == 200
        data = response.json()

        assert data["name"] == "fit-common"
        assert data["version"] == "2.0.0"
        assert data["protocol"] == "MCP Streamable HTTP"
        assert data["tools"] == ["load_skill", "read_common", "read_app_doc"]


class TestMCPInitialize:
    """Test JSON-RPC initialize method."""

    def test_initialize_returns_server_info(self, client):
        request_data = {
            "jsonrpc": "2.0",
            "id": 1,
            "method": "initialize",
            "params": {
                "protocolVersion": "2024-11-05",
                "capabilities": {},
                "clientInfo": {"name": "test-client", "version": "1.0.0"},
            },
        }

        response = client.post("/mcp", json=request_data)

        assert response.status_code == 200
        data = response.json()
        assert data["jsonrpc"] == "2.0"
        assert data["id"] == 1
        assert data["result"]["serverInfo"]["name"] == "fit-common"
        assert "error" not in data

    def test_initialized_notification_accepted(self, client):
        response = client.post("/mcp", json={"jsonrpc": "2.0", "method": "notifications/initialized"})

        assert response.status_code == 202
        assert response.content == b""


class TestMCPToolsList:
    """Test JSON-RPC tools/list method."""

    def test_tools_list_returns_all_tools(self, client):
        response = client.post("/mcp", json={"jsonrpc": "2.0", "id": 1, "method": "tools/list"})

        assert response.status_code == 200
        tools = response.json()["result"]["tools"]
        assert len(tools) == 3
        for tool in tools:
            assert "name" in tool
            assert "description" in tool
            assert tool["inputSchema"]["type"] == "object"

    def test_read_common_tool_has_enum(self, client):
        response = client.post("/mcp", json={"jsonrpc": "2.0", "id": 1, "method": "tools/list"})
        tools = response.json()["result"]["tools"]

        read_common = next(t for t in tools if t["name"] == "read_common")
        assert read_common["inputSchema"]["required"] == ["file"]
        assert read_common["inputSchema"]["properties"]["file"]["enum"] == [
            "DOMAIN_SPEC", "API_REGISTRY", "PRD", "SPRINT_PLAN"
        ]


class TestMCPToolsCall:
    """Test JSON-RPC tools/call method."""

    def call(self, client, name, arguments, headers=None):
        request_data = {
            "jsonrpc": "2.0",
            "id": 1,
            "method": "tools/call",
            "params": {"name": name, "arguments": arguments},
        }
        return client.post("/mcp", json=request_data, headers=headers or {})

    def test_read_common_returns_contents(self, client):
        response = self.call(client, "read_common", {"file": "PRD"})

        assert response.status_code == 200
        data = response.json()
        assert data["result"]["content"][0]["type"] == "text"
        assert data["result"]["content"][0]["text"] == "Hello"
        assert data["result"]["isError"] is False

    def test_load_skill(self, client):
        response = self.call(client, "load_skill", {"skill": "fit-api"})
        assert response.json()["result"]["content"][0]["text"] == "# fit-api skill\n"

    def test_read_app_doc_unicode(self, client):
        response = self.call(client, "read_app_doc", {"app": "fit-mobile", "file": "SCREENS"})
        assert "Workout ✓" in response.json()["result"]["content"][0]["text"]

    def test_missing_document_is_error_text(self, client):
        response = self.call(client, "read_app_doc", {"app": "fit-api", "file": "DATABASE"})

        assert response.status_code == 200
        data = response.json()
        assert "error" not in data
        assert data["result"]["isError"] is True
        assert data["result"]["content"][0]["text"].startswith("Error:")

    def test_unknown_tool_returns_error(self, client):
        response = self.call(client, "unknown_tool", {})

        data = response.json()
        assert data["result"]["isError"] is True
        assert "Unknown tool" in data["result"]["content"][0]["text"]

    def test_tool_call_streams_when_sse_accepted(self, client):
        response = self.call(
            client, "read_common", {"file": "PRD"},
            headers={"Accept": "application/json, text/event-stream"},
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/event-stream")
        body = response.text
        assert body.startswith("data: ")
        payload = json.loads(body[len("data: "):].strip())
        assert payload["id"] == 1
        assert payload["result"]["content"][0]["text"] == "Hello"

    def test_tools_list_stays_json_with_sse_accept(self, client):
        response = client.post(
            "/mcp",
            json={"jsonrpc": "2.0", "id": 1, "method": "tools/list"},
            headers={"Accept": "application/json, text/event-stream"},
        )
        assert response.headers["content-type"].startswith("application/json")


class TestMCPErrors:
    """Protocol-level errors."""

    def test_parse_error(self, client):
        response = client.post(
            "/mcp", content=b"{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        data = response.json()
        assert data["error"]["code"] == -32700
        assert data["id"] is None

    def test_unknown_method(self, client):
        response = client.post("/mcp", json={"jsonrpc": "2.0", "id": 5, "method": "prompts/list"})

        data = response.json()
        assert data["error"]["code"] == -32601
        assert data["id"] == 5
        assert "result" not in data

    def test_invalid_envelope(self, client):
        response = client.post("/mcp", json={"jsonrpc": "2.0", "id": 5})
        assert response.json()["error"]["code"] == -32600
