from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any


# JSON-RPC 2.0 Models
class JsonRpcRequest(BaseModel):
    jsonrpc: str = Field(default="2.0", pattern="^2\\.0$")
    id: Optional[int | str] = None
    method: str
    params: Optional[Dict[str, Any]] = None

    @property
    def is_notification(self) -> bool:
        """Requests without an id (or in the notifications/ namespace) get no reply"""
        return "id" not in self.model_fields_set or self.method.startswith("notifications/")


class JsonRpcError(BaseModel):
    code: int
    message: str
    data: Optional[Any] = None


class JsonRpcResponse(BaseModel):
    jsonrpc: str = "2.0"
    id: Optional[int | str] = None
    result: Optional[Any] = None
    error: Optional[JsonRpcError] = None

    def to_wire(self) -> Dict[str, Any]:
        """Serialize for the wire.

        Success responses carry no error member and error responses no
        result member; id is always present, null when unknown.
        """
        data = self.model_dump(exclude_none=True)
        if self.error is not None:
            data.pop("result", None)
        else:
            data.pop("error", None)
            data["result"] = self.result if self.result is not None else {}
        data["id"] = self.id
        return data


# MCP Protocol Types
class Tool(BaseModel):
    name: str
    description: str
    inputSchema: Dict[str, Any]


class ToolListResult(BaseModel):
    tools: List[Tool]


class ToolCallResult(BaseModel):
    content: List[Dict[str, str]]
    isError: bool = False


class HealthResponse(BaseModel):
    status: str
    server: str
    version: str
    docs_root: str
    docs_root_exists: bool
    tools: List[str]
