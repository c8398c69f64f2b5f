"""JSON-RPC 2.0 request envelope."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

JSONRPC_VERSION = "2.0"


class JsonRpcRequest(BaseModel):
    """Request object sent on the JSON-RPC path."""
    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    id: int | str = 1
    method: str = Field(min_length=1)
    params: dict[str, Any] | list[Any] = Field(default_factory=dict)

    def encode(self) -> bytes:
        return self.model_dump_json().encode("utf-8")
