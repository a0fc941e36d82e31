"""
graphbridge shared data models.

These models define the request and response envelopes exchanged with
callers of the bridge, over HTTP or the console.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

# Request Models (API Input)


class GraphOptions(BaseModel):
    """Options accepted by the graph command."""

    command: Optional[str] = Field(
        None,
        description="The Microsoft Graph CLI command to run, without the leading 'mgc' (e.g. 'users list').",
        max_length=8192,
    )


# Response Models (API Output)


class CommandResponse(BaseModel):
    """Response envelope for a bridged command."""

    status: int = Field(default=200, description="200 on success, 400 on invalid input, 500 on failure")
    message: str = Field(default="", description="Error message if failed")
    results: Optional[List[str]] = Field(None, description="Captured command output")
    duration_ms: Optional[int] = Field(None, description="Execution time in milliseconds")

    @property
    def succeeded(self) -> bool:
        return self.status == 200


class CommandInfo(BaseModel):
    """Description of a command exposed by the host."""

    name: str
    title: str
    description: str
    read_only: bool = True
    destructive: bool = False
    options: Dict[str, str] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Health status", pattern="^(healthy|degraded)$")
    executable: Optional[str] = Field(None, description="Resolved Graph CLI path")
    authenticated: bool = Field(False, description="Service principal login completed")
    version: str = Field(default="1.0.0", description="API version")
