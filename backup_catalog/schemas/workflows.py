from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class Workflow(BaseModel):
    """Handle for an asynchronous operation started on the platform.

    Only the fields needed to track the workflow are declared; the rest of the
    server payload is preserved as extra attributes.
    """

    id: str = Field(..., description="Workflow id used to poll for progress")
    type: Optional[str] = Field(None, description="Workflow name, e.g. restore_code")
    description: Optional[str] = None
    result: Optional[str] = None
    params: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="allow")
