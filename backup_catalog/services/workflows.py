from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from backup_catalog.core.transport import RequestTransport
from backup_catalog.models.environment import EnvironmentRef
from backup_catalog.schemas.workflows import Workflow


class WorkflowDispatcher:
    """Starts named workflows on an environment.

    Only the start call lives here; polling a workflow to completion is the
    caller's business.
    """

    def __init__(self, transport: RequestTransport) -> None:
        self.transport = transport
        self._logger = logging.getLogger(__name__)

    async def create(
        self,
        environment: EnvironmentRef,
        workflow_name: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Workflow:
        self._logger.info(
            "workflow_dispatch | site_id=%s env_id=%s workflow=%s",
            environment.site_id,
            environment.environment_id,
            workflow_name,
        )
        response = await self.transport.request(
            f"{environment.api_path}/workflows",
            method="POST",
            form_params={"type": workflow_name, "params": dict(params or {})},
        )
        if not isinstance(response.data, dict):
            raise KeyError("workflow_missing")
        workflow = Workflow.model_validate(response.data)
        self._logger.info(
            "workflow_dispatched | workflow=%s workflow_id=%s",
            workflow_name,
            workflow.id,
        )
        return workflow
