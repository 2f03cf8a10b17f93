from __future__ import annotations

import httpx
import pytest

from backup_catalog.core.config import Settings
from backup_catalog.core.transport import RequestTransport
from backup_catalog.domain.errors import UnsupportedBackupTypeError
from backup_catalog.models.backup import Backup
from backup_catalog.schemas.workflows import Workflow
from backup_catalog.services.workflows import WorkflowDispatcher


@pytest.mark.asyncio
async def test_create_posts_type_and_params(api, transport, environment):
    api.add(
        "POST",
        "/workflows",
        json_body={"id": "wf-123", "type": "restore_files", "result": None, "site_id": environment.site_id},
    )
    dispatcher = WorkflowDispatcher(transport)

    workflow = await dispatcher.create(environment, "restore_files", {"key": "k", "bucket": "b"})

    assert isinstance(workflow, Workflow)
    assert workflow.id == "wf-123"
    assert workflow.type == "restore_files"
    # Unknown server fields are kept on the handle
    assert workflow.site_id == environment.site_id
    (request,) = api.requests
    assert request.method == "POST"
    assert request.url.path == f"/api/sites/{environment.site_id}/environments/live/workflows"
    assert api.body(request) == {"type": "restore_files", "params": {"key": "k", "bucket": "b"}}


@pytest.mark.asyncio
async def test_create_propagates_http_errors(api, transport, environment):
    api.add("POST", "/workflows", status_code=500, json_body={"error": "boom"})
    dispatcher = WorkflowDispatcher(transport)
    with pytest.raises(httpx.HTTPStatusError):
        await dispatcher.create(environment, "restore_code", {})


@pytest.mark.asyncio
async def test_create_rejects_empty_response(api, transport, environment):
    api.add("POST", "/workflows", json_body=None)
    dispatcher = WorkflowDispatcher(transport)
    with pytest.raises(KeyError):
        await dispatcher.create(environment, "restore_code", {})


@pytest.mark.asyncio
async def test_backup_restore_through_api(api, transport, environment, make_backup):
    api.add("POST", "/workflows", json_body={"id": "wf-9", "type": "restore_database"})
    backup = make_backup(
        id="20210101000000_backup_database",
        filename="site_live_database.sql.gz",
        workflows=WorkflowDispatcher(transport),
    )

    workflow = await backup.restore()

    assert workflow.id == "wf-9"
    assert api.body(api.requests[0]) == {
        "type": "restore_database",
        "params": {
            "key": f"{environment.site_id}/live/20210101000000_backup/site_live_database.sql.gz",
            "bucket": "pantheon-backups",
        },
    }


@pytest.mark.asyncio
async def test_unsupported_restore_sends_nothing(api, transport, make_backup):
    backup = make_backup(id="20210101000000_backup_other", workflows=WorkflowDispatcher(transport))
    with pytest.raises(UnsupportedBackupTypeError):
        await backup.restore()
    assert api.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "host, bucket",
    [
        ("terminus.pantheon.io", "pantheon-backups"),
        ("onebox.dev.example.test", "onebox-pantheon-backups"),
    ],
)
async def test_restore_bucket_follows_configured_host(api, environment, host, bucket):
    api.add("POST", "/workflows", json_body={"id": "wf-2", "type": "restore_files"})
    settings = Settings(host=host)
    backup = Backup(
        {"id": "20210101000000_backup_files", "filename": "files.tar.gz"},
        environment=environment,
        workflows=WorkflowDispatcher(RequestTransport(settings)),
        settings=settings,
    )

    await backup.restore()

    assert api.body(api.requests[0])["params"]["bucket"] == bucket
    assert api.requests[0].url.host == host
