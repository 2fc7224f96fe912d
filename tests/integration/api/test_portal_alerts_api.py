from uuid import uuid4

import pytest
from httpx import AsyncClient

from src.domain.entities import ClientPortalAlert, Project


@pytest.mark.asyncio
async def test_acknowledge_is_idempotent(client: AsyncClient, db_session):
    """
    Given two open alerts for a change order
    When the client acknowledges it twice
    Then the first call reports 2 and the second reports 0
    """
    project = Project(name="Smith Residence")
    db_session.add(project)
    db_session.add_all(
        [
            ClientPortalAlert(project_id=project.id, item_type="change_order", item_id="co-1"),
            ClientPortalAlert(project_id=project.id, item_type="change_order", item_id="co-1"),
            ClientPortalAlert(project_id=project.id, item_type="invoice", item_id="co-1"),
        ]
    )
    await db_session.commit()

    body = {"itemType": "change_order", "itemId": "co-1", "projectId": str(project.id)}
    first = await client.post("/client-portal-acknowledge-alert", json=body)
    second = await client.post("/client-portal-acknowledge-alert", json=body)

    assert first.status_code == 200
    assert first.json() == {"success": True, "acknowledged": 2}
    assert second.json() == {"success": True, "acknowledged": 0}


@pytest.mark.asyncio
async def test_acknowledge_missing_parameters(client: AsyncClient):
    response = await client.post(
        "/client-portal-acknowledge-alert", json={"itemType": "invoice", "projectId": str(uuid4())}
    )

    assert response.status_code == 400
    assert response.json()["code"] == "MISSING_PARAMETERS"
