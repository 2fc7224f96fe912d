from uuid import uuid4

import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.domain.entities import (
    ChangeOrder,
    ClientPortalAccess,
    Membership,
    MembershipRole,
    MembershipStatus,
    Project,
    TeamMemberNotification,
)


@pytest.fixture
def tenant_id():
    return uuid4()


async def _seed_change_order(db_session, tenant_id, **member_fields):
    creator_id = uuid4()
    member = Membership(
        tenant_id=tenant_id,
        user_id=creator_id,
        name="Sam Lee",
        phone="(510) 555-0142",
        role=MembershipRole.admin,
        status=MembershipStatus.active,
    )
    for key, value in member_fields.items():
        setattr(member, key, value)
    project = Project(tenant_id=tenant_id, name="Smith Residence", address="12 Oak St")
    change_order = ChangeOrder(project_id=project.id, co_number="7", created_by=creator_id)
    db_session.add_all([member, project, change_order])
    await db_session.commit()
    return project, change_order


@pytest.mark.asyncio
async def test_approval_notification_sent(client: AsyncClient, db_session, sms, tenant_id):
    """
    Given a change order created by a team member with a valid phone
    When the client approves it
    Then the creator receives an SMS and an in-app notification
    """
    project, change_order = await _seed_change_order(db_session, tenant_id)

    response = await client.post(
        "/notify-change-order-approval",
        json={
            "changeOrderId": str(change_order.id),
            "projectId": str(project.id),
            "clientName": "Jane Smith",
            "coNumber": "7",
            "amount": 1234.5,
        },
    )

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Notification sent",
        "recipientName": "Sam Lee",
    }
    to, body = sms.sent[0]
    assert to == "+15105550142"
    assert "Jane Smith at 12 Oak St approved Change Order #7 for $1,235." in body

    notifications = (await db_session.exec(select(TeamMemberNotification))).all()
    assert len(notifications) == 1
    assert notifications[0].reference_id == str(change_order.id)


@pytest.mark.asyncio
async def test_disabled_notifications_send_nothing(client: AsyncClient, db_session, sms, tenant_id):
    project, change_order = await _seed_change_order(
        db_session, tenant_id, sms_notifications_enabled=False
    )

    response = await client.post(
        "/notify-change-order-approval",
        json={"changeOrderId": str(change_order.id), "projectId": str(project.id)},
    )

    assert response.status_code == 200
    assert response.json() == {"success": False, "message": "SMS notifications disabled"}
    assert sms.sent == []


@pytest.mark.asyncio
async def test_approval_unknown_change_order(client: AsyncClient):
    response = await client.post(
        "/notify-change-order-approval",
        json={"changeOrderId": str(uuid4()), "projectId": str(uuid4())},
    )

    assert response.status_code == 404
    assert response.json()["code"] == "CHANGE_ORDER_NOT_FOUND"


@pytest.mark.asyncio
async def test_approval_missing_parameters(client: AsyncClient):
    response = await client.post("/notify-change-order-approval", json={"projectId": str(uuid4())})

    assert response.status_code == 400
    assert response.json()["code"] == "MISSING_PARAMETERS"


async def _seed_project(db_session, client_phone="510.555.0199", slug="smith-residence"):
    project = Project(name="Smith Residence", client_phone=client_phone)
    db_session.add(project)
    if slug:
        db_session.add(ClientPortalAccess(project_id=project.id, url_slug=slug))
    await db_session.commit()
    return project


@pytest.mark.asyncio
async def test_catchup_sent_with_portal_link(client: AsyncClient, db_session, sms):
    """
    Given a project with a client phone and a portal slug
    When a catch-up is requested
    Then the client gets an SMS linking the portal
    And the project is stamped as notified
    """
    project = await _seed_project(db_session)

    response = await client.post(
        "/send-client-portal-catchup",
        json={
            "projectId": str(project.id),
            "projectName": "Smith Residence",
            "updatesSummary": "Roof panels delivered.",
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["smsSent"] is True
    assert data["portalUrl"].endswith("/client-portal/smith-residence")
    to, body = sms.sent[0]
    assert to == "+15105550199"
    assert "Roof panels delivered." in body

    await db_session.refresh(project)
    assert project.client_last_notified_at is not None


@pytest.mark.asyncio
async def test_catchup_rejects_bad_client_phone(client: AsyncClient, db_session, sms):
    project = await _seed_project(db_session, client_phone="555-0199", slug=None)

    response = await client.post(
        "/send-client-portal-catchup",
        json={"projectId": str(project.id), "projectName": "Smith Residence"},
    )

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_CLIENT_PHONE"
    assert sms.sent == []


@pytest.mark.asyncio
async def test_catchup_delivery_failure_reports_portal(client: AsyncClient, db_session, sms):
    """
    Given the SMS provider rejects the message
    When a catch-up is requested
    Then the response is 500 with the portal URL and the provider error
    """
    project = await _seed_project(db_session)
    sms.failure = {"code": 21211, "message": "Invalid 'To' Phone Number"}

    response = await client.post(
        "/send-client-portal-catchup",
        json={"projectId": str(project.id), "projectName": "Smith Residence"},
    )

    assert response.status_code == 500
    data = response.json()
    assert data["code"] == "SMS_FAILED"
    assert data["portalUrl"].endswith("/client-portal/smith-residence")
    assert data["twilioError"] == {"code": 21211, "message": "Invalid 'To' Phone Number"}
