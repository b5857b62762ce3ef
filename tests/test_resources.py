from __future__ import annotations

from decimal import Decimal

import pytest

from procure_client.api.client import ApiClient
from procure_client.api.models import ApiResponse
from procure_client.errors.internal import ParsingError
from procure_client.resources import (
    AttachmentsAPI,
    AuthAPI,
    BudgetsAPI,
    CommunityAPI,
    DashboardAPI,
    PasswordResetAPI,
    ProvisionsAPI,
    RequestsAPI,
    UploadFile,
    UsersAPI,
    summarize_budgets,
)
from tests.fixtures.fake_http import RecordingTransport


@pytest.fixture
def client(recording_transport: RecordingTransport) -> ApiClient:
    return ApiClient(recording_transport)


def _form(descriptor) -> dict[str, object]:
    return {part.name: part.value for part in descriptor.form}


class TestRequestsAPI:
    @pytest.mark.asyncio
    async def test_get_requests_drops_empty_filters(self, client, recording_transport):
        await RequestsAPI(client).get_requests(
            page=2, page_size=20, status="pending", search="", urgency=None, min_amount=1500
        )
        sent = recording_transport.last
        assert (sent.method, sent.path) == ("GET", "/requests/")
        assert sent.params == {
            "page": "2",
            "page_size": "20",
            "status": "pending",
            "min_amount": "1500",
        }

    @pytest.mark.asyncio
    async def test_get_requests_without_filters_sends_no_query(self, client, recording_transport):
        await RequestsAPI(client).get_requests()
        assert recording_transport.last.params is None

    @pytest.mark.asyncio
    async def test_validate_without_files_is_json(self, client, recording_transport):
        await RequestsAPI(client).validate_request(
            42, "approve", comment="ok", budget_available=True, final_cost=1200
        )
        sent = recording_transport.last
        assert sent.path == "/requests/42/validate/"
        assert sent.form is None
        assert sent.json == {
            "action": "approve",
            "comment": "ok",
            "budget_available": True,
            "final_cost": 1200,
        }

    @pytest.mark.asyncio
    async def test_validate_with_files_is_multipart(self, client, recording_transport):
        files = [
            UploadFile("quote.pdf", b"%PDF-1.7", "application/pdf", file_type="quote"),
            UploadFile("invoice.png", b"\x89PNG", "image/png", description="Scanned invoice"),
        ]
        await RequestsAPI(client).validate_request(
            42, "approve", budget_available=False, final_cost=None, files=files
        )
        sent = recording_transport.last
        assert sent.json is None
        fields = _form(sent)
        assert fields["action"] == "approve"
        assert fields["budget_available"] == "false"
        assert "comment" not in fields and "final_cost" not in fields
        assert fields["file_0"] == b"%PDF-1.7"
        assert fields["description_0"] == "quote.pdf"
        assert fields["file_type_0"] == "quote"
        assert fields["description_1"] == "Scanned invoice"
        assert fields["file_type_1"] == "other"
        assert fields["files_count"] == "2"
        file_part = next(p for p in sent.form if p.name == "file_1")
        assert file_part.filename == "invoice.png"
        assert file_part.content_type == "image/png"

    @pytest.mark.asyncio
    async def test_detail_create_and_rejection_paths(self, client, recording_transport):
        api = RequestsAPI(client)
        await api.get_request(5)
        await api.create_request({"title": "Printer", "amount": "250000"})
        await api.update_rejection_reason(5, {"rejection_reason": "Over budget"})
        assert [(d.method, d.path) for d in recording_transport.sent] == [
            ("GET", "/requests/5/"),
            ("POST", "/requests/"),
            ("PATCH", "/requests/5/update-rejection/"),
        ]


class TestAuthAPI:
    @pytest.mark.asyncio
    async def test_auth_paths(self, client, recording_transport):
        api = AuthAPI(client)
        await api.login({"username": "amina", "password": "secret"})
        await api.get_current_user()
        await api.refresh_token()
        await api.change_password({"old_password": "a", "new_password": "b"})
        await api.update_profile(7, {"phone": "+221"})
        await api.logout()
        assert [(d.method, d.path) for d in recording_transport.sent] == [
            ("POST", "/auth/login/"),
            ("GET", "/auth/me/"),
            ("POST", "/auth/refresh/"),
            ("POST", "/auth/change-password/"),
            ("PATCH", "/users/7/"),
            ("POST", "/auth/logout/"),
        ]
        assert recording_transport.sent[0].json == {"username": "amina", "password": "secret"}

    @pytest.mark.asyncio
    async def test_password_reset_flow(self, client, recording_transport):
        recording_transport.queue(ApiResponse(200, {"detail": "sent"}))
        api = PasswordResetAPI(client)
        assert await api.request_reset("a@example.org") == {"detail": "sent"}
        await api.verify_code("a@example.org", "123456")
        await api.confirm_reset("tok", "N3w!pass", "N3w!pass")
        paths = [d.path for d in recording_transport.sent]
        assert paths == [
            "/auth/password-reset/request/",
            "/auth/password-reset/verify/",
            "/auth/password-reset/confirm/",
        ]
        assert recording_transport.last.json == {
            "token": "tok",
            "new_password": "N3w!pass",
            "confirm_password": "N3w!pass",
        }


class TestAttachmentsAPI:
    @pytest.mark.asyncio
    async def test_upload_builds_multipart(self, client, recording_transport):
        upload = UploadFile("bl.pdf", b"data", "application/pdf")
        await AttachmentsAPI(client).upload_attachment(
            {"request": 42, "file_type": "delivery_note", "description": None}, upload
        )
        sent = recording_transport.last
        assert (sent.method, sent.path) == ("POST", "/attachments/")
        fields = _form(sent)
        assert fields == {"request": "42", "file_type": "delivery_note", "file": b"data"}

    @pytest.mark.asyncio
    async def test_list_and_delete(self, client, recording_transport):
        api = AttachmentsAPI(client)
        await api.get_attachments(42)
        await api.delete_attachment(9)
        first, second = recording_transport.sent
        assert first.path == "/attachments/" and first.params == {"request_id": "42"}
        assert (second.method, second.path) == ("DELETE", "/attachments/9/delete/")


class TestUsersAPI:
    @pytest.mark.asyncio
    async def test_get_users_keeps_false_is_active(self, client, recording_transport):
        await UsersAPI(client).get_users(page=1, role="", is_active=False)
        assert recording_transport.last.params == {"page": "1", "is_active": "false"}

    @pytest.mark.asyncio
    async def test_user_crud_paths(self, client, recording_transport):
        api = UsersAPI(client)
        await api.create_user({"email": "n@example.org", "role": "accounting"})
        await api.get_user(3)
        await api.update_user(3, {"is_active": False})
        await api.get_users_stats()
        await api.delete_user(3)
        assert [(d.method, d.path) for d in recording_transport.sent] == [
            ("POST", "/auth/register/"),
            ("GET", "/users/3/"),
            ("PATCH", "/users/3/"),
            ("GET", "/users/stats/"),
            ("DELETE", "/users/3/"),
        ]


class TestBudgetsAPI:
    def test_summarize_budgets_treats_missing_as_zero(self):
        summary = summarize_budgets(
            [
                {"allocated_amount": "1000000.00", "committed_amount": 250000, "spent_amount": "100000"},
                {"allocated_amount": 500000, "available_amount": "n/a"},
                {},
            ]
        )
        assert summary.allocated == Decimal("1500000.00")
        assert summary.committed == Decimal("250000")
        assert summary.spent == Decimal("100000")
        assert summary.available == Decimal("0")

    @pytest.mark.asyncio
    async def test_create_requires_name_code_amount(self, client, recording_transport):
        with pytest.raises(ValueError, match="code"):
            await BudgetsAPI(client).create({"name": "IT", "code": " ", "allocated_amount": "10"})
        assert recording_transport.sent == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", ["abc", "12,5", "NaN", "Infinity"])
    async def test_create_rejects_non_numeric_amount(self, client, recording_transport, amount):
        with pytest.raises(ValueError, match="allocated_amount must be numeric"):
            await BudgetsAPI(client).create({"name": "IT", "code": "IT-1", "allocated_amount": amount})
        assert recording_transport.sent == []

    @pytest.mark.asyncio
    async def test_create_sends_numeric_amount(self, client, recording_transport):
        await BudgetsAPI(client).create({"name": "IT", "code": "IT-26", "allocated_amount": "1500.5"})
        assert recording_transport.last.json["allocated_amount"] == 1500.5
        assert recording_transport.last.path == "/budgets/projects/"

    @pytest.mark.asyncio
    async def test_summary_accepts_paginated_payload(self, client, recording_transport):
        recording_transport.queue(
            ApiResponse(200, {"results": [{"allocated_amount": 10}, {"allocated_amount": 5}]})
        )
        summary = await BudgetsAPI(client).summary()
        assert summary.allocated == Decimal("15")

    @pytest.mark.asyncio
    async def test_summary_rejects_unexpected_payload(self, client, recording_transport):
        recording_transport.queue(ApiResponse(200, "maintenance"))
        with pytest.raises(ParsingError):
            await BudgetsAPI(client).summary()

    @pytest.mark.asyncio
    async def test_update_and_stats_paths(self, client, recording_transport):
        api = BudgetsAPI(client)
        await api.update(4, {"status": "closed"})
        await api.stats()
        assert [(d.method, d.path) for d in recording_transport.sent] == [
            ("PATCH", "/budgets/projects/4/"),
            ("GET", "/budgets/stats/"),
        ]


class TestProvisionsAPI:
    @pytest.mark.asyncio
    async def test_list_filters(self, client, recording_transport):
        api = ProvisionsAPI(client)
        await api.list(status="all", scope="mine")
        assert recording_transport.last.params == {"scope": "mine"}
        await api.list()
        assert recording_transport.last.params is None

    @pytest.mark.asyncio
    async def test_reject_requires_reason(self, client, recording_transport):
        with pytest.raises(ValueError):
            await ProvisionsAPI(client).update(3, {"status": "rejected"})
        assert recording_transport.sent == []

        await ProvisionsAPI(client).update(3, {"status": "rejected", "rejection_reason": "No stock"})
        assert recording_transport.last.path == "/provisions/3/"

    @pytest.mark.asyncio
    async def test_create(self, client, recording_transport):
        await ProvisionsAPI(client).create({"title": "Projector", "priority": "normal"})
        assert (recording_transport.last.method, recording_transport.last.path) == ("POST", "/provisions/")


class TestCommunityAPI:
    @pytest.mark.asyncio
    async def test_report_lifecycle(self, client, recording_transport):
        api = CommunityAPI(client)
        await api.list_reports()
        await api.create_report({"title": "Broken AC", "description": "Room 2"})
        await api.add_comment(8, "Same in room 3")
        await api.update_report(8, {"status": "resolved"})
        sent = recording_transport.sent
        assert [(d.method, d.path) for d in sent] == [
            ("GET", "/community/reports/"),
            ("POST", "/community/reports/"),
            ("POST", "/community/reports/8/comments/"),
            ("PATCH", "/community/reports/8/"),
        ]
        assert sent[1].json["category"] == "other"
        assert sent[2].json == {"content": "Same in room 3"}

    @pytest.mark.asyncio
    async def test_blank_comment_is_rejected_locally(self, client, recording_transport):
        with pytest.raises(ValueError):
            await CommunityAPI(client).add_comment(8, "   ")
        assert recording_transport.sent == []


@pytest.mark.asyncio
async def test_dashboard(client, recording_transport):
    recording_transport.queue(ApiResponse(200, {"total_requests": 12}))
    assert await DashboardAPI(client).get_dashboard() == {"total_requests": 12}
    assert recording_transport.last.path == "/dashboard/"
