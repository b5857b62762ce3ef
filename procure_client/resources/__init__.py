"""Domain call surface built on :class:`procure_client.api.ApiClient`."""

from .attachments import AttachmentsAPI, UploadFile
from .auth import AuthAPI, PasswordResetAPI
from .budgets import BudgetsAPI, BudgetSummary, summarize_budgets
from .community import CommunityAPI
from .dashboard import DashboardAPI
from .provisions import ProvisionsAPI
from .purchase_requests import RequestsAPI
from .users import UsersAPI

__all__ = [
    "AttachmentsAPI",
    "AuthAPI",
    "BudgetSummary",
    "BudgetsAPI",
    "CommunityAPI",
    "DashboardAPI",
    "PasswordResetAPI",
    "ProvisionsAPI",
    "RequestsAPI",
    "UploadFile",
    "UsersAPI",
    "summarize_budgets",
]
