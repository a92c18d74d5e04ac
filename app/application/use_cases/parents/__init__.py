"""Parent use cases: dashboard and child management."""

from app.application.use_cases.parents.child_management import ChildManagementService
from app.application.use_cases.parents.dashboard_operations import (
    ParentDashboardService,
)

__all__ = ["ChildManagementService", "ParentDashboardService"]
