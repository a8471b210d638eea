# SPDX-License-Identifier: MIT
"""Application services for the sitepub CLI.

Services implement the publish run, coordinating between the domain layer
(core/) and infrastructure (platform/).
"""

from sitepub.services.audit import AuditLog
from sitepub.services.build import BuildVerifier
from sitepub.services.maintenance import MaintenanceWindow
from sitepub.services.notes import ReleaseNotes, ReleaseNotesProvider
from sitepub.services.orchestrator import PublishOrchestrator, RunReport
from sitepub.services.publish import PublishInvoker

__all__ = [
    "AuditLog",
    "BuildVerifier",
    "MaintenanceWindow",
    "PublishInvoker",
    "PublishOrchestrator",
    "ReleaseNotes",
    "ReleaseNotesProvider",
    "RunReport",
]
