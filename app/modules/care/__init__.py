"""Users, roles and the read-only care directory."""

from modules.care.directory import CareDirectory, InMemoryCareDirectory
from modules.care.models import (
    AdministratorProfile,
    DoctorProfile,
    PatientProfile,
    Role,
    UserRecord,
)

__all__ = [
    "CareDirectory",
    "InMemoryCareDirectory",
    "AdministratorProfile",
    "DoctorProfile",
    "PatientProfile",
    "Role",
    "UserRecord",
]
