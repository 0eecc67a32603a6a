"""User records for patients, doctors and administrators.

A record carries the fields every user has plus a role-specific profile.
The role is derived from the profile type, so a record cannot claim to be
a doctor while holding patient data.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional, Union

from infrastructure.notifications.errors import InvalidAddress


class Role(Enum):
    PATIENT = "patient"
    DOCTOR = "doctor"
    ADMINISTRATOR = "administrator"


@dataclass(frozen=True)
class PatientProfile:
    birth_date: Optional[date] = None
    admission_date: Optional[date] = None
    treating_doctor_id: Optional[str] = None


@dataclass(frozen=True)
class DoctorProfile:
    specialization: str = ""
    joining_date: Optional[date] = None


@dataclass(frozen=True)
class AdministratorProfile:
    pass


Profile = Union[PatientProfile, DoctorProfile, AdministratorProfile]

_ROLE_BY_PROFILE = {
    PatientProfile: Role.PATIENT,
    DoctorProfile: Role.DOCTOR,
    AdministratorProfile: Role.ADMINISTRATOR,
}


@dataclass(frozen=True)
class UserRecord:
    """A user as supplied by the persistence collaborator.

    Attributes:
        user_id: Unique user identifier.
        name: Display name.
        email: Email address, if known.
        phone: Phone number in E.164 format, if known.
        gender: Free-form, as recorded.
        profile: Role-specific data; determines the role.
    """

    user_id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    gender: Optional[str] = None
    profile: Profile = field(default_factory=PatientProfile)

    @property
    def role(self) -> Role:
        return _ROLE_BY_PROFILE[type(self.profile)]

    @property
    def is_patient(self) -> bool:
        return self.role == Role.PATIENT

    @property
    def is_doctor(self) -> bool:
        return self.role == Role.DOCTOR

    def contact_for(self, channel_name: str) -> str:
        """Return the address to use for this user on a channel.

        Raises:
            InvalidAddress: The channel is unknown or the user has no
                address for it.
        """
        if channel_name == "email":
            address = self.email
        elif channel_name == "sms":
            address = self.phone
        else:
            raise InvalidAddress(
                f"No contact mapping for channel '{channel_name}'",
                channel=channel_name,
            )

        if not address or not address.strip():
            raise InvalidAddress(
                f"User {self.user_id} has no {channel_name} contact on record",
                channel=channel_name,
            )
        return address.strip()
