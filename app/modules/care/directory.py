"""Read-only access to users and vital history.

The alerting features never write stored entities; they only look up who
to notify and what was measured. CareDirectory is the seam where the
application's database layer plugs in. InMemoryCareDirectory backs tests
and small deployments.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Protocol, runtime_checkable

from modules.care.models import UserRecord
from modules.vitals.models import VitalReading


@runtime_checkable
class CareDirectory(Protocol):
    """Persistence collaborator consumed by the alerting service."""

    def get_user(self, user_id: str) -> Optional[UserRecord]:
        """Return the user, or None if unknown."""
        ...

    def vital_history(self, patient_id: str) -> List[VitalReading]:
        """Return the patient's readings, oldest first."""
        ...


class InMemoryCareDirectory:
    """Dictionary-backed CareDirectory.

    Constructed explicitly and passed to whoever needs it; there is no
    process-wide instance.

    Example:
        directory = InMemoryCareDirectory(users=[doctor, patient])
        directory.add_readings([reading])
    """

    def __init__(
        self,
        users: Iterable[UserRecord] = (),
        readings: Iterable[VitalReading] = (),
    ):
        self._users: Dict[str, UserRecord] = {}
        self._readings: Dict[str, List[VitalReading]] = defaultdict(list)
        for user in users:
            self.add_user(user)
        self.add_readings(readings)

    def add_user(self, user: UserRecord) -> None:
        self._users[user.user_id] = user

    def add_readings(self, readings: Iterable[VitalReading]) -> None:
        for reading in readings:
            self._readings[reading.subject_id].append(reading)

    def get_user(self, user_id: str) -> Optional[UserRecord]:
        return self._users.get(user_id)

    def vital_history(self, patient_id: str) -> List[VitalReading]:
        return sorted(self._readings.get(patient_id, []), key=lambda r: r.observed_at)
