from datetime import date
from typing import List, Optional

from userposts.api.schemas.schemas import UserCreate
from userposts.core.exceptions import ValidationFailed, Violation

NAME_MIN_LENGTH = 2


def validate_user(user: UserCreate, today: Optional[date] = None) -> List[Violation]:
    today = today or date.today()
    violations = []
    if len(user.name) < NAME_MIN_LENGTH:
        violations.append(Violation("name", "Name should have atleast 2 characters"))
    if not user.birth_date < today:
        violations.append(Violation("birthDate", "must be a past date"))
    return violations


def ensure_valid_user(user: UserCreate) -> None:
    violations = validate_user(user)
    if violations:
        raise ValidationFailed(violations)
