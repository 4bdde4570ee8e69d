"""Sex value object - biological sex for BMR."""

from enum import Enum


class Sex(str, Enum):
    """Biological sex used by the Mifflin-St Jeor equation."""

    MALE = "male"
    FEMALE = "female"
