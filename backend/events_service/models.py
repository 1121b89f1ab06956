"""
Bike event types.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Union


def _number(value: Any) -> Union[int, float]:
    # DOUBLE PRECISION columns come back as floats; keep whole distances whole.
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


class EventType(str, Enum):
    GRAVEL = "Gravel"
    ROAD = "Road"


@dataclass(frozen=True)
class Event:
    name: str
    date: str  # free-form, e.g. "27/02/1898"
    description: str
    distance: Union[int, float]
    image: str
    type: EventType

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Event":
        """
        Build an Event from a row of the events table.

        Raises:
            KeyError: If a column is missing.
            ValueError: If the type is neither Gravel nor Road.
        """
        return cls(
            name=row["name"],
            date=row["date"],
            description=row["description"],
            distance=_number(row["distance"]),
            image=row["image"],
            type=EventType(row["type"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "date": self.date,
            "description": self.description,
            "distance": self.distance,
            "image": self.image,
            "type": self.type.value,
        }
