from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple


@dataclass(frozen=True)
class RegistryEntry:
    id: str
    name: str
    date: Optional[str] = None
    description: Optional[str] = None
    photos: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Guess:
    """
    Unverified identification produced by the vision model.

    ``matched`` is the model's own claim that ``name`` is one of the registry
    names it was shown. It only gates matching; similarity is always recomputed.
    """
    name: str
    date: Optional[str] = None
    description: Optional[str] = None
    matched: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Guess":
        """
        Build a Guess from an untyped mapping (e.g. the vision model's JSON).

        A missing or non-string name becomes an empty name, and ``matched`` is
        only true when the value is exactly the boolean ``True``.
        """
        name = data.get("name")
        return cls(
            name=name if isinstance(name, str) else "",
            date=_optional_text(data.get("date")),
            description=_optional_text(data.get("description")),
            matched=data.get("matched") is True,
        )


def _optional_text(value: Any) -> Optional[str]:
    # Models sometimes emit bare years ("date": 1895)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, str):
        return value
    return None
