"""
Artwork entity as seen by the similarity engine.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Union

Year = Union[int, float, str]

UNKNOWN_ATTRIBUTION = "@unknown"


@dataclass(frozen=True)
class Artwork:
    """
    Read-only view of a gallery artwork.

    Only the attributes that take part in similarity scoring are kept.
    Features are stored as a tuple so an artwork cannot change during a
    scoring pass.
    """

    id: str
    title: str = ""
    artist: Optional[str] = None
    features: Optional[tuple[float, ...]] = None
    medium: Optional[str] = None
    year: Optional[Year] = None
    file_type: Optional[str] = None
    is_approved: bool = True

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Artwork id cannot be empty")
        if self.features is not None and not isinstance(self.features, tuple):
            object.__setattr__(self, "features", tuple(self.features))

    def has_feature_vector(self) -> bool:
        """Return True when the artwork carries a non-empty feature vector."""
        return bool(self.features)

    @property
    def attribution(self) -> str:
        """Display attribution, e.g. ``@username``; ``@unknown`` without an artist."""
        if not self.artist or not self.artist.strip():
            return UNKNOWN_ATTRIBUTION
        return f"@{self.artist}"

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Artwork":
        """
        Build an Artwork from a storage row.

        Accepts either a flat ``artist`` key or the joined
        ``profiles: {"username": ...}`` shape returned by the backend.
        Non-list ``features`` values are treated as absent.
        """
        artist = record.get("artist")
        profiles = record.get("profiles")
        if artist is None and isinstance(profiles, Mapping):
            artist = profiles.get("username")

        features = record.get("features")
        if not isinstance(features, (list, tuple)):
            features = None

        return cls(
            id=str(record["id"]),
            title=record.get("title") or "",
            artist=artist,
            features=_as_tuple(features),
            medium=record.get("medium"),
            year=record.get("year"),
            file_type=record.get("file_type"),
            is_approved=bool(record.get("is_approved", True)),
        )


def _as_tuple(values: Optional[Sequence[float]]) -> Optional[tuple[float, ...]]:
    if values is None:
        return None
    return tuple(values)
