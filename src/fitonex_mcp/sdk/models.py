"""
FitONEX record types.

Immutable records exchanged with the API. Decoding ignores unknown keys
so newer servers can add fields; a missing required field or a non-object
payload is a decode failure.
"""

from dataclasses import MISSING, asdict, dataclass, fields
from datetime import datetime
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

from fitonex_mcp.sdk.errors import ApiDecodeError

T = TypeVar("T")

_SCALARS = (str, int, float, bool)


def _is_instance(value: Any, expected: type) -> bool:
    # bool is an int subclass but never a valid number here; ints are valid floats
    if isinstance(value, bool):
        return expected is bool
    if expected is float:
        return isinstance(value, (int, float))
    return isinstance(value, expected)


class Record:
    """Mixin for flat dataclass records."""

    @classmethod
    def from_dict(cls, d: Any):
        if not isinstance(d, dict):
            raise ApiDecodeError(f"{cls.__name__}: expected object, got {type(d).__name__}")
        known = {f.name for f in fields(cls)}
        try:
            record = cls(**{k: v for k, v in d.items() if k in known})
        except TypeError as e:
            raise ApiDecodeError(f"{cls.__name__}: {e}") from e
        return cls._check_required(record)

    @classmethod
    def _check_required(cls, record):
        """Reject nulls and wrong scalar types in fields without a default."""
        for f in fields(cls):
            if f.default is not MISSING or f.default_factory is not MISSING:
                continue
            if f.type not in _SCALARS:
                continue
            value = getattr(record, f.name)
            if not _is_instance(value, f.type):
                raise ApiDecodeError(
                    f"{cls.__name__}.{f.name}: expected {f.type.__name__}, got {type(value).__name__}"
                )
        return record

    def to_dict(self) -> dict:
        return asdict(self)


def decode_list(item_type, data: Any) -> list:
    if not isinstance(data, list):
        raise ApiDecodeError(f"Expected list of {item_type.__name__}, got {type(data).__name__}")
    return [item_type.from_dict(d) for d in data]


# ── Auth / profile ───────────────────────────────────────────────────────

@dataclass(frozen=True)
class User(Record):
    id: str
    email: str
    name: str
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class AuthResponse(Record):
    token: str
    user: User

    @classmethod
    def from_dict(cls, d: Any) -> "AuthResponse":
        if not isinstance(d, dict) or "token" not in d or "user" not in d:
            raise ApiDecodeError("AuthResponse: expected {token, user}")
        return cls._check_required(cls(token=d["token"], user=User.from_dict(d["user"])))


# ── Gyms ─────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Gym(Record):
    """A gym. distance_m and avg_rating are computed by the server per request."""
    id: str
    name: str
    lat: float
    lng: float
    address: str
    created_at: str
    phone: Optional[str] = None
    website: Optional[str] = None
    distance_m: Optional[float] = None
    avg_rating: Optional[float] = None
    machines_count: int = 0
    price_from_cents: Optional[int] = None


@dataclass(frozen=True)
class GymPrice(Record):
    gym_id: str
    plan_name: str
    price_cents: int
    period: str


@dataclass(frozen=True)
class GymReview(Record):
    id: str
    gym_id: str
    user_id: str
    rating: int
    created_at: str
    comment: Optional[str] = None
    user_name: Optional[str] = None


@dataclass(frozen=True)
class Machine(Record):
    id: str
    name: str
    body_part: str
    created_at: str


# ── Videos ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class InstructionVideo(Record):
    id: str
    machine_id: str
    uploader_id: str
    title: str
    video_key: str
    created_at: str
    description: Optional[str] = None
    thumb_key: Optional[str] = None
    duration_sec: Optional[int] = None
    like_count: int = 0
    is_liked: bool = False
    uploader_name: Optional[str] = None
    machine_name: Optional[str] = None


@dataclass(frozen=True)
class UploadTarget(Record):
    """Pre-signed upload URLs and the storage keys to finalize with."""
    upload_url: str
    video_key: str
    thumb_upload_url: Optional[str] = None
    thumb_key: Optional[str] = None


# ── Check-ins ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Checkin(Record):
    id: str
    user_id: str
    day: str
    created_at: str


@dataclass(frozen=True)
class CheckinToday(Record):
    checkin: Checkin
    inserted: bool

    @classmethod
    def from_dict(cls, d: Any) -> "CheckinToday":
        if not isinstance(d, dict) or "checkin" not in d:
            raise ApiDecodeError("CheckinToday: expected {checkin, inserted}")
        return cls(checkin=Checkin.from_dict(d["checkin"]), inserted=bool(d.get("inserted", False)))


@dataclass(frozen=True)
class CheckinStats(Record):
    current_streak_days: int
    longest_streak_days: int
    last_checkin_day: Optional[str] = None


# ── Exercises ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class SetInput(Record):
    """A set as submitted when logging an exercise."""
    set_index: int
    reps: int
    weight_kg: Optional[float] = None
    rpe: Optional[float] = None
    notes: Optional[str] = None

    def validate(self):
        """Apply the server's set rules before sending.

        Raises:
            ValueError: If the set is invalid.
        """
        if self.set_index < 0:
            raise ValueError("set_index must be >= 0")
        if self.reps <= 0:
            raise ValueError("reps must be greater than 0")
        if self.weight_kg is not None and self.weight_kg < 0:
            raise ValueError("weight must be non-negative")
        if self.rpe is not None and not 1 <= self.rpe <= 10:
            raise ValueError("rpe must be between 1 and 10")


@dataclass(frozen=True)
class ExerciseSet(Record):
    id: str
    exercise_id: str
    set_index: int
    reps: int
    weight_kg: Optional[float] = None
    rpe: Optional[float] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class Exercise(Record):
    """A logged exercise. sets are kept ordered by set_index."""
    id: str
    user_id: str
    name: str
    created_at: str
    gym_id: Optional[str] = None
    machine_id: Optional[str] = None
    sets: Tuple[ExerciseSet, ...] = ()
    gym_name: Optional[str] = None
    machine_name: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "sets", tuple(sorted(self.sets, key=lambda s: s.set_index)))

    @classmethod
    def from_dict(cls, d: Any) -> "Exercise":
        if not isinstance(d, dict):
            raise ApiDecodeError(f"Exercise: expected object, got {type(d).__name__}")
        sets = tuple(decode_list(ExerciseSet, d.get("sets") or []))
        return super().from_dict({**d, "sets": sets})

    def to_dict(self) -> dict:
        d = asdict(self)
        d["sets"] = [s.to_dict() for s in self.sets]
        return d


def validate_day(day: str) -> str:
    """Check a YYYY-MM-DD calendar day and return it stripped."""
    day = (day or "").strip()
    try:
        parsed = datetime.strptime(day, "%Y-%m-%d").date()
    except ValueError:
        parsed = None
    # strptime also accepts unpadded months and days
    if parsed is None or parsed.isoformat() != day:
        raise ValueError(f"day must be a valid YYYY-MM-DD date, got {day!r}")
    return day


# ── Workouts ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Workout(Record):
    """A saved workout template. duration is in minutes."""
    id: str
    user_id: str
    name: str
    created_at: str
    updated_at: str
    description: str = ""
    duration: int = 0
    type: str = ""


# ── Search ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class SearchHit(Record):
    """A gym or machine matched by name. address is set for gyms, body_part for machines."""
    id: str
    name: str
    score: float
    address: Optional[str] = None
    body_part: Optional[str] = None


# ── Pagination ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Page(Generic[T]):
    """One batch of items plus continuation state."""
    items: Tuple[T, ...] = ()
    next_cursor: Optional[str] = None
    has_more: bool = False

    @property
    def next(self) -> Optional[str]:
        """Cursor for the following page, or None when this page is the last."""
        if not self.has_more:
            return None
        return self.next_cursor or None

    @classmethod
    def from_dict(cls, d: Any, decode_item: Callable[[Any], T]) -> "Page[T]":
        if not isinstance(d, dict):
            raise ApiDecodeError(f"Page: expected object, got {type(d).__name__}")
        items = d.get("items") or []
        if not isinstance(items, list):
            raise ApiDecodeError("Page: items must be a list")
        return cls(
            items=tuple(decode_item(i) for i in items),
            next_cursor=d.get("next_cursor"),
            has_more=bool(d.get("has_more", False)),
        )

    def to_dict(self) -> dict:
        return {
            "items": [i.to_dict() if hasattr(i, "to_dict") else i for i in self.items],
            "next_cursor": self.next_cursor,
            "has_more": self.has_more,
        }


@dataclass(frozen=True)
class GymReviews:
    """Review listing. The endpoint uses {reviews, next} instead of the Page shape."""
    reviews: Tuple[GymReview, ...] = ()
    next: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Any) -> "GymReviews":
        if not isinstance(d, dict):
            raise ApiDecodeError(f"GymReviews: expected object, got {type(d).__name__}")
        return cls(
            reviews=tuple(decode_list(GymReview, d.get("reviews") or [])),
            next=d.get("next") or None,
        )

    def as_page(self) -> Page[GymReview]:
        return Page(items=self.reviews, next_cursor=self.next, has_more=self.next is not None)

    def to_dict(self) -> dict:
        return {"reviews": [r.to_dict() for r in self.reviews], "next": self.next}


@dataclass(frozen=True)
class WorkoutList:
    """Workout listing. The endpoint uses {workouts, next} instead of the Page shape."""
    workouts: Tuple[Workout, ...] = ()
    next: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Any) -> "WorkoutList":
        if not isinstance(d, dict):
            raise ApiDecodeError(f"WorkoutList: expected object, got {type(d).__name__}")
        return cls(
            workouts=tuple(decode_list(Workout, d.get("workouts") or [])),
            next=d.get("next") or None,
        )

    def as_page(self) -> Page[Workout]:
        return Page(items=self.workouts, next_cursor=self.next, has_more=self.next is not None)

    def to_dict(self) -> dict:
        return {"workouts": [w.to_dict() for w in self.workouts], "next": self.next}
