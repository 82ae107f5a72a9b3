"""Council roster: members, role parsing, and roster loading.

Roster records use the field names of the officials endpoint:
``id, name, ward, party, role, contact, email`` (plus optional ``image_url``).
"""
import json
import logging
from enum import Enum
from typing import NamedTuple

logger = logging.getLogger(__name__)


class RosterError(ValueError):
    """Raised for roster data that cannot be turned into members."""


class Role(Enum):
    HEAD_OF_BODY = "head_of_body"
    SECRETARY = "secretary"
    REPRESENTATIVE = "representative"
    OTHER = "other"


_ROLE_NAMES = {
    "mayor": Role.HEAD_OF_BODY,
    "president": Role.HEAD_OF_BODY,
    "speaker": Role.HEAD_OF_BODY,
    "chair": Role.HEAD_OF_BODY,
    "head of body": Role.HEAD_OF_BODY,
    "clerk": Role.SECRETARY,
    "city clerk": Role.SECRETARY,
    "secretary": Role.SECRETARY,
    "treasurer": Role.OTHER,
    "city treasurer": Role.OTHER,
    "cabinet member": Role.OTHER,
    "staff": Role.OTHER,
}


def parse_role(text) -> Role:
    """Role for a roster role string.

    Unknown, empty or non-string roles count as representatives, so a bad
    record still takes a seat instead of breaking the chart.
    """
    if not isinstance(text, str):
        return Role.REPRESENTATIVE
    key = " ".join(text.replace("_", " ").replace("-", " ").split()).lower()
    return _ROLE_NAMES.get(key, Role.REPRESENTATIVE)


def member_role(member) -> Role:
    """Role of *member*, parsing it when the roster carried a raw string."""
    return member.role if isinstance(member.role, Role) else parse_role(member.role)


class Member(NamedTuple):
    """One elected official."""
    id: int
    name: str
    role: Role
    party: str
    district: int | None = None
    contact: str = ""
    email: str = ""
    image_url: str | None = None


def member_from_record(record: dict) -> Member:
    """Build a Member from one roster JSON object."""
    try:
        raw_id = record["id"]
        name = str(record["name"])
        member_id = int(raw_id)
    except KeyError as e:
        raise RosterError(f"Roster record missing {e.args[0]!r}: {record!r}") from e
    except (TypeError, ValueError, OverflowError) as e:
        raise RosterError(f"Bad roster id in {record!r}") from e
    if isinstance(raw_id, float) and raw_id != member_id:
        raise RosterError(f"Bad roster id in {record!r}: not a whole number")
    ward = record.get("ward")
    try:
        district = int(ward) if ward is not None else None
    except (TypeError, ValueError):
        logger.debug("Ignoring bad ward %r for member %s", ward, member_id)
        district = None
    return Member(
        id=member_id,
        name=name,
        role=parse_role(record.get("role")),
        party=str(record.get("party") or ""),
        district=district,
        contact=str(record.get("contact") or ""),
        email=str(record.get("email") or ""),
        image_url=record.get("image_url"),
    )


def load_roster(path) -> list[Member]:
    """Read a JSON array of roster records, preserving order."""
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise RosterError(f"{path}: expected a JSON array, got {type(data).__name__}")
    return [member_from_record(rec) for rec in data]


def sample_roster(n_districts: int = 50) -> list[Member]:
    """Static fallback roster: head of body, one representative per district, clerk."""
    roster = [Member(1, "Brandon Johnson", Role.HEAD_OF_BODY, "Democrat",
                     None, "(312) 744-3300", "mayor@cityofchicago.org")]
    for i in range(n_districts):
        roster.append(Member(
            id=i + 2,
            name=f"Alderman {i + 1}",
            role=Role.REPRESENTATIVE,
            party="Republican" if i % 3 == 0 else "Democrat",
            district=i + 1,
            contact=f"(312) 744-{3000 + i}",
            email=f"ward{i + 1:02d}@cityofchicago.org",
        ))
    roster.append(Member(n_districts + 2, "Anna Valencia", Role.SECRETARY, "Democrat",
                         None, "(312) 744-6861", "clerk@cityofchicago.org"))
    return roster


def load_roster_or_sample(path=None) -> list[Member]:
    """Roster from *path*, or the sample roster when it cannot be read."""
    if path is None:
        logger.warning("No roster given; using sample roster")
        return sample_roster()
    try:
        return load_roster(path)
    except (OSError, json.JSONDecodeError, RosterError) as e:
        logger.warning("Roster %s unusable (%s); using sample roster", path, e)
        return sample_roster()
