"""Declarative description of the user-facing tracking settings.

The records here only describe fields; rendering them into a form is left
to whatever admin UI hosts the settings.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

SECTION_MAIN = "main"
SECTION_ADVANCED = "advanced"

SECTIONS = {
    SECTION_MAIN: "Please configure these settings before using tracking.",
    SECTION_ADVANCED: "These settings rarely need to be modified.",
}


class FieldKind(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    CHECKBOX = "checkbox"


@dataclass(frozen=True)
class FieldDescriptor:
    uid: str
    kind: FieldKind
    label: str
    section: str
    default: Any
    placeholder: str = ""
    helper: str = ""
    supplemental: str = ""
    step: Optional[float] = None


SETTINGS_FIELDS: List[FieldDescriptor] = [
    FieldDescriptor(
        uid="tracking_id",
        kind=FieldKind.TEXT,
        label="Google Analytics tracking code:",
        section=SECTION_MAIN,
        default="",
        placeholder="UA-xxxxxx-y",
    ),
    FieldDescriptor(
        uid="validity_period_days",
        kind=FieldKind.NUMBER,
        label="Validity period:",
        section=SECTION_ADVANCED,
        default=4.0,
        supplemental=(
            "Number of days before the client id changes. A shorter interval "
            "improves privacy but makes session tracking less reliable."
        ),
        step=0.1,
    ),
    FieldDescriptor(
        uid="enable_for_admins",
        kind=FieldKind.CHECKBOX,
        label="Enable for admins:",
        section=SECTION_ADVANCED,
        default=False,
        supplemental="Compute a client id for users with admin privileges?",
    ),
]


def field(uid: str) -> FieldDescriptor:
    """Look up a field by uid. Raises KeyError for unknown uids."""
    for descriptor in SETTINGS_FIELDS:
        if descriptor.uid == uid:
            return descriptor
    raise KeyError(uid)


def fields_in(section: str) -> List[FieldDescriptor]:
    return [f for f in SETTINGS_FIELDS if f.section == section]


def defaults() -> Dict[str, Any]:
    return {f.uid: f.default for f in SETTINGS_FIELDS}
