"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - EmployeeId wraps the store-assigned integer key — never a bare int in domain logic
    - Form modes encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EmployeeId = NewType("EmployeeId", int)


# ─── Enums ───────────────────────────────────────────────────────

class FormMode(str, Enum):
    """Add/edit form states. EDITING always travels with an editing_id."""
    HIDDEN = "hidden"
    ADDING = "adding"
    EDITING = "editing"
