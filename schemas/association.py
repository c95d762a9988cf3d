"""Association row schema shared by every junction table."""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class AssociationRow(BaseModel):
    """One link between two entities.

    first_id / second_id follow the table's positional convention, e.g. for
    company_note first_id is the company and second_id the note.
    modified_date is always written by the store; a value supplied by the
    caller is never persisted.
    """

    first_id: UUID
    second_id: UUID
    active: bool = True
    modified_date: Optional[datetime] = None
