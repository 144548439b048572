"""
Roster client -- Form state

The user-facing half of the demo: holds the three form fields, checks
them locally, and drives the endpoint through a RosterClient. Nothing is
sent until every field passes; transport and GraphQL failures end up in
`result` as a single "Error: ..." line instead of propagating.

    form = RosterForm(RosterClient())
    form.values = FormValues(name="Bat", role="Engineer", terms=True)
    form.submit()
    print(form.result)      # User created: Bat (Engineer)
    print(form.users)       # refreshed list, Bat last
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from roster_api.models.schemas import UserRecord
from roster_client.graphql import RosterClient, RosterClientError

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 20

# Choices offered on the form. The server accepts any string.
ROLES = ("Student", "Engineer", "Teacher")

NAME_REQUIRED = "Name is required."
NAME_TOO_LONG = f"Name must be at most {NAME_MAX_LENGTH} characters."
ROLE_REQUIRED = "Role is required."
TERMS_REQUIRED = "You must confirm the form is filled in correctly."


@dataclass
class FormValues:
    name: str = ""
    role: str = ""
    terms: bool = False


def validate_form(values: FormValues) -> Dict[str, str]:
    """Return field -> message for every failing field (empty when valid)."""
    errors: Dict[str, str] = {}

    if not values.name:
        errors["name"] = NAME_REQUIRED
    elif len(values.name) > NAME_MAX_LENGTH:
        errors["name"] = NAME_TOO_LONG

    if not values.role:
        errors["role"] = ROLE_REQUIRED

    if not values.terms:
        errors["terms"] = TERMS_REQUIRED

    return errors


@dataclass
class RosterForm:
    """Form fields plus everything the page displays around them."""

    client: RosterClient
    values: FormValues = field(default_factory=FormValues)
    errors: Dict[str, str] = field(default_factory=dict)
    users: List[UserRecord] = field(default_factory=list)
    result: str = ""
    loading: bool = False
    submitted_name: str = ""
    submitted_role: str = ""

    @property
    def headline(self) -> str:
        """Greeting line shown under the form."""
        name = self.submitted_name or "..."
        role = f"({self.submitted_role})" if self.submitted_role else "(Unknown)"
        return f"Clever {name} {role}"

    @contextmanager
    def _busy(self) -> Iterator[None]:
        self.loading = True
        try:
            yield
        finally:
            self.loading = False

    def submit(self) -> Optional[UserRecord]:
        """Validate, create the user, then refresh the list.

        Returns the created user, or None when validation fails, a call is
        already in flight, or the mutation fails.
        """
        if self.loading:
            logger.info("Submit ignored: a request is already in progress")
            return None

        self.errors = validate_form(self.values)
        if self.errors:
            return None

        self.submitted_name = self.values.name
        self.submitted_role = self.values.role

        with self._busy():
            try:
                created = self.client.create_user(self.values.name, self.values.role)
            except RosterClientError as e:
                self.result = f"Error: {e}"
                return None

            self.result = f"User created: {created.name} ({created.role})"

            try:
                self.users = self.client.users()
            except RosterClientError as e:
                self.result = f"Error: {e}"

        return created

    def refresh(self) -> Optional[List[UserRecord]]:
        """Replace the display list with the server's current users."""
        if self.loading:
            logger.info("Refresh ignored: a request is already in progress")
            return None

        with self._busy():
            try:
                self.users = self.client.users()
            except RosterClientError as e:
                self.result = f"Error: {e}"
                return None

        self.result = f"Loaded {len(self.users)} users from server"
        return self.users
