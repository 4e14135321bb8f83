from __future__ import annotations

import logging

from teambuilder.core.crypto import hash_password, verify_password
from teambuilder.core.errors import BadRequest, Conflict, Unauthorized
from teambuilder.db.store import RecordStore

logger = logging.getLogger(__name__)


class AccountService:
    def __init__(self, store: RecordStore):
        self.store = store

    def register(self, team_name: str | None, password: str | None) -> None:
        """
        Create an account. Only the salted hash of the password is stored.
        Raises BadRequest for missing fields and Conflict if the team name is taken.
        """
        if not team_name or not password:
            raise BadRequest("Missing teamName or password")
        # fast path; add() makes the final check atomically
        if self.store.get(team_name) is not None:
            raise Conflict("Team name already exists")

        password_hash = hash_password(password)
        self.store.add(team_name, {"passwordHash": password_hash})
        logger.info("registered team %r", team_name)

    def login(self, team_name: str | None, password: str | None) -> None:
        # Same message for unknown team and wrong password
        if not team_name or not password:
            raise Unauthorized("Invalid credentials")
        record = self.store.get(team_name)
        if record is None or not verify_password(password, record.get("passwordHash")):
            logger.info("failed login for team %r", team_name)
            raise Unauthorized("Invalid credentials")
