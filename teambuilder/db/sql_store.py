# teambuilder/db/sql_store.py
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from teambuilder.core.errors import Conflict
from teambuilder.db.engine import make_engine, make_session_factory
from teambuilder.db.models import Account, Base
from teambuilder.db.store import KEY_FIELD, Record

logger = logging.getLogger(__name__)


def _to_record(row: Account) -> Record:
    rec: Record = {KEY_FIELD: row.team_name, "passwordHash": row.password_hash}
    if row.team_players is not None:
        rec["teamPlayers"] = row.team_players
    return rec


class SqlRecordStore:
    """Same record interface as the JSON file store, one row per account."""

    def __init__(self, database_url: str | None = None, engine: Engine | None = None):
        if engine is None:
            engine = make_engine(database_url or "sqlite:///./teambuilder.db")
        self.engine = engine
        self._sessions = make_session_factory(engine)
        Base.metadata.create_all(engine)

    @contextmanager
    def _session(self) -> Iterator[Session]:
        db = self._sessions()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def get(self, key: str) -> Optional[Record]:
        with self._session() as db:
            row = db.get(Account, key)
            return _to_record(row) if row else None

    def add(self, key: str, value: Record) -> None:
        try:
            with self._session() as db:
                if db.get(Account, key) is not None:
                    raise Conflict("Team name already exists")
                db.add(Account(
                    team_name=key,
                    password_hash=value.get("passwordHash") or "",
                    team_players=value.get("teamPlayers"),
                ))
        except IntegrityError:
            # lost the insert race to another writer
            raise Conflict("Team name already exists")
        logger.debug("added record %r", key)

    def put(self, key: str, value: Record) -> None:
        with self._session() as db:
            row = db.get(Account, key)
            if row is None:
                row = Account(team_name=key, password_hash=value.get("passwordHash") or "")
                db.add(row)
            elif "passwordHash" in value:
                row.password_hash = value["passwordHash"]
            # full replace, never merged
            row.team_players = value.get("teamPlayers")
        logger.debug("wrote record %r", key)

    def delete(self, key: str) -> bool:
        with self._session() as db:
            row = db.get(Account, key)
            if row is None:
                return False
            db.delete(row)
        return True

    def all(self) -> List[Record]:
        with self._session() as db:
            rows = db.scalars(select(Account).order_by(Account.created_at, Account.team_name)).all()
            return [_to_record(r) for r in rows]
