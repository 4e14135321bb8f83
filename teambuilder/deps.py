from fastapi import Request

from teambuilder.core.config import Settings
from teambuilder.db.sql_store import SqlRecordStore
from teambuilder.db.store import JsonFileRecordStore, RecordStore
from teambuilder.services.accounts import AccountService
from teambuilder.services.roster import RosterService


def create_store(settings: Settings) -> RecordStore:
    if settings.STORE_BACKEND == "sql":
        return SqlRecordStore(settings.database_url)
    return JsonFileRecordStore(settings.USERS_FILE)


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_account_service(request: Request) -> AccountService:
    return AccountService(get_store(request))


def get_roster_service(request: Request) -> RosterService:
    return RosterService(get_store(request))
