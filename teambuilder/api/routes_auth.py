# teambuilder/api/routes_auth.py
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from teambuilder.core.errors import TeamBuilderError
from teambuilder.deps import get_account_service
from teambuilder.schemas.account import CredentialsRequest, SuccessResponse
from teambuilder.services.accounts import AccountService

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=SuccessResponse)
def register(
    body: Optional[CredentialsRequest] = None,
    accounts: AccountService = Depends(get_account_service),
):
    body = body or CredentialsRequest()
    try:
        accounts.register(body.team_name, body.password)
    except TeamBuilderError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return SuccessResponse()


@router.post("/login", response_model=SuccessResponse)
def login(
    body: Optional[CredentialsRequest] = None,
    accounts: AccountService = Depends(get_account_service),
):
    """
    Checks the credentials and nothing more; no session is created.
    The caller keeps the team name as its identity.
    """
    body = body or CredentialsRequest()
    try:
        accounts.login(body.team_name, body.password)
    except TeamBuilderError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return SuccessResponse()
