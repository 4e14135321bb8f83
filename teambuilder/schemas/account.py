from pydantic import BaseModel, Field
from typing import Optional

class CredentialsRequest(BaseModel):
    # optional so missing fields reach the service and come back as {error}
    team_name: Optional[str] = Field(default=None, alias="teamName")
    password: Optional[str] = None

class SuccessResponse(BaseModel):
    success: bool = True
