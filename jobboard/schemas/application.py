# application.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ApplicationData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Required fields default to "" so a missing value is reported by the
    # application validator as a failed result instead of a 422.
    full_name: str = Field(default="", alias="fullName")
    email: str = ""
    phone: str | None = None
    # Plain text (a link or pasted resume); file uploads are not accepted.
    resume: str | None = None
    cover_letter: str | None = Field(default=None, alias="coverLetter")
    linkedin_url: str | None = Field(default=None, alias="linkedInUrl")
    portfolio_url: str | None = Field(default=None, alias="portfolioUrl")


class ApplicationResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: str
    application_id: str | None = Field(default=None, alias="applicationId")
