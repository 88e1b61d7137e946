"""Reporting policy for rendered revision tokens."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RevisionConfig(BaseModel):
    """Independent switches controlling what the token reports."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    report_mixed_revisions: bool = True
    report_status: bool = True
    report_unversioned: bool = True
    report_ignored: bool = False
    report_out_of_date: bool = False
    verbose: bool = False
