# commonlogging_server/tools/masking.py
from __future__ import annotations
from typing import Any, List, Optional
from pydantic import BaseModel, Field
from fastmcp import FastMCP

from commonlogging.formatting import format_message
from commonlogging.ports import LoggerPort


class MaskEmailIn(BaseModel):
    email: Optional[str] = Field(None, description="Email address to mask")


class MaskDocumentIn(BaseModel):
    document_id: Optional[str] = Field(None, description="Identity document number to mask")


class FormatMessageIn(BaseModel):
    template: str = Field(..., description="Message with '{}' placeholders")
    args: List[Any] = Field(
        default_factory=list, description="Positional values, consumed left to right"
    )


def register_masking_tools(mcp: FastMCP, log: LoggerPort):
    @mcp.tool(name="mask_email", description="Mask the local part of an email address for logging.")
    def mask_email(input: MaskEmailIn) -> str:
        masked = log.mask_email(input.email)
        log.debug("tool_call mask_email email={}", masked)
        return masked

    @mcp.tool(
        name="mask_document",
        description="Mask an identity document number, keeping the first and last digits.",
    )
    def mask_document(input: MaskDocumentIn) -> str:
        masked = log.mask_document(input.document_id)
        log.debug("tool_call mask_document document_id={}", masked)
        return masked

    @mcp.tool(
        name="format_message",
        description="Fill '{}' placeholders in a template with positional arguments.",
    )
    def format_message_tool(input: FormatMessageIn) -> str:
        # Arguments are caller data; only their count is logged
        log.debug("tool_call format_message args={}", len(input.args))
        return format_message(input.template, *input.args)
