"""OpenAI backed drafting of notification emails and ticket analyses."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Sequence
from typing import Any

from openai import AsyncOpenAI, OpenAIError

from complaint_desk.application.use_cases.notifications.ports import (
    EmailDraft,
    EmailDraftRequest,
)
from complaint_desk.config import Settings, get_settings
from complaint_desk.domain.entities import Comment, TicketAnalysis

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4.1-mini"

_EMAIL_INSTRUCTIONS = """You are an expert in creating professional, responsive, and spam-compliant HTML emails for a Complaint Management System.

Your task is to generate an email with a subject line and a full HTML body.

Rules for the HTML body:
1. Use inline CSS on every element. Do not use <style> blocks.
2. Use a main container with a clear header, body and footer.
3. Display the organization's name prominently in the header.
4. Use clear headings and well spaced paragraphs.
5. Keep a professional, helpful tone. The footer must say this is an automated email.

Answer with a JSON object holding "subject" and "body"."""

_EMAIL_PURPOSES: dict[str, str] = {
    "newUserPending": "inform an admin that a new user ({new_user_name}) is pending approval.",
    "ticketCreated": "inform a supervisor that a new ticket ({ticket_id}: {ticket_title}) has been created.",
    "ticketComment": (
        "inform the ticket owner that {commenter_name} has added a new comment to "
        "ticket {ticket_id}: {ticket_title}."
    ),
    "ticketResolved": "inform the ticket creator that their ticket {ticket_id}: {ticket_title} has been resolved.",
    "userApproved": "inform a user that their account for {org_name} has been approved.",
    "ticketAssigned": (
        "inform a supervisor that ticket {ticket_id}: {ticket_title} has been assigned "
        "to their department."
    ),
    "userProfileUpdated": (
        "inform a user that their profile (role or department) has been updated by an administrator."
    ),
}

_ANALYSIS_INSTRUCTIONS = """You are an expert IT Support Supervisor. Analyze a support ticket to help your team resolve it faster.
Read the ticket title, description and the full conversation history, then provide:
1. "summary": a one or two sentence summary of the core issue.
2. "analysis": a technical analysis of the potential root cause with actionable insights.
3. "suggested_reply": a professional, empathetic reply to the reporter that states the understanding of the issue and the next step.

Answer with a JSON object holding exactly those three fields."""

_EMAIL_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "subject": {"type": "string"},
        "body": {"type": "string"},
    },
    "required": ["subject", "body"],
    "additionalProperties": False,
}

_ANALYSIS_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "summary": {"type": "string"},
        "analysis": {"type": "string"},
        "suggested_reply": {"type": "string"},
    },
    "required": ["summary", "analysis", "suggested_reply"],
    "additionalProperties": False,
}


def _strip_code_fences(text: str) -> str:
    """Return JSON text without Markdown code fences."""

    s = text.strip()
    if not s.startswith("```"):
        return text

    # keep only the payload between the first "{" and the last "}".
    cleaned = s.strip("`")
    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start == -1 or end == -1:
        return text
    return cleaned[start : end + 1]


def _remove_trailing_commas(text: str) -> str:
    """Remove trailing commas that break strict JSON decoding."""

    return re.sub(r",(\s*[}\]])", r"\1", text)


def _decode_json_payload(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass
    json_text = _strip_code_fences(text)
    try:
        return json.loads(json_text)
    except json.JSONDecodeError:
        json_text = _remove_trailing_commas(json_text)
    try:
        return json.loads(json_text)
    except json.JSONDecodeError as exc:
        logger.error("Could not decode the OpenAI response: %s", json_text)
        raise OpenAIServiceError("The OpenAI response is not valid JSON.") from exc


def _require_text(payload: dict[str, Any], field: str) -> str:
    value = payload.get(field)
    if not isinstance(value, str) or not value.strip():
        raise OpenAIServiceError(f"The OpenAI response is missing the field '{field}'.")
    return value.strip()


class OpenAIConfigurationError(RuntimeError):
    """Raised when the OpenAI credentials are missing."""


class OpenAIServiceError(RuntimeError):
    """Raised when the OpenAI API does not answer as expected."""


class _StructuredResponsesClient:
    """Run Responses API calls that must return a JSON object."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        client: AsyncOpenAI | None = None,
    ) -> None:
        settings = settings or get_settings()

        if client is None:
            api_key = (settings.openai_api_key or "").strip()
            if not api_key:
                raise OpenAIConfigurationError(
                    "OPENAI_API_KEY is not defined in the environment.",
                )
            client_kwargs: dict[str, Any] = {"api_key": api_key}
            base_url = (settings.openai_base_url or "").strip()
            if base_url:
                client_kwargs["base_url"] = base_url
            client = AsyncOpenAI(**client_kwargs)

        self._client = client
        self._model = (settings.openai_model or DEFAULT_MODEL).strip() or DEFAULT_MODEL
        self._temperature = float(settings.openai_temperature)
        self._max_output_tokens = settings.openai_max_output_tokens

    async def _request_json(
        self,
        *,
        instructions: str,
        prompt: str,
        schema_name: str,
        schema: dict[str, Any],
    ) -> dict[str, Any]:
        request_kwargs: dict[str, Any] = {
            "model": self._model,
            "instructions": instructions,
            "input": prompt,
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": schema_name,
                    "schema": schema,
                    "strict": True,
                }
            },
        }
        if self._temperature is not None:
            request_kwargs["temperature"] = self._temperature
        if self._max_output_tokens is not None:
            request_kwargs["max_output_tokens"] = self._max_output_tokens

        try:
            resp = await self._client.responses.create(**request_kwargs)
        except OpenAIError as exc:
            raise OpenAIServiceError("The request to OpenAI failed.") from exc

        text = getattr(resp, "output_text", None)
        if not text:
            try:
                text = resp.output[0].content[0].text
            except (AttributeError, IndexError, TypeError) as exc:
                raise OpenAIServiceError("The OpenAI response contains no usable text.") from exc

        logger.debug("Raw model response: %s", text)
        payload = _decode_json_payload(text)
        if not isinstance(payload, dict):
            raise OpenAIServiceError("The OpenAI response must be a JSON object.")
        return payload


class OpenAIEmailDrafter(_StructuredResponsesClient):
    """Draft notification emails from the structured event payload."""

    async def generate(self, request: EmailDraftRequest) -> EmailDraft:
        payload = await self._request_json(
            instructions=_EMAIL_INSTRUCTIONS,
            prompt=self._build_prompt(request),
            schema_name="notification_email",
            schema=_EMAIL_SCHEMA,
        )
        return EmailDraft(
            subject=_require_text(payload, "subject"),
            body=_require_text(payload, "body"),
        )

    @staticmethod
    def _build_prompt(request: EmailDraftRequest) -> str:
        values = {
            "org_name": request.org_name,
            "ticket_id": request.ticket_id or "",
            "ticket_title": request.ticket_title or "",
            "commenter_name": request.commenter_name or "",
            "new_user_name": request.new_user_name or "",
        }
        purpose = _EMAIL_PURPOSES.get(request.notification_type)
        lines = [
            f"Recipient Name: {request.user_name}",
            f"Organization Name: {request.org_name}",
            f"Notification Type: {request.notification_type}",
            f"Ticket ID: {values['ticket_id']}",
            f"Ticket Title: {values['ticket_title']}",
            f"Commenter: {values['commenter_name']}",
            f"New User: {values['new_user_name']}",
        ]
        if purpose:
            lines.append("")
            lines.append("The purpose of the email is to " + purpose.format(**values))
        return "\n".join(lines)


class OpenAITicketAnalyzer(_StructuredResponsesClient):
    """Summarize a ticket and suggest a reply to its reporter."""

    async def analyze(
        self,
        title: str,
        description: str,
        comments: Sequence[Comment],
    ) -> TicketAnalysis:
        history = "\n".join(f'- {comment.author_name}: "{comment.text}"' for comment in comments)
        prompt = (
            f"Ticket Title: {title}\n"
            f"Ticket Description: {description}\n\n"
            f"Conversation History:\n{history or '- (no comments yet)'}"
        )
        payload = await self._request_json(
            instructions=_ANALYSIS_INSTRUCTIONS,
            prompt=prompt,
            schema_name="ticket_analysis",
            schema=_ANALYSIS_SCHEMA,
        )
        return TicketAnalysis(
            summary=_require_text(payload, "summary"),
            analysis=_require_text(payload, "analysis"),
            suggested_reply=_require_text(payload, "suggested_reply"),
        )


__all__ = [
    "OpenAIConfigurationError",
    "OpenAIEmailDrafter",
    "OpenAIServiceError",
    "OpenAITicketAnalyzer",
]
