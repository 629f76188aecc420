"""Payload models for resources fetched during authorization."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class UnvalidatedRequestObject(BaseModel):
    """Authorization request parameters before any validation.

    Every field is optional; validators decide what is actually required.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    response_type: str | None = None
    response_uri: str | None = None
    redirect_uri: str | None = None
    presentation_definition: dict[str, Any] | None = None
    presentation_definition_uri: str | None = None
    request: str | None = None
    request_uri: str | None = None
    client_metadata: dict[str, Any] | None = None
    client_metadata_uri: str | None = None
    client_id: str | None = None
    client_id_scheme: str | None = None
    nonce: str | None = None
    scope: str | None = None
    response_mode: str | None = None
    state: str | None = None
    id_token_type: str | None = None


class InputDescriptor(BaseModel):
    """One credential requirement inside a presentation definition."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str | None = None
    purpose: str | None = None
    format: dict[str, Any] | None = None
    constraints: dict[str, Any] = Field(default_factory=dict)


class PresentationDefinition(BaseModel):
    """DIF presentation definition as fetched from a verifier."""

    model_config = ConfigDict(frozen=True)

    id: str
    input_descriptors: list[InputDescriptor]
    name: str | None = None
    purpose: str | None = None
    format: dict[str, Any] | None = None
