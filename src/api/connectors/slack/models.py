"""Modelos de request/response da Slack Web API (métodos files.* e oauth.v2).

Todos os campos de resposta são opcionais: `model_validate({})` é o
valor "zero" retornado para respostas 200 sem corpo.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from .http_client import QueryParams, to_query_value

if TYPE_CHECKING:
    from .client import SlackClientSession


class SlackResponseMetadata(BaseModel):
    """Bloco `response_metadata` das respostas paginadas."""

    model_config = ConfigDict(extra="ignore")

    next_cursor: str | None = None
    warnings: list[str] | None = None


class SlackFile(BaseModel):
    """Arquivo Slack (subconjunto tipado; campos extras preservados)."""

    model_config = ConfigDict(extra="allow")

    id: str
    created: int | None = None
    timestamp: int | None = None
    name: str | None = None
    title: str | None = None
    mimetype: str | None = None
    filetype: str | None = None
    pretty_type: str | None = None
    user: str | None = None
    editable: bool | None = None
    size: int | None = None
    mode: str | None = None
    is_external: bool | None = None
    external_type: str | None = None
    is_public: bool | None = None
    public_url_shared: bool | None = None
    url_private: str | None = None
    url_private_download: str | None = None
    permalink: str | None = None
    permalink_public: str | None = None
    comments_count: int | None = None
    channels: list[str] | None = None
    groups: list[str] | None = None
    ims: list[str] | None = None


class SlackFileComment(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    created: int | None = None
    timestamp: int | None = None
    user: str | None = None
    comment: str | None = None


class SlackApiFilesInfoRequest(BaseModel):
    """Request de files.info (paginável por cursor sobre `comments`)."""

    model_config = ConfigDict(frozen=True)

    file: str
    count: int | None = None
    cursor: str | None = None
    limit: int | None = None
    page: int | None = None

    def to_query_params(self) -> QueryParams:
        return [
            ("file", self.file),
            ("count", to_query_value(self.count)),
            ("cursor", self.cursor),
            ("limit", to_query_value(self.limit)),
            ("page", to_query_value(self.page)),
        ]

    def with_new_cursor(self, new_cursor: str | None) -> SlackApiFilesInfoRequest:
        return self.model_copy(update={"cursor": new_cursor})

    async def scroll(self, session: SlackClientSession) -> SlackApiFilesInfoResponse:
        return await session.files_info(self)


class SlackApiFilesInfoResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    file: SlackFile | None = None
    comments: list[SlackFileComment] | None = None
    response_metadata: SlackResponseMetadata | None = None

    @property
    def next_cursor(self) -> str | None:
        return self.response_metadata.next_cursor if self.response_metadata else None

    @property
    def items(self) -> list[SlackFileComment]:
        return self.comments or []


class SlackApiFilesListRequest(BaseModel):
    """Request de files.list (paginação por página, não por cursor)."""

    model_config = ConfigDict(frozen=True)

    channel: str | None = None
    count: int | None = None
    page: int | None = None
    show_files_hidden_by_limit: bool | None = None
    team_id: str | None = None
    ts_from: str | None = None
    ts_to: str | None = None
    types: list[str] | None = None
    user: str | None = None

    def to_query_params(self) -> QueryParams:
        return [
            ("channel", self.channel),
            ("count", to_query_value(self.count)),
            ("page", to_query_value(self.page)),
            ("show_files_hidden_by_limit", to_query_value(self.show_files_hidden_by_limit)),
            ("team_id", self.team_id),
            ("ts_from", self.ts_from),
            ("ts_to", self.ts_to),
            ("types", to_query_value(self.types)),
            ("user", self.user),
        ]


class SlackPaging(BaseModel):
    model_config = ConfigDict(extra="ignore")

    count: int | None = None
    total: int | None = None
    page: int | None = None
    pages: int | None = None


class SlackApiFilesListResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    files: list[SlackFile] | None = None
    paging: SlackPaging | None = None


class SlackOAuthV2AccessRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    redirect_uri: str | None = None

    def to_query_params(self) -> QueryParams:
        return [("code", self.code), ("redirect_uri", self.redirect_uri)]


class SlackOAuthTeam(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str | None = None


class SlackOAuthAuthedUser(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    scope: str | None = None
    access_token: str | None = Field(default=None, repr=False)
    token_type: str | None = None


class SlackOAuthV2AccessResponse(BaseModel):
    """Resposta de oauth.v2.access (tokens mascarados no repr)."""

    model_config = ConfigDict(extra="ignore")

    access_token: str | None = Field(default=None, repr=False)
    token_type: str | None = None
    scope: str | None = None
    bot_user_id: str | None = None
    app_id: str | None = None
    team: SlackOAuthTeam | None = None
    authed_user: SlackOAuthAuthedUser | None = None
