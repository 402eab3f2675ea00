"""Paginação por cursor da Slack Web API.

Separa "como buscar uma página" (o request sabe chamar a sessão) de
"como percorrer todas as páginas" (este módulo). O cursor é opaco:
nunca é interpretado, apenas devolvido na próxima chamada.

Uso:
    scroller = SlackApiResponseScroller(request, session)
    async for comment in scroller.items():
        ...
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Sequence

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", covariant=True)
ResponseT = TypeVar("ResponseT", bound="SlackApiScrollableResponse[Any]")


class SlackApiScrollableResponse(Protocol[ItemT]):
    """Resposta de uma página: itens e cursor da próxima."""

    @property
    def next_cursor(self) -> str | None: ...

    @property
    def items(self) -> Sequence[ItemT]: ...


class SlackApiScrollableRequest(Protocol[ResponseT]):
    """Request capaz de representar a próxima página de si mesmo."""

    def with_new_cursor(self, new_cursor: str | None) -> SlackApiScrollableRequest[ResponseT]: ...

    async def scroll(self, session: Any) -> ResponseT: ...


class SlackApiResponseScroller(Generic[ResponseT]):
    """Percorre um endpoint paginado, uma chamada por página.

    Estado mutável (cursor) é local ao scroller: não reinicia depois de
    consumido. Para recomeçar, crie outro scroller a partir do request original.
    """

    def __init__(
        self,
        request: SlackApiScrollableRequest[ResponseT],
        session: Any,
    ) -> None:
        self._request = request
        self._session = session
        self._last_cursor: str | None = None
        self._has_next = True
        self._pages_fetched = 0

    @property
    def has_next(self) -> bool:
        """False depois da página sem next_cursor."""
        return self._has_next

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    async def next_page(self) -> ResponseT:
        """Busca a próxima página e avança o cursor.

        Raises:
            StopAsyncIteration: Se a última página já foi retornada
            SlackClientError: Qualquer erro da chamada, sem conversão
        """
        if not self._has_next:
            raise StopAsyncIteration

        request = self._request.with_new_cursor(self._last_cursor)
        response = await request.scroll(self._session)
        self._pages_fetched += 1

        next_cursor = response.next_cursor
        if next_cursor:
            self._last_cursor = next_cursor
        else:
            self._has_next = False

        logger.debug(
            "slack_scroll_page",
            extra={"page": self._pages_fetched, "has_next": self._has_next},
        )
        return response

    def __aiter__(self) -> SlackApiResponseScroller[ResponseT]:
        return self

    async def __anext__(self) -> ResponseT:
        return await self.next_page()

    async def items(self) -> AsyncIterator[Any]:
        """Itens de todas as páginas, em ordem; erros sobem para o consumidor."""
        async for page in self:
            for item in page.items:
                yield item

    async def collect_items(self) -> list[Any]:
        return [item async for item in self.items()]
