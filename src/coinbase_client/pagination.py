"""Cursor pagination for list endpoints.

List endpoints answer with a page of records and a ``pagination`` object
carrying the URIs of the adjacent pages. ``PaginatedResult`` wraps one
page; ``next_page()`` and ``previous_page()`` fetch the neighbours and
return new instances, leaving the current one untouched.

Example:
    ```python
    page = await client.wallet.list_accounts(limit=25)
    while page is not None:
        for account in page:
            print(account["name"])
        page = await page.next_page()
    ```
"""

from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Literal, TypeVar

if TYPE_CHECKING:
    from coinbase_client.dispatch import RequestDispatcher

T = TypeVar("T")

ListOrder = Literal["asc", "desc"]


@dataclass(frozen=True)
class Pagination:
    """Server-supplied cursor for one page of a list response."""

    ending_before: str | None = None
    starting_after: str | None = None
    limit: int = 25
    order: ListOrder = "desc"
    previous_uri: str | None = None
    next_uri: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Pagination":
        return cls(
            ending_before=data.get("ending_before"),
            starting_after=data.get("starting_after"),
            limit=data.get("limit", 25),
            order=data.get("order", "desc"),
            previous_uri=data.get("previous_uri"),
            next_uri=data.get("next_uri"),
        )


class PaginatedResult(Generic[T]):
    """One page of ``T`` records plus the cursor to reach its neighbours.

    Args:
        data: Records of this page.
        pagination: Cursor returned with the page.
        dispatcher: Dispatcher used to fetch adjacent pages.
        auth: Whether adjacent pages are fetched with authentication.
    """

    def __init__(
        self,
        data: list[T],
        pagination: Pagination,
        dispatcher: "RequestDispatcher",
        auth: bool = True,
    ) -> None:
        self.data = data
        self._pagination = pagination
        self._dispatcher = dispatcher
        self._auth = auth

    def __repr__(self) -> str:
        return f"PaginatedResult(data={self.data!r}, pagination={self._pagination!r})"

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __getitem__(self, index: int) -> T:
        return self.data[index]

    @property
    def pagination(self) -> Pagination:
        return self._pagination

    @property
    def order(self) -> ListOrder:
        return self._pagination.order

    def has_next(self) -> bool:
        return self._pagination.next_uri is not None

    def has_previous(self) -> bool:
        return self._pagination.previous_uri is not None

    async def next_page(self) -> "PaginatedResult[T] | None":
        """Fetch the following page, or return None if this is the last one."""
        uri = self._pagination.next_uri
        if uri is None:
            return None
        return await self._dispatcher.fetch_page(uri, auth=self._auth)

    async def previous_page(self) -> "PaginatedResult[T] | None":
        """Fetch the preceding page, or return None if this is the first one."""
        uri = self._pagination.previous_uri
        if uri is None:
            return None
        return await self._dispatcher.fetch_page(uri, auth=self._auth)

    async def pages(self) -> AsyncIterator["PaginatedResult[T]"]:
        """Yield this page, then every following page in order."""
        page: PaginatedResult[T] | None = self
        while page is not None:
            yield page
            page = await page.next_page()
