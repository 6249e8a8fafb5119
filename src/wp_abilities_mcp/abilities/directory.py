"""Ability discovery with a time-limited in-memory cache."""

import logging
import time
from dataclasses import dataclass
from typing import Callable

from wp_abilities_mcp.abilities.client import AbilitiesClient
from wp_abilities_mcp.abilities.names import to_ability_name, to_tool_name
from wp_abilities_mcp.abilities.types import Ability

logger = logging.getLogger(__name__)

DEFAULT_CACHE_TTL_SECONDS = 60.0


@dataclass(frozen=True)
class DirectorySnapshot:
    """The complete result of one successful discovery fetch."""

    abilities: tuple[Ability, ...]
    fetched_at: float


class AbilityDirectory:
    """Discovers abilities and caches the result for a fixed TTL.

    The cache is a single DirectorySnapshot that is only ever replaced by one
    assignment, so readers see either the previous or the new snapshot.
    A failed refresh leaves the previous snapshot in place and raises; stale
    data is never returned once the TTL has expired.

    Two callers that both find the cache expired may both fetch.
    """

    def __init__(
        self,
        client: AbilitiesClient,
        ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS,
        per_page: int = 100,
        exact_tool_names: bool = False,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the directory.

        Args:
            client: Abilities API client
            ttl_seconds: How long a successful fetch is served from cache
            per_page: Page size requested from the list endpoint
            exact_tool_names: Resolve tool names against discovered abilities
                before falling back to the lossy reverse mapping
            clock: Monotonic time source, in seconds
        """
        self._client = client
        self.ttl_seconds = ttl_seconds
        self.per_page = per_page
        self.exact_tool_names = exact_tool_names
        self._clock = clock
        self._snapshot: DirectorySnapshot | None = None

    @property
    def snapshot(self) -> DirectorySnapshot | None:
        """The current cache snapshot, if any fetch has succeeded."""
        return self._snapshot

    def _is_fresh(self, snapshot: DirectorySnapshot | None, now: float) -> bool:
        return snapshot is not None and now - snapshot.fetched_at < self.ttl_seconds

    async def discover(self) -> list[Ability]:
        """Return all abilities, fetching them when the cache is empty or stale.

        Raises:
            UpstreamError: If the list endpoint does not return a success status
        """
        now = self._clock()
        snapshot = self._snapshot
        if self._is_fresh(snapshot, now):
            logger.debug(f"Serving {len(snapshot.abilities)} abilities from cache")
            return list(snapshot.abilities)

        records = await self._client.list_abilities(per_page=self.per_page)
        abilities = tuple(Ability.from_api(record) for record in records)
        self._snapshot = DirectorySnapshot(abilities=abilities, fetched_at=now)
        logger.info(f"Discovered {len(abilities)} abilities")
        return list(abilities)

    async def get_details(self, ability_name: str) -> Ability:
        """Fetch one ability directly from the API, bypassing the cache.

        Raises:
            UpstreamError: If the detail endpoint does not return a success status
        """
        record = await self._client.get_ability(ability_name)
        return Ability.from_api(record)

    async def resolve_ability_name(self, tool_name: str) -> str:
        """Map a tool name back to an ability identifier.

        With exact_tool_names enabled, the discovered abilities are searched
        first, which handles identifiers the reverse mapping cannot recover.
        """
        if self.exact_tool_names:
            for ability in await self.discover():
                if to_tool_name(ability.name) == tool_name:
                    return ability.name
            logger.debug(f"No discovered ability matches tool: {tool_name}")
        return to_ability_name(tool_name)
