# client.py
import logging
from typing import Any, List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from .jsonplaceholder_types import Comment, CommentList, Post, PostList, User, UserList
from .tools import JSONPLACEHOLDER_ENDPOINTS, JSONPLACEHOLDER_SERVER_URL

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """
    The single failure kind surfaced by the client.
    Transport errors, non-2xx responses and malformed bodies all end up here;
    callers only get the human-readable message.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class JsonPlaceholderClient:
    """Read-only async client for the JSONPlaceholder REST API."""

    def __init__(self, base_url: Optional[str] = None, http_client: Optional[httpx.AsyncClient] = None):
        self.base_url = (base_url or JSONPLACEHOLDER_SERVER_URL).rstrip("/")
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient()

    async def __aenter__(self) -> "JsonPlaceholderClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http.aclose()

    async def _get(self, operation_id: str, resource: str, adapter: TypeAdapter, **path_params: Any) -> Any:
        path = JSONPLACEHOLDER_ENDPOINTS[operation_id].format(**path_params)
        url = f"{self.base_url}{path}"
        logger.debug(f"GET {url} ({operation_id})")

        try:
            response = await self._http.get(url)
        except httpx.HTTPError as e:
            logger.warning(f"Request for {resource} failed: {e}")
            raise FetchError(f"Failed to fetch {resource}: {e}") from e

        if not response.is_success:
            logger.warning(f"Request for {resource} returned HTTP {response.status_code}")
            raise FetchError(f"Failed to fetch {resource}: HTTP {response.status_code}")

        try:
            return adapter.validate_json(response.content)
        except ValidationError as e:
            logger.warning(f"Response for {resource} did not match the expected shape: {e.error_count()} error(s)")
            raise FetchError(f"Failed to fetch {resource}: unexpected response format") from e

    # --- Posts ---

    async def get_posts(self) -> List[Post]:
        return await self._get("listPosts", "posts", PostList)

    async def get_post(self, post_id: int) -> Post:
        return await self._get("getPost", f"post {post_id}", _POST, id=post_id)

    async def get_post_comments(self, post_id: int) -> List[Comment]:
        return await self._get("listPostComments", f"comments for post {post_id}", CommentList, id=post_id)

    # --- Users ---

    async def get_users(self) -> List[User]:
        return await self._get("listUsers", "users", UserList)

    async def get_user(self, user_id: int) -> User:
        return await self._get("getUser", f"user {user_id}", _USER, id=user_id)

    async def get_user_posts(self, user_id: int) -> List[Post]:
        return await self._get("listUserPosts", f"posts for user {user_id}", PostList, id=user_id)


_POST = TypeAdapter(Post)
_USER = TypeAdapter(User)


def get_jsonplaceholder_client(base_url: Optional[str] = None) -> JsonPlaceholderClient:
    """Returns a client bound to the configured JSONPlaceholder base URL."""
    return JsonPlaceholderClient(base_url=base_url)
