# screens.py
import logging
from typing import Any, Dict, List, Optional

from jsonplaceholder.client import JsonPlaceholderClient
from .controller import ResourceController, ResourceState
from .filters import POST_SEARCH_FIELDS, USER_SEARCH_FIELDS, ListFilter
from .presentation import Panel, select_panel

logger = logging.getLogger(__name__)

# --- Centralized Screen Configuration ---
# One entry per data view: what it fetches, which collection it filters and how
# its panels read. Every screen runs through the same controller/filter/panel
# code; only this table differs.
SCREEN_CONFIG: Dict[str, Dict[str, Any]] = {
    'posts': {
        'title': 'Posts',
        'fetchers': lambda client: {'posts': lambda _: client.get_posts()},
        'collection': 'posts',
        'search_fields': POST_SEARCH_FIELDS,
        'template': 'posts.html',
        'noun': 'posts',
        'skeleton': ('card', 9),
        'copy': {
            'empty_title': 'No posts found',
            'empty_text': 'There are no posts to show.',
            'no_match_title': 'No posts found',
            'no_match_text': 'Try adjusting your search terms.',
            'search_placeholder': 'Search posts...',
        },
    },
    'post_detail': {
        'title': 'Post',
        'fetchers': lambda client: {'post': client.get_post, 'comments': client.get_post_comments},
        'collection': None,
        'search_fields': (),
        'template': 'post_detail.html',
        'noun': 'post',
        'skeleton': ('list', 3),
        'copy': {
            'back_label': 'Back to Posts',
            'back_endpoint': 'posts',
            'empty_related': 'No comments yet.',
        },
    },
    'users': {
        'title': 'Users',
        'fetchers': lambda client: {'users': lambda _: client.get_users()},
        'collection': 'users',
        'search_fields': USER_SEARCH_FIELDS,
        'template': 'users.html',
        'noun': 'users',
        'skeleton': ('card', 6),
        'copy': {
            'empty_title': 'No users found',
            'empty_text': 'There are no users to show.',
            'no_match_title': 'No users found',
            'no_match_text': 'Try adjusting your search terms.',
            'search_placeholder': 'Search users...',
        },
    },
    'user_detail': {
        'title': 'User',
        'fetchers': lambda client: {'user': client.get_user, 'posts': client.get_user_posts},
        'collection': None,
        'search_fields': (),
        'template': 'user_detail.html',
        'noun': 'user',
        'skeleton': ('card', 3),
        'copy': {
            'back_label': 'Back to Users',
            'back_endpoint': 'users',
            'empty_related': 'No posts yet.',
        },
    },
}


class Screen:
    """One visit to a data view: a controller, an optional list filter and the panel they imply."""

    def __init__(self, name: str, client: JsonPlaceholderClient):
        if name not in SCREEN_CONFIG:
            raise KeyError(f"Unknown screen: {name}")
        self.name = name
        self.config = SCREEN_CONFIG[name]
        self.controller = ResourceController(self.config['fetchers'](client), name=name)
        self.filter: Optional[ListFilter] = None
        if self.config['collection']:
            self.filter = ListFilter(self.config['search_fields'])

    @property
    def state(self) -> ResourceState:
        return self.controller.state

    @property
    def is_list(self) -> bool:
        return self.filter is not None

    async def load(self, identity: Any = None, query: Optional[str] = None) -> ResourceState:
        if self.filter is not None:
            self.filter.set_query(query)
        await self.controller.trigger(identity)
        self._sync_filter()
        return self.state

    async def retry(self) -> ResourceState:
        await self.controller.retry()
        self._sync_filter()
        return self.state

    def set_query(self, query: Optional[str]) -> None:
        if self.filter is None:
            raise TypeError(f"Screen '{self.name}' has no filter")
        self.filter.set_query(query)

    def _sync_filter(self) -> None:
        if self.filter is None:
            return
        data = self.state.data or {}
        self.filter.set_source(data.get(self.config['collection']))

    @property
    def items(self) -> Optional[List[Any]]:
        return self.filter.filtered if self.filter is not None else None

    @property
    def panel(self) -> Panel:
        if self.filter is None:
            return select_panel(self.state)
        return select_panel(self.state, self.filter.filtered, self.filter.total)

    def context(self) -> Dict[str, Any]:
        """Template variables for this screen."""
        data = self.state.data or {}
        return {
            'screen': self.name,
            'title': self.config['title'],
            'noun': self.config['noun'],
            'copy': self.config['copy'],
            'skeleton': self.config['skeleton'],
            'state': self.state,
            'panel': self.panel.value,
            'data': data,
            'items': self.items,
            'query': self.filter.query if self.filter is not None else '',
            'total': self.filter.total if self.filter is not None else None,
        }

    def to_dict(self) -> Dict[str, Any]:
        """JSON view of the screen: the {data, isLoading, error} record plus the filter result."""
        payload = {
            'status': 'error' if self.panel is Panel.ERROR else 'success',
            'screen': self.name,
            'panel': self.panel.value,
            'state': self.state.to_dict(),
        }
        if self.panel is Panel.ERROR:
            payload['message'] = self.state.error
        if self.filter is not None:
            payload['query'] = self.filter.query
            payload['total'] = self.filter.total
            payload['filtered'] = [item.model_dump() for item in self.filter.filtered]
        return payload
