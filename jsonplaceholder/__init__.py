from .client import FetchError, JsonPlaceholderClient, get_jsonplaceholder_client
from .jsonplaceholder_types import Address, Comment, Company, Geo, Post, User

__all__ = [
    "Address",
    "Comment",
    "Company",
    "FetchError",
    "Geo",
    "JsonPlaceholderClient",
    "Post",
    "User",
    "get_jsonplaceholder_client",
]
