"""Telegraph account data model."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..content_converter.errors import NodeFormatError


@dataclass
class Account:
    """Telegraph account as returned by createAccount/getAccountInfo.

    Every field is optional: the service returns only the fields that were
    requested.

    Attributes:
        short_name: Account name, shown to the user above the "Edit/Publish" button
        author_name: Default author name used when creating new pages
        author_url: Default profile link opened when the author name is clicked
        access_token: Access token of the account (createAccount and revokeAccessToken only)
        auth_url: One-time URL that authorizes a browser on telegra.ph
        page_count: Number of pages belonging to the account
    """
    short_name: Optional[str] = None
    author_name: Optional[str] = None
    author_url: Optional[str] = None
    access_token: Optional[str] = None
    auth_url: Optional[str] = None
    page_count: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Account":
        """Build an Account from the API's decoded account object."""
        if not isinstance(data, dict):
            raise NodeFormatError(
                f"expected an object, got {type(data).__name__}", path="account"
            )
        return cls(
            short_name=data.get("short_name"),
            author_name=data.get("author_name"),
            author_url=data.get("author_url"),
            access_token=data.get("access_token"),
            auth_url=data.get("auth_url"),
            page_count=data.get("page_count"),
        )
