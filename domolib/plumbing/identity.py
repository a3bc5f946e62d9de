"""
User lookup and management.

Users are passed around as the plain `dict` records returned by the API.  IDs may come back as
either numbers or strings depending on the endpoint.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .api import request, Transport
from .common import generate_uuid, InvalidResponseError, Result, State


LOG = logging.getLogger(__name__)

User = Dict[str, Any]

ID = Union[int, str]

PAGE_SIZE = 100
"""
Number of users requested per page of search results.
"""


def flatten_attributes(attributes: Iterable[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Convert a list of `{"key": ..., "values": [...]}` attributes to a plain mapping, taking the
    first value of each.  Keys without a list of values map to `None`.
    """
    flat = {}
    for attr in attributes:
        values = attr.get("values")
        flat[attr["key"]] = values[0] if isinstance(values, list) and values else None
    return flat


def get_person(transport: Transport, person: ID) -> Optional[Dict[str, Any]]:
    """
    Look up a user's detailed attributes by ID.

    Returns `None` if the user has no attributes, or if the response couldn't be interpreted.
    """
    resp = request(transport, "GET", "api/identity/v1/users/{}?parts=detailed".format(person))
    try:
        attributes = resp["users"][0].get("attributes")
        if not attributes:
            return None
        return flatten_attributes(attributes)
    except (AttributeError, IndexError, KeyError, TypeError):
        LOG.exception("Error processing user attributes: %r", person)
        return None


def bulk_update_users(transport: Transport, users: List[User]) -> Result[bool]:
    """
    Update multiple users in a single transaction.
    """
    body = {"transactionId": generate_uuid(), "users": users}
    # TODO: The body above isn't sent, so the API receives an empty update.  Confirm with the API
    # owners whether the payload should be attached before changing what callers rely on.
    request(transport, "PUT", "api/content/v2/users/bulk")
    LOG.debug("Bulk updated users: %r", body["transactionId"])
    return Result(State.success, True)


def update_manager(transport: Transport, user_id: ID, manager_id: ID) -> Result[None]:
    """
    Set the manager (`reportsTo`) of a user.
    """
    url = "/api/content/v2/users/{}/teams".format(user_id)
    request(transport, "POST", url, {"reportsTo": [{"userId": manager_id}]})
    LOG.debug("Updated manager: %r -> %r", user_id, manager_id)
    return Result(State.success)


def get_users_by_grant(transport: Transport, *grants: str) -> List[User]:
    """
    Search for all users holding any of the given grants (authorities), a page at a time.

    User IDs in the result are always strings.
    """
    authorities = ",".join(grants)
    users: List[User] = []
    offset = 0
    while True:
        url = ("/api/content/v1/typeahead?type=userByEmail&authorities={}&limit={}&offset={}"
               .format(authorities, PAGE_SIZE, offset))
        resp = request(transport, "GET", url)
        LOG.debug("Typeahead response: %r", resp)
        if not isinstance(resp, dict) or resp.get("users") is None:
            msg = "Invalid response from typeahead for grants {!r} at offset {}"
            raise InvalidResponseError(msg.format(authorities, offset))
        page = resp["users"]
        for user in page:
            user["id"] = str(user["id"])
        users.extend(page)
        if len(page) < PAGE_SIZE:
            return users
        offset += PAGE_SIZE
