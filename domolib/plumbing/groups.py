"""
Group membership management.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Union

from .api import request, Transport
from .common import Result, State


LOG = logging.getLogger(__name__)

Member = Dict[str, Any]

ID = Union[int, str]


def _user_refs(members: Iterable[Mapping[str, Any]]) -> List[Member]:
    return [{"id": member["id"], "type": "USER"} for member in members]


def get_group_members(transport: Transport, group_id: ID) -> List[Member]:
    """
    Look up the users directly in a group, excluding any nested groups.
    """
    url = "/api/content/v2/groups/{}/permissions?includeUsers=true".format(group_id)
    resp = request(transport, "GET", url)
    return [member for member in resp["members"] if member.get("type") != "GROUP"]


def update_group_members(transport: Transport, group_id: ID,
                         add_members: Iterable[Mapping[str, Any]],
                         remove_members: Iterable[Mapping[str, Any]]) -> Result[None]:
    """
    Add and remove users from a group in one request.

    Members are given as records with at least an `id`.  Any user in both lists is removed.
    """
    remove = _user_refs(remove_members)
    remove_ids = {member["id"] for member in remove}
    add = [member for member in _user_refs(add_members) if member["id"] not in remove_ids]
    body = [{"groupId": group_id, "addMembers": add, "removeMembers": remove}]
    request(transport, "PUT", "/api/content/v2/groups/access", body)
    LOG.debug("Updated group members: %r +%r -%r", group_id,
              [member["id"] for member in add], sorted(remove_ids, key=str))
    return Result(State.success)
