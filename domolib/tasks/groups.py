"""
Group membership changes.
"""

import logging
from typing import Union

from ..plumbing import api, groups
from ..plumbing.common import Collect, Result, State


LOG = logging.getLogger(__name__)

ID = Union[int, str]


@Result.collect
def add_members(group_id: ID, *user_ids: ID) -> Collect[None]:
    """
    Add users to a group.
    """
    with api.context() as transport:
        yield groups.update_group_members(transport, group_id,
                                          [{"id": user_id} for user_id in user_ids], [])


@Result.collect
def remove_members(group_id: ID, *user_ids: ID) -> Collect[None]:
    """
    Remove users from a group.
    """
    with api.context() as transport:
        yield groups.update_group_members(transport, group_id, [],
                                          [{"id": user_id} for user_id in user_ids])


@Result.collect
def sync_members(group_id: ID, *user_ids: ID) -> Collect[None]:
    """
    Make the given users the only direct members of a group.  Nested groups are left alone.
    """
    with api.context() as transport:
        members = groups.get_group_members(transport, group_id)
        current = {str(member["id"]): member for member in members}
        wanted = {str(user_id): user_id for user_id in user_ids}
        add = [{"id": wanted[key]} for key in wanted if key not in current]
        remove = [current[key] for key in current if key not in wanted]
        if not (add or remove):
            LOG.debug("Group members already in sync: %r", group_id)
            yield Result(State.unchanged)
            return
        yield groups.update_group_members(transport, group_id, add, remove)
