"""
Scripts to manage group membership.
"""

from typing import List

from .utils import confirm, entrypoint
from ..plumbing import groups as groups_p
from ..plumbing.api import Transport
from ..tasks import groups


@entrypoint
def members(transport: Transport, group: str):
    """
    List the users directly in a group.

    Usage: {script} GROUP
    """
    for member in groups_p.get_group_members(transport, group):
        print("{}\t{}".format(member["id"], member.get("displayName", "")))


@entrypoint
def add(group: str, user: List[str]):
    """
    Add users to a group.

    Usage: {script} GROUP USER...
    """
    confirm("Add {} to group {}?".format(", ".join(user), group))
    print(groups.add_members(group, *user))


@entrypoint
def remove(group: str, user: List[str]):
    """
    Remove users from a group.

    Usage: {script} GROUP USER...
    """
    confirm("Remove {} from group {}?".format(", ".join(user), group))
    print(groups.remove_members(group, *user))


@entrypoint
def sync(group: str, user: List[str]):
    """
    Replace the direct members of a group with exactly the given users.

    Usage: {script} GROUP USER...

    Nested groups are not affected.
    """
    confirm("Set the members of group {} to {}?".format(group, ", ".join(user)))
    print(groups.sync_members(group, *user))
