"""
Scripts to look up users and change their reporting lines.
"""

from typing import List

from .utils import confirm, entrypoint, error
from ..plumbing import identity
from ..plumbing.api import Transport
from ..tasks import users


@entrypoint
def show(transport: Transport, person: str):
    """
    Print the attributes of a user.

    Usage: {script} PERSON
    """
    attrs = identity.get_person(transport, person)
    if not attrs:
        error("No attributes found for {}".format(person), exit=1)
    width = max(len(key) for key in attrs)
    for key, value in sorted(attrs.items()):
        print("{}  {}".format(key.ljust(width), "" if value is None else value))


@entrypoint
def grant(transport: Transport, grant: List[str]):
    """
    List all users holding any of the given grants.

    Usage: {script} GRANT...
    """
    for user in identity.get_users_by_grant(transport, *grant):
        print("{}\t{}\t{}".format(user["id"], user.get("displayName", ""),
                                  user.get("emailAddress", "")))


@entrypoint
def manager(user: str, manager: str):
    """
    Set the manager that a user reports to.

    Usage: {script} USER MANAGER
    """
    confirm("Make {} report to {}?".format(user, manager))
    print(users.assign_manager(user, manager))
