"""
Updates to user records and reporting lines.
"""

from typing import List, Union

from ..plumbing import api, identity
from ..plumbing.common import Collect, Result


@Result.collect
def assign_manager(user_id: Union[int, str], manager_id: Union[int, str]) -> Collect[None]:
    """
    Make one user report to another.
    """
    with api.context() as transport:
        yield identity.update_manager(transport, user_id, manager_id)


@Result.collect
def update_users(users: List[identity.User]) -> Collect[None]:
    """
    Submit a batch of user record updates.
    """
    if not users:
        return
    with api.context() as transport:
        yield identity.bulk_update_users(transport, users)
