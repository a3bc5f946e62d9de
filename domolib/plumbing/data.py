"""
Data platform management.
"""

import logging
from typing import Union

from .api import request, Transport
from .common import Result, State


LOG = logging.getLogger(__name__)


def delete_access_token(transport: Transport, access_token_id: Union[int, str]) -> Result[None]:
    """
    Revoke an API access token.  Revoking an unknown or already-revoked token fails in the API.
    """
    request(transport, "DELETE", "api/data/v1/accesstokens/{}".format(access_token_id))
    LOG.debug("Revoked access token: %r", access_token_id)
    return Result(State.success)
