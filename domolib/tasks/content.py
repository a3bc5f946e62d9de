"""
Removal of content and credentials.
"""

from typing import Union

from ..plumbing import api, content, data
from ..plumbing.common import Collect, Result


@Result.collect
def remove_page(page_id: Union[int, str]) -> Collect[None]:
    """
    Delete a page along with all of its cards.
    """
    with api.context() as transport:
        yield content.delete_page_and_cards(transport, page_id)


@Result.collect
def revoke_token(access_token_id: Union[int, str]) -> Collect[None]:
    """
    Revoke an API access token.
    """
    with api.context() as transport:
        yield data.delete_access_token(transport, access_token_id)
