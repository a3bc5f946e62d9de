"""
Page (stack) and card management.
"""

import logging
from typing import Any, Dict, List, Union

from .api import request, Transport
from .common import Collect, Result, State


LOG = logging.getLogger(__name__)

ID = Union[int, str]


def get_page_cards(transport: Transport, page_id: ID) -> List[Dict[str, Any]]:
    """
    Look up all cards shown on a page.
    """
    page = request(transport, "GET", "/api/content/v3/stacks/{}/cards".format(page_id))
    return page["cards"]


def delete_cards(transport: Transport, *card_ids: ID) -> Result[None]:
    """
    Delete multiple cards in a single request.
    """
    ids = ",".join(str(card_id) for card_id in card_ids)
    request(transport, "DELETE", "/api/content/v1/cards/bulk?cardIds={}".format(ids))
    LOG.debug("Deleted cards: %r", card_ids)
    return Result(State.success)


def delete_page(transport: Transport, page_id: ID) -> Result[None]:
    """
    Delete a page.  The API rejects pages that still hold cards.
    """
    request(transport, "DELETE", "/api/content/v1/pages/{}".format(page_id))
    LOG.debug("Deleted page: %r", page_id)
    return Result(State.success)


@Result.collect
def delete_page_and_cards(transport: Transport, page_id: ID) -> Collect[bool]:
    """
    Delete all cards on a page, then the page itself.

    The bulk card deletion is always sent, even for an empty page.  A failure part-way leaves any
    earlier deletions in place.
    """
    cards = get_page_cards(transport, page_id)
    yield delete_cards(transport, *(card["id"] for card in cards))
    yield delete_page(transport, page_id)
    return True
