"""
Scripts to remove pages and access tokens.
"""

from .utils import confirm, entrypoint
from ..tasks import content


@entrypoint
def delete_page(page: str):
    """
    Delete a page, and every card on it.

    Usage: {script} PAGE
    """
    confirm("Delete page {} and all of its cards?".format(page))
    print(content.remove_page(page))


@entrypoint
def revoke_token(token: str):
    """
    Revoke an API access token.

    Usage: {script} TOKEN
    """
    confirm("Revoke access token {}?".format(token))
    print(content.revoke_token(token))
