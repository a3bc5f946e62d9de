import code
import logging

from domolib import plumbing as p
from domolib.plumbing import api, content, data, groups, identity
from domolib.plumbing.common import *
from domolib.tasks import content as content_t, groups as groups_t, users as users_t


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    transport = api.connect()
    try:
        code.interact(local=globals())
    finally:
        transport.close()
