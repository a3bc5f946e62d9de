import unittest
from unittest.mock import Mock, patch

from domolib.plumbing import api
from domolib.plumbing.common import State
from domolib.tasks import content, groups, users

from .plumbing import FakeTransport


CONNECT = "{}.connect".format(api.__spec__.name)


class TestContent(unittest.TestCase):

    @patch(CONNECT)
    def test_remove_page(self, connect: Mock):
        transport = connect.return_value = FakeTransport({"cards": [{"id": 1}]})
        result = content.remove_page(42)
        self.assertEqual(result.state, State.success)
        self.assertEqual(len(transport.calls), 3)
        self.assertTrue(transport.closed)

    @patch(CONNECT)
    def test_revoke_token(self, connect: Mock):
        transport = connect.return_value = FakeTransport()
        self.assertTrue(content.revoke_token(99))
        self.assertEqual(transport.calls, [("DELETE", "api/data/v1/accesstokens/99", None)])


class TestUsers(unittest.TestCase):

    @patch(CONNECT)
    def test_assign_manager(self, connect: Mock):
        transport = connect.return_value = FakeTransport()
        self.assertTrue(users.assign_manager(5, 6))
        self.assertEqual(transport.calls[0][2], {"reportsTo": [{"userId": 6}]})

    @patch(CONNECT)
    def test_assign_self(self, connect: Mock):
        transport = connect.return_value = FakeTransport()
        self.assertTrue(users.assign_manager(5, "5"))
        self.assertEqual(transport.calls[0][2], {"reportsTo": [{"userId": "5"}]})

    @patch(CONNECT)
    def test_update_users(self, connect: Mock):
        transport = connect.return_value = FakeTransport()
        self.assertTrue(users.update_users([{"id": 1}]))
        self.assertEqual(transport.calls, [("PUT", "api/content/v2/users/bulk", None)])

    @patch(CONNECT)
    def test_update_no_users(self, connect: Mock):
        self.assertEqual(users.update_users([]).state, State.unchanged)
        connect.assert_not_called()


class TestGroups(unittest.TestCase):

    @patch(CONNECT)
    def test_add(self, connect: Mock):
        transport = connect.return_value = FakeTransport()
        groups.add_members(10, "1", "2")
        body = transport.calls[0][2][0]
        self.assertEqual(body["addMembers"], [{"id": "1", "type": "USER"},
                                              {"id": "2", "type": "USER"}])
        self.assertEqual(body["removeMembers"], [])

    @patch(CONNECT)
    def test_remove(self, connect: Mock):
        transport = connect.return_value = FakeTransport()
        groups.remove_members(10, "1")
        body = transport.calls[0][2][0]
        self.assertEqual(body["addMembers"], [])
        self.assertEqual(body["removeMembers"], [{"id": "1", "type": "USER"}])

    @patch(CONNECT)
    def test_sync(self, connect: Mock):
        transport = connect.return_value = FakeTransport({"members": [
            {"id": 1, "type": "USER"},
            {"id": 2, "type": "USER"},
            {"id": 8, "type": "GROUP"},
        ]})
        result = groups.sync_members(10, "2", "3")
        self.assertEqual(result.state, State.success)
        self.assertEqual(transport.calls[1], ("PUT", "/api/content/v2/groups/access", [{
            "groupId": 10,
            "addMembers": [{"id": "3", "type": "USER"}],
            "removeMembers": [{"id": 1, "type": "USER"}],
        }]))
        self.assertTrue(transport.closed)

    @patch(CONNECT)
    def test_sync_unchanged(self, connect: Mock):
        transport = connect.return_value = FakeTransport({"members": [
            {"id": 1, "type": "USER"},
            {"id": 2, "type": "USER"},
        ]})
        result = groups.sync_members(10, "2", "1")
        self.assertEqual(result.state, State.unchanged)
        self.assertFalse(result)
        self.assertEqual(len(transport.calls), 1)


if __name__ == "__main__":
    unittest.main()
