import unittest

from requests import HTTPError

from domolib.plumbing import content, data
from domolib.plumbing.common import State

from .plumbing import FakeTransport


class TestPage(unittest.TestCase):

    def test_get_cards(self):
        transport = FakeTransport({"cards": [{"id": 1}, {"id": 2}]})
        self.assertEqual(content.get_page_cards(transport, 42), [{"id": 1}, {"id": 2}])
        self.assertEqual(transport.calls, [("GET", "/api/content/v3/stacks/42/cards", None)])

    def test_delete_page_and_cards(self):
        transport = FakeTransport({"cards": [{"id": 3}, {"id": 1}, {"id": 2}]})
        result = content.delete_page_and_cards(transport, 42)
        self.assertEqual(transport.calls, [
            ("GET", "/api/content/v3/stacks/42/cards", None),
            ("DELETE", "/api/content/v1/cards/bulk?cardIds=3,1,2", None),
            ("DELETE", "/api/content/v1/pages/42", None),
        ])
        self.assertIs(result.value, True)
        self.assertEqual(result.state, State.success)

    def test_delete_empty_page(self):
        transport = FakeTransport({"cards": []})
        result = content.delete_page_and_cards(transport, 42)
        self.assertEqual([call[1] for call in transport.calls], [
            "/api/content/v3/stacks/42/cards",
            "/api/content/v1/cards/bulk?cardIds=",
            "/api/content/v1/pages/42",
        ])
        self.assertTrue(result)

    def test_delete_cards_failure(self):
        transport = FakeTransport({"cards": [{"id": 1}]}, HTTPError("403 Forbidden"))
        with self.assertLogs("domolib.plumbing.api", level="ERROR"):
            with self.assertRaises(HTTPError):
                content.delete_page_and_cards(transport, 42)
        self.assertEqual(len(transport.calls), 2)

    def test_get_cards_failure(self):
        transport = FakeTransport(HTTPError("404 Not Found"))
        with self.assertLogs("domolib.plumbing.api", level="ERROR"):
            with self.assertRaises(HTTPError):
                content.delete_page_and_cards(transport, 42)
        self.assertEqual(len(transport.calls), 1)

    def test_delete_page(self):
        transport = FakeTransport()
        self.assertEqual(content.delete_page(transport, "7").state, State.success)
        self.assertEqual(transport.calls, [("DELETE", "/api/content/v1/pages/7", None)])


class TestAccessToken(unittest.TestCase):

    def test_delete(self):
        transport = FakeTransport()
        result = data.delete_access_token(transport, 99)
        self.assertEqual(result.state, State.success)
        self.assertEqual(transport.calls, [("DELETE", "api/data/v1/accesstokens/99", None)])

    def test_delete_twice(self):
        transport = FakeTransport(None, HTTPError("404 Not Found"))
        data.delete_access_token(transport, 99)
        with self.assertLogs("domolib.plumbing.api", level="ERROR"):
            with self.assertRaises(HTTPError):
                data.delete_access_token(transport, 99)
        self.assertEqual(len(transport.calls), 2)


if __name__ == "__main__":
    unittest.main()
