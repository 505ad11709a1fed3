from __future__ import annotations

from main import app
from tests.base import ApiTestCase


class AppTests(ApiTestCase):
    def test_root_and_health(self) -> None:
        root = self.client.get('/')
        self.assertEqual(root.status_code, 200)
        self.assertEqual(root.json()['status'], 'ok')
        self.assertEqual(self.client.get('/health').json(), {'status': 'healthy'})

    def test_unknown_route_uses_message_body(self) -> None:
        response = self.client.get('/api/nope')
        self.assertEqual(response.status_code, 404)
        self.assertIn('message', response.json())

    def test_store_is_rebuilt_on_restart(self) -> None:
        self.client.delete('/api/products/1')
        self.client.__exit__(None, None, None)
        self.client.__enter__()
        self.assertIsNot(app.state.store, self.store)
        self.assertEqual(self.client.get('/api/products/1').status_code, 200)

    def test_unexpected_errors_become_500(self) -> None:
        def broken_list(*args, **kwargs):
            raise RuntimeError('store offline')

        self.store.suppliers.list = broken_list
        response = self.client.get('/api/suppliers')
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()['message'], 'store offline')
