from __future__ import annotations

from tests.base import ApiTestCase

REGISTRATION = {
    'username': 'meera_k',
    'password': 'handloom42',
    'name': 'Meera Krishnan',
    'businessName': 'Handloom House',
    'email': 'meera@handloomhouse.in',
    'phone': '+91 9000000001',
}


class RegisterTests(ApiTestCase):
    def test_register_returns_user_without_password(self) -> None:
        response = self.client.post('/api/auth/register', json=REGISTRATION)
        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body['id'], 2)
        self.assertEqual(body['username'], 'meera_k')
        self.assertEqual(body['businessName'], 'Handloom House')
        self.assertIn('createdAt', body)
        self.assertNotIn('password', body)

    def test_password_is_not_stored_in_clear(self) -> None:
        self.client.post('/api/auth/register', json=REGISTRATION)
        stored = self.store.users.get(2)
        self.assertNotEqual(stored.password, REGISTRATION['password'])

    def test_duplicate_username_conflicts(self) -> None:
        response = self.client.post('/api/auth/register', json={**REGISTRATION, 'username': 'sophia_patel'})
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json(), {'message': 'Username already exists'})
        self.assertEqual(self.store.users.count(), 1)

    def test_duplicate_email_conflicts(self) -> None:
        response = self.client.post('/api/auth/register', json={**REGISTRATION, 'email': 'Sophia@EcoTextiles.com'})
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json(), {'message': 'Email already registered'})

    def test_missing_fields_are_rejected(self) -> None:
        body = {k: v for k, v in REGISTRATION.items() if k != 'businessName'}
        response = self.client.post('/api/auth/register', json=body)
        self.assertEqual(response.status_code, 400)
        payload = response.json()
        self.assertEqual(payload['message'], 'Validation error')
        self.assertTrue(any('businessName' in error for error in payload['errors']))
        self.assertEqual(self.store.users.count(), 1)

    def test_invalid_email_is_rejected(self) -> None:
        response = self.client.post('/api/auth/register', json={**REGISTRATION, 'email': 'not-an-email'})
        self.assertEqual(response.status_code, 400)

    def test_short_password_is_accepted(self) -> None:
        response = self.client.post('/api/auth/register', json={**REGISTRATION, 'password': 'abc'})
        self.assertEqual(response.status_code, 201)
        login = self.client.post('/api/auth/login', json={'username': 'meera_k', 'password': 'abc'})
        self.assertEqual(login.status_code, 200)

    def test_password_over_72_bytes_is_rejected(self) -> None:
        # 30 characters, 90 bytes in UTF-8
        response = self.client.post('/api/auth/register', json={**REGISTRATION, 'password': '\u0928' * 30})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['message'], 'Validation error')
        self.assertTrue(any('password' in error for error in response.json()['errors']))
        self.assertEqual(self.store.users.count(), 1)

    def test_password_of_72_bytes_is_accepted(self) -> None:
        response = self.client.post('/api/auth/register', json={**REGISTRATION, 'password': 'p' * 72})
        self.assertEqual(response.status_code, 201)


class LoginTests(ApiTestCase):
    def test_login_with_seeded_user(self) -> None:
        response = self.client.post('/api/auth/login', json={'username': 'sophia_patel', 'password': 'password123'})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body['id'], 1)
        self.assertEqual(body['email'], 'sophia@ecotextiles.com')
        self.assertNotIn('password', body)

    def test_login_after_register(self) -> None:
        self.client.post('/api/auth/register', json=REGISTRATION)
        response = self.client.post('/api/auth/login', json={'username': 'meera_k', 'password': 'handloom42'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['id'], 2)

    def test_wrong_password_and_unknown_user_look_the_same(self) -> None:
        wrong_password = self.client.post(
            '/api/auth/login', json={'username': 'sophia_patel', 'password': 'password124'}
        )
        unknown_user = self.client.post(
            '/api/auth/login', json={'username': 'nobody', 'password': 'password123'}
        )
        self.assertEqual(wrong_password.status_code, 401)
        self.assertEqual(unknown_user.status_code, 401)
        self.assertEqual(wrong_password.json(), unknown_user.json())
        self.assertEqual(wrong_password.json(), {'message': 'Invalid credentials'})

    def test_overlong_wrong_password_is_invalid_credentials(self) -> None:
        response = self.client.post('/api/auth/login', json={'username': 'sophia_patel', 'password': 'x' * 100})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {'message': 'Invalid credentials'})

    def test_login_requires_password(self) -> None:
        response = self.client.post('/api/auth/login', json={'username': 'sophia_patel'})
        self.assertEqual(response.status_code, 400)


class UserLookupTests(ApiTestCase):
    def test_get_user(self) -> None:
        response = self.client.get('/api/users/1')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['name'], 'Sophia Patel')
        self.assertNotIn('password', response.json())

    def test_non_numeric_id(self) -> None:
        response = self.client.get('/api/users/abc')
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['message'], 'Validation error')

    def test_unknown_user(self) -> None:
        response = self.client.get('/api/users/99')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {'message': 'User not found'})
