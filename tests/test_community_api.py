from __future__ import annotations

from tests.base import ApiTestCase


class ForumPostApiTests(ApiTestCase):
    def test_create_post(self) -> None:
        response = self.client.post('/api/forum-posts', json={
            'userId': 1,
            'title': 'Hello World!',
            'content': 'Testing',
            'tags': ['a', 'b'],
        })
        self.assertEqual(response.status_code, 201)
        post = response.json()
        self.assertEqual(post['responseCount'], 0)
        self.assertEqual(post['tags'], ['a', 'b'])
        self.assertIsInstance(post['id'], int)
        self.assertEqual(post['id'], 4)

        listed = self.client.get('/api/forum-posts').json()
        self.assertIn(post, listed)
        self.assertEqual(listed[-1], post)

    def test_client_cannot_set_response_count(self) -> None:
        response = self.client.post('/api/forum-posts', json={
            'userId': 1, 'title': 'Boosted', 'content': 'Hi', 'responseCount': 50,
        })
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()['responseCount'], 0)
        self.assertEqual(response.json()['tags'], [])

    def test_missing_title_is_rejected(self) -> None:
        response = self.client.post('/api/forum-posts', json={'userId': 1, 'content': 'No title'})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(self.store.forum_posts.count(), 3)

    def test_tags_must_be_strings(self) -> None:
        response = self.client.post('/api/forum-posts', json={
            'userId': 1, 'title': 'Tags', 'content': 'Hi', 'tags': [{'name': 'x'}],
        })
        self.assertEqual(response.status_code, 400)

    def test_filter_by_tag(self) -> None:
        response = self.client.get('/api/forum-posts', params={'tag': 'Marketing'})
        self.assertEqual([p['title'] for p in response.json()], ['Digital marketing on a small budget'])

    def test_get_post(self) -> None:
        self.assertEqual(self.client.get('/api/forum-posts/1').json()['title'], 'Tips for EU Export Compliance')
        self.assertEqual(self.client.get('/api/forum-posts/10').status_code, 404)
