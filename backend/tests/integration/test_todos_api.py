"""End-to-end scenarios for the ``/todos`` resource (in-memory store)."""

from __future__ import annotations

from tests.helpers.assertions import assert_json_keys, assert_problem
from tests.helpers.auth import auth_headers, issue_token
from tests.helpers.utils import run_concurrently

TODOS = "/todos"


def _create(client, headers, content):
    return client.post(TODOS, json={"content": content}, headers=headers)


class TestCreateTodo:
    def test_create_returns_todo_with_owner(self, client, auth_header, user_id) -> None:
        """A valid token and content yield 200 with the stored todo."""

        resp = _create(client, auth_header, "Complete E2E testing")

        assert resp.status_code == 200
        body = resp.get_json()
        assert_json_keys(body, {"id", "content", "userId"})
        assert body["content"] == "Complete E2E testing"
        assert body["userId"] == user_id

    def test_duplicate_content_gets_new_id(self, client, auth_header) -> None:
        first = _create(client, auth_header, "Duplicate").get_json()
        second = _create(client, auth_header, "Duplicate").get_json()

        assert first["id"] != second["id"]
        assert first["content"] == second["content"]

    def test_concurrent_creates_get_distinct_ids(self, app, store, auth_header) -> None:
        """Parallel POSTs each get their own todo; none is lost."""

        def post(i: int) -> int:
            resp = _create(app.test_client(), auth_header, f"Concurrent {i}")
            assert resp.status_code == 200
            return resp.get_json()["id"]

        ids = run_concurrently(post, range(150), workers=16)

        assert len(set(ids)) == 150
        assert store.count() == 150

    def test_empty_content_rejected(self, client, auth_header, store) -> None:
        for payload in ({"content": ""}, {"content": "   "}, {"content": None}, {}):
            resp = client.post(TODOS, json=payload, headers=auth_header)
            assert_problem(resp, 400, "Content cannot be empty")
        assert store.count() == 0

    def test_non_json_body_treated_as_empty(self, client, auth_header) -> None:
        resp = client.post(TODOS, data="content=x", headers=auth_header)

        assert_problem(resp, 400, "Content cannot be empty")

    def test_non_string_content_is_unprocessable(self, client, auth_header) -> None:
        resp = client.post(TODOS, json={"content": 123}, headers=auth_header)

        body = assert_problem(resp, 422)
        assert "content" in body["details"]["errors"]

    def test_unknown_fields_ignored(self, client, auth_header, user_id) -> None:
        resp = client.post(TODOS, json={"content": "x", "userId": 999}, headers=auth_header)

        assert resp.status_code == 200
        assert resp.get_json()["userId"] == user_id

    def test_sql_like_content_is_stored_verbatim(self, client, auth_header) -> None:
        payload = "'); DROP TABLE todos; --"
        _create(client, auth_header, "before")

        resp = _create(client, auth_header, payload)

        assert resp.status_code == 200
        contents = [t["content"] for t in client.get(TODOS, headers=auth_header).get_json()]
        assert contents == ["before", payload]


class TestListTodos:
    def test_empty_list(self, client, auth_header) -> None:
        resp = client.get(TODOS, headers=auth_header)

        assert resp.status_code == 200
        assert resp.get_json() == []

    def test_lists_own_todos_in_creation_order(self, client, auth_header, user_id) -> None:
        a = _create(client, auth_header, "a").get_json()
        _create(client, auth_headers(issue_token(user_id + 1)), "someone else")
        b = _create(client, auth_header, "b").get_json()

        todos = client.get(TODOS, headers=auth_header).get_json()

        assert todos == [a, b]
        assert all(t["userId"] == user_id for t in todos)


class TestDeleteTodos:
    def test_delete_by_content_lookup(self, client, auth_header) -> None:
        """Find a todo by its content, delete it, and it is gone."""

        _create(client, auth_header, "Todo to delete")
        _create(client, auth_header, "Todo to keep")
        todos = client.get(TODOS, headers=auth_header).get_json()
        target = next(t for t in todos if t["content"] == "Todo to delete")

        resp = client.delete(f"{TODOS}/{target['id']}", headers=auth_header)

        assert resp.status_code == 200
        assert resp.get_json() == {"message": "Todo deleted", "id": target["id"]}
        remaining = [t["content"] for t in client.get(TODOS, headers=auth_header).get_json()]
        assert remaining == ["Todo to keep"]

    def test_delete_unknown_id_succeeds(self, client, auth_header) -> None:
        resp = client.delete(f"{TODOS}/424242", headers=auth_header)

        assert resp.status_code == 200
        assert resp.get_json()["id"] == 424242

    def test_delete_negative_id_succeeds(self, client, auth_header) -> None:
        keep = _create(client, auth_header, "keep").get_json()

        resp = client.delete(f"{TODOS}/-1", headers=auth_header)

        assert resp.status_code == 200
        assert resp.get_json() == {"message": "Todo deleted", "id": -1}
        assert client.get(TODOS, headers=auth_header).get_json() == [keep]

    def test_delete_huge_id_succeeds(self, client, auth_header) -> None:
        resp = client.delete(f"{TODOS}/{2**64}", headers=auth_header)

        assert resp.status_code == 200

    def test_cannot_delete_foreign_todo(self, client, auth_header, user_id) -> None:
        other = auth_headers(issue_token(user_id + 1))
        theirs = _create(client, other, "not yours").get_json()

        resp = client.delete(f"{TODOS}/{theirs['id']}", headers=auth_header)

        assert resp.status_code == 200
        assert client.get(TODOS, headers=other).get_json() == [theirs]

    def test_non_integer_id_is_not_a_route(self, client, auth_header) -> None:
        resp = client.delete(f"{TODOS}/abc", headers=auth_header)

        assert_problem(resp, 404)

    def test_delete_all_then_list_is_empty(self, client, auth_header, user_id) -> None:
        other = auth_headers(issue_token(user_id + 1))
        for content in ("one", "two", "three"):
            _create(client, auth_header, content)
        survivor = _create(client, other, "survivor").get_json()

        resp = client.delete(TODOS, headers=auth_header)

        assert resp.status_code == 200
        assert resp.get_json() == {"message": "Todos deleted", "deleted": 3}
        assert client.get(TODOS, headers=auth_header).get_json() == []
        assert client.get(TODOS, headers=other).get_json() == [survivor]

    def test_delete_all_twice(self, client, auth_header) -> None:
        _create(client, auth_header, "x")
        client.delete(TODOS, headers=auth_header)

        resp = client.delete(TODOS, headers=auth_header)

        assert resp.status_code == 200
        assert resp.get_json()["deleted"] == 0
