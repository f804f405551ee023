from __future__ import annotations

import asyncpg
import pytest

from conftest import comment_row

BODY = "I am 100% sure that we're not completely sure."


def _fk_error(detail):
    exc = asyncpg.exceptions.ForeignKeyViolationError("insert or update on table \"comments\" violates foreign key constraint")
    exc.detail = detail
    return exc


def test_post_comment(client, db):
    db.queue(comment_row(comment_id=19, article_id=5, author="butter_bridge", body=BODY, votes=0))
    resp = client.post("/api/articles/5/comments", json={"username": "butter_bridge", "body": BODY})
    assert resp.status_code == 201
    comment = resp.json()["comment"]
    assert comment["comment_id"] == 19
    assert comment["votes"] == 0
    assert comment["article_id"] == 5
    assert comment["author"] == "butter_bridge"
    assert comment["body"] == BODY
    assert comment["created_at"]

    method, sql, args = db.calls[0]
    assert method == "fetchrow"
    assert "INSERT INTO comments" in sql
    assert args == (5, "butter_bridge", BODY)


@pytest.mark.parametrize(
    "payload",
    [{}, {"body": "hi"}, {"username": "butter_bridge"}, {"username": "", "body": "hi"}, None, [1, 2]],
)
def test_post_comment_malformed_body(client, db, payload):
    if payload is None:
        resp = client.post("/api/articles/5/comments")
    else:
        resp = client.post("/api/articles/5/comments", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"msg": "Malformed body/missing required fields"}
    assert db.calls == []


def test_post_comment_unknown_user(client, db):
    db.queue(_fk_error('Key (author)=(5) is not present in table "users".'))
    resp = client.post("/api/articles/5/comments", json={"username": 5, "body": 5})
    assert resp.status_code == 404
    assert resp.json() == {"msg": 'Key (author)=(5) is not present in table "users".'}
    assert db.calls[0][2] == (5, "5", "5")


def test_post_comment_unknown_article(client, db):
    db.queue(_fk_error('Key (article_id)=(5432) is not present in table "articles".'))
    resp = client.post("/api/articles/5432/comments", json={"username": "butter_bridge", "body": BODY})
    assert resp.status_code == 404
    assert resp.json() == {"msg": 'Key (article_id)=(5432) is not present in table "articles".'}


def test_post_comment_out_of_range(client, db):
    resp = client.post("/api/articles/23423421123/comments", json={"username": "butter_bridge", "body": BODY})
    assert resp.status_code == 400
    assert resp.json() == {"msg": "Out of range for type integer - choose a smaller number"}
    assert db.calls == []


def test_post_comment_invalid_id(client, db):
    resp = client.post("/api/articles/apples/comments", json={"username": "butter_bridge", "body": BODY})
    assert resp.status_code == 400
    assert resp.json() == {"msg": "Invalid input"}


def test_delete_comment_then_again(client, db):
    db.queue("DELETE 1", "DELETE 0")
    first = client.delete("/api/comments/5")
    assert first.status_code == 204
    assert first.content == b""

    second = client.delete("/api/comments/5")
    assert second.status_code == 404
    assert second.json() == {"msg": "Comment does not exist"}
    assert [c[2] for c in db.calls] == [(5,), (5,)]


def test_delete_comment_invalid_id(client, db):
    resp = client.delete("/api/comments/pineapple")
    assert resp.status_code == 400
    assert resp.json() == {"msg": "Invalid input"}
    assert db.calls == []
