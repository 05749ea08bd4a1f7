"""
Tests for comments on team discussions.
"""

from app.models import Comment


class TestListComments:
    def test_oldest_first_with_author(self, client, admin, member, make_discussion, make_comment, auth_headers):
        discussion = make_discussion(admin)
        make_comment(member, discussion, body="first")
        make_comment(admin, discussion, body="second")

        response = client.get(f"/comments?discussionId={discussion.id}", headers=auth_headers(member))

        assert response.status_code == 200
        body = response.json()
        assert [c["body"] for c in body["data"]] == ["first", "second"]
        assert body["meta"] == {"page": 1, "total": 2, "totalPages": 1}
        comment = body["data"][0]
        assert comment["discussionId"] == discussion.id
        assert comment["authorId"] == member.id
        assert comment["author"]["firstName"] == "Mia"
        assert "passwordHash" not in comment["author"]

    def test_second_page(self, client, admin, make_discussion, make_comment, auth_headers):
        discussion = make_discussion(admin)
        for i in range(15):
            make_comment(admin, discussion, body=f"comment {i}")

        response = client.get(f"/comments?discussionId={discussion.id}&page=2", headers=auth_headers(admin))

        body = response.json()
        assert [c["body"] for c in body["data"]] == [f"comment {i}" for i in range(10, 15)]
        assert body["meta"] == {"page": 2, "total": 15, "totalPages": 2}

    def test_only_comments_of_that_discussion(self, client, admin, make_discussion, make_comment, auth_headers):
        discussion = make_discussion(admin)
        other = make_discussion(admin)
        make_comment(admin, discussion, body="here")
        make_comment(admin, other, body="elsewhere")

        response = client.get(f"/comments?discussionId={discussion.id}", headers=auth_headers(admin))

        assert [c["body"] for c in response.json()["data"]] == ["here"]

    def test_discussion_id_is_required(self, client, admin, auth_headers):
        response = client.get("/comments", headers=auth_headers(admin))

        assert response.status_code == 400
        assert response.json()["message"] == "Discussion ID is required"

    def test_unknown_discussion(self, client, admin, auth_headers):
        response = client.get("/comments?discussionId=non-existent-id", headers=auth_headers(admin))

        assert response.status_code == 404
        assert response.json()["message"] == "Discussion not found"

    def test_other_team_discussion_is_not_found(self, client, admin, outsider, make_discussion, make_comment,
                                                auth_headers):
        discussion = make_discussion(outsider)
        make_comment(outsider, discussion)

        response = client.get(f"/comments?discussionId={discussion.id}", headers=auth_headers(admin))

        assert response.status_code == 404
        assert response.json()["message"] == "Discussion not found"

    def test_requires_authentication(self, client):
        assert client.get("/comments?discussionId=anything").status_code == 401


class TestCreateComment:
    def test_member_comments(self, client, admin, member, make_discussion, auth_headers):
        discussion = make_discussion(admin)

        response = client.post("/comments", json={"discussionId": discussion.id, "body": "Nice"},
                               headers=auth_headers(member))

        assert response.status_code == 201
        created = response.json()
        assert created["body"] == "Nice"
        assert created["discussionId"] == discussion.id
        assert created["authorId"] == member.id
        assert created["author"]["id"] == member.id
        assert created["createdAt"]

    def test_body_is_stored_as_sent(self, client, admin, member, make_discussion, auth_headers):
        discussion = make_discussion(admin)

        response = client.post("/comments", json={"discussionId": discussion.id, "body": "   "},
                               headers=auth_headers(member))

        assert response.status_code == 201
        assert response.json()["body"] == "   "

    def test_unknown_discussion(self, client, member, auth_headers):
        response = client.post("/comments", json={"discussionId": "non-existent-id", "body": "Nice"},
                               headers=auth_headers(member))

        assert response.status_code == 404
        assert response.json()["message"] == "Discussion not found"

    def test_other_team_discussion_is_not_found(self, client, member, outsider, make_discussion,
                                                auth_headers, db_session):
        discussion = make_discussion(outsider)

        response = client.post("/comments", json={"discussionId": discussion.id, "body": "Nice"},
                               headers=auth_headers(member))

        assert response.status_code == 404
        assert db_session.query(Comment).count() == 0

    def test_validates_fields(self, client, member, auth_headers):
        response = client.post("/comments", json={"body": ""}, headers=auth_headers(member))

        assert response.status_code == 400
        fields = {error["field"] for error in response.json()["errors"]}
        assert fields == {"body", "discussionId"}

    def test_requires_authentication(self, client):
        response = client.post("/comments", json={"discussionId": "x", "body": "Nice"})

        assert response.status_code == 401


class TestDeleteComment:
    def test_author_deletes_own_comment(self, client, admin, member, make_discussion, make_comment,
                                        auth_headers, db_session):
        comment = make_comment(member, make_discussion(admin))

        response = client.delete(f"/comments/{comment.id}", headers=auth_headers(member))

        assert response.status_code == 200
        assert response.json()["message"] == "Comment deleted successfully"
        assert db_session.query(Comment).count() == 0

    def test_admin_deletes_any_team_comment(self, client, admin, member, make_discussion, make_comment,
                                            auth_headers):
        comment = make_comment(member, make_discussion(admin))

        response = client.delete(f"/comments/{comment.id}", headers=auth_headers(admin))

        assert response.status_code == 200

    def test_member_cannot_delete_others_comment(self, client, admin, member, make_discussion, make_comment,
                                                 auth_headers, db_session):
        comment = make_comment(admin, make_discussion(admin))

        response = client.delete(f"/comments/{comment.id}", headers=auth_headers(member))

        assert response.status_code == 403
        assert response.json()["message"] == "Not authorized to delete this comment"
        assert db_session.query(Comment).count() == 1

    def test_unknown_comment(self, client, admin, auth_headers):
        response = client.delete("/comments/non-existent-id", headers=auth_headers(admin))

        assert response.status_code == 404
        assert response.json()["message"] == "Comment not found"

    def test_other_team_comment_is_not_found(self, client, admin, outsider, make_discussion, make_comment,
                                             auth_headers, db_session):
        comment = make_comment(outsider, make_discussion(outsider))

        response = client.delete(f"/comments/{comment.id}", headers=auth_headers(admin))

        assert response.status_code == 404
        assert response.json()["message"] == "Comment not found"
        assert db_session.query(Comment).count() == 1

    def test_requires_authentication(self, client):
        assert client.delete("/comments/some-id").status_code == 401
