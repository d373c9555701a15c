import pytest

from bookmore.core.config import settings

API = "/api/v1"


@pytest.fixture
def author(make_user):
    return make_user("author@bookmore.site", "author")


@pytest.fixture
def reader(make_user):
    return make_user("reader@bookmore.site", "reader")


def test_create_and_read_review(client, author, reader, auth_headers):
    response = client.post(
        f"{API}/reviews",
        json={"isbn": "9788936434120", "content": "Loved it", "spoiler": True},
        headers=auth_headers("author@bookmore.site"),
    )

    assert response.status_code == 200
    review_id = response.json()["result"]["id"]

    response = client.get(f"{API}/reviews/{review_id}", headers=auth_headers("reader@bookmore.site"))

    assert response.status_code == 200
    result = response.json()["result"]
    assert result["nickname"] == "author"
    assert result["spoiler"] is True
    assert result["likes_count"] == 0
    assert result["liked"] is False


def test_create_review_with_blank_content(client, author, auth_headers):
    response = client.post(
        f"{API}/reviews", json={"isbn": "9788936434120", "content": " "}, headers=auth_headers("author@bookmore.site")
    )

    assert response.status_code == 400
    assert response.json()["result"].startswith("[content]")


def test_get_missing_review(client, author, auth_headers):
    response = client.get(f"{API}/reviews/999", headers=auth_headers("author@bookmore.site"))

    assert response.status_code == 404
    assert response.json()["result"]["errorCode"] == "REVIEW_NOT_FOUND"


def test_toggle_likes_twice(client, author, reader, make_review, auth_headers):
    review = make_review(author)
    headers = auth_headers("reader@bookmore.site")

    response = client.post(f"{API}/reviews/{review.id}/likes", headers=headers)
    assert response.json()["result"] == {"liked": True, "likes_count": 1}
    assert client.get(f"{API}/reviews/{review.id}", headers=headers).json()["result"]["liked"] is True

    response = client.post(f"{API}/reviews/{review.id}/likes", headers=headers)
    assert response.json()["result"] == {"liked": False, "likes_count": 0}

    response = client.get(f"{API}/reviews/{review.id}/likes", headers=headers)
    assert response.json()["result"] == {"liked": False, "likes_count": 0}


def test_likes_on_missing_review(client, reader, auth_headers):
    response = client.post(f"{API}/reviews/999/likes", headers=auth_headers("reader@bookmore.site"))

    assert response.status_code == 404
    assert response.json()["result"]["errorCode"] == "REVIEW_NOT_FOUND"


def test_modify_review(client, author, make_review, auth_headers):
    review = make_review(author)
    headers = auth_headers("author@bookmore.site")

    response = client.put(f"{API}/reviews/{review.id}", json={"content": "Even better", "spoiler": True}, headers=headers)

    assert response.status_code == 200
    assert response.json()["result"] == {"id": review.id, "message": "Review updated."}
    assert client.get(f"{API}/reviews/{review.id}", headers=headers).json()["result"]["content"] == "Even better"


def test_delete_review_by_reader(client, author, reader, make_review, auth_headers):
    review = make_review(author)

    response = client.delete(f"{API}/reviews/{review.id}", headers=auth_headers("reader@bookmore.site"))

    assert response.status_code == 401
    assert response.json()["result"]["errorCode"] == "INVALID_PERMISSION"


def test_delete_review(client, author, make_review, auth_headers):
    review = make_review(author)
    headers = auth_headers("author@bookmore.site")

    response = client.delete(f"{API}/reviews/{review.id}", headers=headers)

    assert response.status_code == 200
    assert client.get(f"{API}/reviews/{review.id}", headers=headers).status_code == 404


def test_list_reviews_by_isbn(client, author, reader, make_review, auth_headers):
    make_review(author, isbn="9788936434120")
    wanted = make_review(reader, isbn="9791190885515")

    response = client.get(
        f"{API}/reviews", params={"isbn": "9791190885515"}, headers=auth_headers("author@bookmore.site")
    )

    result = response.json()["result"]
    assert [item["id"] for item in result["content"]] == [wanted.id]
    assert result["meta"]["total"] == 1


def test_list_reviews_rejects_bad_page(client, author, auth_headers):
    response = client.get(f"{API}/reviews", params={"page": 0}, headers=auth_headers("author@bookmore.site"))

    assert response.status_code == 400
    assert response.json()["result"].startswith("[page]")


def test_list_reviews_uses_default_page_size(client, author, make_review, auth_headers, monkeypatch):
    monkeypatch.setattr(settings, "DEFAULT_PAGE_SIZE", 1)
    make_review(author, content="first")
    newest = make_review(author, content="second")

    response = client.get(f"{API}/reviews", headers=auth_headers("author@bookmore.site"))

    result = response.json()["result"]
    assert [item["id"] for item in result["content"]] == [newest.id]
    assert result["meta"]["per_page"] == 1
    assert result["meta"]["total"] == 2


def test_list_reviews_rejects_zero_page_size(client, author, auth_headers):
    response = client.get(f"{API}/reviews", params={"per_page": 0}, headers=auth_headers("author@bookmore.site"))

    assert response.status_code == 400
    assert response.json()["result"].startswith("[per_page]")
