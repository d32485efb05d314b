def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["books"] == 4


def test_list_books(client):
    response = client.get("/api/books")
    assert response.status_code == 200
    books = response.json()
    assert [b["id"] for b in books] == [1, 2, 3, 4]
    hobbit = books[0]
    assert hobbit["readingStatus"] == "READ"
    assert hobbit["lendingStatus"] == "ON_SHELF"
    assert hobbit["detailedRating"]["worldBuilding"] == 5.0
    assert hobbit["calculatedStars"] == 2.5


def test_list_books_filters(client):
    response = client.get("/api/books", params={"author": "tolkien"})
    assert [b["title"] for b in response.json()] == ["The Hobbit"]

    response = client.get("/api/books", params={"status": "LENT_OUT"})
    assert [b["lentTo"] for b in response.json()] == ["Alice"]

    response = client.get("/api/books", params={"readingStatus": "CURRENTLY_READING"})
    assert [b["title"] for b in response.json()] == ["Project Hail Mary"]


def test_list_books_rejects_unknown_status(client):
    response = client.get("/api/books", params={"status": "LOST"})
    assert response.status_code == 422


def test_reading_statuses(client):
    response = client.get("/api/books/reading-statuses")
    assert response.json() == ["READ", "WANT_TO_READ", "WANT_TO_READ_OWN", "CURRENTLY_READING"]


def test_get_book(client):
    response = client.get("/api/books/3")
    assert response.status_code == 200
    assert response.json()["title"] == "Dune"


def test_get_missing_book(client):
    response = client.get("/api/books/99")
    assert response.status_code == 404
    assert response.json()["detail"] == "Book with ID 99 not found"


def test_create_book(client):
    payload = {
        "title": "The Name of the Wind",
        "author": "Patrick Rothfuss",
        "readingStatus": "READ",
        "simpleRating": "4.5",
        "detailedRating": {"character": 9, "plot": 8, "writing": 10, "comment": "Gorgeous prose"},
        "year": 2007,
    }
    response = client.post("/api/books", json=payload)
    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 5
    assert body["lendingStatus"] == "ON_SHELF"
    assert body["lentTo"] is None
    assert body["description"] is None
    assert body["calculatedStars"] == 4.5

    assert client.get("/api/books/5").json() == body


def test_create_book_with_invalid_rating(client):
    payload = {"title": "X", "author": "Y", "readingStatus": "READ", "simpleRating": "3.1"}
    response = client.post("/api/books", json=payload)
    assert response.status_code == 400
    assert "DNF" in response.json()["detail"]
    assert len(client.get("/api/books").json()) == 4


def test_create_book_with_invalid_detailed_rating(client):
    payload = {"title": "X", "author": "Y", "readingStatus": "READ", "detailedRating": {"plot": 10.1}}
    response = client.post("/api/books", json=payload)
    assert response.status_code == 400
    assert response.json()["detail"] == "plot must be 1–10 in .25 steps"


def test_create_book_requires_title(client):
    response = client.post("/api/books", json={"title": "", "author": "Y", "readingStatus": "READ"})
    assert response.status_code == 422


def test_update_book_keeps_lending_state(client):
    payload = {"title": "Clean Code", "author": "Uncle Bob", "readingStatus": "READ", "simpleRating": "DNF"}
    response = client.put("/api/books/2", json=payload)
    assert response.status_code == 200
    body = response.json()
    assert body["author"] == "Uncle Bob"
    assert body["simpleRating"] == "DNF"
    assert body["isbn"] is None
    assert body["lendingStatus"] == "LENT_OUT"
    assert body["lentTo"] == "Alice"


def test_update_book_errors(client):
    payload = {"title": "T", "author": "A", "readingStatus": "READ"}
    assert client.put("/api/books/99", json=payload).status_code == 404
    payload["simpleRating"] = "0.9"
    assert client.put("/api/books/1", json=payload).status_code == 400


def test_delete_book(client):
    assert client.delete("/api/books/4").status_code == 204
    assert client.get("/api/books/4").status_code == 404
    assert client.delete("/api/books/4").status_code == 404
    assert len(client.get("/api/books").json()) == 3

    response = client.post("/api/books", json={"title": "New", "author": "A", "readingStatus": "WANT_TO_READ"})
    assert response.json()["id"] == 5


def test_lend_and_return(client):
    response = client.post("/api/books/3/lend", json={"lentTo": "Alice"})
    assert response.status_code == 200
    assert response.json()["lendingStatus"] == "LENT_OUT"
    assert response.json()["lentTo"] == "Alice"

    response = client.post("/api/books/3/lend", json={"lentTo": "Bob"})
    assert response.status_code == 409
    assert client.get("/api/books/3").json()["lentTo"] == "Alice"

    response = client.post("/api/books/3/return")
    assert response.status_code == 200
    assert response.json()["lendingStatus"] == "ON_SHELF"
    assert response.json()["lentTo"] is None

    assert client.post("/api/books/3/return").status_code == 200


def test_lend_errors(client):
    assert client.post("/api/books/99/lend", json={"lentTo": "Alice"}).status_code == 404
    assert client.post("/api/books/99/return").status_code == 404
    assert client.post("/api/books/3/lend", json={"lentTo": ""}).status_code == 422


def test_create_book_rejects_numeric_simple_rating(client):
    payload = {"title": "X", "author": "Y", "readingStatus": "READ", "simpleRating": 4.5}
    response = client.post("/api/books", json=payload)
    assert response.status_code == 422
    assert len(client.get("/api/books").json()) == 4


def test_lend_with_whitespace_borrower(client):
    response = client.post("/api/books/3/lend", json={"lentTo": "   "})
    assert response.status_code == 400
    assert client.get("/api/books/3").json()["lendingStatus"] == "ON_SHELF"
