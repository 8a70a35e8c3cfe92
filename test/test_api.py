from src.db.booking.models.booking_models import Booking
from src.db.cart.models.cart_models import CartItem
from src.db.user.models.user_models import Account


SIGNUP = {"full_name": "A B", "email": "a@x.com", "contact": "123", "user_password": "pw1"}


def test_end_to_end_signup_login_cart_booking(client, db, books):
    response = client.post("/signup", json=SIGNUP)
    assert response.status_code == 200
    assert response.json() == {"message": "User registered successfully!", "success": True, "user_id": 1}

    response = client.post("/login", json={"email": "a@x.com", "password": "pw1"})
    assert response.status_code == 200
    assert response.json() == {
        "message": "Login successful",
        "success": True,
        "user_id": 1,
        "userEmail": "a@x.com",
    }

    response = client.post("/login", json={"email": "a@x.com", "password": "wrong"})
    assert response.status_code == 401

    response = client.post("/cart/add", json={"user_id": 1, "book_id": 7})
    assert response.status_code == 200
    assert response.text == "Book added to cart"

    response = client.get("/cart/1")
    assert response.status_code == 200
    assert response.json() == [{"cart_id": 1, "title": "Dune", "book_id": 7, "quantity": 1}]

    response = client.post("/cart/book", json={"user_id": 1})
    assert response.status_code == 200
    assert response.text == "Booking successful! Cart cleared."

    bookings = db.query(Booking).all()
    assert [(b.user_id, b.book_id) for b in bookings] == [(1, 7)]
    assert bookings[0].booking_date is not None

    assert client.get("/cart/1").json() == []


def test_signup_missing_fields_is_400(client, db):
    response = client.post("/signup", json={"email": "a@x.com", "user_password": "pw1"})

    assert response.status_code == 400
    assert response.json() == {"detail": "All fields are required", "success": False}
    assert db.query(Account).count() == 0


def test_signup_duplicate_email_is_400(client):
    client.post("/signup", json=SIGNUP)

    response = client.post("/signup", json={**SIGNUP, "full_name": "Someone Else"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Email already exists"


def test_login_errors(client):
    client.post("/signup", json=SIGNUP)

    missing = client.post("/login", json={"email": "a@x.com"})
    unknown = client.post("/login", json={"email": "nobody@x.com", "password": "pw1"})
    wrong = client.post("/login", json={"email": "a@x.com", "password": "nope"})

    assert missing.status_code == 400
    assert unknown.status_code == wrong.status_code == 401
    assert unknown.json() == wrong.json() == {"detail": "Invalid email or password", "success": False}


def test_profile(client):
    client.post("/signup", json=SIGNUP)

    response = client.get("/profile/a@x.com")

    assert response.status_code == 200
    assert response.json() == {"full_name": "A B", "email": "a@x.com", "contact": "123"}
    assert "user_password" not in response.json()


def test_profile_not_found(client):
    response = client.get("/profile/missing@x.com")

    assert response.status_code == 404
    assert response.json()["detail"] == "User not found"


def test_books_by_category(client, books):
    response = client.get("/books/fantasy")

    assert response.status_code == 200
    assert response.json() == [
        {"book_id": 3, "title": "The Hobbit"},
        {"book_id": 5, "title": "A Wizard of Earthsea"},
    ]


def test_books_by_category_is_exact_match(client, books):
    assert client.get("/books/fant").json() == []
    assert client.get("/books/Fantasy").json() == []


def test_cart_add_requires_ids(client, db):
    response = client.post("/cart/add", json={"user_id": 1})

    assert response.status_code == 400
    assert response.json()["detail"] == "user_id and book_id are required"
    assert db.query(CartItem).count() == 0


def test_cart_add_with_malformed_id_is_400(client):
    response = client.post("/cart/add", json={"user_id": "abc", "book_id": 7})

    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid request", "success": False}


def test_cart_remove(client, books):
    client.post("/cart/add", json={"user_id": 1, "book_id": 7, "quantity": 2})
    client.post("/cart/add", json={"user_id": 1, "book_id": 7})

    response = client.post("/cart/remove", json={"user_id": 1, "book_id": 7})
    assert response.status_code == 200
    assert response.text == "Book removed from cart"
    assert client.get("/cart/1").json() == []

    response = client.post("/cart/remove", json={"user_id": 1, "book_id": 7})
    assert response.status_code == 404
    assert response.json()["detail"] == "Book not found in cart"


def test_cart_book_requires_user_id(client):
    response = client.post("/cart/book", json={})

    assert response.status_code == 400


def test_storage_errors_do_not_leak_driver_text(client, engine):
    CartItem.__table__.drop(bind=engine)

    response = client.post("/cart/add", json={"user_id": 1, "book_id": 7})

    assert response.status_code == 500
    assert response.json() == {"detail": "Error adding to cart", "success": False}


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["database"] == "connected"


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["message"] == "Library Booking API"


def test_signup_with_unhashable_password_is_json_400(client, db):
    response = client.post("/signup", json={**SIGNUP, "user_password": "a\u0000b"})

    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid password", "success": False}
    assert db.query(Account).count() == 0
