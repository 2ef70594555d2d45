"""In-memory catalogues served by the routing examples."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Product:
    id: int
    name: str
    price: int


@dataclass(frozen=True, slots=True)
class Profile:
    username: str
    email: str
    role: str


@dataclass(frozen=True, slots=True)
class Book:
    id: int
    title: str
    author: str
    price: int


PRODUCTS: dict[int, Product] = {
    product.id: product
    for product in (
        Product(id=100, name="Laptop", price=1200),
        Product(id=101, name="Mouse", price=25),
        Product(id=102, name="Keyboard", price=75),
    )
}

PROFILES: dict[str, Profile] = {
    profile.username.lower(): profile
    for profile in (
        Profile(username="Alice", email="alice@example.com", role="admin"),
        Profile(username="Bob", email="bob@example.com", role="user"),
        Profile(username="Carol", email="carol@example.com", role="moderator"),
        Profile(username="Dave", email="dave@example.com", role="user"),
    )
}

BOOKS: dict[int, Book] = {
    book.id: book
    for book in (
        Book(id=201, title="Clean Code", author="Robert C. Martin", price=35),
        Book(id=202, title="The Pragmatic Programmer", author="Andrew Hunt", price=45),
        Book(id=203, title="Design Patterns", author="Erich Gamma", price=55),
    )
}


def find_product(product_id: int) -> Product | None:
    return PRODUCTS.get(product_id)


def find_profile(username: str) -> Profile | None:
    """Look up a profile by username, ignoring case."""

    return PROFILES.get(username.strip().lower())


def find_book(book_id: int) -> Book | None:
    return BOOKS.get(book_id)
