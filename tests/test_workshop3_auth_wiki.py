from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from urllib.parse import quote

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from workshops.workshop3.app.main import create_app
from workshops.workshop3.app.services import PageService
from workshops.workshop3.app.services.pages import sanitize_html
from workshops.workshop3.app.store import DataStore, PageFormat
from workshops.workshop3.app.uploads import allowed_file, secure_filename

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


@pytest.fixture()
def upload_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    target = tmp_path / "avatars"
    monkeypatch.setenv("WORKSHOP3_UPLOAD_DIR", str(target))
    monkeypatch.setenv("WORKSHOP3_MAX_UPLOAD_BYTES", "1024")
    return target


@pytest.fixture()
def client(upload_dir: Path) -> Iterator[TestClient]:
    with TestClient(create_app()) as test_client:
        yield test_client


def _register(client: TestClient, token: str, username: str = "ada", password: str = "s3cret") -> None:
    client.post("/register", data={"csrf_token": token, "username": username, "password": password})


def _login(client: TestClient, csrf_token_in, username: str = "ada", password: str = "s3cret"):
    token = csrf_token_in(client.get("/register").text)
    _register(client, token, username, password)
    return client.post("/login", data={"csrf_token": token, "username": username, "password": password})


def test_register_then_login(client: TestClient, csrf_token_in) -> None:
    token = csrf_token_in(client.get("/register").text)

    registered = client.post("/register", data={"csrf_token": token, "username": "ada", "password": "s3cret"})
    assert str(registered.url).endswith("/login")
    assert "Registration successful! Please log in." in registered.text

    logged_in = client.post("/login", data={"csrf_token": token, "username": "ada", "password": "s3cret"})
    assert str(logged_in.url).endswith("/")
    assert "Login successful!" in logged_in.text
    assert "Welcome, ada!" in logged_in.text


def test_duplicate_registration_is_rejected(client: TestClient, csrf_token_in) -> None:
    token = csrf_token_in(client.get("/register").text)
    _register(client, token)

    response = client.post("/register", data={"csrf_token": token, "username": "ada", "password": "other"})

    assert str(response.url).endswith("/register")
    assert "Username already exists!" in response.text


def test_wrong_password_is_rejected(client: TestClient, csrf_token_in) -> None:
    response = _login(client, csrf_token_in, password="s3cret")
    assert "Login successful!" in response.text
    client.get("/logout")

    token = csrf_token_in(client.get("/login").text)
    response = client.post("/login", data={"csrf_token": token, "username": "ada", "password": "nope"})

    assert str(response.url).endswith("/login")
    assert "Invalid username or password." in response.text


def test_short_username_redisplays_form(client: TestClient, csrf_token_in) -> None:
    token = csrf_token_in(client.get("/register").text)

    response = client.post("/register", data={"csrf_token": token, "username": "al", "password": "pw"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert 'class="field-error"' in response.text
    assert 'value="al"' in response.text
    assert 'value="pw"' not in response.text


def test_forged_csrf_token_blocks_login(client: TestClient, csrf_token_in) -> None:
    _login(client, csrf_token_in)
    client.get("/logout")
    client.get("/login")

    response = client.post("/login", data={"csrf_token": "forged", "username": "ada", "password": "s3cret"})

    assert "The form has expired. Please try again." in response.text


def test_missing_csrf_token_blocks_registration(client: TestClient) -> None:
    client.get("/register")

    response = client.post("/register", data={"username": "ada", "password": "s3cret"})

    assert str(response.url).endswith("/register")
    assert "The form has expired. Please try again." in response.text
    assert "Field required" not in response.text


def test_create_page_requires_login(client: TestClient) -> None:
    response = client.get("/create", follow_redirects=False)

    assert response.status_code == status.HTTP_303_SEE_OTHER
    assert response.headers["location"] == "/login"
    assert "You must be logged in to create a page." in client.get("/login").text


def test_markdown_page_round_trip(client: TestClient, csrf_token_in) -> None:
    _login(client, csrf_token_in)
    token = csrf_token_in(client.get("/create").text)

    response = client.post(
        "/create",
        data={
            "csrf_token": token,
            "title": "Getting Started",
            "content": "# Hello\n\nSome **bold** text <script>alert(1)</script>",
            "format": "markdown",
        },
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.url.path == "/wiki/Getting Started"
    assert "<h1>Hello</h1>" in response.text
    assert "<strong>bold</strong>" in response.text
    assert "<script>alert(1)</script>" not in response.text

    index = client.get("/wiki")
    assert "Getting Started" in index.text
    assert "Getting Started" in client.get("/").text


def test_quill_page_is_sanitised(client: TestClient, csrf_token_in) -> None:
    _login(client, csrf_token_in)
    editor = client.get("/create", params={"editor": "quill"})
    assert 'id="quill-editor"' in editor.text
    token = csrf_token_in(editor.text)

    response = client.post(
        "/create",
        data={
            "csrf_token": token,
            "title": "Rich",
            "content": '<p><em>Styled</em></p><img src="x" onerror="alert(1)"><script>bad()</script>',
            "format": "html",
        },
    )

    assert "<em>Styled</em>" in response.text
    assert "onerror" not in response.text
    assert "bad()" not in response.text


def test_title_with_slash_is_rejected(client: TestClient, csrf_token_in) -> None:
    _login(client, csrf_token_in)
    token = csrf_token_in(client.get("/create").text)

    response = client.post(
        "/create",
        data={"csrf_token": token, "title": "a/b", "content": "text", "format": "markdown"},
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert 'class="field-error"' in response.text


@pytest.mark.parametrize("title", ["What?", "C# tips", "100%"])
def test_titles_with_url_reserved_characters_stay_reachable(client: TestClient, csrf_token_in, title: str) -> None:
    _login(client, csrf_token_in)
    token = csrf_token_in(client.get("/create").text)

    response = client.post(
        "/create",
        data={"csrf_token": token, "title": title, "content": "Body text", "format": "markdown"},
    )

    assert response.status_code == status.HTTP_200_OK
    assert "<p>Body text</p>" in response.text

    link = f"/wiki/{quote(title, safe='')}"
    assert f'{link}"' in client.get("/wiki").text
    assert client.get(link).status_code == status.HTTP_200_OK


def test_missing_page_renders_not_found(client: TestClient) -> None:
    response = client.get("/wiki/Nowhere")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert "Page Not Found" in response.text
    assert "/wiki/Nowhere" in response.text


def test_unknown_url_renders_not_found(client: TestClient) -> None:
    response = client.get("/no/such/route")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert "Page Not Found" in response.text


def test_profile_requires_login(client: TestClient) -> None:
    response = client.get("/profile")

    assert str(response.url).endswith("/login")
    assert "You must be logged in to view your profile." in response.text


def test_avatar_upload_is_stored_and_served(client: TestClient, csrf_token_in, upload_dir: Path) -> None:
    _login(client, csrf_token_in)
    token = csrf_token_in(client.get("/profile").text)

    response = client.post(
        "/profile",
        data={"csrf_token": token},
        files={"avatar": ("me.png", PNG_BYTES, "image/png")},
    )

    assert "Avatar updated!" in response.text
    stored = list(upload_dir.iterdir())
    assert len(stored) == 1
    assert stored[0].name.endswith("_me.png")
    assert client.get(f"/avatars/{stored[0].name}").content == PNG_BYTES


@pytest.mark.parametrize(
    ("files", "message"),
    [
        (None, "No file selected."),
        ({"avatar": ("notes.txt", b"hello", "text/plain")}, "Invalid file type. Allowed: png, jpg, jpeg, gif."),
        ({"avatar": ("big.png", b"x" * 2048, "image/png")}, "File too large."),
    ],
)
def test_avatar_upload_rejections(client: TestClient, csrf_token_in, files, message: str) -> None:
    _login(client, csrf_token_in)
    token = csrf_token_in(client.get("/profile").text)

    response = client.post("/profile", data={"csrf_token": token}, files=files)

    assert str(response.url).endswith("/profile")
    assert message in response.text


def test_avatar_upload_requires_login(client: TestClient) -> None:
    response = client.post("/profile", files={"avatar": ("me.png", PNG_BYTES, "image/png")})

    assert "You must be logged in to upload an avatar." in response.text


@pytest.mark.parametrize(
    ("filename", "expected"),
    [("me.PNG", True), ("photo.jpeg", True), ("script.js", False), ("noextension", False)],
)
def test_allowed_file(filename: str, expected: bool) -> None:
    assert allowed_file(filename) is expected


def test_secure_filename_strips_directories() -> None:
    assert secure_filename("../../etc/pass wd.png") == "pass_wd.png"
    assert secure_filename("..") == "avatar"


def test_page_service_overwrites_existing_title() -> None:
    service = PageService(DataStore())
    service.save_page(title="Home", content="first", author="ada", page_format=PageFormat.MARKDOWN)
    service.save_page(title="Home", content="second", author="bob", page_format=PageFormat.MARKDOWN)

    pages = service.list_pages()
    assert [page.content for page in pages] == ["second"]
    assert pages[0].author == "bob"


def test_sanitize_html_keeps_formatting() -> None:
    cleaned = sanitize_html('<p onclick="x()">Hi <strong>there</strong></p>')
    assert cleaned == "<p>Hi <strong>there</strong></p>"
