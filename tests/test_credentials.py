"""
Tests for the credential record and its file-backed store.
"""

import json
import re

import pytest
from pydantic import ValidationError

from demoshop.credentials import CredentialStore, Credentials, generate_unique_email
from demoshop.exceptions import CredentialsFileError


@pytest.fixture
def store(tmp_path):
    return CredentialStore(tmp_path / "testData.json")


@pytest.fixture
def credentials():
    return Credentials(email="testuser_abc@example.com", password="s3cret!")


class TestCredentials:
    """Tests for the Credentials model."""

    def test_password_masked_in_repr(self, credentials):
        assert "s3cret!" not in repr(credentials)
        assert "s3cret!" not in str(credentials)
        assert "testuser_abc@example.com" in repr(credentials)

    def test_empty_password_rejected(self):
        with pytest.raises(ValidationError):
            Credentials(email="someone@example.com", password="")

    def test_frozen(self, credentials):
        with pytest.raises(ValidationError):
            credentials.email = "other@example.com"


class TestGenerateUniqueEmail:
    """Tests for unique email generation."""

    def test_format(self):
        email = generate_unique_email()
        assert re.fullmatch(r"testuser_[0-9a-f]{12}@example\.com", email)

    def test_custom_prefix_and_domain(self):
        email = generate_unique_email(prefix="buyer", domain="shop.test")
        assert email.startswith("buyer_")
        assert email.endswith("@shop.test")

    def test_unique(self):
        emails = {generate_unique_email() for _ in range(50)}
        assert len(emails) == 50


class TestCredentialStore:
    """Tests for CredentialStore."""

    def test_load_missing_file_returns_none(self, store):
        assert not store.exists()
        assert store.load() is None
        assert store.load(strict=True) is None

    def test_save_then_load(self, store, credentials):
        store.save(credentials)

        assert store.exists()
        assert store.load() == credentials

    def test_file_format(self, store, credentials):
        store.save(credentials)

        data = json.loads(store.path.read_text(encoding="utf-8"))
        assert data == {"email": "testuser_abc@example.com", "password": "s3cret!"}

    def test_save_replaces_previous_record(self, store, credentials):
        store.save(credentials)
        newer = Credentials(email="testuser_def@example.com", password="s3cret!")
        store.save(newer)

        assert store.load() == newer

    def test_save_creates_parent_directory(self, tmp_path, credentials):
        store = CredentialStore(tmp_path / "nested" / "dir" / "creds.json")
        store.save(credentials)

        assert store.load() == credentials

    def test_save_leaves_no_temp_files(self, store, credentials):
        store.save(credentials)

        assert [p.name for p in store.path.parent.iterdir()] == ["testData.json"]

    @pytest.mark.parametrize(
        "content",
        ["", "not json", "[]", '{"email": "a@b.c"}', '{"email": "a@b.c", "password": ""}'],
    )
    def test_unusable_file_lenient(self, store, content):
        store.path.write_text(content, encoding="utf-8")

        assert store.load() is None

    def test_unusable_file_strict(self, store):
        store.path.write_text("{broken", encoding="utf-8")

        with pytest.raises(CredentialsFileError) as exc_info:
            store.load(strict=True)

        assert exc_info.value.path == store.path
        assert "testData.json" in str(exc_info.value)

    def test_clear(self, store, credentials):
        store.save(credentials)

        assert store.clear() is True
        assert not store.exists()
        assert store.clear() is False
