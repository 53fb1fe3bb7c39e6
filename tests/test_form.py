import pytest
from pydantic import ValidationError

from fakersa.cipher.cascade import decrypt_string
from fakersa.form import LoginForm, build_login_form

RSA = (
    "912F97589B78631B315CB4B8654EACF218C244BFB9AC5A1809495841FED3F131"
    "3F87C346C8672F7C7DBBAFFA02992D43"
)


def test_build_login_form_fields():
    form = build_login_form("2024000000", "secret", "LT-1-abc", "e1s1")
    assert form.rsa == RSA
    assert form.ul == "10"
    assert form.pl == "6"
    assert form.sl == "0"
    assert form.lt == "LT-1-abc"
    assert form.execution == "e1s1"
    assert form.event_id == "submit"


def test_form_data_order_and_alias():
    form = build_login_form("2024000000", "secret", "LT-1-abc", "e1s1")
    data = form.to_form_data()
    assert list(data) == ["rsa", "ul", "pl", "sl", "lt", "execution", "_eventId"]
    assert data["_eventId"] == "submit"


def test_encode():
    body = build_login_form("u", "p", "LT 1", "e1s1", key_ring=["k"]).encode()
    assert body.endswith("&sl=0&lt=LT+1&execution=e1s1&_eventId=submit")
    assert body.startswith("rsa=")


def test_rsa_decrypts_to_concatenation():
    form = build_login_form("alice", "pa55", "LT-9", "e2s1", key_ring=["x", "yz"])
    assert decrypt_string(form.rsa, ["x", "yz"]) == "alicepa55LT-9"


def test_default_ring_comes_from_settings(monkeypatch):
    monkeypatch.setenv("FAKERSA_KEY_RING", "q")
    form = build_login_form("2024000000", "secret", "LT-1-abc", "e1s1")
    assert form.rsa == build_login_form("2024000000", "secret", "LT-1-abc", "e1s1", key_ring=["q"]).rsa
    assert form.rsa != RSA


@pytest.mark.parametrize("username,password", [("", "secret"), ("user", "")])
def test_empty_credentials_rejected(username, password):
    with pytest.raises(ValidationError):
        build_login_form(username, password, "LT-1", "e1s1")


def test_login_form_rejects_non_hex_rsa():
    with pytest.raises(ValidationError):
        LoginForm(rsa="xyz", ul="1", pl="1", lt="LT", execution="e1s1")


def test_login_form_accepts_alias():
    form = LoginForm(rsa="AB", ul="1", pl="1", lt="LT", execution="e1s1", _eventId="other")
    assert form.event_id == "other"
