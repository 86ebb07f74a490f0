import json

import pytest

from outrun.crypto import (
    BLOCK_SIZE,
    DEFAULT_IV,
    ENCRYPTION_KEY,
    b64_decode,
    b64_encode,
    build_response,
    clean_bytes,
    decrypt,
    encrypt,
    get_received_message,
    pkcs5_padding,
)

IV = b"0123456789abcdef"


def test_b64_round_trip():
    data = b"\x00\xffsome data"
    assert b64_decode(b64_encode(data)) == data


def test_b64_encode_known_value():
    assert b64_encode(b"hello") == "aGVsbG8="


def test_b64_decode_invalid_gives_empty():
    assert b64_decode("not base64!!") == b""


@pytest.mark.parametrize("length", [0, 1, 15, 16, 17, 31])
def test_pkcs5_padding_invariants(length):
    data = b"a" * length
    padded = pkcs5_padding(data, BLOCK_SIZE)
    pad = padded[-1]
    assert len(padded) % BLOCK_SIZE == 0
    assert 1 <= pad <= BLOCK_SIZE
    assert padded[-pad:] == bytes([pad]) * pad
    assert padded[:length] == data
    assert len(padded) - pad == length


def test_pkcs5_padding_example():
    assert pkcs5_padding(b"abc", 8) == b"abc\x05\x05\x05\x05\x05"


def test_pkcs5_padding_rejects_bad_block_size():
    with pytest.raises(ValueError):
        pkcs5_padding(b"abc", 0)


def test_encrypt_decrypt_round_trip():
    message = b'{"sessionId":"abc","count":3}'
    ciphertext = encrypt(message, ENCRYPTION_KEY, IV)
    assert len(ciphertext) % BLOCK_SIZE == 0
    assert message not in ciphertext
    assert decrypt(ciphertext, ENCRYPTION_KEY, IV) == pkcs5_padding(message, BLOCK_SIZE)


def test_encrypt_bad_key_raises():
    with pytest.raises(ValueError):
        encrypt(b"x", b"short", IV)


def test_encrypt_bad_iv_raises():
    with pytest.raises(ValueError):
        encrypt(b"x", ENCRYPTION_KEY, b"short")


def test_decrypt_partial_block_raises():
    with pytest.raises(ValueError):
        decrypt(b"x" * 15, ENCRYPTION_KEY, IV)


def test_clean_bytes_drops_unprintable():
    assert clean_bytes(b"a\x00b\x1fc\x7f\x80\xffd") == b"abc\x7fd"


def test_received_message_plain():
    form = {"param": '{"a":1}', "secure": "0"}
    assert get_received_message(form) == b'{"a":1}'


def test_received_message_without_secure_flag():
    assert get_received_message({"param": "x"}) == b"x"


def test_received_message_takes_first_of_list():
    assert get_received_message({"param": ["first", "second"]}) == b"first"


def test_received_message_secure():
    payload = b'{"lineAuth":{"userId":"0"}}'
    form = {
        "param": b64_encode(encrypt(payload, ENCRYPTION_KEY, IV)),
        "key": IV.decode(),
        "secure": "1",
    }
    assert get_received_message(form) == payload


def test_build_response_insecure():
    raw = build_response(b'{"a":1}', "0", "")
    assert json.loads(raw) == {"secure": "0", "key": "", "param": '{"a":1}'}


def test_build_response_secure_by_default():
    payload = b'{"statusCode":0}'
    data = json.loads(build_response(payload))
    assert data["secure"] == "1"
    assert data["key"] == DEFAULT_IV
    decrypted = decrypt(b64_decode(data["param"]), ENCRYPTION_KEY, DEFAULT_IV.encode())
    assert decrypted == pkcs5_padding(payload, BLOCK_SIZE)


def test_build_response_key_order_and_escaping():
    raw = build_response(b"<&>", "0", "")
    assert raw.startswith(b'{"key":""')
    assert b"<" not in raw and b"&" not in raw
    assert json.loads(raw)["param"] == "<&>"