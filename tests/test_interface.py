import logging

import pytest
import torch

from Base64Codec import Base64Codec, CodecConfig, InvalidPaddingError, InvalidSymbolError


@pytest.fixture
def codec():
    return Base64Codec(CodecConfig(logger_name="b64-interface", force_cpu=True))


def test_encode_decode(codec):
    assert codec.encode(b"foo") == "Zm9v"
    assert codec.decode("Zm9v") == b"foo"


def test_is_valid(codec):
    assert codec.is_valid("Zm8=")
    assert codec.is_valid("")
    assert not codec.is_valid("AB#D")
    assert not codec.is_valid("A")
    assert not codec.is_valid("\ud800")


def test_decode_failure_is_logged_and_raised(codec, caplog):
    with caplog.at_level(logging.WARNING, logger="b64-interface"):
        with pytest.raises(InvalidSymbolError):
            codec.decode("AB#D")
    assert "InvalidSymbolError" in caplog.text


def test_decode_batch_failure_is_raised(codec):
    with pytest.raises(InvalidPaddingError):
        codec.decode_batch(["Zg==", "QQ="])


def test_batch(codec):
    texts = codec.encode_batch([b"f", b"fo"])
    assert texts == ["Zg==", "Zm8="]
    assert codec.decode_batch(texts) == [b"f", b"fo"]


def test_decode_to_tensor_uses_codec_device(codec):
    assert codec.device == torch.device("cpu")
    tensor = codec.decode_to_tensor("Zm9v")
    assert tensor.device.type == "cpu"
    assert tensor.tolist() == [102, 111, 111]


def test_device_from_config():
    codec = Base64Codec.from_dict({"device": "cpu", "logger_name": "b64-interface"})
    assert codec.device == torch.device("cpu")


def test_explicit_device_wins():
    codec = Base64Codec(CodecConfig(device="cuda"), device=torch.device("cpu"))
    assert codec.device == torch.device("cpu")
