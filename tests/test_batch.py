import numpy as np
import pytest
import torch

from Base64Codec.encoding import (
    encode,
    encode_batch,
    decode_batch,
    decode_to_array,
    decode_to_tensor,
    InvalidSymbolError,
)


CPU = torch.device("cpu")


def test_encode_batch_mixed_containers():
    items = [b"f", bytearray(b"fo"), [102, 111, 111], np.array([102, 111, 111, 98], dtype=np.uint8)]
    assert encode_batch(items) == ["Zg==", "Zm8=", "Zm9v", "Zm9vYg=="]


def test_encode_batch_2d_array_rows():
    rows = np.array([[102, 111, 111], [98, 97, 114]], dtype=np.int64)
    assert encode_batch(rows) == ["Zm9v", "YmFy"]


def test_encode_batch_2d_tensor_rows():
    rows = torch.tensor([[102, 111], [98, 97]], dtype=torch.uint8)
    assert encode_batch(rows) == ["Zm8=", "YmE="]


def test_encode_tensor_matches_bytes():
    data = bytes(range(40))
    tensor = torch.tensor(list(data), dtype=torch.uint8)
    assert encode(tensor) == encode(data)


def test_encode_rejects_float_array():
    with pytest.raises(ValueError):
        encode(np.array([1.0, 2.0]))


def test_encode_rejects_negative_values():
    with pytest.raises(ValueError):
        encode(torch.tensor([-1, 2], dtype=torch.int16))


def test_decode_batch():
    assert decode_batch(["Zg==", "Zm8=", b"Zm9v", ""]) == [b"f", b"fo", b"foo", b""]


def test_decode_batch_fails_on_first_invalid_item():
    with pytest.raises(InvalidSymbolError):
        decode_batch(["Zm9v", "AB#D", "Zg=="])


def test_decode_to_array():
    array = decode_to_array("Zm9vYmFy")
    assert array.dtype == np.uint8
    assert array.tolist() == list(b"foobar")
    assert array.flags.writeable


def test_decode_to_tensor_on_explicit_device():
    tensor = decode_to_tensor("Zm9vYg==", device=CPU)
    assert tensor.dtype == torch.uint8
    assert tensor.device.type == "cpu"
    assert tensor.tolist() == list(b"foob")


def test_decode_to_tensor_empty():
    tensor = decode_to_tensor("", device=CPU)
    assert tensor.shape == (0,)


def test_encode_batch_rejects_1d_tensor():
    with pytest.raises(ValueError):
        encode_batch(torch.tensor([102, 111], dtype=torch.uint8))


def test_encode_batch_rejects_1d_array():
    with pytest.raises(ValueError):
        encode_batch(np.array([102, 111], dtype=np.uint8))


@pytest.mark.parametrize("items", [b"fo", bytearray(b"fo"), memoryview(b"fo"), "fo"])
def test_encode_batch_rejects_single_item(items):
    with pytest.raises(TypeError):
        encode_batch(items)


def test_encode_scalars_are_rejected():
    with pytest.raises(TypeError):
        encode(np.uint8(5))
    with pytest.raises(TypeError):
        encode(np.array(5, dtype=np.uint8))
    with pytest.raises(TypeError):
        encode(torch.tensor(5, dtype=torch.uint8))


def test_encode_single_element_array():
    assert encode(np.array([5], dtype=np.uint8)) == "BQ=="
