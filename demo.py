from Base64Codec import encode, decode, DecodeError


data = b"The quick brown fox jumps over the lazy dog"

encoded = encode(data)
print(f"Encoded: {encoded}")

try:
    decoded = decode(encoded)
    print(f"Decoded: {decoded.decode('utf-8')}")
except DecodeError as e:
    message, value = e.as_tuple()
    print(f"Error: {message} (invalid byte: {value})")
