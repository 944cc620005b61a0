ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PADDING = "="

BITS_PER_BYTE = 8
BITS_PER_SYMBOL = 6
BYTES_PER_BLOCK = 3

WINDOW_MASK = 0b1111110000000000

PADDING_BYTE = ord(PADDING)

# Keyed by raw byte value so the decoder can scan encoded bytes directly.
REVERSE_ALPHABET = {ord(c): i for i, c in enumerate(ALPHABET)}
