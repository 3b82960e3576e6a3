from xlex.yamlcore.binary import Binary


def test_default_is_owned_and_empty():
    binary = Binary()
    assert binary.owned()
    assert len(binary) == 0
    assert binary.data() == b""


def test_borrowed_data():
    binary = Binary(b"abc")
    assert not binary.owned()
    assert len(binary) == 3
    assert binary.data() == b"abc"


def test_borrowed_sees_outside_changes():
    buffer = bytearray(b"xyz")
    binary = Binary(buffer)
    buffer[0] = ord("q")
    assert binary.data() == b"qyz"


def test_swap_borrowed_takes_ownership():
    binary = Binary(b"abc")
    other = bytearray(b"12")
    binary.swap(other)
    assert binary.owned()
    assert binary.data() == b"12"
    assert other == bytearray(b"abc")


def test_swap_owned_exchanges():
    binary = Binary()
    first = bytearray(b"one")
    binary.swap(first)
    assert first == bytearray()
    second = bytearray(b"two!")
    binary.swap(second)
    assert binary.data() == b"two!"
    assert second == bytearray(b"one")


def test_equality_compares_bytes():
    assert Binary(b"abc") == Binary(bytearray(b"abc"))
    assert not Binary(b"abc") == Binary(b"abd")
    assert not Binary(b"ab") == Binary(b"abc")
    assert Binary() == Binary(b"")