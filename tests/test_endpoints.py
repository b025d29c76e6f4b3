import socket

import pytest

from qniokit.endpoints import NullEndpoint, SocketEndpoint


@pytest.fixture
def pair():
    left, right = socket.socketpair()
    yield SocketEndpoint(left), SocketEndpoint(right)
    for sock in (left, right):
        sock.close()


def test_write_then_read(pair):
    writer, reader = pair
    assert writer.write(b"hello") == len(b"hello")
    assert reader.read(1024) == b"hello"


def test_writev_gathers_buffers(pair):
    writer, reader = pair
    sent = writer.writev([b"abc", b"def"])
    assert sent == len(b"abcdef")
    assert reader.read(1024) == b"abcdef"


def test_readv_scatters_into_buffers(pair):
    writer, reader = pair
    writer.write(b"abcdef")
    head, tail = bytearray(2), bytearray(4)
    assert reader.readv([head, tail]) == len(b"abcdef")
    assert bytes(head) == b"ab"
    assert bytes(tail) == b"cdef"


def test_read_after_peer_close_returns_empty(pair):
    writer, reader = pair
    writer.close()
    assert reader.read(16) == b""


def test_operations_on_closed_endpoint_raise(pair):
    writer, _ = pair
    writer.close()
    with pytest.raises(ValueError):
        writer.write(b"x")
    with pytest.raises(ValueError):
        writer.close()


def test_context_manager_closes_socket():
    left, right = socket.socketpair()
    with SocketEndpoint(left) as endpoint:
        endpoint.write(b"z")
    assert left.fileno() == -1
    assert right.recv(4) == b"z"
    right.close()


def test_null_endpoint_transfers_nothing():
    endpoint = NullEndpoint()
    assert endpoint.read(100) == b""
    assert endpoint.write(b"data") == 0


def test_null_endpoint_usable_after_close():
    endpoint = NullEndpoint()
    endpoint.close()
    assert endpoint.write(b"more") == 0
    assert endpoint.name == "qnio"