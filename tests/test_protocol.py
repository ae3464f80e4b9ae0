import io
import math
import socket
import time

import pytest

from dirsync_cloud.protocol import MessageChannel, calc_throughput, current_time


@pytest.fixture
def pair():
    left, right = socket.socketpair()
    yield left, right
    left.close()
    right.close()


def test_calc_throughput_one_second_equals_size():
    assert calc_throughput(1.0, "abcdef") == len("abcdef")


def test_calc_throughput_counts_utf8_bytes():
    assert calc_throughput(1.0, "é") == len("é".encode("utf-8"))


def test_calc_throughput_halves_when_time_doubles():
    assert calc_throughput(2.0, "abcd") * 2 == calc_throughput(1.0, "abcd")


def test_calc_throughput_zero_elapsed_is_infinite():
    assert calc_throughput(0.0, "abc") == math.inf


def test_current_time_is_ctime_format():
    text = current_time()
    assert text.endswith("\n")
    parsed = time.strptime(text.strip(), "%a %b %d %H:%M:%S %Y")
    assert parsed.tm_year >= 2000


def test_send_delivers_and_reports(pair):
    left, right = pair
    out = io.StringIO()
    MessageChannel(left, "servidor", out).send("READY")
    assert right.recv(1024) == b"READY"
    report = out.getvalue()
    assert "Mensagem enviada ao servidor: READY" in report
    assert "Throughput:" in report


def test_receive_returns_message_and_reports(pair):
    left, right = pair
    out = io.StringIO()
    right.sendall(b"READY ACK")
    message = MessageChannel(left, "cliente", out).receive()
    assert message == "READY ACK"
    assert "Resposta do cliente: READY ACK" in out.getvalue()


def test_receive_stops_at_nul(pair):
    left, right = pair
    right.sendall(b"abc\0def")
    assert MessageChannel(left, "cliente", io.StringIO()).receive() == "abc"


def test_receive_on_closed_peer_raises(pair):
    left, right = pair
    right.close()
    with pytest.raises(ConnectionError):
        MessageChannel(left, "cliente", io.StringIO()).receive()