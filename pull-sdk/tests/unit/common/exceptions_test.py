from pull_sdk.common.exceptions import (
    BasePullException,
    DecodeError,
    RemoteError,
    TransportError,
)


def test_exceptions_equality():
    assert DecodeError("bad body") == DecodeError("bad body")
    assert DecodeError("bad body") != TransportError("bad body")
    assert repr(TransportError("refused")) == "refused"
    assert str(TransportError("refused")) == "refused"


def test_remote_error():
    error = RemoteError(503, "Oracle unavailable", body="maintenance")

    assert isinstance(error, BasePullException)
    assert error.status == 503
    assert error.body == "maintenance"
    assert error.serialize() == "503: Oracle unavailable"
