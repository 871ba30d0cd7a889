import re

from latlong.utils.logging import warn_once


def test_warn_once(caplog, monkeypatch):
    monkeypatch.setattr('latlong.utils.logging._WARNINGS', set())

    warn_once('test')
    assert 'test' in caplog.text

    warn_once('test')
    assert len(re.findall('test', caplog.text)) == 1


def test_warn_once_args(caplog, monkeypatch):
    monkeypatch.setattr('latlong.utils.logging._WARNINGS', set())

    warn_once('angle %r out of range', 'abc')
    warn_once('angle %r out of range', 'abc')
    warn_once('angle %r out of range', 'xyz')
    assert len(re.findall("angle 'abc' out of range", caplog.text)) == 1
    assert "angle 'xyz' out of range" in caplog.text
