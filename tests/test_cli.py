import json

import httpx
import pytest

from service_fetch.cli import main


def test_get_prints_json_and_exits_zero(client, service, capsys):
    service.body = {"name": "widget"}

    code = main(["get", "https://svc/items", "-p", "id=5"], client=client)

    assert code == 0
    assert str(service.last.url) == "https://svc/items?id=5"
    assert json.loads(capsys.readouterr().out) == {"name": "widget"}


def test_post_sends_json_option(client, service):
    code = main(["post", "https://svc/items", "--json", '{"name": "x"}'], client=client)

    assert code == 0
    assert json.loads(service.last.content) == {"name": "x"}


def test_upload_reads_local_file(client, service, tmp_path):
    path = tmp_path / "report.csv"
    path.write_bytes(b"a,b\n1,2\n")

    code = main(["upload", "https://svc/files", str(path), "--mimetype", "text/csv"], client=client)

    assert code == 0
    assert b'filename="report.csv"' in service.last.content
    assert b"text/csv" in service.last.content


def test_service_error_exits_one(client, service, sink, capsys):
    service.body = {"isBoom": True, "output": {"message": "bad"}}

    code = main(["delete", "https://svc/items/1"], client=client)

    assert code == 1
    assert '"message": "bad"' in capsys.readouterr().err
    assert sink.errors == [{"message": "bad"}]


def test_transport_error_exits_two(client, service, capsys):
    service.exc = httpx.ConnectError("connection refused")

    code = main(["get", "https://svc/items"], client=client)

    assert code == 2
    assert "Request failed" in capsys.readouterr().err


def test_bad_param_is_usage_error(client):
    with pytest.raises(SystemExit) as excinfo:
        main(["get", "https://svc/items", "-p", "no-equals"], client=client)

    assert excinfo.value.code == 2


def test_undecodable_body_exits_two(client, service, capsys):
    service.content = b"\xff\xfe\xfa"

    code = main(["get", "https://svc/items"], client=client)

    assert code == 2
    assert "Request failed" in capsys.readouterr().err


def test_missing_config_file_exits_two(tmp_path, capsys):
    code = main(["--config", str(tmp_path / "nope.yml"), "get", "https://svc/items"])

    assert code == 2
    assert "Invalid configuration" in capsys.readouterr().err


def test_non_mapping_config_file_exits_two(tmp_path, capsys):
    path = tmp_path / "fetch.yml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    code = main(["--config", str(path), "get", "https://svc/items"])

    assert code == 2
    assert "must contain a mapping" in capsys.readouterr().err


def test_unreadable_upload_file_exits_two(client, service, capsys):
    code = main(["upload", "https://svc/files", "/nonexistent/file.bin"], client=client)

    assert code == 2
    assert service.requests == []
