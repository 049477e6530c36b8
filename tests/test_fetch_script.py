from conftest import item, page, status

import fetch_gamepasses


def test_prints_ids_and_exits_zero(stub_upstream, capsys):
    stub_upstream(page([item(1, 42), item(2, 7)], cursor="abc"), page([item(3, 42)]))
    assert fetch_gamepasses.main(["42"]) == 0

    out = capsys.readouterr().out
    assert out.split() == ["1", "3"]


def test_partial_result_exits_one(stub_upstream, capsys):
    stub_upstream(page([item(1, 42)], cursor="abc"), status(500))
    assert fetch_gamepasses.main(["42"]) == 1
    assert capsys.readouterr().out.split() == ["1"]


def test_invalid_user_id_exits_two(stub_upstream):
    stub = stub_upstream()
    assert fetch_gamepasses.main(["abc"]) == 2
    assert stub.calls == []


def test_usage_error_exits_two():
    assert fetch_gamepasses.main([]) == 2
