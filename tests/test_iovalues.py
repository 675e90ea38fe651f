from dbuswire.iovalues import RW, Result, Status


def test_rw_from_values():
    assert RW(1) is RW.READ
    assert RW(2) is RW.WRITE


def test_rw_combination():
    both = RW(3)
    assert both == RW.READ | RW.WRITE
    assert RW.READ in both
    assert RW.WRITE in both
    assert both & RW.READ == RW.READ
    assert RW.WRITE not in RW.READ


def test_status_from_zero_is_ok():
    assert Status(0) is Status.OK


def test_status_values_are_consecutive_from_ok():
    members = [Status(value) for value in range(len(Status))]
    assert members == list(Status)
    assert members[0] is Status.OK
    assert members[-1] is Status.INTERNAL_ERROR


def test_result_defaults():
    result = Result()
    assert result.status is Status.OK
    assert result.length == 0


def test_result_fields():
    result = Result(Status.REMOTE_CLOSED, 17)
    assert result.status is Status.REMOTE_CLOSED
    assert result.length == 17
    result.length += 3
    assert result == Result(Status.REMOTE_CLOSED, 20)