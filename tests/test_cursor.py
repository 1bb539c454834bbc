from backup_tool.cursor import TokenCursor


def test_new_cursor_is_empty():
    cur = TokenCursor()
    assert len(cur) == 0
    assert cur.position == 0
    assert cur.next() is None


def test_next_advances_and_stops_at_end():
    cur = TokenCursor([1, 2, 3])
    assert [cur.next(), cur.next(), cur.next()] == [1, 2, 3]
    assert cur.position == 3
    assert cur.next() is None
    assert cur.position == 3


def test_reset_rewinds():
    cur = TokenCursor([1, 2, 3])
    list(cur)
    assert cur.next() is None
    cur.reset()
    assert cur.position == 0
    assert cur.next() == 1
    assert cur.position == 1


def test_push_after_exhaustion():
    cur = TokenCursor()
    for i in (1, 2, 3):
        cur.push(i)
    assert list(cur) == [1, 2, 3]
    cur.push(4)
    assert len(cur) == 4
    assert cur.position == 3
    assert cur.next() == 4
    assert cur.next() is None


def test_peek_does_not_advance():
    cur = TokenCursor(["this", "is", "a", "test"])
    assert cur.peek(1) == ("this",)
    assert cur.peek(2) == ("this", "is")
    assert cur.peek(4) == ("this", "is", "a", "test")
    assert cur.peek(5) is None
    assert cur.next() == "this"
    assert cur.peek() == ("is",)
    assert cur.peek(4) is None
    assert cur.peek(0) == ()


def test_handler_can_consume_its_argument():
    cur = TokenCursor(["this", "is", "a", "test"])
    seen = []
    for item in cur:
        seen.append(item)
        if item == "is":
            assert cur.next() == "a"
    assert seen == ["this", "is", "test"]
