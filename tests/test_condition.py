from lotools.condition import if_, if_f, switch, ternary, ternary_f


def test_ternary():
    assert ternary(True, "a", "b") == "a"
    assert ternary(False, "a", "b") == "b"


def test_ternary_f():
    assert ternary_f(True, lambda: "a", lambda: "b") == "a"
    assert ternary_f(False, lambda: "a", lambda: "b") == "b"


def test_ternary_f_is_lazy():
    calls = []
    result = ternary_f(True, lambda: "a", lambda: calls.append("else") or "b")
    assert result == "a"
    assert calls == []


def test_if_else():
    assert if_(True, 1).else_if(False, 2).else_(3) == 1
    assert if_(True, 1).else_if(True, 2).else_(3) == 1
    assert if_(False, 1).else_if(True, 2).else_(3) == 2
    assert if_(False, 1).else_if(False, 2).else_(3) == 3


def test_if_f_else_f():
    assert if_f(True, lambda: 1).else_if_f(False, lambda: 2).else_f(lambda: 3) == 1
    assert if_f(True, lambda: 1).else_if_f(True, lambda: 2).else_f(lambda: 3) == 1
    assert if_f(False, lambda: 1).else_if_f(True, lambda: 2).else_f(lambda: 3) == 2
    assert if_f(False, lambda: 1).else_if_f(False, lambda: 2).else_f(lambda: 3) == 3


def test_if_f_skips_later_branches():
    calls = []
    result = if_f(True, lambda: 1).else_if_f(True, lambda: calls.append(2) or 2).else_f(lambda: calls.append(3) or 3)
    assert result == 1
    assert calls == []


def test_switch_case():
    assert switch(42).case(42, 1).case(1, 2).default(3) == 1
    assert switch(42).case(42, 1).case(42, 2).default(3) == 1
    assert switch(42).case(1, 1).case(42, 2).default(3) == 2
    assert switch(42).case(1, 1).case(1, 2).default(3) == 3


def test_switch_case_f():
    assert switch(42).case_f(42, lambda: 1).case_f(1, lambda: 2).default_f(lambda: 3) == 1
    assert switch(42).case_f(42, lambda: 1).case_f(42, lambda: 2).default_f(lambda: 3) == 1
    assert switch(42).case_f(1, lambda: 1).case_f(42, lambda: 2).default_f(lambda: 3) == 2
    assert switch(42).case_f(1, lambda: 1).case_f(1, lambda: 2).default_f(lambda: 3) == 3