from dataclasses import dataclass

from lotools.intersect import (
    contains,
    contains_by,
    difference,
    every,
    every_by,
    intersect,
    none,
    none_by,
    some,
    some_by,
    union,
    without,
    without_by,
    without_nth,
)


class MyStrings(list):
    pass


def test_contains():
    assert contains([0, 1, 2, 3, 4, 5], 5) is True
    assert contains([0, 1, 2, 3, 4, 5], 6) is False


def test_contains_by():
    @dataclass
    class A:
        a: int
        b: str

    a1 = [A(1, "1"), A(2, "2"), A(3, "3")]
    assert contains_by(a1, lambda t: t.a == 1 and t.b == "2") is False
    assert contains_by(a1, lambda t: t.a == 2 and t.b == "2") is True

    a2 = ["aaa", "bbb", "ccc"]
    assert contains_by(a2, lambda t: t == "ccc") is True
    assert contains_by(a2, lambda t: t == "ddd") is False


def test_every():
    assert every([0, 1, 2, 3, 4, 5], [0, 2]) is True
    assert every([0, 1, 2, 3, 4, 5], [0, 6]) is False
    assert every([0, 1, 2, 3, 4, 5], [-1, 6]) is False
    assert every([0, 1, 2, 3, 4, 5], []) is True


def test_every_by():
    assert every_by([1, 2, 3, 4], lambda x: x < 5) is True
    assert every_by([1, 2, 3, 4], lambda x: x < 3) is False
    assert every_by([1, 2, 3, 4], lambda x: x < 0) is False
    assert every_by([], lambda x: x < 5) is True


def test_some():
    assert some([0, 1, 2, 3, 4, 5], [0, 2]) is True
    assert some([0, 1, 2, 3, 4, 5], [0, 6]) is True
    assert some([0, 1, 2, 3, 4, 5], [-1, 6]) is False
    assert some([0, 1, 2, 3, 4, 5], []) is False


def test_some_by():
    assert some_by([1, 2, 3, 4], lambda x: x < 5) is True
    assert some_by([1, 2, 3, 4], lambda x: x < 3) is True
    assert some_by([1, 2, 3, 4], lambda x: x < 0) is False
    assert some_by([], lambda x: x < 5) is False


def test_none():
    assert none([0, 1, 2, 3, 4, 5], [0, 2]) is False
    assert none([0, 1, 2, 3, 4, 5], [0, 6]) is False
    assert none([0, 1, 2, 3, 4, 5], [-1, 6]) is True
    assert none([0, 1, 2, 3, 4, 5], []) is True


def test_none_by():
    assert none_by([1, 2, 3, 4], lambda x: x < 5) is False
    assert none_by([1, 2, 3, 4], lambda x: x < 3) is False
    assert none_by([1, 2, 3, 4], lambda x: x < 0) is True
    assert none_by([], lambda x: x < 5) is True


def test_intersect():
    assert intersect([0, 1, 2, 3, 4, 5], [0, 2]) == [0, 2]
    assert intersect([0, 1, 2, 3, 4, 5], [0, 6]) == [0]
    assert intersect([0, 1, 2, 3, 4, 5], [-1, 6]) == []
    assert intersect([0, 6], [0, 1, 2, 3, 4, 5]) == [0]
    assert intersect([0, 6, 0], [0, 1, 2, 3, 4, 5]) == [0]


def test_intersect_preserves_type():
    all_strings = MyStrings(["", "foo", "bar"])
    result = intersect(all_strings, all_strings)
    assert isinstance(result, MyStrings)
    assert result == ["", "foo", "bar"]


def test_difference():
    assert difference([0, 1, 2, 3, 4, 5], [0, 2, 6]) == ([1, 3, 4, 5], [6])
    assert difference([1, 2, 3, 4, 5], [0, 6]) == ([1, 2, 3, 4, 5], [0, 6])
    assert difference([0, 1, 2, 3, 4, 5], [0, 1, 2, 3, 4, 5]) == ([], [])


def test_difference_preserves_type():
    all_strings = MyStrings(["", "foo", "bar"])
    a, b = difference(all_strings, all_strings)
    assert isinstance(a, MyStrings) and isinstance(b, MyStrings)
    assert a == [] and b == []


def test_union():
    assert union([0, 1, 2, 3, 4, 5], [0, 2, 10]) == [0, 1, 2, 3, 4, 5, 10]
    assert union([0, 1, 2, 3, 4, 5], [6, 7]) == [0, 1, 2, 3, 4, 5, 6, 7]
    assert union([0, 1, 2, 3, 4, 5], []) == [0, 1, 2, 3, 4, 5]
    assert union([0, 1, 2], [0, 1, 2]) == [0, 1, 2]
    assert union([], []) == []

    assert union([0, 1, 2, 3, 4, 5], [0, 2, 10], [0, 1, 11]) == [0, 1, 2, 3, 4, 5, 10, 11]
    assert union([0, 1, 2, 3, 4, 5], [6, 7], [8, 9]) == list(range(10))
    assert union([0, 1, 2, 3, 4, 5], [], []) == [0, 1, 2, 3, 4, 5]
    assert union([0, 1, 2], [0, 1, 2], [0, 1, 2]) == [0, 1, 2]
    assert union([], [], []) == []
    assert union() == []


def test_union_preserves_type():
    all_strings = MyStrings(["", "foo", "bar"])
    result = union(all_strings, all_strings)
    assert isinstance(result, MyStrings)
    assert result == ["", "foo", "bar"]


def test_without():
    assert without([0, 2, 10], 0, 1, 2, 3, 4, 5) == [10]
    assert without([0, 7], 0, 1, 2, 3, 4, 5) == [7]
    assert without([], 0, 1, 2, 3, 4, 5) == []
    assert without([0, 1, 2], 0, 1, 2) == []
    assert without([]) == []


def test_without_preserves_type():
    result = without(MyStrings(["", "foo", "bar"]), "")
    assert isinstance(result, MyStrings)
    assert result == ["foo", "bar"]


def test_without_by():
    @dataclass
    class User:
        name: str = ""
        age: int = 0

    result1 = without_by([User(name="nick"), User(name="peter")], lambda u: u.name, "nick", "lily")
    assert result1 == [User(name="peter")]
    assert without_by([], lambda u: u.age, 1, 2, 3) == []
    assert without_by([], lambda u: u.name) == []


def test_without_nth():
    assert without_nth([5, 6, 7], 1, 0) == [7]
    assert without_nth([1, 2]) == [1, 2]
    assert without_nth([]) == []
    assert without_nth([0, 1, 2, 3], -1, 4) == [0, 1, 2, 3]


def test_without_nth_preserves_type():
    result = without_nth(MyStrings(["", "foo", "bar"]))
    assert isinstance(result, MyStrings)
    assert result == ["", "foo", "bar"]