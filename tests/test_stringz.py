from groundwork import stringz


def test_permutations_of_four():
    results = list(stringz.permutations(["a", "b", "c", "d"]))
    assert len(results) == 15
    assert all(results)
    assert len({tuple(r) for r in results}) == len(results)
    assert results[:5] == [
        ["a"],
        ["a", "b"],
        ["a", "b", "c"],
        ["a", "b", "c", "d"],
        ["a", "b", "d"],
    ]
    assert results[-1] == ["d"]


def test_permutations_keep_input_order():
    source = ["a", "b", "c", "d"]
    for result in stringz.permutations(source):
        positions = [source.index(x) for x in result]
        assert positions == sorted(positions)


def test_permutations_empty():
    assert list(stringz.permutations([])) == []


def test_permutation_with_prefixes_base():
    results = list(stringz.permutation_with(["x"], ["a", "b"]))
    assert results == [["x", "a"], ["x", "a", "b"], ["x", "b"]]


def test_to_string_slice():
    assert stringz.to_string_slice([b"abc", b"", "é".encode()]) == ["abc", "", "é"]


def test_or_empty():
    assert stringz.or_empty(None) == ""
    assert stringz.or_empty("value") == "value"


def test_reexported_helpers():
    assert stringz.contains(["a", "b"], "b") is True
    assert stringz.difference(["a", "b", "c"], ["b"]) == ["a", "c"]
    assert stringz.remove(["a", "b", "a"], "a") == ["b"]