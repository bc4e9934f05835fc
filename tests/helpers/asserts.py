from pathutil import canonicalize, split


def assert_canonical(path: str) -> None:
    root, rest = split(path)
    assert "\\" not in path
    if rest:
        parts = rest.split("/")
        assert "" not in parts
        assert "." not in parts
        if root:
            assert ".." not in parts
        else:
            # relative paths may only climb at the front
            climbing = [p == ".." for p in parts]
            assert climbing == sorted(climbing, reverse=True)
    assert canonicalize(path) == path
