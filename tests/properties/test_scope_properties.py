from hypothesis import given, strategies as st

from mosaic.templating import ScopeFrame

frame_values = st.dictionaries(st.text(min_size=1, max_size=8), st.integers(), max_size=6)


@given(parent_values=frame_values, child_values=frame_values)
def test_derive_never_alters_parent(
    parent_values: dict[str, int], child_values: dict[str, int]
) -> None:
    parent = ScopeFrame(dict(parent_values))
    _ = parent.derive(child_values)
    assert dict(parent) == parent_values


@given(parent_values=frame_values, child_values=frame_values)
def test_child_sees_own_values_then_parent(
    parent_values: dict[str, int], child_values: dict[str, int]
) -> None:
    child = ScopeFrame(dict(parent_values)).derive(child_values)
    assert dict(child) == {**parent_values, **child_values}
