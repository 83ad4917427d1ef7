from selector_list import SelectorList


def test_display_format() -> None:
    sl = SelectorList(["Up", "Down"])
    s = f"{sl}"
    assert "['Up', 'Down']" in s
    assert "current_index=0" in s
    assert "current=Up" in s


def test_display_tracks_current_item() -> None:
    sl = SelectorList(["On", "Off", "Auto"])
    sl.select_index(2)
    s = sl.to_display_string()
    assert s == "items=['On', 'Off', 'Auto'], current_index=2, current=Auto"
    assert str(sl) == s


def test_repr_round_trips_state() -> None:
    sl = SelectorList([1, 2, 3], start_index=1)
    assert repr(sl) == "SelectorList([1, 2, 3], start_index=1)"
